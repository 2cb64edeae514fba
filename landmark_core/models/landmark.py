"""
Landmark models - the point-of-interest snapshot handed to the core
Includes the weekly opening schedule and the document-store mapping
"""
import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

DAYS_OF_WEEK = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


class Coordinates(BaseModel):
    """Geographic point"""
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class DayHours(BaseModel):
    """Opening hours for a single day, times as "HH:MM" (24-hour)"""
    model_config = ConfigDict(frozen=True)

    open: Optional[str] = None
    close: Optional[str] = None
    closed: bool = False


WeeklySchedule = Dict[str, DayHours]


class Landmark(BaseModel):
    """Immutable landmark snapshot owned by the external data store"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    location: Coordinates
    image: str = ""
    address: str = ""
    entrance_fee: Optional[float] = None
    description: str = ""
    category: str = "Others"
    schedule: WeeklySchedule = Field(default_factory=dict)

    @classmethod
    def from_document(
        cls, doc: Dict[str, Any], *, placeholder_image: str = ""
    ) -> "Landmark":
        """
        Build a landmark from a raw ``markers`` document

        Args:
            doc: Document as stored (camelCase keys, ``openingHours`` map)
            placeholder_image: Image URL used when the document has none

        Returns:
            Landmark with malformed schedule days dropped (treated as closed)
        """
        name = str(doc.get("name") or "")

        image = doc.get("image")
        image = image.strip() if isinstance(image, str) else ""

        location = doc.get("location")
        if isinstance(location, dict):
            lat, lng = location.get("lat", 0.0), location.get("lng", 0.0)
        else:
            lat, lng = doc.get("latitude", 0.0), doc.get("longitude", 0.0)

        return cls(
            id=str(doc.get("_id") or doc.get("id") or name),
            name=name,
            location=Coordinates(lat=lat, lng=lng),
            image=image or placeholder_image,
            address=str(doc.get("address") or ""),
            entrance_fee=_to_fee(doc.get("entranceFee")),
            description=str(doc.get("description") or ""),
            category=doc.get("categoryOption") or doc.get("category") or "Others",
            schedule=_to_schedule(name, doc.get("openingHours")),
        )


def _to_fee(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _to_schedule(name: str, raw: Any) -> WeeklySchedule:
    if not isinstance(raw, dict):
        return {}

    schedule: WeeklySchedule = {}
    for day, hours in raw.items():
        if not isinstance(hours, dict):
            logger.warning("Dropping malformed hours for %s on %s", name, day)
            continue
        try:
            schedule[str(day).lower()] = DayHours.model_validate(hours)
        except ValidationError:
            logger.warning("Dropping malformed hours for %s on %s", name, day)
    return schedule
