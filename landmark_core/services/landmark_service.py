"""
Landmark service - reads landmark documents and answers list/search queries
"""
import logging
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError
from pymongo.errors import PyMongoError

from landmark_core.config import settings
from landmark_core.models.landmark import Landmark
from landmark_core.services.mongo import connect_collection

logger = logging.getLogger(__name__)


def search_landmarks(landmarks: Iterable[Landmark], text: str) -> List[Landmark]:
    """Case-insensitive substring match on name or category; blank text matches nothing."""
    needle = (text or "").strip().lower()
    if not needle:
        return []
    return [
        landmark
        for landmark in landmarks
        if needle in landmark.name.lower() or needle in landmark.category.lower()
    ]


def filter_by_category(landmarks: Iterable[Landmark], category: str) -> List[Landmark]:
    wanted = (category or "").strip().lower()
    return [landmark for landmark in landmarks if landmark.category.lower() == wanted]


class LandmarkService:
    """Read-only access to the ``markers`` collection"""

    def __init__(
        self,
        mongo_uri: Optional[str] = None,
        database_name: Optional[str] = None,
        collection_name: Optional[str] = None,
        *,
        collection: Any = None,
        placeholder_image: Optional[str] = None,
    ):
        self.mongo_uri = mongo_uri or settings.mongo_uri
        self.database_name = database_name or settings.mongo_db_name
        self.collection_name = collection_name or settings.mongo_landmark_collection
        self.placeholder_image = (
            placeholder_image if placeholder_image is not None else settings.placeholder_image_url
        )

        if collection is None:
            collection = connect_collection(
                self.mongo_uri, self.database_name, self.collection_name
            )
        self.collection = collection
        self.mongodb_available = collection is not None

    def list_landmarks(self) -> List[Landmark]:
        if not self.mongodb_available:
            return []
        try:
            documents = list(self.collection.find({}))
        except PyMongoError as exc:
            logger.warning("Error fetching landmarks: %s", exc)
            return []
        return [landmark for landmark in map(self._to_landmark, documents) if landmark]

    def find_by_name(self, name: str) -> Optional[Landmark]:
        if not self.mongodb_available:
            return None
        try:
            document = self.collection.find_one({"name": name})
        except PyMongoError as exc:
            logger.warning("Error fetching landmark %s: %s", name, exc)
            return None
        return self._to_landmark(document) if document else None

    def search(self, text: str) -> List[Landmark]:
        return search_landmarks(self.list_landmarks(), text)

    def in_category(self, category: str) -> List[Landmark]:
        return filter_by_category(self.list_landmarks(), category)

    def _to_landmark(self, document: dict) -> Optional[Landmark]:
        try:
            return Landmark.from_document(document, placeholder_image=self.placeholder_image)
        except ValidationError as exc:
            logger.warning("Skipping malformed landmark document %s: %s", document.get("_id"), exc)
            return None
