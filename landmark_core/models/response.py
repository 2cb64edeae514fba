"""
Response models for the landmark detail sheet and landmark lists
"""
from typing import List, Optional

from pydantic import BaseModel

from landmark_core.models.rating import RatingSummary


class ScheduleLine(BaseModel):
    """One compressed opening-hours row"""
    day_label: str
    display_text: str
    is_closed: bool


class LandmarkDetail(BaseModel):
    """Everything the detail sheet renders for one landmark"""
    id: str
    name: str
    address: str
    description: str
    image: str
    is_open: bool
    status_text: str  # "Open" or "Closed"
    entrance_text: str  # "Free" or "P<fee>"
    opening_hours: List[ScheduleLine] = []
    rating: RatingSummary
    rating_text: Optional[str] = None


class LandmarkListItem(BaseModel):
    """Search result card"""
    id: str
    name: str
    image: str
    category: str
    status_text: str


class LandmarkListResponse(BaseModel):
    landmarks: List[LandmarkListItem] = []
    total_count: int = 0
