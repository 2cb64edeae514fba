"""
Detail service - composes schedule, rating and fee data into view models
"""
from datetime import datetime
from typing import Any, Iterable, List, Optional

from landmark_core.models.landmark import Landmark
from landmark_core.models.response import (
    LandmarkDetail,
    LandmarkListItem,
    LandmarkListResponse,
    ScheduleLine,
)
from landmark_core.services.feedback_service import FeedbackService
from landmark_core.services.rating import summarize
from landmark_core.services.schedule import compress, is_open_now, open_status


def entrance_text(fee: Optional[float]) -> str:
    if fee is not None and fee > 0:
        return f"P{fee:g}"
    return "Free"


class LandmarkDetailService:
    """Build detail and list views; all values are recomputed per call"""

    def __init__(self, feedback_service: Optional[FeedbackService] = None):
        self.feedback_service = feedback_service

    def build_detail(
        self,
        landmark: Landmark,
        *,
        now: Optional[datetime] = None,
        ratings: Optional[Iterable[Any]] = None,
    ) -> LandmarkDetail:
        """
        Build the detail sheet of a landmark

        Args:
            landmark: Snapshot to render
            now: Local wall-clock instant, defaults to the current time
            ratings: Raw ratings; read from the feedback service when omitted

        Returns:
            LandmarkDetail
        """
        if ratings is None:
            ratings = (
                self.feedback_service.fetch_ratings(landmark.name)
                if self.feedback_service is not None
                else []
            )
        rating = summarize(ratings)
        is_open = is_open_now(landmark.schedule, now)

        return LandmarkDetail(
            id=landmark.id,
            name=landmark.name,
            address=landmark.address,
            description=landmark.description,
            image=landmark.image,
            is_open=is_open,
            status_text="Open" if is_open else "Closed",
            entrance_text=entrance_text(landmark.entrance_fee),
            opening_hours=[
                ScheduleLine(
                    day_label=group.day_label,
                    display_text=group.display_text,
                    is_closed=group.is_closed,
                )
                for group in compress(landmark.schedule)
            ],
            rating=rating,
            rating_text=rating.display_text(),
        )

    def build_list(
        self, landmarks: Iterable[Landmark], *, now: Optional[datetime] = None
    ) -> LandmarkListResponse:
        now = now or datetime.now()
        items: List[LandmarkListItem] = [
            LandmarkListItem(
                id=landmark.id,
                name=landmark.name,
                image=landmark.image,
                category=landmark.category,
                status_text=open_status(landmark.schedule, now),
            )
            for landmark in landmarks
        ]
        return LandmarkListResponse(landmarks=items, total_count=len(items))
