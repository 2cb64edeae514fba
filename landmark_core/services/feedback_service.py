"""
User feedback service for reading landmark ratings from MongoDB.
Falls back to empty results if MongoDB is unavailable.
"""
import logging
from typing import Any, List, Optional

from pymongo.errors import PyMongoError

from landmark_core.config import settings
from landmark_core.models.landmark import Landmark
from landmark_core.models.rating import RatingSummary
from landmark_core.services.mongo import connect_collection
from landmark_core.services.rating import ratings_from_documents, summarize

logger = logging.getLogger(__name__)


class FeedbackService:
    """Service for reading user ratings from MongoDB or no-op mode"""

    def __init__(
        self,
        mongo_uri: Optional[str] = None,
        database_name: Optional[str] = None,
        collection_name: Optional[str] = None,
        *,
        collection: Any = None,
    ):
        self.mongo_uri = mongo_uri or settings.mongo_uri
        self.database_name = database_name or settings.mongo_db_name
        self.collection_name = collection_name or settings.mongo_feedback_collection

        if collection is None:
            collection = connect_collection(
                self.mongo_uri, self.database_name, self.collection_name
            )
        self.collection = collection
        self.mongodb_available = collection is not None

        if not self.mongodb_available:
            logger.warning("Feedback ratings disabled; every landmark will show no rating")

    def fetch_ratings(self, landmark_name: str) -> List[Any]:
        """Raw rating values of every feedback left for ``landmark_name``."""
        if not self.mongodb_available:
            return []

        try:
            documents = self.collection.find({"location": landmark_name}, {"rating": 1})
            return ratings_from_documents(documents)
        except PyMongoError as exc:
            logger.warning("Error fetching ratings for %s: %s", landmark_name, exc)
            return []

    def rating_summary(self, landmark: Landmark) -> RatingSummary:
        return summarize(self.fetch_ratings(landmark.name))

    def is_available(self) -> bool:
        """Check if feedback storage is available."""
        return self.mongodb_available
