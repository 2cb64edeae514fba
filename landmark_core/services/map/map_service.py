from abc import ABC, abstractmethod

from landmark_core.models.landmark import Coordinates
from landmark_core.models.route import RouteSummary


class RouteProvider(ABC):
    """Route provider abstract interface"""

    @abstractmethod
    async def fetch_route(
        self, origin: Coordinates, destination: Coordinates
    ) -> RouteSummary:
        """Get distance and duration from origin to destination

        Raises:
            RouteFetchError: carrying the failure reason
        """
        pass
