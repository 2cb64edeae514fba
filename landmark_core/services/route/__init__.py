# Route service package
from .errors import RouteFetchError
from .coordinator import RouteCoordinator

__all__ = ["RouteCoordinator", "RouteFetchError"]
