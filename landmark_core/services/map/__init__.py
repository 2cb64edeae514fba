# Map service package
from .api_counter import APICounter, api_counter
from .google_map_service import GoogleRouteService
from .map_service import RouteProvider

__all__ = ["APICounter", "GoogleRouteService", "RouteProvider", "api_counter"]
