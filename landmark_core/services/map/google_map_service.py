import logging
from typing import Any, Dict, Optional

import httpx

from landmark_core.config import settings
from landmark_core.models.landmark import Coordinates
from landmark_core.models.route import RouteFailureReason, RouteSummary
from landmark_core.services.map.api_counter import APICounter, api_counter
from landmark_core.services.map.map_service import RouteProvider
from landmark_core.services.route.errors import RouteFetchError

logger = logging.getLogger(__name__)


class GoogleRouteService(RouteProvider):
    """Google Routes API implementation"""

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        counter: Optional[APICounter] = None,
        travel_mode: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.google_maps_api_key
        self.routes_url = settings.routes_url
        self.travel_mode = travel_mode or settings.travel_mode
        self.timeout = timeout if timeout is not None else settings.route_timeout_s
        self._client = client
        self._counter = counter or api_counter

        if not self.api_key:
            raise ValueError("Google Maps API Key is required")

    async def fetch_route(
        self, origin: Coordinates, destination: Coordinates
    ) -> RouteSummary:
        """Compute a single route from origin to destination"""
        # Check API call limit
        if not self._counter.can_make_call():
            raise RouteFetchError(
                RouteFailureReason.NETWORK_ERROR,
                f"API call limit exceeded. Max calls per day: {self._counter.max_calls_per_day}",
            )

        if self._client is not None:
            data = await self._post(self._client, origin, destination)
        else:
            async with httpx.AsyncClient() as client:
                data = await self._post(client, origin, destination)

        return self._convert_routes_response(data)

    async def _post(
        self,
        client: httpx.AsyncClient,
        origin: Coordinates,
        destination: Coordinates,
    ) -> Dict[str, Any]:
        try:
            response = await client.post(
                self.routes_url,
                headers={
                    "Content-Type": "application/json",
                    "X-Goog-Api-Key": self.api_key,
                    "X-Goog-FieldMask": "routes.duration,routes.distanceMeters",
                },
                json=self._build_routes_request_body(origin, destination),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise RouteFetchError(
                RouteFailureReason.TIMEOUT, "Routes API request timed out"
            ) from e
        except httpx.HTTPStatusError as e:
            raise RouteFetchError(
                RouteFailureReason.NETWORK_ERROR,
                f"Routes API error: {e.response.status_code}{self._error_detail(e.response)}",
            ) from e
        except httpx.HTTPError as e:
            raise RouteFetchError(
                RouteFailureReason.NETWORK_ERROR, f"Failed to get directions: {e}"
            ) from e

        # Record API call
        self._counter.record_call()

        try:
            return response.json()
        except ValueError as e:
            raise RouteFetchError(
                RouteFailureReason.NETWORK_ERROR, "Routes API returned invalid JSON"
            ) from e

    def _build_routes_request_body(
        self, origin: Coordinates, destination: Coordinates
    ) -> Dict:
        """Build request body for Google Routes API using raw coordinates"""
        return {
            "origin": {"location": {"latLng": self._lat_lng(origin)}},
            "destination": {"location": {"latLng": self._lat_lng(destination)}},
            "travelMode": self.travel_mode,
        }

    @staticmethod
    def _lat_lng(point: Coordinates) -> Dict[str, float]:
        return {"latitude": point.lat, "longitude": point.lng}

    def _convert_routes_response(self, data: Dict) -> RouteSummary:
        """Convert Routes API response to a RouteSummary"""
        routes = data.get("routes") if isinstance(data, dict) else None
        if not routes:
            raise RouteFetchError(
                RouteFailureReason.NO_ROUTE_FOUND, "Routes API returned no routes"
            )

        route = routes[0]
        return RouteSummary(
            distance_meters=float(route.get("distanceMeters", 0)),
            duration_seconds=self._parse_duration(route.get("duration", "0s")),
        )

    @staticmethod
    def _parse_duration(value: Any) -> float:
        """Parse durations such as "3848s" into seconds"""
        if isinstance(value, (int, float)):
            return float(value)
        try:
            return float(str(value).strip().rstrip("s"))
        except ValueError:
            logger.warning("Unparseable route duration %r", value)
            return 0.0

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        try:
            message = response.json().get("error", {}).get("message", "")
        except (ValueError, AttributeError):
            return ""
        return f" - {message}" if message else ""
