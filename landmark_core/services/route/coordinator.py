"""
Route coordinator - single-flight route requests for the selected landmark

Every request is tagged with a sequence number taken at issue time. A
completion commits its state only while its tag is still the latest one;
results of superseded requests are dropped. The transport call of a
superseded request is left to finish on its own.
"""
from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Awaitable, Callable, List, Optional, Union

import httpx

from landmark_core.models.landmark import Coordinates, Landmark
from landmark_core.models.route import RouteFailureReason, RouteState
from landmark_core.services.map.map_service import RouteProvider

from .errors import RouteFetchError

logger = logging.getLogger(__name__)

LocationProvider = Callable[[], Union[Coordinates, Awaitable[Coordinates]]]
StateListener = Callable[[RouteState], None]


class RouteCoordinator:
    """Own the RouteState of one selection and publish its transitions."""

    def __init__(
        self,
        route_provider: RouteProvider,
        location_provider: LocationProvider,
    ) -> None:
        self._route_provider = route_provider
        self._location_provider = location_provider
        self._state = RouteState.idle()
        self._selected: Optional[Landmark] = None
        self._sequence = 0
        self._task: Optional[asyncio.Task] = None
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> RouteState:
        return self._state

    @property
    def selected(self) -> Optional[Landmark]:
        return self._selected

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register ``listener`` for every future state; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def request_route(self, landmark: Landmark) -> asyncio.Task:
        """Select ``landmark`` and start fetching its route.

        Must be called from a running event loop. Any request still in
        flight becomes stale and its result will be ignored.
        """
        loop = asyncio.get_running_loop()

        self._sequence += 1
        sequence = self._sequence
        if self._state.is_loading:
            logger.debug(
                "Route request #%d for %s supersedes pending request for %s",
                sequence,
                landmark.id,
                self._state.landmark_id,
            )

        self._selected = landmark
        self._publish(RouteState.loading(landmark.id))
        self._task = loop.create_task(self._run(sequence, landmark))
        return self._task

    def reload(self) -> Optional[asyncio.Task]:
        """Request the route for the current selection again."""
        if self._selected is None:
            return None
        return self.request_route(self._selected)

    async def wait(self) -> RouteState:
        """Wait until the newest request has settled and return the state."""
        while self._task is not None and not self._task.done():
            await self._task
        return self._state

    async def _run(self, sequence: int, landmark: Landmark) -> None:
        try:
            origin = await self._current_location()
            summary = await self._route_provider.fetch_route(origin, landmark.location)
        except RouteFetchError as exc:
            logger.warning("Route fetch for %s failed: %s", landmark.id, exc)
            outcome = RouteState.failed(landmark.id, exc.reason)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning("Route fetch for %s timed out", landmark.id)
            outcome = RouteState.failed(landmark.id, RouteFailureReason.TIMEOUT)
        except Exception:
            logger.exception("Route fetch for %s failed", landmark.id)
            outcome = RouteState.failed(landmark.id, RouteFailureReason.NETWORK_ERROR)
        else:
            outcome = RouteState.ready(
                landmark.id, summary.distance_meters, summary.duration_seconds
            )

        if sequence != self._sequence:
            logger.debug("Dropping stale route result #%d for %s", sequence, landmark.id)
            return
        self._publish(outcome)

    async def _current_location(self) -> Coordinates:
        location = self._location_provider()
        if inspect.isawaitable(location):
            location = await location
        return location

    def _publish(self, state: RouteState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Route state listener failed")
