"""
Route models - fetch results and the coordinator's published state
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class RouteStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class RouteFailureReason(str, Enum):
    NETWORK_ERROR = "network_error"
    NO_ROUTE_FOUND = "no_route_found"
    TIMEOUT = "timeout"


class RouteSummary(BaseModel):
    """Result of one route fetch"""
    model_config = ConfigDict(frozen=True)

    distance_meters: float
    duration_seconds: float


class RouteState(BaseModel):
    """Snapshot of the route coordinator; never mutated in place"""
    model_config = ConfigDict(frozen=True)

    status: RouteStatus = RouteStatus.IDLE
    landmark_id: Optional[str] = None
    distance_meters: Optional[float] = None
    duration_seconds: Optional[float] = None
    reason: Optional[RouteFailureReason] = None

    @classmethod
    def idle(cls) -> "RouteState":
        return cls()

    @classmethod
    def loading(cls, landmark_id: str) -> "RouteState":
        return cls(status=RouteStatus.LOADING, landmark_id=landmark_id)

    @classmethod
    def ready(
        cls, landmark_id: str, distance_meters: float, duration_seconds: float
    ) -> "RouteState":
        return cls(
            status=RouteStatus.READY,
            landmark_id=landmark_id,
            distance_meters=distance_meters,
            duration_seconds=duration_seconds,
        )

    @classmethod
    def failed(cls, landmark_id: str, reason: RouteFailureReason) -> "RouteState":
        return cls(status=RouteStatus.FAILED, landmark_id=landmark_id, reason=reason)

    @property
    def is_loading(self) -> bool:
        return self.status is RouteStatus.LOADING

    def distance_text(self) -> Optional[str]:
        if self.distance_meters is None:
            return None
        return f"{self.distance_meters / 1000:.2f} km"

    def duration_text(self) -> Optional[str]:
        if self.duration_seconds is None:
            return None
        return f"{self.duration_seconds / 60:.0f} min"
