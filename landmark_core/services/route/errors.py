"""Errors raised by route providers."""
from __future__ import annotations

from landmark_core.models.route import RouteFailureReason


class RouteFetchError(Exception):
    """A route fetch failed for a reason the coordinator can publish."""

    def __init__(self, reason: RouteFailureReason, message: str = "") -> None:
        super().__init__(message or reason.value)
        self.reason = reason
