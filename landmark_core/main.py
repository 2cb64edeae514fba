import logging
from functools import lru_cache
from typing import Dict, Optional

from fastapi import Depends, FastAPI, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from landmark_core.config import settings
from landmark_core.models.landmark import Coordinates
from landmark_core.models.response import LandmarkDetail, LandmarkListResponse
from landmark_core.models.route import RouteState
from landmark_core.services.detail_service import LandmarkDetailService
from landmark_core.services.feedback_service import FeedbackService
from landmark_core.services.landmark_service import LandmarkService
from landmark_core.services.map import GoogleRouteService, RouteProvider
from landmark_core.services.route import RouteCoordinator

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

# Clients that send no X-Device-Id header share this route session
DEFAULT_DEVICE_ID = "default"

app = FastAPI(
    title="Landmark API",
    description="Landmark availability, ratings and route coordination",
    version=settings.api_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class RouteRequest(BaseModel):
    name: str
    origin: Coordinates


class DeviceLocation:
    """Last origin reported by one device, read by its route coordinator"""

    def __init__(self) -> None:
        self.current = Coordinates(lat=0.0, lng=0.0)

    def update(self, origin: Coordinates) -> None:
        self.current = origin

    def __call__(self) -> Coordinates:
        return self.current


class RouteSession:
    """Route coordinator and reported location of one device"""

    def __init__(self, provider: RouteProvider) -> None:
        self.location = DeviceLocation()
        self.coordinator = RouteCoordinator(provider, self.location)


class RouteSessions:
    """One route session per device id, so one device's selection never supersedes another's"""

    def __init__(self, provider: RouteProvider) -> None:
        self.provider = provider
        self._sessions: Dict[str, RouteSession] = {}

    def get(self, device_id: str) -> RouteSession:
        session = self._sessions.get(device_id)
        if session is None:
            session = self._sessions[device_id] = RouteSession(self.provider)
        return session


@lru_cache
def get_landmark_service() -> LandmarkService:
    return LandmarkService()


@lru_cache
def get_detail_service() -> LandmarkDetailService:
    return LandmarkDetailService(FeedbackService())


@lru_cache
def get_route_sessions() -> Optional[RouteSessions]:
    try:
        provider = GoogleRouteService()
    except ValueError as e:
        logger.warning("Route coordination disabled: %s", e)
        return None
    return RouteSessions(provider)


def _device_session(
    device_id: str = Header(DEFAULT_DEVICE_ID, alias="X-Device-Id"),
    sessions: Optional[RouteSessions] = Depends(get_route_sessions),
) -> RouteSession:
    if sessions is None:
        raise HTTPException(status_code=503, detail="Route service not configured")
    return sessions.get(device_id)


@app.get("/api/v1/landmarks", response_model=LandmarkListResponse)
async def list_landmarks(
    q: Optional[str] = None,
    category: Optional[str] = None,
    landmarks: LandmarkService = Depends(get_landmark_service),
    details: LandmarkDetailService = Depends(get_detail_service),
):
    """List landmarks, optionally filtered by search text or category"""
    if q is not None:
        found = landmarks.search(q)
    elif category is not None:
        found = landmarks.in_category(category)
    else:
        found = landmarks.list_landmarks()
    return details.build_list(found)


@app.get("/api/v1/landmarks/{name}", response_model=LandmarkDetail)
async def landmark_detail(
    name: str,
    landmarks: LandmarkService = Depends(get_landmark_service),
    details: LandmarkDetailService = Depends(get_detail_service),
):
    """Detail sheet: open status, compressed hours, rating summary"""
    landmark = landmarks.find_by_name(name)
    if landmark is None:
        raise HTTPException(status_code=404, detail=f"Landmark not found: {name}")
    return details.build_detail(landmark)


@app.post("/api/v1/route", response_model=RouteState)
async def request_route(
    request: RouteRequest,
    landmarks: LandmarkService = Depends(get_landmark_service),
    session: RouteSession = Depends(_device_session),
):
    """Select a landmark and start fetching its route"""
    landmark = landmarks.find_by_name(request.name)
    if landmark is None:
        raise HTTPException(status_code=404, detail=f"Landmark not found: {request.name}")
    session.location.update(request.origin)
    session.coordinator.request_route(landmark)
    return session.coordinator.state


@app.post("/api/v1/route/reload", response_model=RouteState)
async def reload_route(session: RouteSession = Depends(_device_session)):
    """Fetch the route of the current selection again"""
    if session.coordinator.reload() is None:
        raise HTTPException(status_code=409, detail="No landmark selected")
    return session.coordinator.state


@app.get("/api/v1/route", response_model=RouteState)
async def route_state(session: RouteSession = Depends(_device_session)):
    """Current route state snapshot"""
    return session.coordinator.state


@app.get("/health")
async def health_check():
    """Health check"""
    return {"status": "healthy", "version": settings.api_version}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
