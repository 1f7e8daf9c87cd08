from fastapi import APIRouter, Depends

from api.dependencies import get_settings
from config import Settings
from models import utc_now
from schemas import HealthResponse

router = APIRouter(tags=["info"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="up", time=utc_now())


@router.get("/api/diag/cors")
async def cors_diag(app_settings: Settings = Depends(get_settings)):
    return {
        "allow_origins": app_settings.allowed_origins,
        "allow_credentials": True,
    }
