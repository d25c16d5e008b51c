from fastapi import APIRouter, Depends
from typing import Optional

from app.models.base_model import ErrorResponse
from app.models.streetview_model import StreetViewResponse
from app.services.Streetview_service import StreetViewService
from app.core.config import settings

router = APIRouter()

# --- Dependency Injection ---
def get_streetview_service() -> StreetViewService:
    return StreetViewService(api_key=settings.GOOGLE_KEY)

@router.get(
    "/streetview",
    response_model=StreetViewResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_streetview_endpoint(
    lat: Optional[str] = None,
    lng: Optional[str] = None,
    service: StreetViewService = Depends(get_streetview_service)
):
    return service.get_streetview(lat, lng)
