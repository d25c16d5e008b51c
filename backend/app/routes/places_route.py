from fastapi import APIRouter, Depends
from typing import List, Optional

from app.models.base_model import ErrorResponse
from app.models.places_model import NearbyPoint
from app.services.Places_service import PlacesService
from app.core.config import settings

router = APIRouter()

def get_places_service() -> PlacesService:
    return PlacesService(
        api_key=settings.GOOGLE_KEY,
        timeout=settings.HTTP_TIMEOUT,
        radius=settings.PLACES_RADIUS,
    )

@router.get(
    "/places",
    response_model=List[NearbyPoint],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_places_endpoint(
    lat: Optional[str] = None,
    lng: Optional[str] = None,
    type: Optional[str] = "cafe",
    service: PlacesService = Depends(get_places_service)
):
    return await service.get_places(lat, lng, type)
