from fastapi import APIRouter

from app.models.streetview_model import TeleportResponse
from app.services.Teleport_service import random_coordinate

router = APIRouter()

@router.get("/teleport", response_model=TeleportResponse)
async def teleport_endpoint():
    coordinate = random_coordinate()
    return TeleportResponse(lat=coordinate.lat, lng=coordinate.lng)
