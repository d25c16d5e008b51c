from pydantic import BaseModel
from typing import List, Optional
from enum import Enum

from app.models.base_model import Coordinate

# --- Enums ---
class PlaceType(str, Enum):
    CAFE = "cafe"
    BAR = "bar"

# Requested category -> Places API "type". Anything not listed falls back to DEFAULT_PLACE_TYPE.
PLACE_TYPE_MAP = {
    "cafe": PlaceType.CAFE,
    "bar": PlaceType.BAR,
}
DEFAULT_PLACE_TYPE = PlaceType.CAFE

def resolve_place_type(requested: Optional[str]) -> PlaceType:
    return PLACE_TYPE_MAP.get(requested or "", DEFAULT_PLACE_TYPE)

# --- API Response Models ---
class NearbyPoint(BaseModel):
    id: str
    name: str
    distance: Optional[float] = None  # metres
    address: Optional[str] = None
    categories: str = ""
    lat: Optional[float] = None
    lng: Optional[float] = None

    @property
    def coordinate(self) -> Optional[Coordinate]:
        if self.lat is None or self.lng is None:
            return None
        return Coordinate(lat=self.lat, lng=self.lng)

# --- Provider Models (Places Nearby Search) ---
# Every field may be missing or null; defaults are applied in to_nearby_point.
class ProviderLocation(BaseModel):
    lat: Optional[float] = None
    lng: Optional[float] = None

class ProviderGeometry(BaseModel):
    location: Optional[ProviderLocation] = None

class ProviderPlace(BaseModel):
    place_id: Optional[str] = None
    name: Optional[str] = None
    vicinity: Optional[str] = None
    formatted_address: Optional[str] = None
    types: Optional[List[str]] = None
    geometry: Optional[ProviderGeometry] = None

    def to_nearby_point(self) -> NearbyPoint:
        location = (self.geometry and self.geometry.location) or ProviderLocation()
        return NearbyPoint(
            id=self.place_id or "",
            name=self.name or "",
            distance=None,  # Nearby Search doesn't return a distance
            address=self.vicinity or self.formatted_address,
            categories=", ".join(self.types or []),
            lat=location.lat,
            lng=location.lng,
        )

class NearbySearchResponse(BaseModel):
    status: Optional[str] = None
    error_message: Optional[str] = None
    results: Optional[List[ProviderPlace]] = None

    @property
    def places(self) -> List[ProviderPlace]:
        return self.results or []
