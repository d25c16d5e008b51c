from enum import Enum
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict

class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float

class NearbyPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    distance: Optional[float] = None
    address: Optional[str] = None
    categories: str = ""
    lat: Optional[float] = None
    lng: Optional[float] = None

    @property
    def coordinate(self) -> Optional[Coordinate]:
        if self.lat is None or self.lng is None:
            return None
        return Coordinate(lat=self.lat, lng=self.lng)

class VisitStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    PARTIAL_ERROR = "partial_error"

class VisitState(BaseModel):
    """Everything the page renders. Never mutated; each transition builds a new one."""
    model_config = ConfigDict(frozen=True)

    coordinate: Optional[Coordinate] = None
    panorama_url: str = ""
    nearby_points: Tuple[NearbyPoint, ...] = ()
    loading: bool = False
    panorama_error: str = ""
    nearby_error: str = ""
    city_query: str = ""
    city_error: str = ""

    @property
    def status(self) -> VisitStatus:
        if self.loading:
            return VisitStatus.LOADING
        if self.panorama_error or self.nearby_error:
            return VisitStatus.PARTIAL_ERROR
        if self.coordinate is None:
            return VisitStatus.IDLE
        return VisitStatus.LOADED
