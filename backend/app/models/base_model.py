import math
from pydantic import BaseModel, ConfigDict
from typing import Optional

from app.core.exceptions import InvalidCoordinateError

# --- Domain Models ---
class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float

    @classmethod
    def from_query(cls, lat: Optional[str], lng: Optional[str]) -> "Coordinate":
        """
        Builds a coordinate from raw query-string values.
        Both values must be present and parse as finite numbers.
        """
        if not lat or not lng or not lat.strip() or not lng.strip():
            raise InvalidCoordinateError()
        try:
            lat_value = float(lat)
            lng_value = float(lng)
        except ValueError:
            raise InvalidCoordinateError("lat and lng must be numbers")
        if not (math.isfinite(lat_value) and math.isfinite(lng_value)):
            raise InvalidCoordinateError("lat and lng must be numbers")
        return cls(lat=lat_value, lng=lng_value)

# --- API Response Models ---
class ErrorResponse(BaseModel):
    error: str
