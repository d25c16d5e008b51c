from pydantic import BaseModel

class StreetViewResponse(BaseModel):
    url: str

class TeleportResponse(BaseModel):
    lat: float
    lng: float
