import logging
from typing import Optional

from app.core.exceptions import MissingCredentialError
from app.core.logger import logs
from app.models.base_model import Coordinate
from app.models.streetview_model import StreetViewResponse

# Fixed camera for every embed
HEADING = 210
PITCH = 10
FOV = 80

class StreetViewService:
    """
    Builds Street View Embed URLs. The provider is never contacted here:
    missing imagery only shows up as a broken embed in the browser.
    """
    def __init__(self, api_key: str):
        self.api_key = api_key
        self.embed_url = "https://www.google.com/maps/embed/v1/streetview"

    def get_streetview(self, lat: Optional[str], lng: Optional[str]) -> StreetViewResponse:
        if not self.api_key:
            logs.log(logging.ERROR, "Missing GOOGLE_KEY")
            raise MissingCredentialError()
        # Validates only; the URL keeps the caller's exact lat/lng text
        Coordinate.from_query(lat, lng)

        url = (
            f"{self.embed_url}?key={self.api_key}"
            f"&location={lat.strip()},{lng.strip()}"
            f"&heading={HEADING}&pitch={PITCH}&fov={FOV}"
        )
        return StreetViewResponse(url=url)
