import os
import logging
from typing import Any, List, Optional

import requests

from wander_client.models import Coordinate, NearbyPoint

logger = logging.getLogger(__name__)

BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:5000")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))

class CommunicationError(Exception):
    """The backend could not be reached or sent something unreadable."""

class BackendError(Exception):
    """The backend answered with an error status."""
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

class BackendClient:
    def __init__(self, base_url: str = BACKEND_URL, timeout: float = REQUEST_TIMEOUT, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, path: str, params: dict = None, default_error: str = "Request failed.") -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"GET {path} failed: {e}")
            raise CommunicationError(str(e)) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"GET {path} returned a non-JSON body ({response.status_code})")
            raise CommunicationError(f"Invalid JSON from {path}") from e

        if not response.ok:
            message = data.get("error") if isinstance(data, dict) else None
            raise BackendError(response.status_code, message or default_error)
        return data

    def health(self) -> bool:
        try:
            self._get("/health")
            return True
        except (CommunicationError, BackendError):
            return False

    def teleport(self) -> Coordinate:
        data = self._get("/teleport")
        logger.info(f"Teleport coords: {data}")
        try:
            return Coordinate(lat=data["lat"], lng=data["lng"])
        except (KeyError, TypeError, ValueError) as e:
            raise CommunicationError("Unexpected response from /teleport") from e

    def streetview(self, coordinate: Coordinate) -> str:
        data = self._get(
            "/streetview",
            params={"lat": coordinate.lat, "lng": coordinate.lng},
            default_error="Street View failed.",
        )
        url = data.get("url") if isinstance(data, dict) else None
        if not url:
            raise BackendError(200, "Street View failed.")
        return url

    def places(self, coordinate: Coordinate, place_type: str = "cafe") -> List[NearbyPoint]:
        data = self._get(
            "/places",
            params={"lat": coordinate.lat, "lng": coordinate.lng, "type": place_type},
            default_error="Places API failed (check server console for details).",
        )
        if not isinstance(data, list):
            raise BackendError(200, "Unexpected response from /places")
        logger.info(f"Places data: {len(data)} places")
        try:
            return [NearbyPoint.model_validate(p) for p in data]
        except ValueError as e:
            raise BackendError(200, "Unexpected response from /places") from e
