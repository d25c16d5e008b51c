import httpx
import logging
from typing import List, Optional

from app.core.exceptions import MissingCredentialError
from app.core.logger import logs
from app.models.base_model import Coordinate
from app.models.places_model import NearbyPoint, NearbySearchResponse, resolve_place_type

def get_fallback_places(coordinate: Coordinate) -> List[NearbyPoint]:
    """Static nearby points centred on the requested coordinate."""
    return [
        NearbyPoint(
            id="fallback-1",
            name="Sample Café",
            distance=200,
            address="123 Example Street",
            categories="cafe",
            lat=coordinate.lat,
            lng=coordinate.lng,
        ),
        NearbyPoint(
            id="fallback-2",
            name="Neighbourhood Coffee",
            distance=450,
            address="456 Demo Avenue",
            categories="coffee_shop",
            lat=coordinate.lat,
            lng=coordinate.lng,
        ),
    ]

class PlacesService:
    def __init__(
        self,
        api_key: str,
        timeout: float = 10.0,
        radius: int = 1500,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.timeout = timeout
        self.radius = radius
        self.transport = transport
        self.base_url = "https://maps.googleapis.com/maps/api/place/nearbysearch/json"

    async def get_places(self, lat: Optional[str], lng: Optional[str], place_type: Optional[str] = "cafe") -> List[NearbyPoint]:
        if not self.api_key:
            logs.log(logging.ERROR, "Missing GOOGLE_KEY for Places")
            raise MissingCredentialError()
        coordinate = Coordinate.from_query(lat, lng)

        google_type = resolve_place_type(place_type)
        logs.log(logging.INFO, "Requesting Google Places", {
            "lat": coordinate.lat,
            "lng": coordinate.lng,
            "type": place_type,
            "google_type": google_type.value,
        })

        try:
            search = await self._nearby_search(f"{lat.strip()},{lng.strip()}", google_type.value)
        except (httpx.HTTPError, ValueError) as e:
            self._log_provider_error(e)
            logs.log(logging.WARNING, "Using fallback places due to Places error")
            return get_fallback_places(coordinate)

        logs.log(logging.INFO, f"Google Places returned {len(search.places)} places")
        if not search.places:
            logs.log(logging.WARNING, "Google Places returned 0 results, using fallback places", {
                "status": search.status,
                "error_message": search.error_message,
            })
            return get_fallback_places(coordinate)

        return [place.to_nearby_point() for place in search.places]

    async def _nearby_search(self, location: str, google_type: str) -> NearbySearchResponse:
        params = {
            "key": self.api_key,
            "location": location,
            "radius": self.radius,
            "type": google_type,
        }
        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            resp = await client.get(self.base_url, params=params)
            resp.raise_for_status()
            return NearbySearchResponse.model_validate(resp.json())

    def _log_provider_error(self, error: Exception):
        if isinstance(error, httpx.HTTPStatusError):
            logs.log(logging.ERROR, f"Google Places error: {error.response.status_code} {error.response.text}")
        else:
            logs.log(logging.ERROR, f"Google Places error: {type(error).__name__}: {error}")
