"""
Session controller for one browsing session.

A visit fetches the Street View embed and the nearby places for one coordinate.
Every transition returns a fresh VisitState; the controller only ever swaps
the whole record.
"""

import logging

from wander_client.api import BackendClient, BackendError, CommunicationError
from wander_client.models import Coordinate, NearbyPoint, VisitState
from wander_client.presets import CityNotFoundError, EmptyInputError, lookup_city, not_found_hint

logger = logging.getLogger(__name__)

COMMUNICATION_ERROR = "Something went wrong talking to the server."
EMPTY_CITY_ERROR = "Type a city name first."

class SessionController:
    def __init__(self, api: BackendClient, place_type: str = "cafe"):
        self.api = api
        self.place_type = place_type
        self._state = VisitState()

    @property
    def state(self) -> VisitState:
        return self._state

    def _replace(self, **changes) -> VisitState:
        self._state = self._state.model_copy(update=changes)
        return self._state

    def _busy(self) -> bool:
        # Advisory only: in-flight requests are not cancelled
        if self._state.loading:
            logger.info("Visit already in progress, ignoring request")
            return True
        return False

    def teleport(self) -> VisitState:
        if self._busy():
            return self._state
        self._replace(
            city_error="",
            coordinate=None,
            panorama_url="",
            nearby_points=(),
            panorama_error="",
            nearby_error="",
            loading=True,
        )
        try:
            coordinate = self.api.teleport()
        except (CommunicationError, BackendError) as e:
            logger.error(f"Teleport error: {e}")
            return self._replace(panorama_error=COMMUNICATION_ERROR, loading=False)
        return self._visit(coordinate)

    def search_city(self, text: str) -> VisitState:
        if self._busy():
            return self._state
        self._replace(city_query=text, city_error="", panorama_error="", nearby_error="")
        try:
            preset = lookup_city(text)
        except EmptyInputError:
            return self._replace(city_error=EMPTY_CITY_ERROR)
        except CityNotFoundError:
            return self._replace(city_error=not_found_hint())

        logger.info(f"Searching city preset: {preset.label} {preset.coordinate}")
        return self._visit(preset.coordinate)

    def select_nearby_point(self, point: NearbyPoint) -> VisitState:
        if self._busy():
            return self._state
        coordinate = point.coordinate
        if coordinate is None:
            logger.warning(f"Place has no lat/lng, cannot teleport: {point.name}")
            return self._state
        logger.info(f"Teleporting to place: {point.name} {coordinate}")
        return self._visit(coordinate)

    def visit(self, coordinate: Coordinate) -> VisitState:
        if self._busy():
            return self._state
        return self._visit(coordinate)

    def _visit(self, coordinate: Coordinate) -> VisitState:
        self._replace(
            coordinate=coordinate,
            loading=True,
            panorama_url="",
            nearby_points=(),
            panorama_error="",
            nearby_error="",
        )
        try:
            self._load_panorama(coordinate)
            self._load_nearby(coordinate)
        finally:
            self._replace(loading=False)
        return self._state

    def _load_panorama(self, coordinate: Coordinate):
        try:
            self._replace(panorama_url=self.api.streetview(coordinate))
        except BackendError as e:
            self._replace(panorama_error=e.message)
        except CommunicationError as e:
            logger.error(f"Street View request failed: {e}")
            self._replace(panorama_error=COMMUNICATION_ERROR)

    def _load_nearby(self, coordinate: Coordinate):
        try:
            points = self.api.places(coordinate, self.place_type)
            self._replace(nearby_points=tuple(points))
        except BackendError as e:
            self._replace(nearby_error=e.message)
        except CommunicationError as e:
            logger.error(f"Places request failed: {e}")
            self._replace(nearby_error=COMMUNICATION_ERROR)
