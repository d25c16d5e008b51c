import json
from unittest.mock import Mock

import pytest
import requests

from wander_client.api import BackendClient, BackendError, CommunicationError
from wander_client.models import Coordinate


def make_response(status_code, body):
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode() if isinstance(body, str) else json.dumps(body).encode()
    return response


def client_returning(*responses):
    session = Mock(spec=requests.Session)
    session.get.side_effect = list(responses)
    return BackendClient(base_url="http://backend/", timeout=3, session=session), session


def test_teleport():
    client, session = client_returning(make_response(200, {"lat": 35.6762, "lng": 139.6503}))

    assert client.teleport() == Coordinate(lat=35.6762, lng=139.6503)
    session.get.assert_called_once_with("http://backend/teleport", params=None, timeout=3)


def test_streetview_passes_coordinate():
    client, session = client_returning(make_response(200, {"url": "https://embed"}))

    assert client.streetview(Coordinate(lat=1.5, lng=-2.5)) == "https://embed"
    assert session.get.call_args.kwargs["params"] == {"lat": 1.5, "lng": -2.5}


def test_streetview_error_message_from_backend():
    client, _ = client_returning(make_response(500, {"error": "Missing GOOGLE_KEY in .env"}))

    with pytest.raises(BackendError) as exc_info:
        client.streetview(Coordinate(lat=0, lng=0))
    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Missing GOOGLE_KEY in .env"


def test_streetview_default_error_message():
    client, _ = client_returning(make_response(502, {}))

    with pytest.raises(BackendError) as exc_info:
        client.streetview(Coordinate(lat=0, lng=0))
    assert exc_info.value.message == "Street View failed."


def test_places():
    body = [
        {"id": "a", "name": "A", "distance": None, "address": "x", "categories": "cafe", "lat": 1.0, "lng": 2.0},
        {"id": "b", "name": "B", "distance": 450, "address": None, "categories": "", "lat": None, "lng": None},
    ]
    client, session = client_returning(make_response(200, body))

    points = client.places(Coordinate(lat=1, lng=2), "bar")

    assert [p.id for p in points] == ["a", "b"]
    assert points[1].coordinate is None
    assert session.get.call_args.kwargs["params"]["type"] == "bar"


def test_places_unexpected_shape():
    client, _ = client_returning(make_response(200, {"places": []}))

    with pytest.raises(BackendError) as exc_info:
        client.places(Coordinate(lat=0, lng=0))
    assert exc_info.value.message == "Unexpected response from /places"


def test_connection_error():
    session = Mock(spec=requests.Session)
    session.get.side_effect = requests.exceptions.ConnectionError("refused")
    client = BackendClient(session=session)

    with pytest.raises(CommunicationError):
        client.teleport()
    assert client.health() is False


def test_non_json_body():
    client, _ = client_returning(make_response(200, "<html>proxy error</html>"))

    with pytest.raises(CommunicationError):
        client.teleport()


def test_health():
    client, _ = client_returning(make_response(200, {"status": "ok"}))
    assert client.health() is True
