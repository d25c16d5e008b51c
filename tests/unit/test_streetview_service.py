import pytest
from urllib.parse import parse_qs, urlsplit

from app.core.exceptions import InvalidCoordinateError, MissingCredentialError
from app.services.Streetview_service import StreetViewService


@pytest.mark.parametrize("lat, lng", [
    ("51.5074", "-0.1278"),
    ("0", "0"),
    ("-33.8568", "151.2153"),
    ("40.7128", "-74.006"),
])
def test_url_contains_location_and_camera(lat, lng):
    url = StreetViewService(api_key="abc").get_streetview(lat, lng).url

    assert url.startswith("https://www.google.com/maps/embed/v1/streetview?")
    assert f"location={lat},{lng}" in url
    query = parse_qs(urlsplit(url).query)
    assert query["heading"] == ["210"]
    assert query["pitch"] == ["10"]
    assert query["fov"] == ["80"]
    assert query["key"] == ["abc"]


def test_url_is_deterministic():
    service = StreetViewService(api_key="abc")
    assert service.get_streetview("48.8566", "2.3522") == service.get_streetview("48.8566", "2.3522")


def test_missing_key_checked_before_coordinate():
    with pytest.raises(MissingCredentialError):
        StreetViewService(api_key="").get_streetview(None, None)


@pytest.mark.parametrize("lat, lng", [(None, "1"), ("1", None), ("", "2"), ("  ", "2"), ("north", "2")])
def test_invalid_coordinate(lat, lng):
    with pytest.raises(InvalidCoordinateError):
        StreetViewService(api_key="abc").get_streetview(lat, lng)
