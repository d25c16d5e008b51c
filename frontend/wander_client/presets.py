"""
City presets for local search. Looking up a preset never touches the backend.
"""

from typing import Dict, List
from pydantic import BaseModel, ConfigDict

from wander_client.models import Coordinate

class CityPreset(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    display_name: str
    coordinate: Coordinate

class EmptyInputError(ValueError):
    pass

class CityNotFoundError(LookupError):
    def __init__(self, name: str):
        super().__init__(f"No preset for city '{name}'")
        self.name = name

def _preset(key, label, lat, lng):
    return CityPreset(
        key=key,
        label=label,
        display_name=label.split(",")[0],
        coordinate=Coordinate(lat=lat, lng=lng),
    )

CITY_PRESETS: Dict[str, CityPreset] = {
    p.key: p
    for p in (
        _preset("london", "London, UK", 51.5074, -0.1278),
        _preset("paris", "Paris, France", 48.8566, 2.3522),
        _preset("toronto", "Toronto, Canada", 43.65107, -79.347015),
        _preset("new york", "New York, USA", 40.7128, -74.006),
        _preset("tokyo", "Tokyo, Japan", 35.6762, 139.6503),
        _preset("rome", "Rome, Italy", 41.9028, 12.4964),
    )
}

def normalize_city(name: str) -> str:
    return (name or "").strip().casefold()

def lookup_city(name: str) -> CityPreset:
    """
    Finds the preset for a user-typed city name, ignoring case and surrounding whitespace.

    Raises:
        EmptyInputError: the name is blank.
        CityNotFoundError: no preset matches.
    """
    key = normalize_city(name)
    if not key:
        raise EmptyInputError("City name is empty")
    preset = CITY_PRESETS.get(key)
    if preset is None:
        raise CityNotFoundError(name.strip())
    return preset

def preset_names() -> List[str]:
    return [p.display_name for p in CITY_PRESETS.values()]

def not_found_hint() -> str:
    names = preset_names()
    return f"City not found. Try: {', '.join(names[:-1])}, or {names[-1]}."
