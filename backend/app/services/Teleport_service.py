import random
import logging

from app.core.logger import logs
from app.models.base_model import Coordinate

TELEPORT_CITIES = [
    Coordinate(lat=40.7128, lng=-74.006),      # New York
    Coordinate(lat=43.65107, lng=-79.347015),  # Toronto
    Coordinate(lat=48.8566, lng=2.3522),       # Paris
    Coordinate(lat=35.6762, lng=139.6503),     # Tokyo
    Coordinate(lat=41.9028, lng=12.4964),      # Rome
    Coordinate(lat=51.5074, lng=-0.1278),      # London
]

def random_coordinate() -> Coordinate:
    coordinate = random.choice(TELEPORT_CITIES)
    logs.log(logging.INFO, f"Teleporting to: {coordinate.lat}, {coordinate.lng}")
    return coordinate
