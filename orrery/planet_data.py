#!/usr/bin/env python3
"""
Planet seed data loading.

Schema
======
planets.json is a list of records (camelCase keys):
[
  {
    "id": 3,                    # small positive integer, selects the colour
    "name": "Earth",            # optional
    "distanceFromSun": 149.6,   # 10^6 km
    "orbitalVelocity": 29.8,    # km/s
    "mass": 5.97,               # 10^24 kg
    "diameter": 12756           # km
  }
]

Each planet starts on the positive x axis at its distance from the sun, moving
along +y at its orbital velocity. The bundled file lives in orrery/data/.
"""
import json
import logging
import math
import os
from dataclasses import dataclass
from typing import Dict, List, Optional

from .constants import DISTANCE_SCALE, MASS_SCALE, NEUTRAL_COLOR
from .data_models import Body, Color

logger = logging.getLogger(__name__)

PLANETS_FILE = os.path.join(os.path.dirname(__file__), "data", "planets.json")

PLANET_COLORS: Dict[int, Color] = {
    1: (183, 184, 185, 255),  # Mercury
    2: (238, 203, 139, 255),  # Venus
    3: (100, 149, 237, 255),  # Earth
    4: (188, 39, 50, 255),  # Mars
    5: (210, 180, 140, 255),  # Jupiter
    6: (234, 214, 184, 255),  # Saturn
    7: (172, 229, 238, 255),  # Uranus
    8: (91, 93, 223, 255),  # Neptune
}


class PlanetDataError(Exception):
    """Raised when a planet data file cannot be read or is not a list of records."""


@dataclass(frozen=True)
class PlanetData:
    id: int
    distance_from_sun: float  # 10^6 km
    orbital_velocity: float  # km/s
    mass: float  # 10^24 kg
    diameter: float  # km
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, d: dict) -> "PlanetData":
        record = cls(
            id=int(d["id"]),
            distance_from_sun=float(d["distanceFromSun"]),
            orbital_velocity=float(d["orbitalVelocity"]),
            mass=float(d["mass"]),
            diameter=float(d["diameter"]),
            name=d.get("name"),
        )
        numbers = (record.distance_from_sun, record.orbital_velocity, record.mass, record.diameter)
        if not all(math.isfinite(v) for v in numbers):
            raise ValueError(f"non-finite value in planet {record.id}")
        if record.mass <= 0 or record.diameter <= 0:
            raise ValueError(f"planet {record.id} needs a positive mass and diameter")
        return record


def planet_color(planet_id: int) -> Color:
    """Colour for a planet id; unknown ids get the neutral colour."""
    return PLANET_COLORS.get(planet_id, NEUTRAL_COLOR)


def load_planet_data(path: Optional[str] = None) -> List[PlanetData]:
    """
    Load planet records from a JSON file (the bundled planets.json by default).

    Records missing a field, holding a non-numeric or non-finite value, or with a
    non-positive mass or diameter are skipped with a warning.
    """
    path = path or PLANETS_FILE
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise PlanetDataError(f"cannot read planet data from {path}: {e}") from e
    if not isinstance(data, list):
        raise PlanetDataError(f"{path}: expected a list of planet records")

    records: List[PlanetData] = []
    for i, raw in enumerate(data):
        try:
            records.append(PlanetData.from_dict(raw))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping planet record %d in %s: %r", i, path, e)
    logger.debug("Loaded %d planet records from %s", len(records), path)
    return records


def planet_from_data(d: PlanetData) -> Body:
    """Instantiate a Planet body from a seed record."""
    return Body.planet(
        position=(d.distance_from_sun * DISTANCE_SCALE, 0.0),
        velocity=(0.0, d.orbital_velocity),
        mass=d.mass * MASS_SCALE,
        size=d.diameter / 2.0,
        color=planet_color(d.id),
        name=d.name or f"Planet {d.id}",
    )
