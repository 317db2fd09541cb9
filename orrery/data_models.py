#!/usr/bin/env python3
"""
Data models for the orrery.

This module defines the kinematic state and the Body dataclass shared between
physics, rendering and the front end.

Units and usage
- position is in kilometres [km], velocity in km/s, size (true radius) in km, mass in kg.
- color is an RGBA tuple in 0..255.
- A body's kind, mass and size never change after construction; only `state`
  is replaced, once per tick, through `update`.
"""
import enum
import math
from dataclasses import dataclass
from typing import NamedTuple, Tuple

from .constants import NEUTRAL_COLOR, SOLAR_MASS, SOLAR_RADIUS, STAR_COLOR
from .vector_utils import ORIGIN, ZERO, Point2, Vector2

Color = Tuple[int, int, int, int]

_FIXED_FIELDS = ("kind", "mass", "size")


class PhysicsState(NamedTuple):
    """The parts of a body's physics that change over time."""
    position: Point2
    velocity: Vector2


class BodyKind(enum.Enum):
    """
    Closed set of body variants.

    STAR is held fixed in the simulation's reference frame; PLANET responds to
    the gravity of every other body.
    """
    STAR = "star"
    PLANET = "planet"


@dataclass
class Body:
    """
    A massive body participating in gravity and rendering.

    Fields:
    - kind: STAR or PLANET; selects the tick rule
    - state: current position and velocity
    - mass: Mass in kilograms
    - size: "True" radius in km (0 when unknown); used for drawing, never for the force law
    - color: RGBA tuple used for rendering
    - name: Label shown by the front end

    kind, mass and size are read-only once the body exists. Mass must be a
    positive finite number and size a non-negative finite one.
    """
    kind: BodyKind
    state: PhysicsState
    mass: float
    size: float = 0.0
    color: Color = NEUTRAL_COLOR
    name: str = "Body"

    def __post_init__(self):
        if not math.isfinite(self.mass) or self.mass <= 0:
            raise ValueError(f"{self.name}: mass must be positive and finite, got {self.mass}")
        if not math.isfinite(self.size) or self.size < 0:
            raise ValueError(f"{self.name}: size must be non-negative and finite, got {self.size}")

    def __setattr__(self, name, value):
        if name in _FIXED_FIELDS and name in self.__dict__:
            raise AttributeError(f"{name} is fixed at construction")
        super().__setattr__(name, value)

    @classmethod
    def star(cls, position=ORIGIN, mass: float = SOLAR_MASS, size: float = SOLAR_RADIUS,
             color: Color = STAR_COLOR, name: str = "Sun") -> "Body":
        return cls(
            kind=BodyKind.STAR,
            state=PhysicsState(Point2(*position), ZERO),
            mass=float(mass),
            size=float(size),
            color=color,
            name=name,
        )

    @classmethod
    def planet(cls, position, velocity, mass: float, size: float = 0.0,
               color: Color = NEUTRAL_COLOR, name: str = "Planet") -> "Body":
        return cls(
            kind=BodyKind.PLANET,
            state=PhysicsState(Point2(*position), Vector2(*velocity)),
            mass=float(mass),
            size=float(size),
            color=color,
            name=name,
        )

    @property
    def position(self) -> Point2:
        return self.state.position

    @property
    def velocity(self) -> Vector2:
        return self.state.velocity

    def update(self, to: PhysicsState) -> None:
        """Commit a state computed by the tick rule."""
        self.state = to
