#!/usr/bin/env python3
"""
Simulation engine for the orrery.

World owns the ordered list of bodies and the two view/time parameters:
- time_scale: simulated seconds per real second
- view_half_width: half the visible universe width in km (the zoom level)

Stepping is two-phase: every body's next state is computed from the states at
the start of the step, and only then are all of them committed. A body ticked
later in the list therefore never sees an earlier body's new position, and the
storage order does not change the result.

Body order is the draw order: later bodies are painted on top.
"""
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .constants import (
    DEFAULT_TIME_SCALE,
    DEFAULT_VIEW_HALF_WIDTH,
    MIN_TIME_SCALE,
    MIN_VIEW_HALF_WIDTH_KM,
    SPEED_STEP,
    ZOOM_STEP_KM,
)
from .data_models import Body, PhysicsState
from .physics import tick_body
from .planet_data import PlanetData, planet_from_data
from .scaled_buffer import ScaledBuffer, render_body

logger = logging.getLogger(__name__)


class World:
    def __init__(self, time_scale: float = DEFAULT_TIME_SCALE,
                 view_half_width: float = DEFAULT_VIEW_HALF_WIDTH):
        self._bodies: List[Body] = []
        self.time_scale = max(MIN_TIME_SCALE, float(time_scale))
        self.view_half_width = max(MIN_VIEW_HALF_WIDTH_KM, float(view_half_width))

    @classmethod
    def from_planet_data(cls, records: Iterable[PlanetData], star: Optional[Body] = None, **kwargs) -> "World":
        """A world holding a star at the origin followed by one planet per record."""
        world = cls(**kwargs)
        world.add_body(star if star is not None else Body.star())
        for d in records:
            world.add_body(planet_from_data(d))
        return world

    @property
    def bodies(self) -> Tuple[Body, ...]:
        return tuple(self._bodies)

    def add_body(self, body: Body) -> None:
        self._bodies.append(body)

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def next_states(self, dt: float) -> List[PhysicsState]:
        """
        Next state of every body after `dt` simulated seconds, in body order.

        Nothing is committed; each body sees all the others as they are now.
        """
        bodies = self._bodies
        return [
            tick_body(body, dt, [other for j, other in enumerate(bodies) if j != i])
            for i, body in enumerate(bodies)
        ]

    def tick(self, dt_real: float) -> float:
        """
        Advance the simulation by `dt_real` real seconds.

        Returns the simulated seconds that elapsed (dt_real * time_scale).
        """
        if dt_real < 0:
            raise ValueError(f"real time delta must be non-negative, got {dt_real}")
        dt = dt_real * self.time_scale
        self._warn_coincident()
        new_states = self.next_states(dt)
        for body, state in zip(self._bodies, new_states):
            body.update(state)
        logger.debug("Stepped %d bodies by %.1f s", len(new_states), dt)
        return dt

    def _warn_coincident(self) -> None:
        # Coincident pairs exert no force on each other; report them once per step.
        seen = {}
        shared = []
        for body in self._bodies:
            first = seen.setdefault(body.position, body)
            if first is not body:
                shared.append(f"{first.name}/{body.name}")
        if shared:
            logger.warning("Coincident bodies contribute no mutual force this step: %s", ", ".join(shared))

    # ------------------------------------------------------------------
    # View and time controls
    # ------------------------------------------------------------------

    def zoom_out(self) -> None:
        self.view_half_width += ZOOM_STEP_KM

    def zoom_in(self) -> None:
        self.view_half_width -= ZOOM_STEP_KM
        if self.view_half_width < MIN_VIEW_HALF_WIDTH_KM:
            self.view_half_width = MIN_VIEW_HALF_WIDTH_KM
            logger.debug("View half-width held at its %.0f km floor", MIN_VIEW_HALF_WIDTH_KM)

    def speed_up(self) -> None:
        self.time_scale += SPEED_STEP

    def slow_down(self) -> None:
        self.time_scale -= SPEED_STEP
        if self.time_scale <= MIN_TIME_SCALE:
            self.time_scale = MIN_TIME_SCALE
            logger.debug("Time scale held at zero; simulation paused")

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, canvas: np.ndarray, compress_sizes: bool = True) -> np.ndarray:
        """Draw every body into `canvas` (mutated in place) and return it."""
        buf = ScaledBuffer(canvas, self.view_half_width)
        for body in self._bodies:
            render_body(body, buf, compress_sizes)
        return buf.into_buffer()

    def body_names(self) -> Sequence[str]:
        return [b.name for b in self._bodies]
