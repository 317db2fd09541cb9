#!/usr/bin/env python3
"""
Core Physics for the orrery

Responsibilities
- Compute pairwise Newtonian gravitational forces by direct summation.
- Advance a single body one step with semi-implicit (symplectic) Euler.

Units and conventions
- Positions are in kilometres [km].
- Velocities are in km/s.
- Masses are in kilograms [kg].
- Time steps are in seconds [s].
- G is expressed in km^3 kg^-1 s^-2 so it matches km-scale positions.

Numerical notes
- Integration order: the velocity is updated from the current force first and the
  position is then advanced with the *updated* velocity (semi-implicit Euler). This
  is first order but symplectic, so near-circular orbits stay bounded over long runs.
- Close approaches: squared distances below MIN_DISTANCE_KM ** 2 are clamped to it.
  Exactly coincident bodies have no defined direction and contribute no force.
- Complexity: O(N^2) per world step (every body sums over every other body).

This module is pure compute: tick_body reads only the body passed in and the
start-of-step mass and position of the others. It never mutates anything.
"""

import logging
from typing import Sequence

from .constants import G, MIN_DISTANCE_KM
from .data_models import Body, BodyKind, PhysicsState
from .vector_utils import ZERO, Vector2, distance_squared, vec_sum

logger = logging.getLogger(__name__)

MIN_DISTANCE_SQUARED = MIN_DISTANCE_KM * MIN_DISTANCE_KM


def gravitational_force(body: Body, other: Body) -> Vector2:
    """
    Force exerted on `body` by `other`.

    F = G * m1 * m2 / d^2, directed from body toward other.

    Args:
        body: Body the force acts on.
        other: Attracting body.

    Returns:
        Force vector in kg*km/s^2.
    """
    d2 = distance_squared(body.position, other.position)
    if d2 == 0.0:
        logger.debug("Bodies %s and %s are coincident; pair force skipped", body.name, other.name)
        return ZERO
    f = G * body.mass * other.mass / max(d2, MIN_DISTANCE_SQUARED)
    return f * (other.position - body.position).normalize()


def net_force(body: Body, others: Sequence[Body]) -> Vector2:
    """Sum of the gravitational forces of every body in `others` on `body`."""
    return vec_sum(gravitational_force(body, e) for e in others)


def tick_body(body: Body, dt: float, others: Sequence[Body]) -> PhysicsState:
    """
    Compute the next state of `body` after `dt` seconds.

    The result depends only on body.state, body.mass and the mass/position of
    each entry in `others` as they are when called; the caller is responsible
    for not committing any new state until every body has been ticked.

    Args:
        body: Body to advance (not modified).
        dt: Time step in simulated seconds (>= 0).
        others: Every other body in the world, excluding `body` itself.

    Returns:
        The body's next PhysicsState.
    """
    if dt < 0:
        raise ValueError(f"time step must be non-negative, got {dt}")

    if body.kind is BodyKind.STAR:
        # Fixed reference frame: the net force on the star is ignored.
        return body.state
    if body.kind is BodyKind.PLANET:
        force = net_force(body, others)
        new_velocity = body.velocity + force * dt / body.mass
        return PhysicsState(
            position=body.position + new_velocity * dt,
            velocity=new_velocity,
        )
    raise ValueError(f"unknown body kind: {body.kind!r}")

