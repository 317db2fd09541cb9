#!/usr/bin/env python3
"""
Universe-to-pixel mapping and circle rasterization.

A ScaledBuffer binds a caller-owned RGBA pixel buffer to a view half-width
snapshot for one render pass. Universe space is in km with the origin at the
centre of the image; pixel space has its origin at the upper-left corner.
"""
import math
from typing import Tuple

import numpy as np

from .constants import (
    BACKGROUND_COLOR,
    MIN_PIXEL_RADIUS,
    SIZE_COMPRESSION_BASE,
    SIZE_COMPRESSION_SCALE_KM,
)
from .data_models import Body, BodyKind, Color
from .vector_utils import Point2


def new_pixel_buffer(width: int, height: int, fill: Color = BACKGROUND_COLOR) -> np.ndarray:
    """Allocate a (height, width, 4) uint8 RGBA buffer filled with `fill`."""
    buf = np.empty((int(height), int(width), 4), dtype=np.uint8)
    buf[...] = fill
    return buf


def compress_size(true_radius: float) -> float:
    """
    Presentation radius (km) for a body of the given true radius (km).

    log_1.8(r) scaled by a constant, so a star hundreds of times larger than a
    planet does not dwarf it on screen. Radii of 1 km or less map to 0 and are
    drawn at the minimum pixel radius.
    """
    if true_radius <= 1.0:
        return 0.0
    return math.log(true_radius, SIZE_COMPRESSION_BASE) * SIZE_COMPRESSION_SCALE_KM


class ScaledBuffer:
    """
    Pixel buffer wrapper that maps universe coordinates (km) to pixels.

    The buffer is mutated in place; into_buffer hands it back to the caller.
    """

    def __init__(self, buf: np.ndarray, view_half_width: float):
        if buf.ndim != 3 or buf.shape[2] != 4:
            raise ValueError(f"expected a (height, width, 4) RGBA buffer, got shape {buf.shape}")
        self.inner = buf
        self.view_half_width = float(view_half_width)

    @property
    def width(self) -> int:
        return self.inner.shape[1]

    @property
    def height(self) -> int:
        return self.inner.shape[0]

    def into_buffer(self) -> np.ndarray:
        return self.inner

    def _universe_size(self) -> Tuple[float, float]:
        universe_width = self.view_half_width * 2.0
        universe_height = universe_width * self.height / self.width
        return universe_width, universe_height

    def map_point(self, pos: Point2) -> Tuple[int, int]:
        # 0.0 is the centre in universe coordinates but the upper-left corner in
        # pixel coordinates. Results may fall outside the buffer.
        universe_width, universe_height = self._universe_size()
        x_fraction = 0.5 + pos[0] / (universe_width * 2.0)
        y_fraction = 0.5 + pos[1] / (universe_height * 2.0)
        return (int(x_fraction * self.width), int(y_fraction * self.height))

    def unmap_point(self, pixel: Tuple[float, float]) -> Point2:
        universe_width, universe_height = self._universe_size()
        x = (pixel[0] / self.width - 0.5) * universe_width * 2.0
        y = (pixel[1] / self.height - 0.5) * universe_height * 2.0
        return Point2(x, y)

    def map_length(self, length: float) -> int:
        return int(length * self.width / (self.view_half_width * 2.0))

    def unmap_length(self, pixels: float) -> float:
        return pixels * (self.view_half_width * 2.0) / self.width

    def draw_circle(self, center: Point2, radius: float, color: Color) -> int:
        """
        Fill a disk of `radius` km around `center`.

        Every pixel at offset (dx, dy) from the mapped centre with
        dx^2 + dy^2 < r^2 is painted, where r is at least MIN_PIXEL_RADIUS.
        Pixels outside the buffer are dropped. Returns the number painted.
        """
        cx, cy = self.map_point(center)
        r = max(self.map_length(radius), MIN_PIXEL_RADIUS)

        # Only the part of the bounding square that overlaps the buffer is scanned.
        x0, x1 = max(cx - r, 0), min(cx + r, self.width - 1)
        y0, y1 = max(cy - r, 0), min(cy + r, self.height - 1)
        if x0 > x1 or y0 > y1:
            return 0

        ys, xs = np.ogrid[y0:y1 + 1, x0:x1 + 1]
        mask = (xs - cx) ** 2 + (ys - cy) ** 2 < r * r
        self.inner[y0:y1 + 1, x0:x1 + 1][mask] = color
        return int(np.count_nonzero(mask))


def render_body(body: Body, canvas: ScaledBuffer, compress_sizes: bool = True) -> int:
    """Draw one body. Size compression only affects the drawn radius."""
    radius = compress_size(body.size) if compress_sizes else body.size
    if body.kind in (BodyKind.STAR, BodyKind.PLANET):
        return canvas.draw_circle(body.position, radius, body.color)
    raise ValueError(f"unknown body kind: {body.kind!r}")
