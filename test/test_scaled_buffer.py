import unittest

import numpy as np

from orrery.constants import MIN_PIXEL_RADIUS, SIZE_COMPRESSION_SCALE_KM
from orrery.data_models import Body
from orrery.scaled_buffer import ScaledBuffer, compress_size, new_pixel_buffer, render_body
from orrery.vector_utils import Point2

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def disk_offsets(r):
    return {(dx, dy) for dx in range(-r, r + 1) for dy in range(-r, r + 1) if dx * dx + dy * dy < r * r}


def painted(buf):
    ys, xs = np.nonzero(np.all(buf == WHITE, axis=2))
    return set(zip(xs.tolist(), ys.tolist()))


class TestMapping(unittest.TestCase):

    def setUp(self):
        # universe width 2000 km across 640 px; height follows the 4:3 aspect
        self.canvas = ScaledBuffer(new_pixel_buffer(640, 480, BLACK), 1000.0)

    def test_origin_maps_to_centre(self):
        self.assertEqual(self.canvas.map_point(Point2(0.0, 0.0)), (320, 240))

    def test_map_point(self):
        self.assertEqual(self.canvas.map_point(Point2(1000.0, 750.0)), (480, 360))
        self.assertEqual(self.canvas.map_point(Point2(-1000.0, -750.0)), (160, 120))

    def test_out_of_range_is_not_clamped(self):
        x, y = self.canvas.map_point(Point2(4000.0, 0.0))
        self.assertGreater(x, 640)
        x, _ = self.canvas.map_point(Point2(-4000.0, 0.0))
        self.assertLess(x, 0)

    def test_map_length(self):
        self.assertEqual(self.canvas.map_length(1000.0), 320)
        self.assertEqual(self.canvas.map_length(1.0), 0)
        self.assertAlmostEqual(self.canvas.unmap_length(320), 1000.0)

    def test_point_round_trip_within_one_pixel(self):
        pixel_x = self.canvas.unmap_point((1, 0)).x - self.canvas.unmap_point((0, 0)).x
        pixel_y = self.canvas.unmap_point((0, 1)).y - self.canvas.unmap_point((0, 0)).y
        for p in [Point2(0.0, 0.0), Point2(123.4, -56.7), Point2(-1999.0, 1499.0), Point2(17.0, 3.0)]:
            back = self.canvas.unmap_point(self.canvas.map_point(p))
            self.assertLessEqual(abs(back.x - p.x), pixel_x)
            self.assertLessEqual(abs(back.y - p.y), pixel_y)

    def test_rejects_non_rgba_buffer(self):
        with self.assertRaises(ValueError):
            ScaledBuffer(np.zeros((10, 10, 3), dtype=np.uint8), 1000.0)


class TestDrawCircle(unittest.TestCase):

    def setUp(self):
        self.buf = new_pixel_buffer(640, 480, BLACK)
        self.canvas = ScaledBuffer(self.buf, 1000.0)

    def test_tiny_radius_uses_minimum(self):
        n = self.canvas.draw_circle(Point2(0.0, 0.0), 0.0, WHITE)
        expected = {(320 + dx, 240 + dy) for dx, dy in disk_offsets(MIN_PIXEL_RADIUS)}
        self.assertEqual(n, len(expected))
        self.assertEqual(painted(self.buf), expected)
        self.assertGreaterEqual(n, 1)

    def test_disk_is_strict(self):
        # 31.25 km is exactly 10 px at this scale
        n = self.canvas.draw_circle(Point2(0.0, 0.0), 31.25, WHITE)
        expected = {(320 + dx, 240 + dy) for dx, dy in disk_offsets(10)}
        self.assertEqual(painted(self.buf), expected)
        self.assertEqual(n, len(expected))
        self.assertNotIn((330, 240), painted(self.buf))
        self.assertNotIn((326, 248), painted(self.buf))

    def test_clipped_at_corner(self):
        corner = self.canvas.unmap_point((0, 0))
        self.assertEqual(self.canvas.map_point(corner), (0, 0))
        n = self.canvas.draw_circle(corner, 31.25, WHITE)
        expected = {(dx, dy) for dx, dy in disk_offsets(10) if dx >= 0 and dy >= 0}
        self.assertEqual(painted(self.buf), expected)
        self.assertEqual(n, len(expected))

    def test_fully_off_screen(self):
        n = self.canvas.draw_circle(Point2(1.0e6, -1.0e6), 31.25, WHITE)
        self.assertEqual(n, 0)
        self.assertFalse(painted(self.buf))

    def test_into_buffer(self):
        self.assertIs(self.canvas.into_buffer(), self.buf)


class TestSizeCompression(unittest.TestCase):

    def test_log_base(self):
        self.assertAlmostEqual(compress_size(1.8 ** 3) / SIZE_COMPRESSION_SCALE_KM, 3.0)

    def test_small_radii(self):
        self.assertEqual(compress_size(0.0), 0.0)
        self.assertEqual(compress_size(1.0), 0.0)

    def test_monotonic_and_compressive(self):
        earth, sun = 6378.0, 696340.0
        self.assertLess(compress_size(earth), compress_size(sun))
        self.assertLess(compress_size(sun) / compress_size(earth), sun / earth / 10)

    def test_render_body(self):
        buf = new_pixel_buffer(100, 100, BLACK)
        canvas = ScaledBuffer(buf, 1.0e8)
        star = Body.star(color=WHITE)
        compressed = render_body(star, canvas)
        self.assertEqual(star.size, 696340.0)
        canvas.inner[...] = BLACK
        true = render_body(star, canvas, compress_sizes=False)
        self.assertGreaterEqual(compressed, true)


if __name__ == "__main__":
    unittest.main()
