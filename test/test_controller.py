import unittest

from orrery.constants import BACKGROUND_COLOR, SECONDS_PER_DAY
from orrery.data_models import Body
from orrery.world import World
from orrery_sim import SimulationController, build_default_world


def small_world():
    world = World(time_scale=SECONDS_PER_DAY)
    world.add_body(Body.star())
    world.add_body(Body.planet(position=(1.496e8, 0.0), velocity=(0.0, 29.78), mass=5.97e24, name="Earth"))
    return world


class TestSimulationController(unittest.TestCase):

    def test_step_advances_clock(self):
        sim = SimulationController(small_world())
        sim.step(0.5)
        self.assertEqual(sim.elapsed_sim_seconds, 0.5 * SECONDS_PER_DAY)
        self.assertNotEqual(sim.world.bodies[1].position.y, 0.0)

    def test_paused_does_not_step(self):
        sim = SimulationController(small_world())
        self.assertFalse(sim.toggle_play())
        before = sim.world.bodies[1].state
        sim.step(1.0)
        self.assertEqual(sim.world.bodies[1].state, before)
        self.assertTrue(sim.toggle_play())

    def test_controls_and_snapshot(self):
        sim = SimulationController(small_world())
        sim.speed_up()
        sim.zoom_out()
        time_scale, half_width, elapsed, playing, names = sim.snapshot()
        self.assertEqual(time_scale, 11 * SECONDS_PER_DAY)
        self.assertEqual(half_width, 151_000_000.0)
        self.assertEqual(elapsed, 0.0)
        self.assertTrue(playing)
        self.assertEqual(names, ["Sun", "Earth"])
        sim.slow_down()
        sim.zoom_in()
        self.assertEqual(sim.snapshot()[:2], (SECONDS_PER_DAY, 150_000_000.0))

    def test_render_into(self):
        sim = SimulationController(small_world())
        buf = sim.render_into(64, 48)
        self.assertEqual(buf.shape, (48, 64, 4))
        self.assertEqual(tuple(buf[0, 0]), BACKGROUND_COLOR)
        self.assertNotEqual(tuple(buf[24, 32]), BACKGROUND_COLOR)

    def test_default_world(self):
        world = build_default_world()
        self.assertEqual(world.body_names()[0], "Sun")
        self.assertEqual(len(world.bodies), 10)


if __name__ == "__main__":
    unittest.main()
