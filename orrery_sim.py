#!/usr/bin/env python3
"""
Orrery application entry point and viewer/control-panel coordination.

What this module does
- Starts two event loops: a Pygame viewport thread and the Dear PyGui control
  panel (running on the main thread).
- Maintains a shared SimulationController that owns the World; all access is
  guarded by a re-entrant lock so a tick and a render never overlap.
- Seeds the world with the sun and the bundled planet table.

Threading model
- PygameRenderer runs in a background thread and performs: key handling,
  stepping the world by the measured real time, rendering the world into a
  fresh RGBA buffer and blitting it to the window.
- The UI class runs in the main thread via Dear PyGui. Its buttons call the
  controller's lock-protected view/time controls and it refreshes the readouts
  on a periodic frame callback.

Keys (viewport window)
- q / Esc: quit          + / =: zoom in        -: zoom out
- Up: speed up           Down: slow down       Space: play/pause

Running
1) Install: `pip install -e .`
2) Run this module: `python orrery_sim.py` (or the `orrery-sim` script)
"""

import logging
import threading
import time
from typing import List, Optional, Tuple

# GUI and Rendering libs
import pygame
import dearpygui.dearpygui as dpg

from orrery.constants import (
    BACKGROUND_COLOR,
    SECONDS_PER_DAY,
    TARGET_FPS,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from orrery.planet_data import load_planet_data
from orrery.scaled_buffer import new_pixel_buffer
from orrery.world import World

logger = logging.getLogger("orrery_sim")

# ============================================================
# Simulation Controller (Shared State)
# ============================================================

class SimulationController:
    """
    Shared state between the UI thread (Dear PyGui) and the viewport thread (Pygame).
    Includes thread-safe operations guarded by a lock.
    """
    def __init__(self, world: Optional[World] = None):
        self.lock = threading.RLock()
        self.world = world if world is not None else World()
        self.running = True  # app running
        self.playing = True  # simulation running
        self.elapsed_sim_seconds = 0.0

    def step(self, dt_real_seconds: float) -> None:
        with self.lock:
            if not self.playing or dt_real_seconds <= 0:
                return
            self.elapsed_sim_seconds += self.world.tick(dt_real_seconds)

    def render_into(self, width: int, height: int):
        buf = new_pixel_buffer(width, height, BACKGROUND_COLOR)
        with self.lock:
            return self.world.render(buf)

    def toggle_play(self) -> bool:
        with self.lock:
            self.playing = not self.playing
            return self.playing

    def zoom_in(self):
        with self.lock:
            self.world.zoom_in()

    def zoom_out(self):
        with self.lock:
            self.world.zoom_out()

    def speed_up(self):
        with self.lock:
            self.world.speed_up()

    def slow_down(self):
        with self.lock:
            self.world.slow_down()

    def snapshot(self) -> Tuple[float, float, float, bool, List[str]]:
        """(time_scale, view_half_width, elapsed_sim_seconds, playing, body names)"""
        with self.lock:
            return (
                self.world.time_scale,
                self.world.view_half_width,
                self.elapsed_sim_seconds,
                self.playing,
                list(self.world.body_names()),
            )

# ============================================================
# Pygame Viewport Thread
# ============================================================

class PygameRenderer(threading.Thread):
    """
    Pygame loop: steps the world, blits its rendered buffer, handles keys and resizes.
    """
    def __init__(self, sim: SimulationController):
        super().__init__(daemon=True)
        self.sim = sim
        self.surface = None
        self.clock = None
        self.viewport_size = (VIEW_WIDTH, VIEW_HEIGHT)
        self.running = True

    def run(self):
        pygame.init()
        pygame.display.set_caption("Orrery - Viewport")
        self.surface = pygame.display.set_mode(self.viewport_size, pygame.RESIZABLE)
        self.clock = pygame.time.Clock()

        last_time = time.perf_counter()
        while self.running and self.sim.running:
            now = time.perf_counter()
            real_dt = now - last_time
            last_time = now

            self.handle_events()
            self.sim.step(real_dt)
            self.draw()

            # Limit FPS
            self.clock.tick(TARGET_FPS)

        pygame.quit()

    def stop(self):
        self.sim.running = False
        self.running = False

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.stop()

            elif event.type == pygame.VIDEORESIZE:
                self.viewport_size = (max(event.w, 1), max(event.h, 1))
                self.surface = pygame.display.set_mode(self.viewport_size, pygame.RESIZABLE)

            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_q, pygame.K_ESCAPE):
                    self.stop()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    self.sim.zoom_in()
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    self.sim.zoom_out()
                elif event.key == pygame.K_UP:
                    self.sim.speed_up()
                elif event.key == pygame.K_DOWN:
                    self.sim.slow_down()
                elif event.key == pygame.K_SPACE:
                    self.sim.toggle_play()

    def draw(self):
        w, h = self.viewport_size
        buf = self.sim.render_into(w, h)
        image = pygame.image.frombuffer(buf.tobytes(), (w, h), "RGBA")
        self.surface.blit(image, (0, 0))
        pygame.display.flip()

# ============================================================
# Dear PyGui Control Panel
# ============================================================

class UI:
    """
    Dear PyGui interface: zoom/speed/play controls and simulation readouts.
    """
    def __init__(self, sim: SimulationController, renderer: PygameRenderer):
        self.sim = sim
        self.renderer = renderer
        self._build_ui()
        self._schedule_sync()

    def _build_ui(self):
        dpg.create_context()
        dpg.create_viewport(title='Orrery - Controls', width=380, height=420)

        with dpg.window(label="Controls", width=360, height=400, pos=(10, 10), tag="main_window"):
            dpg.add_text("Simulation Controls")
            with dpg.group(horizontal=True):
                dpg.add_button(label="Play/Pause", callback=lambda: self.sim.toggle_play())
                dpg.add_button(label="Slower", callback=lambda: self.sim.slow_down())
                dpg.add_button(label="Faster", callback=lambda: self.sim.speed_up())
            with dpg.group(horizontal=True):
                dpg.add_button(label="Zoom In", callback=lambda: self.sim.zoom_in())
                dpg.add_button(label="Zoom Out", callback=lambda: self.sim.zoom_out())

            dpg.add_separator()
            dpg.add_text("", tag="state_text")
            dpg.add_text("", tag="speed_text")
            dpg.add_text("", tag="zoom_text")
            dpg.add_text("", tag="elapsed_text")

            dpg.add_separator()
            dpg.add_text("Bodies (draw order)")
            dpg.add_listbox([], num_items=10, width=320, tag="body_list")

        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)

    def _schedule_sync(self):
        """Reschedule the periodic sync callback using frame callbacks (~10Hz)."""
        current = dpg.get_frame_count()
        dpg.set_frame_callback(current + 6, self._sync_ui_with_sim)

    def _sync_ui_with_sim(self):
        time_scale, half_width, elapsed, playing, names = self.sim.snapshot()
        dpg.set_value("state_text", "Playing" if playing else "Paused")
        dpg.set_value("speed_text", f"Speed: {time_scale / SECONDS_PER_DAY:.1f} days per second")
        dpg.set_value("zoom_text", f"View half-width: {half_width:.3e} km")
        dpg.set_value("elapsed_text", f"Elapsed: {elapsed / SECONDS_PER_DAY:.1f} days")
        dpg.configure_item("body_list", items=names)
        if not self.sim.running:
            dpg.stop_dearpygui()
            return
        self._schedule_sync()

# ============================================================
# Default Scene and Application Entry
# ============================================================

def build_default_world() -> World:
    records = load_planet_data()
    logger.info("Seeding world with the sun and %d planets", len(records))
    return World.from_planet_data(records)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sim = SimulationController(build_default_world())

    renderer = PygameRenderer(sim)

    # Start Pygame viewport thread
    renderer.start()

    UI(sim, renderer)

    # Run Dear PyGui event loop
    try:
        dpg.start_dearpygui()
    finally:
        # Stop simulation and viewport
        renderer.stop()
        renderer.join(timeout=2.0)
        dpg.destroy_context()

if __name__ == "__main__":
    main()
