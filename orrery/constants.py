#!/usr/bin/env python3
"""
Shared constants for the orrery (kilometre-based units unless stated otherwise).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""

# Physical constants
G = 6.67430e-20  # km^3 kg^-1 s^-2
SOLAR_MASS = 1.98850e30  # kg
SOLAR_RADIUS = 696340.0  # km
SECONDS_PER_DAY = 24.0 * 60.0 * 60.0

# Force computation: squared distances are clamped to MIN_DISTANCE_KM ** 2
MIN_DISTANCE_KM = 1.0

# Seed data scaling
DISTANCE_SCALE = 1_000_000.0  # planets.json distances are in 10^6 km
MASS_SCALE = 1e24  # planets.json masses are in 10^24 kg

# Simulation controls
DEFAULT_TIME_SCALE = 100.0 * SECONDS_PER_DAY  # simulated seconds per real second
SPEED_STEP = 10.0 * SECONDS_PER_DAY
MIN_TIME_SCALE = 0.0

# View controls (universe half-width in km)
DEFAULT_VIEW_HALF_WIDTH = 150_000_000.0
ZOOM_STEP_KM = 1_000_000.0
MIN_VIEW_HALF_WIDTH_KM = 1_000.0

# Rendering
MIN_PIXEL_RADIUS = 2
SIZE_COMPRESSION_BASE = 1.8
SIZE_COMPRESSION_SCALE_KM = 2.0e5
BACKGROUND_COLOR = (25, 25, 25, 255)  # RGBA
STAR_COLOR = (255, 255, 200, 255)
NEUTRAL_COLOR = (244, 244, 244, 255)

# Front end (viewport)
VIEW_WIDTH = 640
VIEW_HEIGHT = 480
TARGET_FPS = 60
