"""Shared sample tables: input color -> expected output."""

# Exact results for primaries and secondaries
samples_rgba_hsla = {
    (255, 0, 0): (0.0, 100.0, 50.0),
    (0, 255, 0): (120.0, 100.0, 50.0),
    (0, 0, 255): (240.0, 100.0, 50.0),
    (255, 255, 0): (60.0, 100.0, 50.0),
    (0, 255, 255): (180.0, 100.0, 50.0),
    (255, 0, 255): (300.0, 100.0, 50.0),
}

samples_rgba_hsva = {
    (255, 0, 0): (0.0, 100.0, 100.0),
    (0, 255, 0): (120.0, 100.0, 100.0),
    (0, 0, 255): (240.0, 100.0, 100.0),
    (255, 255, 0): (60.0, 100.0, 100.0),
    (0, 255, 255): (180.0, 100.0, 100.0),
    (255, 0, 255): (300.0, 100.0, 100.0),
}

samples_rgba_cmyka = {
    (255, 0, 0): (0.0, 100.0, 100.0, 0.0),
    (0, 255, 0): (100.0, 0.0, 100.0, 0.0),
    (0, 0, 255): (100.0, 100.0, 0.0, 0.0),
    (255, 255, 255): (0.0, 0.0, 0.0, 0.0),
    (0, 0, 0): (0.0, 0.0, 0.0, 100.0),
}

# Lavender used throughout the demo, checked to a tolerance
LAVENDER = (134, 131, 213, 0.94)
LAVENDER_HSLA = (242.19512, 49.39759, 67.45098, 0.94)
LAVENDER_HSVA = (242.19512, 38.49765, 83.52941, 0.94)
LAVENDER_CMYKA = (37.08920, 38.49765, 0.0, 16.47059, 0.94)

samples_hsla_rgba = {
    (242.0, 49.0, 67.0, 0.94): (132, 129, 212, 0.94),
    (0.0, 100.0, 50.0, 1.0): (255, 0, 0, 1.0),
    (120.0, 100.0, 50.0, 1.0): (0, 255, 0, 1.0),
}

samples_hsva_rgba = {
    (242.0, 39.0, 83.0, 0.94): (131, 129, 211, 0.94),
    (0.0, 100.0, 100.0, 1.0): (255, 0, 0, 1.0),
    (120.0, 100.0, 100.0, 1.0): (0, 255, 0, 1.0),
    (240.0, 100.0, 100.0, 1.0): (0, 0, 255, 1.0),
}

samples_cmyka_rgba = {
    (47.0, 0.0, 16.0, 0.0, 0.94): (135, 255, 214, 0.94),
    (0.0, 0.0, 0.0, 0.0, 1.0): (255, 255, 255, 1.0),
    (0.0, 0.0, 0.0, 100.0, 0.5): (0, 0, 0, 0.5),
    (100.0, 100.0, 100.0, 0.0, 1.0): (0, 0, 0, 1.0),
}

# Chromatic colors (r, g, b not all equal) for round trips
chromatic_rgba = [
    (255, 0, 0, 1.0),
    (134, 131, 213, 0.94),
    (87, 60, 250, 1.0),
    (12, 200, 99, 0.0),
    (1, 2, 3, 0.25),
    (254, 255, 255, 0.5),
    (200, 30, 170, 1.0),
    (66, 66, 67, 0.75),
    (250, 128, 114, 1.0),
    (0, 128, 128, 0.33),
]

hex_samples = ["#000000", "#ffffff", "#8683d5", "#0a0b0c", "#ff7f00", "#123abc"]
