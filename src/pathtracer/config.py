"""
Configuration settings for the path tracer
"""

# Smallest hit distance accepted by the integrator; avoids self-intersection acne.
T_MIN = 0.001

# Quality presets: samples per pixel and maximum bounce depth.
QUALITY_LEVELS = {
    "preview": {"samples": 16, "bounces": 8},
    "balanced": {"samples": 100, "bounces": 50},
    "high_quality": {"samples": 400, "bounces": 100},
}

# Rendering settings
RENDER_DEFAULTS = {
    "scene": "cornell_box",
    "output": "output.png",
    "width": 400,
    "quality": "balanced",
    "seed": 42,
    "workers": 0,  # 0 means one worker per CPU
    "background": "scene",  # scene, solid or sky
}

# Background settings
SKY_SETTINGS = {
    "zenith": (0.5, 0.7, 1.0),
    "horizon": (1.0, 1.0, 1.0),
}

# Texture used by the earth scenes when none is given on the command line.
DEFAULT_EARTH_TEXTURE = "earthmap.jpg"
