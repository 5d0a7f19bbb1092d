"""
Flight model constants and canvas defaults for discflight.

The distance model and effect scales are tuned so that the rendered
curves look plausible on a flight chart; they are not derived from
aerodynamics.
"""

# =============================================================================
# Distance Model (feet)
# =============================================================================

BASE_DISTANCE_FT = 30.0        # Distance of a speed-0 disc
FEET_PER_SPEED = 28.0          # Speed 2 ≈ 86 ft, speed 12 ≈ 366 ft
FEET_PER_GLIDE = 5.0           # Glide bonus per point

# =============================================================================
# Canvas Geometry (pixels)
# =============================================================================

TOP_MARGIN_PX = 20.0           # Reserved above the highest end point

# Turn/fade offsets are tuned for a 250 px flight and scaled from there
REFERENCE_FLIGHT_PX = 250.0

TURN_PX_PER_POINT = 10.0       # Lateral pixels per point of turn
FADE_PX_PER_POINT = 15.0       # Lateral pixels per point of fade
ARC_PX_PER_GLIDE = 6.0         # Apex bulge per point of glide

# Control point placement
CONTROL1_HEIGHT_RATIO = 0.4    # First control point sits 40% up the flight
CONTROL2_TURN_RATIO = 0.5      # Residual turn at the second control point
CONTROL2_FADE_RATIO = 0.3      # Incoming fade at the second control point

# =============================================================================
# Release Angle Weights: (turn multiplier, fade multiplier)
# =============================================================================

RELEASE_ANGLE_WEIGHTS = {
    "hyzer":   (0.5, 1.4),
    "flat":    (1.0, 1.0),
    "anhyzer": (1.6, 0.6),
}

# =============================================================================
# Default Canvas
# =============================================================================

DEFAULT_CANVAS_WIDTH = 200
DEFAULT_CANVAS_HEIGHT = 300
DEFAULT_START_X = 100
DEFAULT_START_Y = 280
DEFAULT_MAX_DISTANCE_FT = 400

DEFAULT_SAMPLE_POINTS = 50

# =============================================================================
# Typical Manufacturer Flight Number Ranges (informational only)
# =============================================================================

TYPICAL_RANGES = {
    "speed": (1, 15),
    "glide": (1, 7),
    "turn":  (-5, 1),
    "fade":  (0, 5),
}
