"""
Flight path geometry engine for discflight.

Two-stage model:
  1. Flight numbers → per-angle metrics (compute_path_metrics)
  2. Metrics → cubic Bézier curve in canvas pixels (build_path)

The curve is a drawing aid, not a simulation: distance grows linearly
with speed and glide, turn pulls the first control point sideways, fade
moves the landing point back the other way, and glide lifts the second
control point to bulge the arc.

Canvas coordinate system (pixels):
    x = lateral (positive = right)
    y = vertical, growing downward; the throw starts near the bottom
        and travels toward y = 0

RHBH and LHFH are drawn as-is; RHFH and LHBH are mirrored about the
throw origin's x coordinate.
"""

import logging
import math
import numbers
from typing import Mapping, Optional, Union

import numpy as np
from scipy.integrate import quad

from discflight.models.flight import (
    BezierPath,
    CanvasConfig,
    FlightNumbers,
    FlightPathSet,
    FlightSummary,
    InvalidInputError,
    PathMetrics,
    Point,
    ReleaseAngle,
    ThrowStyle,
)
from discflight.utils.constants import (
    ARC_PX_PER_GLIDE,
    BASE_DISTANCE_FT,
    CONTROL1_HEIGHT_RATIO,
    CONTROL2_FADE_RATIO,
    CONTROL2_TURN_RATIO,
    DEFAULT_SAMPLE_POINTS,
    FADE_PX_PER_POINT,
    FEET_PER_GLIDE,
    FEET_PER_SPEED,
    REFERENCE_FLIGHT_PX,
    TURN_PX_PER_POINT,
)

logger = logging.getLogger(__name__)

FlightNumbersLike = Union[FlightNumbers, Mapping]


# =============================================================================
# Input Validation
# =============================================================================

def _check_number(name: str, value) -> None:
    """Reject anything that would turn into NaN/Infinity on the canvas."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value!r}")


def validate_inputs(
    flight_numbers: FlightNumbersLike,
    throw_style,
    canvas: Optional[CanvasConfig] = None,
) -> tuple[FlightNumbers, ThrowStyle, CanvasConfig]:
    """Check and normalize the public inputs of the engine.

    Flight numbers outside the typical manufacturer ranges are accepted;
    the formulas are defined for any finite value.

    Args:
        flight_numbers: FlightNumbers or a mapping with speed/glide/turn/fade.
        throw_style: ThrowStyle member, short code or long name.
        canvas: Drawing area, or None for the default canvas.

    Returns:
        Tuple of (FlightNumbers, ThrowStyle, CanvasConfig).

    Raises:
        InvalidInputError: On missing fields, non-numeric or non-finite
            numbers, a non-positive max distance or an unknown throw style.
    """
    if isinstance(flight_numbers, Mapping):
        flight_numbers = FlightNumbers.from_dict(flight_numbers)
    elif not isinstance(flight_numbers, FlightNumbers):
        raise InvalidInputError(
            f"Expected flight numbers, got {type(flight_numbers).__name__}"
        )
    for name in ("speed", "glide", "turn", "fade"):
        _check_number(name, getattr(flight_numbers, name))

    style = ThrowStyle.parse(throw_style)

    if canvas is None:
        canvas = CanvasConfig()
    elif not isinstance(canvas, CanvasConfig):
        raise InvalidInputError(
            f"Expected CanvasConfig, got {type(canvas).__name__}"
        )
    for name in ("width", "height", "start_x", "start_y", "max_distance"):
        _check_number(name, getattr(canvas, name))
    if canvas.max_distance <= 0:
        raise InvalidInputError(
            f"max_distance must be positive, got {canvas.max_distance!r}"
        )

    outside = flight_numbers.out_of_range_fields()
    if outside:
        logger.debug(f"Flight numbers outside typical ranges: {', '.join(outside)}")

    return flight_numbers, style, canvas


# =============================================================================
# Stage 1: Flight Numbers → Path Metrics
# =============================================================================

def estimate_distance(flight_numbers: FlightNumbers, max_distance: float) -> float:
    """Estimated flight distance in feet, capped at the canvas scale."""
    base_distance = BASE_DISTANCE_FT + flight_numbers.speed * FEET_PER_SPEED
    glide_bonus = flight_numbers.glide * FEET_PER_GLIDE
    return min(base_distance + glide_bonus, max_distance)


def compute_path_metrics(
    flight_numbers: FlightNumbers,
    release_angle: ReleaseAngle,
    mirror: bool,
    canvas: CanvasConfig,
) -> PathMetrics:
    """Derive the pixel-space quantities for one release angle.

    Turn and fade are scaled by the rendered flight length so that a
    putter curves less on the chart than a distance driver with the same
    ratings. The release angle then trades turn against fade, and
    forehand-equivalent throws flip both.
    """
    estimated_distance = estimate_distance(flight_numbers, canvas.max_distance)

    if estimated_distance >= canvas.max_distance:
        # Capped flights fill the usable height exactly
        flight_length = canvas.available_height
    else:
        flight_length = estimated_distance * canvas.pixels_per_foot

    effect_scale = flight_length / REFERENCE_FLIGHT_PX

    # Negative turn = curves right for RHBH
    turn_effect = flight_numbers.turn * TURN_PX_PER_POINT * effect_scale
    # Positive fade = hooks left for RHBH
    fade_effect = flight_numbers.fade * FADE_PX_PER_POINT * effect_scale

    turn_effect *= release_angle.turn_weight
    fade_effect *= release_angle.fade_weight

    if mirror:
        turn_effect = -turn_effect
        fade_effect = -fade_effect

    arc_height = flight_numbers.glide * ARC_PX_PER_GLIDE * effect_scale

    return PathMetrics(
        estimated_distance_ft=estimated_distance,
        flight_length_px=flight_length,
        effect_scale=effect_scale,
        turn_effect=turn_effect,
        fade_effect=fade_effect,
        arc_height=arc_height,
    )


# =============================================================================
# Stage 2: Path Metrics → Bézier Curve
# =============================================================================

def build_path(metrics: PathMetrics, canvas: CanvasConfig) -> BezierPath:
    """Lay out the cubic Bézier control points for one release angle."""
    start_x, start_y = canvas.start_x, canvas.start_y
    flight_length = metrics.flight_length_px
    turn_effect = metrics.turn_effect
    fade_effect = metrics.fade_effect

    # Landing point: straight up the chart, pushed sideways by the fade
    end_y = start_y - flight_length
    end_x = start_x - fade_effect

    # Initial trajectory pulled toward the turn
    cp1 = Point(start_x + turn_effect, start_y - flight_length * CONTROL1_HEIGHT_RATIO)

    # Residual turn meets incoming fade, lifted by the glide arc
    cp2 = Point(
        start_x + turn_effect * CONTROL2_TURN_RATIO - fade_effect * CONTROL2_FADE_RATIO,
        end_y + metrics.arc_height,
    )

    return BezierPath(
        start=Point(start_x, start_y),
        control1=cp1,
        control2=cp2,
        end=Point(end_x, end_y),
    )


def compute_flight_paths(
    flight_numbers: FlightNumbersLike,
    throw_style,
    canvas: Optional[CanvasConfig] = None,
) -> FlightPathSet:
    """Compute the hyzer, flat and anhyzer flight paths of a disc.

    This is the main entry point of the engine.

    Throw equivalencies:
        - RHBH = LHFH (reference path)
        - RHFH = LHBH (mirrored path)

    Args:
        flight_numbers: Disc ratings (FlightNumbers or mapping).
        throw_style: ThrowStyle member, short code or long name.
        canvas: Drawing area, defaults to CanvasConfig().

    Returns:
        FlightPathSet with one BezierPath per release angle.

    Raises:
        InvalidInputError: If the inputs fail validation.
    """
    flight_numbers, style, canvas = validate_inputs(flight_numbers, throw_style, canvas)
    mirror = style.is_mirrored

    paths = {
        angle.value: build_path(
            compute_path_metrics(flight_numbers, angle, mirror, canvas), canvas
        )
        for angle in ReleaseAngle
    }
    result = FlightPathSet(**paths)

    logger.debug(
        f"Flight paths computed: {flight_numbers} {style.value} "
        f"flat={result.flat.to_svg()}"
    )
    return result


def compute_svg_paths(
    flight_numbers: FlightNumbersLike,
    throw_style,
    canvas: Optional[CanvasConfig] = None,
) -> dict[str, str]:
    """SVG path strings keyed by release angle."""
    return compute_flight_paths(flight_numbers, throw_style, canvas).to_svg()


# =============================================================================
# Curve Evaluation
# =============================================================================

def _control_array(path: BezierPath) -> np.ndarray:
    return np.array([p.as_tuple() for p in path.control_points()], dtype=float)


def sample_path(path: BezierPath, num_points: int = DEFAULT_SAMPLE_POINTS) -> np.ndarray:
    """Evaluate the curve at evenly spaced parameter values.

    Args:
        path: Curve to evaluate.
        num_points: Number of samples, including both end points.

    Returns:
        Array of shape (num_points, 2) with (x, y) rows; the first row is
        the start point and the last row the end point.
    """
    if isinstance(num_points, bool) or not isinstance(num_points, numbers.Integral) \
            or num_points < 2:
        raise InvalidInputError(f"num_points must be an integer >= 2, got {num_points!r}")

    p0, p1, p2, p3 = _control_array(path)
    t = np.linspace(0.0, 1.0, num_points)[:, np.newaxis]
    mt = 1.0 - t
    return (mt ** 3) * p0 + 3 * (mt ** 2) * t * p1 + 3 * mt * (t ** 2) * p2 + (t ** 3) * p3


def path_length(path: BezierPath) -> float:
    """Arc length of the curve in pixels."""
    p0, p1, p2, p3 = _control_array(path)

    def speed(t):
        """Magnitude of the curve's first derivative at t."""
        mt = 1.0 - t
        dx, dy = 3 * mt ** 2 * (p1 - p0) + 6 * mt * t * (p2 - p1) + 3 * t ** 2 * (p3 - p2)
        return math.hypot(dx, dy)

    length, _ = quad(speed, 0.0, 1.0)
    return length


def summarize_flight(
    path: BezierPath,
    canvas: Optional[CanvasConfig] = None,
    num_points: int = DEFAULT_SAMPLE_POINTS,
) -> FlightSummary:
    """Key statistics of a flight path for display next to the chart.

    Args:
        path: Curve produced with the given canvas.
        canvas: Canvas the curve was laid out in (default canvas if None).
        num_points: Samples used to find the lateral extremes.

    Returns:
        FlightSummary in pixels and feet.
    """
    if canvas is None:
        canvas = CanvasConfig()

    samples = sample_path(path, num_points)
    offsets = samples[:, 0] - path.start.x
    pixels_per_foot = canvas.pixels_per_foot

    final_offset = path.end.x - path.start.x
    return FlightSummary(
        distance_ft=(path.start.y - path.end.y) / pixels_per_foot,
        max_right_px=max(float(offsets.max()), 0.0),
        max_left_px=max(float(-offsets.min()), 0.0),
        final_offset_px=final_offset,
        final_offset_ft=final_offset / pixels_per_foot,
        length_px=path_length(path),
    )
