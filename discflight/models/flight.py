"""
Data models for flight path diagrams in discflight.

FlightNumbers: The four manufacturer ratings of a disc.
ThrowStyle / ReleaseAngle: Closed sets of throw variants.
CanvasConfig: Drawing area the curves are laid out in.
BezierPath: One cubic Bézier curve descriptor in canvas pixels.
FlightPathSet: One BezierPath per release angle.
PathMetrics / FlightSummary: Intermediate and derived per-path values.
"""

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Iterator, Mapping

from discflight.utils.constants import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_MAX_DISTANCE_FT,
    DEFAULT_START_X,
    DEFAULT_START_Y,
    RELEASE_ANGLE_WEIGHTS,
    TOP_MARGIN_PX,
    TYPICAL_RANGES,
)


class InvalidInputError(ValueError):
    """Raised when flight path inputs are missing or not finite numbers."""


@dataclass(frozen=True)
class FlightNumbers:
    """Manufacturer flight ratings of a disc.

    Attributes:
        speed: Arm speed needed to fly as designed (typically 1 to 15).
        glide: Ability to hold lift (typically 1 to 7).
        turn: Early high-speed curve, negative = right for RHBH
              (typically -5 to 1).
        fade: Late low-speed hook, positive = left for RHBH
              (typically 0 to 5).
    """
    speed: float
    glide: float
    turn: float
    fade: float

    @classmethod
    def from_dict(cls, data: Mapping) -> "FlightNumbers":
        """Build flight numbers from a disc record or any mapping."""
        values = {}
        for f in fields(cls):
            if f.name not in data:
                raise InvalidInputError(f"Missing flight number: {f.name}")
            values[f.name] = data[f.name]
        return cls(**values)

    def out_of_range_fields(self) -> list[str]:
        """Fields outside the typical manufacturer ranges."""
        outside = []
        for name, (low, high) in TYPICAL_RANGES.items():
            value = getattr(self, name)
            if not low <= value <= high:
                outside.append(name)
        return outside


class ThrowStyle(str, Enum):
    """Throwing hand and motion.

    RHBH and LHFH spin the disc the same way and share the reference
    curves; RHFH and LHBH are their mirror image.
    """
    RHBH = "rhbh"
    RHFH = "rhfh"
    LHBH = "lhbh"
    LHFH = "lhfh"

    @property
    def long_name(self) -> str:
        return _LONG_NAMES_BY_STYLE[self]

    @property
    def is_mirrored(self) -> bool:
        return self in (ThrowStyle.RHFH, ThrowStyle.LHBH)

    @classmethod
    def parse(cls, value) -> "ThrowStyle":
        """Accept a member, a short code ("rhbh") or a long name
        ("right-hand-backhand")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "-")
            if key in _STYLES_BY_LONG_NAME:
                return _STYLES_BY_LONG_NAME[key]
            try:
                return cls(key)
            except ValueError:
                pass
        raise InvalidInputError(f"Unknown throw style: {value!r}")

    @classmethod
    def from_hand(cls, hand: str, motion: str = "backhand") -> "ThrowStyle":
        """Map a throwing-hand preference and motion to a throw style."""
        return cls.parse(f"{hand}-hand-{motion}")


_LONG_NAMES_BY_STYLE = {
    ThrowStyle.RHBH: "right-hand-backhand",
    ThrowStyle.RHFH: "right-hand-forehand",
    ThrowStyle.LHBH: "left-hand-backhand",
    ThrowStyle.LHFH: "left-hand-forehand",
}
_STYLES_BY_LONG_NAME = {name: style for style, name in _LONG_NAMES_BY_STYLE.items()}


class ReleaseAngle(str, Enum):
    """Angle of the disc relative to the ground at release."""
    HYZER = "hyzer"
    FLAT = "flat"
    ANHYZER = "anhyzer"

    @property
    def turn_weight(self) -> float:
        return RELEASE_ANGLE_WEIGHTS[self.value][0]

    @property
    def fade_weight(self) -> float:
        return RELEASE_ANGLE_WEIGHTS[self.value][1]


@dataclass(frozen=True)
class CanvasConfig:
    """Drawing area for flight diagrams.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        start_x: Throw origin x in pixels.
        start_y: Throw origin y in pixels (y grows downward).
        max_distance: Feet mapped onto the usable vertical extent.
    """
    width: float = DEFAULT_CANVAS_WIDTH
    height: float = DEFAULT_CANVAS_HEIGHT
    start_x: float = DEFAULT_START_X
    start_y: float = DEFAULT_START_Y
    max_distance: float = DEFAULT_MAX_DISTANCE_FT

    @property
    def available_height(self) -> float:
        return self.start_y - TOP_MARGIN_PX

    @property
    def pixels_per_foot(self) -> float:
        return self.available_height / self.max_distance


@dataclass(frozen=True)
class Point:
    """A position in canvas pixels."""
    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


def _format_number(value: float) -> str:
    """Shortest round-trip form, integral values without a trailing .0"""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class BezierPath:
    """Cubic Bézier curve from the throw origin to the landing point."""
    start: Point
    control1: Point
    control2: Point
    end: Point

    def control_points(self) -> list[Point]:
        return [self.start, self.control1, self.control2, self.end]

    def to_svg(self) -> str:
        """Encode as an SVG path `d` attribute."""
        x0, y0, c1x, c1y, c2x, c2y, x1, y1 = (
            _format_number(v) for p in self.control_points() for v in p.as_tuple()
        )
        return f"M {x0} {y0} C {c1x} {c1y}, {c2x} {c2y}, {x1} {y1}"

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class FlightPathSet:
    """One flight path per release angle."""
    hyzer: BezierPath
    flat: BezierPath
    anhyzer: BezierPath

    def __getitem__(self, angle) -> BezierPath:
        try:
            return getattr(self, ReleaseAngle(angle).value)
        except ValueError:
            raise KeyError(angle) from None

    def __iter__(self) -> Iterator[tuple[ReleaseAngle, BezierPath]]:
        for angle in ReleaseAngle:
            yield angle, self[angle]

    def to_svg(self) -> dict[str, str]:
        return {angle.value: path.to_svg() for angle, path in self}

    def to_dict(self) -> dict:
        return {angle.value: path.to_dict() for angle, path in self}


@dataclass(frozen=True)
class PathMetrics:
    """Intermediate values for one release angle.

    Turn and fade effects are in pixels, already weighted for the
    release angle and mirrored for forehand-equivalent throws.
    """
    estimated_distance_ft: float
    flight_length_px: float
    effect_scale: float
    turn_effect: float
    fade_effect: float
    arc_height: float


@dataclass(frozen=True)
class FlightSummary:
    """Readable statistics of a rendered flight path.

    Lateral offsets are measured from the throw origin, positive = right
    on the canvas.

    Attributes:
        distance_ft: Distance represented by the path's vertical extent.
        max_right_px: Largest rightward excursion along the curve.
        max_left_px: Largest leftward excursion (reported as a positive
                     number).
        final_offset_px: Lateral offset of the landing point.
        final_offset_ft: Landing offset converted to feet.
        length_px: Arc length of the curve.
    """
    distance_ft: float
    max_right_px: float
    max_left_px: float
    final_offset_px: float
    final_offset_ft: float
    length_px: float
