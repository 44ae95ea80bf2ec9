"""Core lightweight types shared across modules.
Provides simple dataclasses and helpers so the host, the runtime and the core
components can interoperate without importing each other.
"""
import math
from dataclasses import dataclass, field, fields, asdict
from typing import Tuple, Optional, Dict, Any, List, Mapping, Sequence, Union

from bubble_sim import constants

Vec2 = Tuple[float, float]
Range = Tuple[float, float]


@dataclass(frozen=True)
class Bounds:
    """Working area of the host surface, in pixels."""
    width: float = 0.0
    height: float = 0.0

    @property
    def is_degenerate(self) -> bool:
        return not (self.width > 0 and self.height > 0)


BoundsLike = Union[Bounds, Mapping[str, float], Sequence[float]]
PointerLike = Union[Vec2, Mapping[str, float], Sequence[float], None]


def _finite(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def to_bounds(value: Optional[BoundsLike]) -> Bounds:
    """Coerce a Bounds, ``{"width", "height"}`` mapping or pair into Bounds.

    Missing or non-finite dimensions become 0, which the components treat as
    "host not laid out yet".
    """
    if value is None:
        return Bounds()
    if isinstance(value, Bounds):
        return Bounds(_finite(value.width), _finite(value.height))
    if isinstance(value, Mapping):
        return Bounds(_finite(value.get("width", 0.0)), _finite(value.get("height", 0.0)))
    try:
        width, height = value
    except (TypeError, ValueError):
        return Bounds()
    return Bounds(_finite(width), _finite(height))


def to_pointer(value: PointerLike) -> Optional[Vec2]:
    """Coerce a pointer into an ``(x, y)`` tuple; None or non-finite input gives None."""
    if value is None:
        return None
    try:
        if isinstance(value, Mapping):
            x, y = value.get("x"), value.get("y")
        else:
            x, y = value
        x, y = float(x), float(y)
    except (TypeError, ValueError):
        return None
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return (x, y)


@dataclass
class SimulationConfig:
    """Tuning for one simulation instance. Forces are per nominal frame."""
    # Timing
    nominal_dt: float = constants.NOMINAL_DT
    max_frame_scale: float = constants.MAX_FRAME_SCALE

    # Forces
    mouse_attraction: float = constants.MOUSE_ATTRACTION
    bubble_repulsion: float = constants.BUBBLE_REPULSION
    ambient_lift: float = constants.AMBIENT_LIFT
    friction: float = constants.FRICTION
    restitution: float = constants.RESTITUTION

    # Bubble geometry
    base_radius_range: Range = constants.BASE_RADIUS_RANGE
    min_radius: float = constants.MIN_RADIUS
    initial_speed: float = constants.INITIAL_SPEED
    mass_per_radius: float = constants.MASS_PER_RADIUS
    min_mass: float = constants.MIN_MASS

    # Radius animation
    spring_stiffness: float = constants.SPRING_STIFFNESS
    pulse_increment: float = constants.PULSE_INCREMENT
    pulse_amplitude: float = constants.PULSE_AMPLITUDE
    hover_growth: float = constants.HOVER_GROWTH
    expand_growth: float = constants.EXPAND_GROWTH

    # Ambient particles
    ambient_count: int = constants.AMBIENT_COUNT
    ambient_speed: float = constants.AMBIENT_SPEED
    ambient_size_range: Range = constants.AMBIENT_SIZE_RANGE
    ambient_alpha_range: Range = constants.AMBIENT_ALPHA_RANGE
    particle_decay: float = constants.PARTICLE_DECAY
    lifespan_epsilon: float = constants.LIFESPAN_EPSILON

    # Burst particles
    burst_count: int = constants.BURST_COUNT
    burst_speed_range: Range = constants.BURST_SPEED_RANGE
    burst_size_range: Range = constants.BURST_SIZE_RANGE
    burst_alpha: float = constants.BURST_ALPHA

    # Connection links
    connection_distance: float = constants.CONNECTION_DISTANCE
    connection_max_alpha: float = constants.CONNECTION_MAX_ALPHA

    def __post_init__(self):
        """Validate coefficient ranges"""
        for name in ("friction", "restitution", "spring_stiffness", "particle_decay"):
            value = getattr(self, name)
            if not 0.0 < value <= 1.0:
                raise ValueError(f"{name} must be in (0, 1], got {value}")
        if self.nominal_dt <= 0:
            raise ValueError(f"nominal_dt must be positive, got {self.nominal_dt}")
        if self.max_frame_scale <= 0:
            raise ValueError(f"max_frame_scale must be positive, got {self.max_frame_scale}")
        if self.min_radius <= 0:
            raise ValueError(f"min_radius must be positive, got {self.min_radius}")
        if self.min_mass <= 0:
            raise ValueError(f"min_mass must be positive, got {self.min_mass}")
        if self.ambient_count < 0 or self.burst_count < 0:
            raise ValueError("particle counts must not be negative")
        if not 0.0 < self.lifespan_epsilon < 1.0:
            raise ValueError(f"lifespan_epsilon must be in (0, 1), got {self.lifespan_epsilon}")
        for name in ("base_radius_range", "ambient_size_range", "ambient_alpha_range",
                     "burst_speed_range", "burst_size_range"):
            low, high = getattr(self, name)
            if low > high:
                raise ValueError(f"{name} is empty: {low} > {high}")
            setattr(self, name, (float(low), float(high)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SimulationConfig":
        """Build a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class BubbleView:
    """Read-only per-frame view of one bubble."""
    id: int
    x: float
    y: float
    radius: float
    is_hovered: bool
    is_expanded: bool
    payload: Any = None


@dataclass(frozen=True)
class ParticleView:
    x: float
    y: float
    size: float
    alpha: float


@dataclass(frozen=True)
class Connection:
    """Link between two nearby bubbles; alpha fades with distance."""
    a: int
    b: int
    alpha: float


@dataclass(frozen=True)
class Snapshot:
    """Everything the host needs to draw one frame."""
    frame: int = 0
    bubbles: List[BubbleView] = field(default_factory=list)
    particles: List[ParticleView] = field(default_factory=list)
    connections: List[Connection] = field(default_factory=list)

    @property
    def expanded(self) -> Optional[BubbleView]:
        for bubble in self.bubbles:
            if bubble.is_expanded:
                return bubble
        return None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = [
    "Vec2",
    "Range",
    "Bounds",
    "BoundsLike",
    "PointerLike",
    "to_bounds",
    "to_pointer",
    "SimulationConfig",
    "BubbleView",
    "ParticleView",
    "Connection",
    "Snapshot",
]
