"""Board and simulation settings domain models."""

from dataclasses import dataclass, field

MIN_PLATFORMS = 1
MAX_PLATFORMS = 20


@dataclass
class SimulationSettings:
    """Virtual clock settings.

    ``speed`` is virtual minutes per real second. ``last_tick`` is a monotonic
    timestamp in seconds, or None before the first tick.
    """

    virtual_minutes: float = 8 * 60
    auto_advance: bool = True
    speed: float = 1.0
    last_tick: float | None = None


@dataclass
class BoardSettings:
    """Settings owned by the schedule store."""

    num_platforms: int = 6
    sim: SimulationSettings = field(default_factory=SimulationSettings)


def clamp_platform_count(value: int) -> int:
    """Clamp a platform count into the supported range."""
    return max(MIN_PLATFORMS, min(MAX_PLATFORMS, int(value)))
