"""Shared dataclasses for signals, their points, and generation requests."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional

import numpy as np


class SignalDefaults:
    """Default values used to stage a new generation request."""

    AMPLITUDE = 1.0
    FREQUENCY = 1.0
    PHASE = 0.0
    POINT_COUNT = 100
    TIME_INTERVAL = 1.0
    NOISE_LEVEL = 0


class SignalType(Enum):
    """Waveform families the synthesizer knows how to produce."""

    SINE = "sine"
    SQUARE = "square"
    TRIANGLE = "triangle"
    SAWTOOTH = "sawtooth"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: Any) -> "SignalType":
        """
        Resolve a selector (enum member, name, value or stored index).

        Raises ``ValueError`` for anything that does not name a known type.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Unknown signal type {value!r}")
        if isinstance(value, int):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
            raise ValueError(f"Unknown signal type index {value!r}")
        key = str(value or "").strip().lower()
        for member in cls:
            if key in {member.value, member.name.lower()}:
                return member
        raise ValueError(f"Unknown signal type {value!r}")

    @property
    def index(self) -> int:
        """Stable integer code used by the persistence layer."""
        return list(SignalType).index(self)


class SignalPoint(NamedTuple):
    time: float
    value: float


@dataclass
class Signal:
    """
    Signal metadata plus its ordered ``(time, value)`` points.

    ``point_count`` mirrors ``len(points)`` for signals that carry their
    samples. Library entries loaded without points keep the stored count.
    """

    type: SignalType
    amplitude: float
    frequency: float
    phase: float = SignalDefaults.PHASE
    time_interval: float = SignalDefaults.TIME_INTERVAL
    noise_level: int = SignalDefaults.NOISE_LEVEL
    points: List[SignalPoint] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    id: Optional[int] = None
    point_count: Optional[int] = None

    def __post_init__(self) -> None:
        if self.point_count is None or self.points:
            self.point_count = len(self.points)

    def __len__(self) -> int:
        return len(self.points)

    @property
    def display_name(self) -> str:
        return (
            f"{self.type.label} (A={self.amplitude}, f={self.frequency}, "
            f"phi={self.phase}, T={self.time_interval})"
        )

    def times(self) -> np.ndarray:
        """Return point times as a ``float64`` array."""
        return np.fromiter(
            (p.time for p in self.points), dtype=np.float64, count=len(self.points)
        )

    def values(self) -> np.ndarray:
        """Return point values as a ``float64`` array."""
        return np.fromiter(
            (p.value for p in self.points), dtype=np.float64, count=len(self.points)
        )

    def clone(self, **changes: Any) -> "Signal":
        """Return a copy with its own point list; ``changes`` override fields."""
        points = changes.pop("points", None)
        return replace(self, points=list(self.points if points is None else points), **changes)

    def with_points(self, points: List[SignalPoint]) -> "Signal":
        """Return a new signal carrying ``points`` and a fresh ``created_at``."""
        return self.clone(points=points, created_at=datetime.now())

    def metadata(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "amplitude": self.amplitude,
            "frequency": self.frequency,
            "phase": self.phase,
            "time_interval": self.time_interval,
            "noise_level": self.noise_level,
            "point_count": self.point_count,
            "created_at": self.created_at.isoformat(sep=" ", timespec="seconds"),
        }


@dataclass
class SignalParameters:
    """
    Optional-valued staging object for a generation request.

    Values start at :class:`SignalDefaults`; an input field cleared by the
    user becomes ``None`` and is reported by the validator.
    """

    amplitude: Optional[float] = SignalDefaults.AMPLITUDE
    frequency: Optional[float] = SignalDefaults.FREQUENCY
    phase: Optional[float] = SignalDefaults.PHASE
    point_count: Optional[int] = SignalDefaults.POINT_COUNT
    time_interval: Optional[float] = SignalDefaults.TIME_INTERVAL
    noise_level: int = SignalDefaults.NOISE_LEVEL

    def to_request(self) -> Dict[str, Any]:
        """
        Convert to keyword arguments for :meth:`SignalSynthesizer.synthesize`.

        Callers validate first; a missing phase falls back to the default.
        """
        return {
            "amplitude": float(self.amplitude),
            "frequency": float(self.frequency),
            "phase": float(SignalDefaults.PHASE if self.phase is None else self.phase),
            "point_count": int(self.point_count),
            "time_interval": float(self.time_interval),
            "noise_level": int(self.noise_level),
        }
