"""Bounds checks for generation requests.

The synthesizer only enforces what its math needs (``point_count > 0``).
Everything a user can type into a request is checked here first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..core.models import SignalParameters


@dataclass(frozen=True)
class ParameterLimits:
    max_amplitude: float = 1000.0
    max_frequency: float = 10_000.0
    max_point_count: int = 100_000
    max_time_interval: float = 3600.0
    max_noise_level: int = 100


DEFAULT_LIMITS = ParameterLimits()


def validate_parameters(
    params: SignalParameters, limits: ParameterLimits = DEFAULT_LIMITS
) -> List[str]:
    """Return a list of human-readable problems (empty when ``params`` is valid)."""
    errors: List[str] = []

    if params.amplitude is None:
        errors.append("Amplitude is required.")
    elif params.amplitude < 0:
        errors.append("Amplitude must not be negative.")
    elif params.amplitude > limits.max_amplitude:
        errors.append(f"Amplitude must not exceed {limits.max_amplitude:g}.")

    if params.frequency is None:
        errors.append("Frequency is required.")
    elif params.frequency < 0:
        errors.append("Frequency must not be negative.")
    elif params.frequency > limits.max_frequency:
        errors.append(f"Frequency must not exceed {limits.max_frequency:g} Hz.")

    if params.point_count is None:
        errors.append("Point count is required.")
    elif params.point_count <= 0:
        errors.append("Point count must be greater than 0.")
    elif params.point_count > limits.max_point_count:
        errors.append(f"Point count must not exceed {limits.max_point_count}.")

    if params.time_interval is None:
        errors.append("Time interval is required.")
    elif params.time_interval <= 0:
        errors.append("Time interval must be greater than 0.")
    elif params.time_interval > limits.max_time_interval:
        errors.append(
            f"Time interval must not exceed {limits.max_time_interval:g} seconds."
        )

    if not 0 <= params.noise_level <= limits.max_noise_level:
        errors.append(f"Noise level must be between 0% and {limits.max_noise_level}%.")

    return errors


def ensure_valid(params: SignalParameters, limits: ParameterLimits = DEFAULT_LIMITS) -> None:
    """Raise ``ValueError`` listing every problem found by :func:`validate_parameters`."""
    errors = validate_parameters(params, limits)
    if errors:
        raise ValueError(" ".join(errors))
