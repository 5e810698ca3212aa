"""Configuration objects and helpers.

:mod:`runtime` loads the YAML tuning file into :class:`SigGenConfig`,
:mod:`app_config` resolves where the signal library lives on disk and
:mod:`validation` checks generation requests against the supported bounds.
"""

from .app_config import AppPaths
from .runtime import SigGenConfig, config_from_mapping, load_config, save_config
from .validation import DEFAULT_LIMITS, ParameterLimits, ensure_valid, validate_parameters

__all__ = [
    "AppPaths",
    "DEFAULT_LIMITS",
    "ParameterLimits",
    "SigGenConfig",
    "config_from_mapping",
    "ensure_valid",
    "load_config",
    "save_config",
    "validate_parameters",
]
