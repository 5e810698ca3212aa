"""Runtime configuration for synthesis, filtering and storage."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_SECTION = "siggen"


@dataclass(slots=True)
class SigGenConfig:
    """
    Tuning knobs for the synthesis engine and its collaborators.

    The defaults reproduce the desktop application: parallel generation from
    10k points, cancellation checks every 1000 filtered samples and a 10k
    point display budget.
    """

    parallel_threshold: int = 10_000
    # None picks cpu_count - 1 (at least 1)
    max_workers: Optional[int] = None
    seed: Optional[int] = None

    filter_check_interval: int = 1000
    default_window_size: int = 3

    max_display_points: int = 10_000

    # None means the SQLite file under AppPaths().data_root
    database_url: Optional[str] = None

    def sanitized(self) -> SigGenConfig:
        """Return a copy with derived limits applied."""
        workers = self.max_workers
        if workers is not None:
            workers = max(1, int(workers))
        window = max(1, int(self.default_window_size))
        if window % 2 == 0:
            window += 1
        return SigGenConfig(
            parallel_threshold=max(1, int(self.parallel_threshold)),
            max_workers=workers,
            seed=None if self.seed is None else int(self.seed),
            filter_check_interval=max(1, int(self.filter_check_interval)),
            default_window_size=window,
            max_display_points=max(2, int(self.max_display_points)),
            database_url=str(self.database_url) if self.database_url else None,
        )


def _flatten(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Merge the optional ``siggen:`` block over the root-level keys.

    An empty ``siggen:`` entry counts as no block; any other non-mapping value
    raises ``ValueError``.
    """
    block = data.get(CONFIG_SECTION)
    if block is None:
        block = {}
    elif not isinstance(block, Mapping):
        raise ValueError(
            f"'{CONFIG_SECTION}' must be a mapping, got {type(block).__name__}"
        )
    flat = {key: value for key, value in data.items() if key != CONFIG_SECTION}
    flat.update(block)
    return flat


def config_from_mapping(data: Mapping[str, Any] | None) -> SigGenConfig:
    """Build a sanitized :class:`SigGenConfig` from parsed YAML."""
    if not data:
        return SigGenConfig()
    flat = _flatten(data)
    known = {f.name for f in fields(SigGenConfig)}
    unknown = sorted(str(key) for key in flat.keys() - known)
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
    return SigGenConfig(**{key: flat[key] for key in flat.keys() & known}).sanitized()


def load_config(path: str | Path | None) -> SigGenConfig:
    """
    Read a YAML config file.

    ``None`` or a path that does not exist yields the defaults; a document
    that is not a mapping raises ``ValueError``.
    """
    if path is None or not Path(path).exists():
        return SigGenConfig()
    cfg_path = Path(path)
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if raw is None:
        return SigGenConfig()
    if not isinstance(raw, Mapping):
        raise ValueError(f"{cfg_path}: expected a mapping, got {type(raw).__name__}")
    logger.debug("Loaded config from %s", cfg_path)
    return config_from_mapping(raw)


def save_config(path: str | Path, config: SigGenConfig) -> None:
    """Write ``config`` as YAML under a ``siggen`` block."""
    cfg_path = Path(path)
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    data = {CONFIG_SECTION: {f.name: getattr(config, f.name) for f in fields(SigGenConfig)}}
    with cfg_path.open("w", encoding="utf-8") as fh:
        yaml.safe_dump(data, fh, default_flow_style=False, sort_keys=False)


__all__ = ["SigGenConfig", "config_from_mapping", "load_config", "save_config"]
