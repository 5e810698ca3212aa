"""Default application paths."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DATABASE_FILENAME = "signals.db"
CONFIG_FILENAME = "siggen.yaml"


@dataclass
class AppPaths:
    """
    Commonly used paths for the application.

    ``SIGGEN_DATA_ROOT`` overrides the default per-user data folder
    (``~/.siggen``) so tests and alternate installs can store the signal
    library elsewhere.
    """

    data_root: Path = field(init=False)
    database_file: Path = field(init=False)
    config_file: Path = field(init=False)

    def __post_init__(self) -> None:
        env_data_root = os.environ.get("SIGGEN_DATA_ROOT")
        if env_data_root:
            self.data_root = Path(env_data_root).expanduser()
        else:
            self.data_root = Path("~/.siggen").expanduser()

        self.database_file = self.data_root / DATABASE_FILENAME
        self.config_file = self.data_root / CONFIG_FILENAME

    def ensure(self) -> None:
        """Create the data directory if it does not yet exist."""
        self.data_root.mkdir(parents=True, exist_ok=True)

    def database_url(self) -> str:
        return f"sqlite:///{self.database_file.as_posix()}"
