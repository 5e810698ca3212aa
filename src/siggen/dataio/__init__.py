"""Signal storage (SQLAlchemy repository and the library list built on it).

- :mod:`models` declares the ``signals`` / ``signal_points`` tables.
- :mod:`repository` implements save / load_all / load_points / delete.
- :mod:`library` keeps a newest-first metadata list in step with storage.
"""

from .library import SignalLibrary
from .repository import SignalNotFoundError, SignalRepository

__all__ = ["SignalLibrary", "SignalNotFoundError", "SignalRepository"]
