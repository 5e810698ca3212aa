"""In-memory view of the signal library kept in sync with the repository."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..core.models import Signal
from .repository import SignalRepository

logger = logging.getLogger(__name__)


class SignalLibrary:
    """
    Newest-first list of stored signal metadata.

    Entries never carry points; use :meth:`open` to fetch a full signal.
    """

    def __init__(self, repository: SignalRepository) -> None:
        if repository is None:
            raise ValueError("repository is required")
        self._repository = repository
        self.signals: List[Signal] = []

    def load(self) -> List[Signal]:
        self.signals = self._repository.load_all()
        logger.debug("Library loaded with %d signals", len(self.signals))
        return self.signals

    def save(self, signal: Signal) -> Signal:
        """Persist ``signal`` and add its metadata entry at the top of the list."""
        self._repository.save(signal)
        entry = signal.clone(points=[])
        self.signals.insert(0, entry)
        return entry

    def delete(self, signal_id: int) -> bool:
        deleted = self._repository.delete(signal_id)
        self.signals = [s for s in self.signals if s.id != signal_id]
        return deleted

    def find(self, signal_id: int) -> Optional[Signal]:
        return next((s for s in self.signals if s.id == signal_id), None)

    def open(self, signal_id: int) -> Signal:
        return self._repository.load(signal_id)
