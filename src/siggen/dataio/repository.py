"""SQLAlchemy-backed storage for generated signals."""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import create_engine, delete, func, insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from ..config.app_config import AppPaths
from ..core.models import Signal, SignalPoint, SignalType
from .models import Base, SignalModel, SignalPointModel

logger = logging.getLogger(__name__)


class SignalNotFoundError(LookupError):
    """Raised when a signal id is not present in the repository."""


def _to_domain(model: SignalModel, point_count: int) -> Signal:
    return Signal(
        id=model.id,
        type=SignalType.parse(model.type),
        amplitude=model.amplitude,
        frequency=model.frequency,
        phase=model.phase or 0.0,
        time_interval=model.time_interval,
        noise_level=model.noise_level,
        created_at=model.created_at,
        point_count=int(point_count),
    )


class SignalRepository:
    """
    Persist signals and their points.

    Signals are stored in ``signals`` and their samples in ``signal_points``.
    Library listings only read metadata plus a point count; the samples are
    loaded on demand with :meth:`load_points`.
    """

    def __init__(self, database_url: Optional[str] = None, *, engine: Engine | None = None) -> None:
        if engine is None:
            if database_url is None:
                paths = AppPaths()
                paths.ensure()
                database_url = paths.database_url()
            engine = create_engine(database_url)
        self.engine = engine
        self._session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
        Base.metadata.create_all(bind=engine)

    def save(self, signal: Signal) -> int:
        """Insert ``signal`` and its points in one transaction; return and assign its id."""
        # stored at whole-second resolution; keep the caller's copy in step
        signal.created_at = signal.created_at.replace(microsecond=0)
        with self._session_factory.begin() as session:
            model = SignalModel(
                type=signal.type.index,
                amplitude=signal.amplitude,
                frequency=signal.frequency,
                phase=signal.phase,
                time_interval=signal.time_interval,
                noise_level=signal.noise_level,
                created_at=signal.created_at,
            )
            session.add(model)
            session.flush()
            if signal.points:
                session.execute(
                    insert(SignalPointModel),
                    [
                        {"signal_id": model.id, "time": p.time, "value": p.value}
                        for p in signal.points
                    ],
                )
            signal.id = model.id
        logger.info("Saved signal %d (%s, %d points)", signal.id, signal.type.value, len(signal.points))
        return signal.id

    def load_all(self) -> List[Signal]:
        """Return metadata-only signals (no points), newest first."""
        stmt = (
            select(SignalModel, func.count(SignalPointModel.id))
            .outerjoin(SignalPointModel, SignalPointModel.signal_id == SignalModel.id)
            .group_by(SignalModel.id)
            .order_by(SignalModel.created_at.desc(), SignalModel.id.desc())
        )
        with self._session_factory() as session:
            return [_to_domain(model, count) for model, count in session.execute(stmt).all()]

    def load_points(self, signal_id: int) -> List[SignalPoint]:
        """Return the points of ``signal_id`` ordered by time."""
        with self._session_factory() as session:
            if session.get(SignalModel, signal_id) is None:
                raise SignalNotFoundError(f"Signal {signal_id} not found")
            rows = session.execute(
                select(SignalPointModel.time, SignalPointModel.value)
                .where(SignalPointModel.signal_id == signal_id)
                .order_by(SignalPointModel.time, SignalPointModel.id)
            ).all()
        return [SignalPoint(float(t), float(v)) for t, v in rows]

    def load(self, signal_id: int) -> Signal:
        """Return the full signal, points included."""
        points = self.load_points(signal_id)
        with self._session_factory() as session:
            model = session.get(SignalModel, signal_id)
            if model is None:
                raise SignalNotFoundError(f"Signal {signal_id} not found")
            signal = _to_domain(model, len(points))
        signal.points = points
        return signal

    def delete(self, signal_id: int) -> bool:
        """Delete a signal and its points; return False if it did not exist."""
        with self._session_factory.begin() as session:
            session.execute(delete(SignalPointModel).where(SignalPointModel.signal_id == signal_id))
            result = session.execute(delete(SignalModel).where(SignalModel.id == signal_id))
            deleted = result.rowcount > 0
        if deleted:
            logger.info("Deleted signal %d", signal_id)
        return deleted
