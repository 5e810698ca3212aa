from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()


class SignalModel(Base):
    __tablename__ = "signals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(Integer, nullable=False)
    amplitude = Column(Float, nullable=False)
    frequency = Column(Float, nullable=False)
    phase = Column(Float, nullable=True)
    time_interval = Column(Float, nullable=False)
    noise_level = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=datetime.now)


class SignalPointModel(Base):
    __tablename__ = "signal_points"

    id = Column(Integer, primary_key=True, autoincrement=True)
    signal_id = Column(
        Integer, ForeignKey("signals.id", ondelete="CASCADE"), nullable=False, index=True
    )
    time = Column(Float, nullable=False)
    value = Column(Float, nullable=False)
