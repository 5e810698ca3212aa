"""Signal synthesis: waveform plus noise over an evenly spaced time grid."""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import numpy as np

from ..core.cancellation import CancellationToken, check_cancelled
from ..core.models import Signal, SignalDefaults, SignalPoint, SignalType
from ..tools.debug import time_block
from . import waveforms
from .noise import GaussianNoise

logger = logging.getLogger(__name__)

PARALLEL_THRESHOLD = 10_000
# Partitions per worker; more partitions mean more cancellation checkpoints.
PARTITIONS_PER_WORKER = 4

SeedLike = Optional[int | np.random.SeedSequence]


def default_worker_count() -> int:
    """All cores but one, so a UI or control thread keeps some headroom."""
    return max(1, (os.cpu_count() or 1) - 1)


def partition_bounds(count: int, partitions: int) -> list[tuple[int, int]]:
    """Split ``range(count)`` into at most ``partitions`` contiguous slices."""
    partitions = max(1, min(int(partitions), count))
    edges = np.linspace(0, count, partitions + 1).astype(int)
    return [(int(lo), int(hi)) for lo, hi in zip(edges[:-1], edges[1:]) if hi > lo]


class SignalSynthesizer:
    """
    Produce fully populated :class:`Signal` objects.

    Small requests are computed sample by sample on the calling thread.
    From ``parallel_threshold`` points on, the index range is split into
    disjoint partitions evaluated on a bounded thread pool. Every partition
    owns its RNG (spawned from one :class:`numpy.random.SeedSequence`) and
    writes only its own slice of the pre-sized output arrays, so point ``i``
    always lands at position ``i``.
    """

    def __init__(
        self,
        noise: GaussianNoise | None = None,
        *,
        parallel_threshold: int = PARALLEL_THRESHOLD,
        max_workers: int | None = None,
        seed: SeedLike = None,
    ) -> None:
        self.noise = noise or GaussianNoise()
        self.parallel_threshold = max(1, int(parallel_threshold))
        self.max_workers = max(1, int(max_workers)) if max_workers else default_worker_count()
        self.seed = seed

    @classmethod
    def from_config(cls, config) -> "SignalSynthesizer":
        return cls(
            parallel_threshold=config.parallel_threshold,
            max_workers=config.max_workers,
            seed=config.seed,
        )

    def synthesize(
        self,
        signal_type: SignalType | str,
        amplitude: float = SignalDefaults.AMPLITUDE,
        frequency: float = SignalDefaults.FREQUENCY,
        phase: float = SignalDefaults.PHASE,
        point_count: int = SignalDefaults.POINT_COUNT,
        time_interval: float = SignalDefaults.TIME_INTERVAL,
        noise_level: int = SignalDefaults.NOISE_LEVEL,
        cancellation: CancellationToken | None = None,
        *,
        seed: SeedLike = None,
    ) -> Signal:
        """
        Generate ``point_count`` samples spanning ``[0, time_interval]``.

        Raises
        ------
        ValueError
            ``point_count <= 0``, an unknown ``signal_type`` or a non-positive
            frequency for a period-based waveform.
        OperationCancelled
            ``cancellation`` was set before or during generation. No partial
            signal is returned.
        """
        if point_count <= 0:
            raise ValueError(f"point_count must be > 0, got {point_count}")
        kind = SignalType.parse(signal_type)
        if kind in (SignalType.TRIANGLE, SignalType.SAWTOOTH) and not frequency > 0:
            raise ValueError(f"frequency must be > 0 for {kind.label}, got {frequency}")

        check_cancelled(cancellation)

        func = waveforms.waveform_for(kind)
        dt = time_interval / max(1, point_count - 1)
        noise_amp = self.noise.noise_amplitude(amplitude, noise_level)
        seed_seq = np.random.SeedSequence(self.seed if seed is None else seed)

        times = np.empty(point_count, dtype=np.float64)
        values = np.empty(point_count, dtype=np.float64)

        parallel = point_count >= self.parallel_threshold
        logger.debug(
            "Synthesizing %s: %d points, dt=%g, noise_amp=%g, mode=%s",
            kind.value,
            point_count,
            dt,
            noise_amp,
            "parallel" if parallel else "sequential",
        )
        with time_block(f"synthesize {kind.value} x{point_count}", logger):
            if parallel:
                self._fill_parallel(
                    func, amplitude, frequency, phase, dt, noise_amp,
                    times, values, seed_seq, cancellation,
                )
            else:
                self._fill_sequential(
                    func, amplitude, frequency, phase, dt, noise_amp,
                    times, values, np.random.default_rng(seed_seq), cancellation,
                )

        points = [SignalPoint(t, v) for t, v in zip(times.tolist(), values.tolist())]
        return Signal(
            type=kind,
            amplitude=amplitude,
            frequency=frequency,
            phase=phase,
            time_interval=time_interval,
            noise_level=noise_level,
            points=points,
        )

    def _fill_sequential(
        self,
        func: waveforms.WaveformFunc,
        amplitude: float,
        frequency: float,
        phase: float,
        dt: float,
        noise_amp: float,
        times: np.ndarray,
        values: np.ndarray,
        rng: np.random.Generator,
        cancellation: CancellationToken | None,
    ) -> None:
        for i in range(times.size):
            check_cancelled(cancellation)
            t = i * dt
            times[i] = t
            values[i] = func(amplitude, frequency, t, phase) + self.noise.sample(noise_amp, rng)

    def _fill_parallel(
        self,
        func: waveforms.WaveformFunc,
        amplitude: float,
        frequency: float,
        phase: float,
        dt: float,
        noise_amp: float,
        times: np.ndarray,
        values: np.ndarray,
        seed_seq: np.random.SeedSequence,
        cancellation: CancellationToken | None,
    ) -> None:
        bounds = partition_bounds(times.size, self.max_workers * PARTITIONS_PER_WORKER)
        child_seeds = seed_seq.spawn(len(bounds))

        def fill(start: int, stop: int, child: np.random.SeedSequence) -> None:
            check_cancelled(cancellation)
            rng = np.random.default_rng(child)
            t = np.arange(start, stop, dtype=np.float64) * dt
            times[start:stop] = t
            values[start:stop] = func(amplitude, frequency, t, phase) + self.noise.samples(
                noise_amp, rng, stop - start
            )

        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="SigGenWorker"
        ) as pool:
            futures = [
                pool.submit(fill, start, stop, child)
                for (start, stop), child in zip(bounds, child_seeds)
            ]
            try:
                for future in futures:
                    future.result()
            except BaseException:
                for future in futures:
                    future.cancel()
                raise
