"""Signal synthesis: waveform functions, Gaussian noise and the synthesizer."""

from .noise import GaussianNoise, noise_amplitude, sample, samples
from .synthesizer import PARALLEL_THRESHOLD, SignalSynthesizer, default_worker_count
from .waveforms import sawtooth, sine, square, triangle, waveform_for, waveform_value

__all__ = [
    "GaussianNoise",
    "PARALLEL_THRESHOLD",
    "SignalSynthesizer",
    "default_worker_count",
    "noise_amplitude",
    "sample",
    "samples",
    "sawtooth",
    "sine",
    "square",
    "triangle",
    "waveform_for",
    "waveform_value",
]
