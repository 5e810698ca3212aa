import pytest

from siggen.config.validation import ParameterLimits, ensure_valid, validate_parameters
from siggen.core.models import SignalParameters


def test_defaults_are_valid() -> None:
    assert validate_parameters(SignalParameters()) == []


@pytest.mark.parametrize(
    "changes",
    [
        {"amplitude": None},
        {"amplitude": -0.1},
        {"amplitude": 1000.5},
        {"frequency": None},
        {"frequency": -1.0},
        {"frequency": 10_001.0},
        {"point_count": None},
        {"point_count": 0},
        {"point_count": 100_001},
        {"time_interval": None},
        {"time_interval": 0.0},
        {"time_interval": 3600.1},
        {"noise_level": -1},
        {"noise_level": 101},
    ],
)
def test_each_bound_is_reported(changes) -> None:
    errors = validate_parameters(SignalParameters(**changes))
    assert len(errors) == 1


def test_boundaries_are_inclusive_where_allowed() -> None:
    params = SignalParameters(
        amplitude=1000.0,
        frequency=0.0,
        point_count=100_000,
        time_interval=3600.0,
        noise_level=100,
    )
    assert validate_parameters(params) == []


def test_ensure_valid_joins_messages() -> None:
    with pytest.raises(ValueError) as excinfo:
        ensure_valid(SignalParameters(amplitude=None, point_count=0))
    assert "Amplitude" in str(excinfo.value)
    assert "Point count" in str(excinfo.value)


def test_custom_limits() -> None:
    limits = ParameterLimits(max_point_count=10)
    assert validate_parameters(SignalParameters(point_count=11), limits)


def test_to_request_fills_missing_phase() -> None:
    request = SignalParameters(phase=None, noise_level=30).to_request()
    assert request == {
        "amplitude": 1.0,
        "frequency": 1.0,
        "phase": 0.0,
        "point_count": 100,
        "time_interval": 1.0,
        "noise_level": 30,
    }
