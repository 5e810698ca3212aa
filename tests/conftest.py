import pytest

from siggen.core.cancellation import CancellationToken
from siggen.dataio.repository import SignalRepository


class CountdownToken(CancellationToken):
    """Cancels itself after ``checks`` checkpoints."""

    def __init__(self, checks: int) -> None:
        super().__init__()
        self.remaining = checks
        self.checkpoints = 0

    def raise_if_cancelled(self) -> None:
        self.checkpoints += 1
        self.remaining -= 1
        if self.remaining < 0:
            self.cancel()
        super().raise_if_cancelled()


@pytest.fixture
def countdown_token():
    return CountdownToken


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite:///{(tmp_path / 'signals.db').as_posix()}"


@pytest.fixture
def repository(database_url) -> SignalRepository:
    return SignalRepository(database_url)


@pytest.fixture(autouse=True)
def isolated_data_root(tmp_path, monkeypatch):
    monkeypatch.setenv("SIGGEN_DATA_ROOT", str(tmp_path / "data"))
