import logging

from siggen.tools.debug import debug_enabled, time_block


def test_debug_flag_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("SIGGEN_DEBUG", "yes")
    assert debug_enabled()
    monkeypatch.setenv("SIGGEN_DEBUG", "0")
    assert not debug_enabled()


def test_time_block_logs_at_debug(caplog, monkeypatch) -> None:
    monkeypatch.delenv("SIGGEN_DEBUG", raising=False)
    logger = logging.getLogger("siggen.test.timing")
    with caplog.at_level(logging.DEBUG, logger="siggen.test.timing"):
        with time_block("work", logger):
            pass
    assert any(r.message.startswith("work took ") for r in caplog.records)


def test_time_block_silent_without_debug(caplog, monkeypatch) -> None:
    monkeypatch.delenv("SIGGEN_DEBUG", raising=False)
    logger = logging.getLogger("siggen.test.quiet")
    logger.setLevel(logging.WARNING)
    with caplog.at_level(logging.WARNING, logger="siggen.test.quiet"):
        with time_block("work", logger):
            pass
    assert caplog.records == []
