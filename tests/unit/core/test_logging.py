import logging

import pytest
from structlog.testing import capture_logs

from sassc_embedded.core.logging import get_logger, setup_logging


@pytest.mark.unit
def test_setup_logging_configures_package_logger() -> None:
    setup_logging(log_level="DEBUG")

    package_logger = logging.getLogger("sassc_embedded")
    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 1
    assert package_logger.propagate is False


@pytest.mark.unit
def test_get_logger_emits_structured_events() -> None:
    with capture_logs() as logs:
        get_logger("sassc_embedded.test").info("something_happened", answer=42)

    assert logs == [{"event": "something_happened", "answer": 42, "log_level": "info"}]


@pytest.mark.unit
def test_setup_logging_reads_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    from sassc_embedded.config.settings import get_settings

    monkeypatch.setenv("SASSC_EMBEDDED_LOG_LEVEL", "ERROR")
    get_settings.cache_clear()

    setup_logging()

    assert logging.getLogger("sassc_embedded").level == logging.ERROR


@pytest.mark.unit
def test_events_go_through_stdlib_logging(
    capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
) -> None:
    logger = get_logger("sassc_embedded.test")

    logger.debug("too_quiet_to_show")
    logger.warning("worth_showing", reason="test")

    assert capsys.readouterr().out == ""
    assert [r.levelno for r in caplog.records] == [logging.WARNING]
    assert caplog.records[0].name == "sassc_embedded.test"
    assert "worth_showing" in caplog.records[0].getMessage()
    assert "reason='test'" in caplog.records[0].getMessage()
