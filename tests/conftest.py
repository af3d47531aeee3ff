"""Shared test fixtures for sassc_embedded tests.

The protocol compiler is an external service, so the tests drive the
adapters through :class:`~tests.helpers.fake_compiler.FakeCompiler`.
"""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from sassc_embedded.config.settings import get_settings, reset_load_paths
from sassc_embedded.core.logging import PACKAGE_LOGGER, configure_structlog
from sassc_embedded.protocol.compiler import set_default_compiler
from tests.helpers.fake_compiler import FakeCompiler


@pytest.fixture
def compiler() -> FakeCompiler:
    return FakeCompiler()


@pytest.fixture(autouse=True)
def isolated_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Clear process-wide load paths and the default compiler around each test."""
    monkeypatch.delenv("SASS_PATH", raising=False)
    monkeypatch.delenv("SASSC_EMBEDDED_SASS_PATH", raising=False)
    reset_load_paths()
    set_default_compiler(None)
    yield
    reset_load_paths()
    set_default_compiler(None)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with the working directory set to a fresh temp dir."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def default_logging() -> Generator[None, None, None]:
    """Undo ``setup_logging`` so each test sees the import-time routing."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = []
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
    configure_structlog()
    get_settings.cache_clear()
