"""Unit tests for session logger setup."""

import pytest
from loguru import logger

from quire import __version__
from quire.contexts.rendering.logger import _log_debug, setup_rendering_logger


@pytest.fixture
def session_dir(tmp_path):
    yield tmp_path / "render_session"
    logger.remove()


@pytest.mark.unit
def test_setup_creates_log_file_with_header(session_dir):
    log_file = setup_rendering_logger(session_dir)

    assert log_file == session_dir / "render.log"
    content = log_file.read_text(encoding="utf-8")
    assert f"quire {__version__}" in content
    assert "Working directory:" in content


@pytest.mark.unit
def test_file_sink_keeps_debug_messages(session_dir, capsys):
    log_file = setup_rendering_logger(session_dir)
    _log_debug("encoded 5 objects")

    assert "[render] encoded 5 objects" in log_file.read_text(encoding="utf-8")
    assert "encoded 5 objects" not in capsys.readouterr().out
