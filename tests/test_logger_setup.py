import sys

from loguru import logger
import pytest

from polywire.utils import setup_logger


@pytest.fixture(autouse=True)
def restore_default_sink():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_file_sink_receives_messages(tmp_path):
    log_file = setup_logger(log_dir=tmp_path / "logs", level="DEBUG")
    logger.info("search started")
    logger.remove()

    assert log_file.parent == tmp_path / "logs"
    assert log_file.name.startswith("search_")
    assert "search started" in log_file.read_text(encoding="utf-8")


def test_console_only_without_log_dir(tmp_path):
    assert setup_logger(log_dir=None) is None
    assert list(tmp_path.iterdir()) == []
