"""Tests for loguru sink setup."""

from loguru import logger

from pager2077 import config
from pager2077.Utils.logging_config import configure_logging, get_log_level


def test_default_level(isolated_config):
    assert get_log_level() == "INFO"


def test_unknown_level_falls_back(isolated_config):
    isolated_config.write_text('[logging]\nlog_level = "chatty"\n', encoding="utf-8")
    config.load_cli_config_and_ensure_existence(force_reload=True)
    assert get_log_level() == "INFO"


def test_configure_logging_writes_file(isolated_config):
    configure_logging()
    try:
        logger.info("pager test line")
        logger.complete()
        log_file = config.get_cli_log_file_path()
        assert "pager test line" in log_file.read_text(encoding="utf-8")
    finally:
        logger.remove()
