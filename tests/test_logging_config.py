import logging

import pytest

from isac.config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_file_logging(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "shell.log"

    setup_logging("debug", log_file, enable_console=False)
    logging.getLogger("isac.plugin.registry").debug("selected provider")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert restore_root_logger.level == logging.DEBUG
    assert "selected provider" in log_file.read_text(encoding="utf-8")


def test_console_only(restore_root_logger):
    setup_logging("WARNING")
    assert restore_root_logger.level == logging.WARNING
    assert any(isinstance(h, logging.StreamHandler) for h in restore_root_logger.handlers)
