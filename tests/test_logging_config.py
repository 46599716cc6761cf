import logging

import pytest

from logging_config import parse_level, setup_logging


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for h in root.handlers:
        h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_only(restore_root):
    setup_logging(logging.DEBUG)
    assert restore_root.level == logging.DEBUG
    assert len(restore_root.handlers) == 1


def test_repeat_calls_do_not_stack(restore_root, tmp_path):
    log_file = tmp_path / "game.log"
    setup_logging(logging.INFO, str(log_file))
    setup_logging(logging.INFO, str(log_file))
    assert len(restore_root.handlers) == 2

    logging.getLogger("session").info("Game over with score 3")
    for h in restore_root.handlers:
        h.flush()
    assert "Game over with score 3" in log_file.read_text(encoding="utf-8")


@pytest.mark.parametrize("name, level", [
    ("debug", logging.DEBUG), ("INFO", logging.INFO), (" warning ", logging.WARNING),
])
def test_parse_level(name, level):
    assert parse_level(name) == level


def test_parse_level_rejects_unknown():
    with pytest.raises(ValueError, match="Unknown log level"):
        parse_level("loud")


def test_string_level(restore_root):
    setup_logging("warning")
    assert restore_root.level == logging.WARNING
