import logging

from photoelectric.logging_config import setup_logging
from photoelectric.main import parse_args


def test_setup_logging_console_and_file(tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logger = logging.getLogger("photoelectric")
    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        logging.getLogger("photoelectric.model.state").debug("state changed")
        content = log_file.read_text(encoding="utf-8")
        assert "Logging initialized." in content
        assert "photoelectric.model.state - DEBUG - state changed" in content
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_setup_logging_twice_does_not_duplicate_handlers():
    setup_logging()
    setup_logging()
    logger = logging.getLogger("photoelectric")
    try:
        assert len(logger.handlers) == 1
    finally:
        logger.handlers.clear()


def test_parse_args():
    args = parse_args(["--debug", "--log-file", "sim.log", "--seed", "7"])
    assert args.debug is True
    assert args.log_file == "sim.log"
    assert args.seed == 7
    assert parse_args([]).debug is False
