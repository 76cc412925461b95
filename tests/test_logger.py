import logging

from addicted.config import Settings
from addicted.utils.logger import configure_logging, get_logger


def test_file_handler_written_when_log_file_set(tmp_path):
    log_file = tmp_path / "logs" / "addicted.log"
    logger = configure_logging(Settings(LOG_LEVEL="debug", LOG_FILE=str(log_file)))
    try:
        get_logger("addicted.services.jupiter").warning("price feed down")
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert "addicted.services.jupiter - WARNING - price feed down" in log_file.read_text()
    finally:
        for handler in logger.handlers:
            handler.close()
        configure_logging(Settings(LOG_LEVEL="INFO", LOG_FILE=""))


def test_unknown_level_falls_back_to_info():
    logger = configure_logging(Settings(LOG_LEVEL="chatty", LOG_FILE=""))

    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
