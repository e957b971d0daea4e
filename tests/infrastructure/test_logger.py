import logging
from logging.handlers import RotatingFileHandler

import pytest

from pattern_catalog.config.schemas import LoggingConfig
from pattern_catalog.domain.base.exceptions import ConfigurationError
from pattern_catalog.infrastructure.logging.logger import DetailedFormatter, get_logger, setup_logging

pytestmark = pytest.mark.usefixtures("restore_root_logger")


def test_stdout_destination_installs_stream_handler():
    setup_logging(LoggingConfig(level="DEBUG"))

    root_logger = logging.getLogger()
    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1
    handler = root_logger.handlers[0]
    assert type(handler) is logging.StreamHandler
    assert isinstance(handler.formatter, DetailedFormatter)


def test_both_destination_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "catalog.log"

    setup_logging(LoggingConfig(level="INFO", destination="both", file_path=str(log_file)))
    get_logger("tests.logger").info("Registered user", user_id="1")
    for handler in logging.getLogger().handlers:
        handler.flush()

    handler_types = {type(handler) for handler in logging.getLogger().handlers}
    assert handler_types == {logging.StreamHandler, RotatingFileHandler}
    content = log_file.read_text()
    assert "Registered user" in content
    assert "user_id='1'" in content
    assert "INFO" in content


def test_file_destination_requires_path():
    with pytest.raises(ConfigurationError) as exc_info:
        setup_logging(LoggingConfig(destination="file"))

    assert exc_info.value.missing_fields == ["logging.file_path"]


def test_level_filters_messages(tmp_path):
    log_file = tmp_path / "catalog.log"

    setup_logging(LoggingConfig(level="WARNING", destination="file", file_path=str(log_file)))
    logger = get_logger("tests.logger")
    logger.info("quiet message")
    logger.warning("loud message")
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = log_file.read_text()
    assert "loud message" in content
    assert "quiet message" not in content


def test_stdlib_loggers_share_the_format(tmp_path):
    log_file = tmp_path / "catalog.log"

    setup_logging(LoggingConfig(level="INFO", destination="file", file_path=str(log_file)))
    logging.getLogger("tests.stdlib").info("loaded %s", "defaults")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "loaded defaults" in log_file.read_text()
