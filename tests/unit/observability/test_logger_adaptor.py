"""Unit tests for the loguru logger adaptor."""

from loguru import logger as loguru_logger

from blob_bridge.observability.logger_adaptor import (
    BlobBridgeLogger,
    default_logger,
    get_logger,
)


class TestLoggerAdaptor:
    """Test cases for get_logger."""

    def test_loggers_are_cached_by_name(self):
        """Test the same name returns the same logger."""
        assert get_logger("blob_bridge.tests") is get_logger("blob_bridge.tests")

    def test_default_logger(self):
        """Test the default logger is named after the package."""
        assert isinstance(default_logger, BlobBridgeLogger)
        assert default_logger.name == "blob_bridge"
        assert get_logger() is default_logger

    def test_messages_carry_logger_name(self):
        """Test records are bound with the logger name."""
        records = []
        sink_id = loguru_logger.add(
            lambda message: records.append(message.record), level="DEBUG"
        )
        try:
            get_logger("blob_bridge.tests.names").info("Uploading block blob")
        finally:
            loguru_logger.remove(sink_id)

        assert records[-1]["message"] == "Uploading block blob"
        assert records[-1]["extra"]["logger_name"] == "blob_bridge.tests.names"
        assert records[-1]["level"].name == "INFO"

    def test_braces_in_messages_are_kept(self):
        """Test JSON-like messages are not treated as format strings."""
        records = []
        sink_id = loguru_logger.add(lambda message: records.append(message.record))
        try:
            get_logger("blob_bridge.tests.braces").info('[{"name":"a.txt"}]')
        finally:
            loguru_logger.remove(sink_id)

        assert records[-1]["message"] == '[{"name":"a.txt"}]'
