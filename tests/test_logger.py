"""Logger setup unit tests."""

from async_es_client.logger import new_logger


def test_new_logger_json_format() -> None:
    """A JSON-format logger can be created."""
    logger = new_logger(level="INFO", format="json")
    assert logger is not None


def test_new_logger_text_format() -> None:
    """A text-format logger can be created."""
    logger = new_logger(level="DEBUG", format="text")
    assert logger is not None


def test_new_logger_returns_bound_logger() -> None:
    """The returned logger supports bind()."""
    bound = new_logger().bind(index="test_index")
    assert bound is not None
