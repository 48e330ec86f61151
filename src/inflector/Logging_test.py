import pytest
from loguru import logger

from inflector.Logging import LoggerAdapter, get_logger


@pytest.fixture
def captured():
    messages = []
    sink_id = logger.add(
        lambda message: messages.append(message.record), level="DEBUG"
    )
    yield messages
    logger.remove(sink_id)


def test_get_logger_names_the_adapter():
    assert get_logger("inflector.test").name == "inflector.test"
    assert get_logger().name == "inflector"


def test_adapter_forwards_to_loguru(captured):
    adapter = LoggerAdapter("inflector.test")
    adapter.warning("rule %s skipped", "quiz")

    assert len(captured) == 1
    record = captured[0]
    assert record["message"] == "rule quiz skipped"
    assert record["level"].name == "WARNING"
    assert record["extra"]["name"] == "inflector.test"


def test_adapter_debug_messages(captured):
    adapter = LoggerAdapter("inflector.test")
    adapter.debug("loaded %d entries", 3)

    assert [r["message"] for r in captured] == ["loaded 3 entries"]
    assert captured[0]["level"].name == "DEBUG"


def test_message_without_args_is_left_alone(captured):
    adapter = LoggerAdapter("inflector.test")
    adapter.debug("100% literal")
    assert captured[0]["message"] == "100% literal"


def test_adapter_reports_the_calling_function(captured):
    adapter = LoggerAdapter("inflector.test")
    adapter.debug("hello")
    assert captured[0]["function"] == "test_adapter_reports_the_calling_function"


def test_adapter_exposes_only_the_levels_in_use():
    adapter = LoggerAdapter("inflector.test")
    assert not hasattr(adapter, "setLevel")
    assert not hasattr(adapter, "isEnabledFor")
