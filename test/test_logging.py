import uuid

import pytest

from loguru import logger
from pytest_mock import MockerFixture

from blockkit_builder.components.blocks import header_block
from blockkit_builder.config import Settings
from blockkit_builder.exception import ValidationError
from blockkit_builder.logging import configure_logging, log_event
from blockkit_builder.state import get_text_input_value


@pytest.fixture(autouse=True)
def disable_library_logs():
    yield
    logger.disable("blockkit_builder")


def test_log_event(mocker: MockerFixture) -> None:
    mock_logger = mocker.patch("blockkit_builder.logging.logger")

    log_event(
        actor=None,
        event="header_block",
        type="validation_error",
        body={"length": 151, "id": uuid.UUID(int=0)},
    )

    mock_logger.info.assert_called_once()
    message = mock_logger.info.call_args.args[0]
    assert '"event":"header_block"' in message
    assert '"id":"00000000-0000-0000-0000-000000000000"' in message


def test_log_event_with_unserializable_body(mocker: MockerFixture) -> None:
    mock_logger = mocker.patch("blockkit_builder.logging.logger")

    log_event(actor=None, event="header_block", type="test", body={"obj": object()})

    mock_logger.info.assert_not_called()
    mock_logger.debug.assert_called_once()


def test_library_logs_are_disabled_without_log_file() -> None:
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG")
    try:
        configure_logging(Settings(_env_file=None, LOG_FILE=None))  # type: ignore
        get_text_input_value({"state": {"values": {}}}, "b", "a")
        with pytest.raises(ValidationError):
            header_block("a" * 151)
    finally:
        logger.remove(handler_id)

    assert messages == []


def test_log_file_respects_log_level(tmp_path) -> None:
    log_file = tmp_path / "logs.csv"
    handler_id = configure_logging(
        Settings(_env_file=None, LOG_FILE=str(log_file), LOG_LEVEL="INFO")  # type: ignore
    )
    assert handler_id is not None
    try:
        get_text_input_value({"state": {"values": {}}}, "b", "a")  # DEBUG
        with pytest.raises(ValidationError):
            header_block("a" * 151)  # INFO
    finally:
        logger.remove(handler_id)

    content = log_file.read_text(encoding="utf-8")
    assert "header_block" in content
    assert "No text input value" not in content
    assert ",INFO," in content
