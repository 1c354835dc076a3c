from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from loguru import logger as loguru_logger

from login_jwt.shared.logging import clear_correlation_id, set_correlation_id, setup_logging


@pytest.fixture()
def captured() -> Iterator[list[str]]:
    setup_logging("INFO")
    messages: list[str] = []
    sink_id = loguru_logger.add(
        messages.append, level="INFO", format="{extra[correlation_id]}|{message}"
    )
    yield messages
    loguru_logger.remove(sink_id)
    clear_correlation_id()


def test_stdlib_message_with_braces_is_forwarded(captured: list[str]) -> None:
    logging.getLogger("werkzeug").info('"GET /x?q={id} HTTP/1.1" 200 -')

    assert any('GET /x?q={id} HTTP/1.1' in message for message in captured)


def test_stdlib_records_carry_correlation_id(captured: list[str]) -> None:
    set_correlation_id("req-42")
    logging.getLogger("sqlalchemy.engine").warning("pool {size} exhausted")

    assert any(message.startswith("req-42|pool {size} exhausted") for message in captured)
