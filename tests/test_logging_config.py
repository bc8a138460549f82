"""JSON logging configuration tests."""

import json
import logging

import pytest

from src.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True


def test_setup_logging_emits_json(capsys):
    setup_logging("DEBUG")
    logging.getLogger("src.heuristics.test").info("page fetched", extra={"url": "https://example.com/"})
    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["message"] == "page fetched"
    assert record["level"] == "INFO"
    assert record["logger"] == "src.heuristics.test"
    assert record["url"] == "https://example.com/"


def test_setup_logging_quiets_http_client():
    setup_logging("DEBUG")
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING
