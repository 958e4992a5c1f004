import logging
import pytest

from picsum.errors import ConfigurationError
from picsum.context import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, PicsumContext
from picsum.logging import setup_logger

def test_defaults(monkeypatch):
    monkeypatch.delenv("PICSUM_BASE_URL", raising=False)
    monkeypatch.delenv("PICSUM_TIMEOUT", raising=False)

    context = PicsumContext()

    assert context.base_url == DEFAULT_BASE_URL
    assert context.timeout == DEFAULT_TIMEOUT
    assert context.logger.name == "picsum"

def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("PICSUM_LOG_LEVEL", "debug")

    context = PicsumContext()

    assert context.logger.level == logging.DEBUG

def test_handler_is_added_once():
    setup_logger()
    logger = setup_logger()

    assert len(logger.handlers) == 1

def test_context_keeps_an_existing_log_level(monkeypatch):
    monkeypatch.delenv("PICSUM_LOG_LEVEL", raising=False)

    logger = logging.getLogger("picsum")
    logger.setLevel(logging.WARNING)

    context = PicsumContext()

    assert context.logger.level == logging.WARNING

@pytest.mark.parametrize("name,value", [
    ("PICSUM_TIMEOUT", "soon"),
    ("PICSUM_LOG_LEVEL", "chatty"),
])
def test_malformed_environment_names_the_variable(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError, match=name):
        PicsumContext()
