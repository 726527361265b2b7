import pytest
from loguru import logger

from ssmgr_collector.core.config import config_store

SS_VARIABLES = (
    "SS_REMOTE_HOST",
    "SS_REMOTE_PORT",
    "SS_LOCAL_HOST",
    "SS_LOCAL_PORT",
    "SS_PLUGIN_OPTIONS",
)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    for name in SS_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    config_store.reset()
    try:
        yield
    finally:
        config_store.reset()


@pytest.fixture
def plugin_env(monkeypatch):
    """Environment as set by a shadowsocks host launching the plugin."""
    values = {
        "SS_REMOTE_HOST": "203.0.113.7",
        "SS_REMOTE_PORT": "6001",
        "SS_LOCAL_HOST": "127.0.0.1",
        "SS_LOCAL_PORT": "8388",
    }
    for name, value in values.items():
        monkeypatch.setenv(name, value)
    return values


@pytest.fixture
def log_records():
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    try:
        yield records
    finally:
        logger.remove(handler_id)
