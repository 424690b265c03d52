"""Pytest configuration and fixtures."""

from __future__ import annotations

import logging

import pytest
import pytest_asyncio
import respx

from assembla_connector.api import AssemblaClient, AssemblaTransport

BASE_URL = "https://api.assembla.com"
LOGGER_NAME = "tests.assembla"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the user's config file and environment."""
    from assembla_connector import config

    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "config.yaml")
    for name in (
        "ASSEMBLA_API_KEY",
        "ASSEMBLA_API_SECRET",
        "ASSEMBLA_BASE_URL",
        "ASSEMBLA_TIMEOUT",
        "ASSEMBLA_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    config.reset_settings()
    yield
    config.reset_settings()


@pytest.fixture
def api_logger(caplog) -> logging.Logger:
    """Logger handed to the transport, captured at DEBUG."""
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    return logging.getLogger(LOGGER_NAME)


@pytest.fixture
def mock_api():
    """Activate respx mock for the Assembla base URL."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest_asyncio.fixture
async def transport(mock_api, api_logger):
    """Transport wired to the mocked API."""
    t = AssemblaTransport("key123", "secret456", api_logger, base_url=BASE_URL)
    yield t
    await t.aclose()


@pytest.fixture
def client(transport) -> AssemblaClient:
    return AssemblaClient(transport)


def http_records(caplog) -> list[logging.LogRecord]:
    """Records emitted by the transport, in order."""
    return [r for r in caplog.records if hasattr(r, "http")]
