"""Pytest configuration and fixtures for aligo_sms tests."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Set test environment
os.environ["SMS_ENV"] = "test"


@pytest.fixture(autouse=True)
def clean_sms_state(monkeypatch):
    """Start every test without cached settings, gateway or SMS_* env."""
    from aligo_sms.config import get_settings
    from aligo_sms.sms.factory import reset_sms_gateway

    for key in list(os.environ):
        if key.startswith("SMS_") and key != "SMS_ENV":
            monkeypatch.delenv(key)

    get_settings.cache_clear()
    reset_sms_gateway()
    yield
    get_settings.cache_clear()
    reset_sms_gateway()


@pytest.fixture
def mock_settings(monkeypatch):
    """Mock settings using the mock SMS provider."""
    from aligo_sms.config import SMSSettings, Settings

    settings = Settings(
        environment="test",
        sms=SMSSettings(enabled=True, provider="mock"),
    )

    from aligo_sms import cli
    from aligo_sms.sms import factory

    monkeypatch.setattr(factory, "get_settings", lambda: settings)
    monkeypatch.setattr(cli, "get_settings", lambda: settings)
    return settings
