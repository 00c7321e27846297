# tests/conftest.py

import pytest
import sys
import os
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

# Add project root to path to ensure imports work
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app import create_app
from app.core.config import Settings
from app.core.twilio_sms_client import TwilioSMSClient

ENV_KEYS = [
    "DATABASE_URL",
    "MONGODB_URI",
    "HOST",
    "PORT",
    "STATIC_DIR",
    "CORS_ORIGINS",
    "BRAND_NAME",
    "TWILIO_ACCOUNT_SID",
    "TWILIO_SID",
    "TWILIO_AUTH_TOKEN",
    "TWILIO_PHONE_NUMBER",
    "TWILIO_SENDER",
    "ADMIN_PHONE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from an environment with none of our settings"""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def static_dir(tmp_path):
    """A minimal prebuilt frontend bundle"""
    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text("<!doctype html><div id=\"root\"></div>")
    (dist / "assets" / "app.js").write_text("console.log('app');")
    return dist


@pytest.fixture
def settings(monkeypatch, tmp_path, static_dir):
    """Settings backed by a fresh SQLite file, SMS disabled"""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setenv("STATIC_DIR", str(static_dir))
    return Settings()


@pytest.fixture
def sms_settings(monkeypatch, settings):
    """Same as settings, with every Twilio value configured"""
    monkeypatch.setenv("TWILIO_ACCOUNT_SID", "ACtest")
    monkeypatch.setenv("TWILIO_AUTH_TOKEN", "test_token")
    monkeypatch.setenv("TWILIO_PHONE_NUMBER", "+15550001111")
    monkeypatch.setenv("ADMIN_PHONE", "+15559998888")
    return Settings()


@pytest.fixture
def mock_sms_client():
    """Mock Twilio SMS client for tests."""
    client = AsyncMock(spec=TwilioSMSClient)
    client.send_message = AsyncMock(return_value={"sid": "SM123456789"})
    return client


@pytest.fixture
def app(settings):
    """Create application for testing."""
    return create_app(settings)


@pytest.fixture
def client(app):
    """Create a test client for the app."""
    return TestClient(app)


@pytest.fixture
def sms_app(sms_settings, mock_sms_client):
    """Application with SMS enabled and the provider mocked"""
    return create_app(sms_settings, sms_client=mock_sms_client)


@pytest.fixture
def sms_test_client(sms_app):
    return TestClient(sms_app)


@pytest.fixture
def message_payload():
    """Generate a contact/order form submission."""

    def _create_payload(
        sender_name="Ada",
        sender_email="ada@x.com",
        subject="Order",
        items=None,
        body="Please ship",
        **extra,
    ):
        payload = {
            "senderName": sender_name,
            "senderEmail": sender_email,
            "subject": subject,
            "items": [{"title": "Widget"}] if items is None else items,
            "body": body,
        }
        payload.update(extra)
        return payload

    return _create_payload
