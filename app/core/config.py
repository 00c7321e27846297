# app/core/config.py

import logging
import sys
import os

from dotenv import load_dotenv

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when a setting required at startup is missing"""


def load_environment():
    """Load variables from the .env file in the project root, if present."""
    dotenv_path = os.path.join(PROJECT_ROOT, ".env")
    # Variables already set in the process win over the file
    load_dotenv(dotenv_path=dotenv_path, override=False)


class Settings:
    """Simple settings object to hold configuration values"""

    def __init__(self):
        # MONGODB_URI is accepted for deployments configured for the old service
        self.DATABASE_URL = os.getenv("DATABASE_URL") or os.getenv("MONGODB_URI", "")
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self.PORT = int(os.getenv("PORT", "3000"))
        self.STATIC_DIR = os.getenv("STATIC_DIR", os.path.join(PROJECT_ROOT, "dist"))
        self.CORS_ORIGINS = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        self.BRAND_NAME = os.getenv("BRAND_NAME", "Nexverra")

        # Check Twilio settings
        self.TWILIO_ACCOUNT_SID = os.getenv("TWILIO_ACCOUNT_SID") or os.getenv("TWILIO_SID", "")
        self.TWILIO_AUTH_TOKEN = os.getenv("TWILIO_AUTH_TOKEN", "")
        self.TWILIO_PHONE_NUMBER = os.getenv("TWILIO_PHONE_NUMBER") or os.getenv("TWILIO_SENDER", "")
        self.ADMIN_PHONE = os.getenv("ADMIN_PHONE", "")

        missing = [
            name
            for name, value in (
                ("TWILIO_ACCOUNT_SID", self.TWILIO_ACCOUNT_SID),
                ("TWILIO_AUTH_TOKEN", self.TWILIO_AUTH_TOKEN),
                ("TWILIO_PHONE_NUMBER", self.TWILIO_PHONE_NUMBER),
                ("ADMIN_PHONE", self.ADMIN_PHONE),
            )
            if not value
        ]
        if missing:
            logger.warning(
                f"Twilio settings missing ({', '.join(missing)}), SMS notifications disabled."
            )

    @property
    def sms_enabled(self) -> bool:
        return all(
            (
                self.TWILIO_ACCOUNT_SID,
                self.TWILIO_AUTH_TOKEN,
                self.TWILIO_PHONE_NUMBER,
                self.ADMIN_PHONE,
            )
        )

    def require_database(self) -> str:
        if not self.DATABASE_URL:
            raise ConfigurationError("DATABASE_URL environment variable not set.")
        return self.DATABASE_URL


def configure_logging():
    """Configure application logging"""
    # The Twilio SDK logs every request and response at INFO
    logging.getLogger("twilio.http_client").setLevel(logging.WARNING)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )
