# app/services/notification_service.py

import logging
from typing import Any, Optional

from pydantic import BaseModel

from app.core.config import Settings
from app.core.twilio_sms_client import TwilioSMSClient
from app.data_schemas import MessageCreate

logger = logging.getLogger(__name__)

NOT_CONFIGURED = "Twilio not configured"


class DispatchResult(BaseModel):
    """Outcome of one notification attempt"""

    success: bool
    error: Optional[str] = None


def _item_title(item: Any) -> str:
    if isinstance(item, dict):
        title = item.get("title")
        return "" if title is None else str(title)
    return str(item)


def format_notification(payload: MessageCreate, brand: str = "Nexverra") -> str:
    """Build the SMS text sent to the administrator for a new lead."""
    if payload.items:
        items = ", ".join(_item_title(item) for item in payload.items)
    else:
        items = "None"

    return (
        f"📩 New {brand} Order\n"
        f"From: {payload.sender_name or 'N/A'}\n"
        f"📧 {payload.sender_email or 'N/A'}\n"
        f"📞 {payload.sender_phone or 'N/A'}\n"
        f"Subject: {payload.subject or 'N/A'}\n"
        f"Items: {items}\n"
        f"Message: {payload.body or 'N/A'}"
    )


class NotificationDispatcher:
    """Best-effort SMS notification to the administrator.

    Whether SMS is enabled is decided once, when the dispatcher is built.
    Provider errors are reported in the returned DispatchResult and never
    raised to the caller.
    """

    def __init__(self, settings: Settings, client: Optional[TwilioSMSClient] = None):
        self.brand = settings.BRAND_NAME
        self.admin_phone = settings.ADMIN_PHONE
        self.client = None

        if settings.sms_enabled:
            self.client = client or TwilioSMSClient(
                sid=settings.TWILIO_ACCOUNT_SID,
                token=settings.TWILIO_AUTH_TOKEN,
                from_number=settings.TWILIO_PHONE_NUMBER,
            )
            logger.info("Twilio client initialized")

    @property
    def enabled(self) -> bool:
        return self.client is not None

    async def dispatch(self, payload: MessageCreate) -> DispatchResult:
        if self.client is None:
            return DispatchResult(success=False, error=NOT_CONFIGURED)

        text = format_notification(payload, self.brand)
        try:
            result = await self.client.send_message(self.admin_phone, text)
        except Exception as e:
            logger.error(f"SMS failed: {e}")
            return DispatchResult(success=False, error=str(e))

        logger.info(f"SMS dispatched: {result.get('sid')}")
        return DispatchResult(success=True)
