# app/core/twilio_sms_client.py

import asyncio
from typing import Dict, Any
from twilio.rest import Client


def to_e164(number: str) -> str:
    """Normalise a phone number to the +E164 form Twilio expects."""
    return f"+{number.strip().lstrip('+')}"


class TwilioSMSClient:
    def __init__(self, sid: str, token: str, from_number: str):
        self._client = Client(sid, token)
        self.from_number = to_e164(from_number)

    async def send_message(self, to: str, message: str) -> Dict[str, Any]:
        # Use asyncio.to_thread for the blocking Twilio SDK call
        msg = await asyncio.to_thread(
            self._client.messages.create,
            from_=self.from_number,
            to=to_e164(to),
            body=message,
        )

        return {"sid": msg.sid}
