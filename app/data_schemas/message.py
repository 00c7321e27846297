# app/data_schemas/message.py

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from app.models import MessageStatus


class MessageValidationError(ValueError):
    """Raised when a request body cannot be turned into a MessageCreate"""


class MessageCreate(BaseModel):
    """A candidate lead as posted by the frontend (camelCase keys)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    sender_name: Optional[str] = None
    sender_email: Optional[str] = None
    sender_phone: Optional[str] = None
    sender_address: Optional[str] = None
    subject: Optional[str] = None
    items: Optional[List[Any]] = None
    body: Optional[str] = None
    timestamp: Optional[datetime] = None
    status: Optional[MessageStatus] = None
    user_id: Optional[str] = None


class MessageRead(BaseModel):
    """A stored lead as returned by GET /api/messages"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    # The frontend bundle reads the record id from "_id"
    id: int = Field(serialization_alias="_id")
    sender_name: Optional[str] = None
    sender_email: Optional[str] = None
    sender_phone: Optional[str] = None
    sender_address: Optional[str] = None
    subject: Optional[str] = None
    items: List[Any] = Field(default_factory=list)
    body: Optional[str] = None
    timestamp: datetime
    status: MessageStatus
    user_id: Optional[str] = None


def _describe_errors(exc: ValidationError) -> str:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        details.append(f"{location}: {error['msg']}")
    return "Message validation failed: " + "; ".join(details)


def parse_message(payload: Any) -> MessageCreate:
    """Validate a decoded JSON body as a MessageCreate.

    Raises MessageValidationError with a readable summary of every field
    that could not be coerced.
    """
    if not isinstance(payload, dict):
        raise MessageValidationError("Message validation failed: body must be a JSON object")
    try:
        return MessageCreate.model_validate(payload)
    except ValidationError as e:
        raise MessageValidationError(_describe_errors(e)) from e
