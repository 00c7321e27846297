# app/models.py

from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional

from sqlalchemy import JSON, Column
from sqlmodel import SQLModel, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MessageStatus(str, Enum):
    UNREAD = "unread"
    READ = "read"
    RESOLVED = "resolved"


class Message(SQLModel, table=True):
    """A lead captured from the contact/order form"""
    __table_args__ = {'extend_existing': True}

    id: Optional[int] = Field(default=None, primary_key=True)
    sender_name: Optional[str] = None
    sender_email: Optional[str] = None
    sender_phone: Optional[str] = None
    sender_address: Optional[str] = None
    subject: Optional[str] = None
    items: List[Any] = Field(default_factory=list, sa_column=Column(JSON))
    body: Optional[str] = None
    timestamp: datetime = Field(default_factory=utc_now, index=True)
    status: MessageStatus = Field(default=MessageStatus.UNREAD)
    user_id: Optional[str] = None  # Opaque, set by the frontend
