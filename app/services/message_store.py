# app/services/message_store.py

import logging
from typing import List

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from app.core.database import get_session
from app.data_schemas import MessageCreate
from app.models import Message, MessageStatus, utc_now

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """A database operation on the message store failed"""


class MessageStore:
    def __init__(self, engine: Engine):
        self.engine = engine

    def create(self, record: MessageCreate) -> Message:
        """Insert one lead, filling in timestamp/status when absent."""
        message = Message(
            sender_name=record.sender_name,
            sender_email=record.sender_email,
            sender_phone=record.sender_phone,
            sender_address=record.sender_address,
            subject=record.subject,
            items=record.items or [],
            body=record.body,
            timestamp=record.timestamp or utc_now(),
            status=record.status or MessageStatus.UNREAD,
            user_id=record.user_id,
        )
        try:
            with get_session(self.engine) as session:
                session.add(message)
                session.commit()
                session.refresh(message)
        except SQLAlchemyError as e:
            logger.exception("Failed to store message")
            raise StoreError(str(e)) from e

        logger.info(f"Stored message {message.id} from {message.sender_email or 'unknown sender'}")
        return message

    def list(self) -> List[Message]:
        """All stored leads, newest first."""
        statement = select(Message).order_by(Message.timestamp.desc(), Message.id.desc())
        try:
            with get_session(self.engine) as session:
                return list(session.exec(statement).all())
        except SQLAlchemyError as e:
            logger.exception("Failed to list messages")
            raise StoreError(str(e)) from e
