from .message import MessageCreate, MessageRead, MessageValidationError, parse_message
from app.models import Message, MessageStatus

__all__ = [
    "Message",
    "MessageStatus",
    "MessageCreate",
    "MessageRead",
    "MessageValidationError",
    "parse_message",
]
