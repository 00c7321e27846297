# app/core/context.py

from dataclasses import dataclass

from fastapi import Request
from sqlalchemy.engine import Engine

from app.core.config import Settings
from app.services.message_store import MessageStore
from app.services.notification_service import NotificationDispatcher


@dataclass
class AppContext:
    """Everything a request handler needs, built once per process."""

    settings: Settings
    engine: Engine
    store: MessageStore
    dispatcher: NotificationDispatcher


def get_context(request: Request) -> AppContext:
    return request.app.state.context
