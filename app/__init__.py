import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings
from app.core.context import AppContext
from app.core.database import create_db_engine, init_db
from app.core.twilio_sms_client import TwilioSMSClient
from app.routes.frontend import router as frontend_router
from app.routes.messages import router as messages_router
from app.services.message_store import MessageStore
from app.services.notification_service import NotificationDispatcher


def create_app(
    settings: Optional[Settings] = None,
    sms_client: Optional[TwilioSMSClient] = None,
):
    """Build the application and its context.

    Raises ConfigurationError when no database is configured, and lets
    SQLAlchemy errors from the startup probe propagate.
    """
    settings = settings or Settings()

    # Initialize database
    engine = create_db_engine(settings.require_database())
    init_db(engine)

    # Initialize services
    context = AppContext(
        settings=settings,
        engine=engine,
        store=MessageStore(engine),
        dispatcher=NotificationDispatcher(settings, client=sms_client),
    )

    # Initialize FastAPI app
    app = FastAPI(title=f"{settings.BRAND_NAME} Lead Capture")
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    # Register routes; the frontend catch-all must come last
    app.include_router(messages_router)
    app.include_router(frontend_router)

    logging.getLogger(__name__).info(
        f"Application ready (SMS {'enabled' if context.dispatcher.enabled else 'disabled'})"
    )
    return app
