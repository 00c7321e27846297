# app/routes/messages.py

import asyncio
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.core.context import AppContext, get_context
from app.data_schemas import MessageRead, parse_message
from app.services.message_store import StoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/messages", tags=["messages"])


@router.post("")
async def create_message(request: Request, context: AppContext = Depends(get_context)):
    """Store a lead, then notify the administrator by SMS (best effort)."""
    try:
        # Malformed JSON raises JSONDecodeError, a ValueError
        payload = parse_message(await request.json())
        await asyncio.to_thread(context.store.create, payload)
    except (ValueError, StoreError) as e:
        logger.info(f"Rejected message: {e}")
        return JSONResponse(
            status_code=400, content={"success": False, "message": str(e)}
        )

    # Only reached once the lead is saved; dispatch never raises
    sms_status = await context.dispatcher.dispatch(payload)

    return JSONResponse(
        status_code=201,
        content={
            "success": True,
            "message": f"Lead captured in {context.settings.BRAND_NAME} Database",
            "sms": sms_status.model_dump(exclude_none=True),
        },
    )


@router.get("")
async def list_messages(context: AppContext = Depends(get_context)):
    """Get all messages, newest first"""
    try:
        messages = await asyncio.to_thread(context.store.list)
    except StoreError as e:
        return JSONResponse(status_code=500, content={"message": str(e)})

    return JSONResponse(
        content=[
            MessageRead.model_validate(message).model_dump(mode="json", by_alias=True)
            for message in messages
        ]
    )
