"""Z-API WhatsApp webhook endpoint."""

import json
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.domain.services.inbound_message_service import InboundMessageService
from app.infrastructure.zapi_client import SenderFactory, get_sender_factory
from app.persistence.database import get_session_factory

logger = logging.getLogger(__name__)

router = APIRouter()


def _bad_request(error: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": error})


def _ack() -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_200_OK, content={"success": True})


@router.post("/zapi")
async def zapi_webhook(
    request: Request,
    session_factory: Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)],
    sender_factory: Annotated[SenderFactory, Depends(get_sender_factory)],
) -> JSONResponse:
    """Handle Z-API message callbacks.

    Z-API retries deliveries that do not get a 200, so everything past body
    parsing is acknowledged with 200 whatever happens to the individual
    messages. Only a body that cannot be read as JSON gets a 400.

    The caller is identified solely by the ``instanceId`` in each message;
    Z-API does not sign callbacks, so there is no signature to verify.
    """
    content_type = request.headers.get("content-type", "")
    if "application/json" not in content_type:
        logger.warning(f"Z-API webhook with invalid content type: {content_type!r}")
        return _bad_request("Content-Type must be application/json")

    try:
        raw_body = await request.body()
    except Exception as e:
        logger.error(f"Failed to read Z-API webhook body: {e}")
        return _bad_request("Could not read request body")

    if not raw_body.strip():
        logger.warning("Empty Z-API webhook body")
        return _bad_request("Empty body")

    try:
        body = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Invalid JSON in Z-API webhook: {e}; body starts with {raw_body[:500]!r}")
        return _bad_request("Invalid JSON")

    if isinstance(body, list):
        messages = body
    elif isinstance(body, dict):
        # Z-API normally sends an object per callback; arrays are also accepted
        messages = [body]
    else:
        logger.warning(f"Z-API webhook payload is {type(body).__name__}, expected array or object")
        return _bad_request("Payload must be an array or object")

    if not messages:
        return _ack()

    try:
        service = InboundMessageService(session_factory, sender_factory)
        outcomes = await service.process_batch(messages)
        logger.info(f"Processed Z-API batch of {len(messages)}: {outcomes}")
    except Exception as e:
        logger.error(f"Unexpected error in Z-API webhook: {e}", exc_info=True)

    return _ack()
