"""Inbound WhatsApp message pipeline for Z-API webhook batches."""

import asyncio
import logging
from typing import Any

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.tenant_context import set_bot_context
from app.domain.models.zapi_webhook import ZApiWebhookMessage
from app.domain.services.contact_service import ContactResolver
from app.domain.services.response_dispatcher import ResponseDispatcher
from app.domain.services.rule_evaluator import RuleEvaluator
from app.infrastructure.redis import RedisClient, redis_client
from app.infrastructure.zapi_client import SenderFactory
from app.persistence.models.whatsapp_message import MessageDirection
from app.persistence.models.whatsapp_response import ResponseType
from app.persistence.repositories.bot_repository import BotRepository
from app.persistence.repositories.message_repository import MessageRepository
from app.settings import settings

logger = logging.getLogger(__name__)

DEDUP_KEY_PREFIX = "zapi_msg_processed"


class UnitOutcome:
    """How a single message unit ended. Used for logging and tests."""
    INVALID = "invalid"
    SKIPPED = "skipped"
    DUPLICATE = "duplicate"
    UNKNOWN_BOT = "unknown_bot"
    INACTIVE_BOT = "inactive_bot"
    NO_MATCH = "no_match"
    DISPATCHED = "dispatched"
    FAILED = "failed"


class InboundMessageService:
    """Processes webhook batches, one isolated task per message unit.

    Every unit gets its own database session and nothing a unit raises
    reaches the caller, so one bad message never affects its siblings or
    the acknowledgment sent back to the gateway.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        sender_factory: SenderFactory,
        redis: RedisClient | None = None,
    ) -> None:
        self.session_factory = session_factory
        self.sender_factory = sender_factory
        self.redis = redis or redis_client

    async def process_batch(self, units: list[Any]) -> list[str]:
        """Process all units concurrently and wait for every one of them.

        Args:
            units: Raw message objects from the webhook body

        Returns:
            One UnitOutcome per unit, in input order
        """
        if not units:
            return []
        return list(await asyncio.gather(*(self._process_isolated(unit) for unit in units)))

    async def _process_isolated(self, raw: Any) -> str:
        try:
            return await self.process_unit(raw)
        except Exception as e:
            logger.error(f"Failed to process Z-API message: {e}", exc_info=True)
            return UnitOutcome.FAILED
        finally:
            set_bot_context(None)

    async def process_unit(self, raw: Any) -> str:
        """Run the pipeline for one message unit.

        resolve bot -> resolve contact -> log inbound -> evaluate rules -> dispatch
        """
        try:
            message = ZApiWebhookMessage.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring malformed Z-API message: {e.error_count()} validation error(s)")
            return UnitOutcome.INVALID

        if not message.is_processable():
            return UnitOutcome.SKIPPED

        if not await self._claim(message):
            logger.info(
                f"Duplicate delivery of message {message.message_id} "
                f"for instance {message.instance_id}, skipping"
            )
            return UnitOutcome.DUPLICATE

        async with self.session_factory() as session:
            bot = await BotRepository(session).get_by_instance_id(message.instance_id)
            if bot is None:
                logger.info(f"No bot registered for instance {message.instance_id}")
                return UnitOutcome.UNKNOWN_BOT
            if not bot.is_active:
                logger.info(f"Bot {bot.id} is {bot.status}, ignoring message")
                return UnitOutcome.INACTIVE_BOT

            set_bot_context(bot.id)

            contact_id = await ContactResolver(session).resolve(
                bot.id,
                message.phone,
                message.candidate_name,
                message.event_time,
            )

            await MessageRepository(session).create(
                bot.id,
                contact_id=contact_id,
                phone=message.phone,
                message_id=message.message_id,
                direction=MessageDirection.INCOMING,
                message_text=message.message_text,
                message_type=ResponseType.TEXT,
            )

            response = await RuleEvaluator(session).evaluate(bot.id, message.message_text)
            if response is None:
                return UnitOutcome.NO_MATCH

            dispatcher = ResponseDispatcher(session, self.sender_factory(bot))
            await dispatcher.dispatch(bot, contact_id, message.phone, response)
            return UnitOutcome.DISPATCHED

    async def _claim(self, message: ZApiWebhookMessage) -> bool:
        """Claim a message id so redelivered webhooks are processed once.

        Without Redis (or without a message id) every delivery is processed.
        """
        if not message.message_id:
            return True
        key = f"{DEDUP_KEY_PREFIX}:{message.instance_id}:{message.message_id}"
        try:
            return await self.redis.setnx(key, "1", ttl=settings.webhook_dedup_ttl_seconds)
        except Exception as e:
            logger.warning(f"Redis dedup check failed: {e}. Processing anyway.")
            return True
