"""Domain services."""

from app.domain.services.inbound_message_service import InboundMessageService
from app.domain.services.menu_renderer import MenuRenderer
from app.domain.services.response_dispatcher import ResponseDispatcher
from app.domain.services.rule_evaluator import RuleEvaluator

__all__ = ["InboundMessageService", "MenuRenderer", "ResponseDispatcher", "RuleEvaluator"]
