"""Tests for trigger evaluation order."""

from datetime import datetime, timedelta, timezone

from app.domain.services.rule_evaluator import RuleEvaluator
from app.persistence.models.whatsapp_trigger import MatchType
from tests.factories import (
    create_bot,
    create_enterprise,
    create_project,
    create_response,
    create_trigger,
)


async def _bot(session, instance_id="INSTANCE-1"):
    enterprise = await create_enterprise(session)
    project = await create_project(session, enterprise)
    return await create_bot(session, project, instance_id=instance_id)


async def test_lowest_priority_wins(db_session):
    bot = await _bot(db_session)
    low = await create_response(db_session, bot, text="prioridade 5")
    high = await create_response(db_session, bot, text="prioridade 1")
    await create_trigger(db_session, bot, low, text="oi", priority=5)
    await create_trigger(db_session, bot, high, text="oi", priority=1)

    response = await RuleEvaluator(db_session).evaluate(bot.id, "oi")

    assert response is not None
    assert response.id == high.id


async def test_priority_tie_resolved_by_creation_order(db_session):
    bot = await _bot(db_session)
    first = await create_response(db_session, bot, text="primeiro")
    second = await create_response(db_session, bot, text="segundo")
    older = await create_trigger(db_session, bot, first, text="oi", priority=0)
    newer = await create_trigger(db_session, bot, second, text="oi", match_type=MatchType.CONTAINS)
    # Make the ordering explicit regardless of clock resolution
    older.created_at = datetime(2025, 1, 1, tzinfo=timezone.utc)
    newer.created_at = older.created_at + timedelta(seconds=1)
    await db_session.commit()

    evaluator = RuleEvaluator(db_session)
    for _ in range(3):
        response = await evaluator.evaluate(bot.id, "oi")
        assert response.id == first.id


async def test_inactive_triggers_are_ignored(db_session):
    bot = await _bot(db_session)
    inactive = await create_response(db_session, bot, text="inativo")
    active = await create_response(db_session, bot, text="ativo")
    await create_trigger(db_session, bot, inactive, text="oi", priority=0, is_active=False)
    await create_trigger(db_session, bot, active, text="oi", priority=10)

    response = await RuleEvaluator(db_session).evaluate(bot.id, "OI")

    assert response.id == active.id


async def test_first_matching_trigger_wins_over_later_modes(db_session):
    bot = await _bot(db_session)
    regex = await create_response(db_session, bot, text="regex")
    contains = await create_response(db_session, bot, text="contains")
    await create_trigger(db_session, bot, regex, text=r"^quero\s+(\w+)", match_type=MatchType.REGEX, priority=1)
    await create_trigger(db_session, bot, contains, text="pizza", match_type=MatchType.CONTAINS, priority=2)

    response = await RuleEvaluator(db_session).evaluate(bot.id, "Quero pizza")

    assert response.id == regex.id


async def test_no_match_returns_none(db_session):
    bot = await _bot(db_session)
    response = await create_response(db_session, bot)
    await create_trigger(db_session, bot, response, text="oi")

    assert await RuleEvaluator(db_session).evaluate(bot.id, "tchau") is None


async def test_triggers_of_other_bots_are_not_evaluated(db_session):
    bot_a = await _bot(db_session, "A")
    bot_b = await _bot(db_session, "B")
    response = await create_response(db_session, bot_a)
    await create_trigger(db_session, bot_a, response, text="oi")

    assert await RuleEvaluator(db_session).evaluate(bot_b.id, "oi") is None


async def test_missing_response_yields_no_match(db_session):
    bot = await _bot(db_session)
    response = await create_response(db_session, bot)
    await create_trigger(db_session, bot, response, text="oi")
    await db_session.delete(response)
    await db_session.commit()

    assert await RuleEvaluator(db_session).evaluate(bot.id, "oi") is None
