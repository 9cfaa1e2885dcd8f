"""Tests for trigger text matching."""

import pytest

from app.domain.services.trigger_matcher import matches
from app.persistence.models.whatsapp_trigger import MatchType


@pytest.mark.parametrize(
    "message, trigger, match_type, expected",
    [
        ("OI", "oi", MatchType.EXACT, True),
        ("oi tudo bem", "oi", MatchType.EXACT, False),
        ("Quero ver o CARDÁPIO hoje", "cardápio", MatchType.CONTAINS, True),
        ("menu", "cardápio", MatchType.CONTAINS, False),
        ("Bom dia, equipe", "BOM DIA", MatchType.STARTS_WITH, True),
        ("Olá, bom dia", "bom dia", MatchType.STARTS_WITH, False),
        ("Pedido 12345 atrasado", r"pedido\s+\d+", MatchType.REGEX, True),
        ("PEDIDO 9", r"pedido \d", MatchType.REGEX, True),
        ("sem número", r"\d+", MatchType.REGEX, False),
    ],
)
def test_match_modes(message, trigger, match_type, expected):
    assert matches(message, trigger, match_type) is expected


def test_invalid_regex_returns_false():
    """A broken pattern never raises."""
    assert matches("anything (", "(unclosed", MatchType.REGEX) is False
    assert matches("a", "*a", MatchType.REGEX) is False


def test_unknown_match_type_returns_false():
    assert matches("oi", "oi", "fuzzy") is False


def test_regex_searches_original_text():
    """Regex runs on the message as received, relying on IGNORECASE."""
    assert matches("Meu CPF é 123", r"CPF é \d+$", MatchType.REGEX) is True
    assert matches("abc", r"^B", MatchType.REGEX) is False
