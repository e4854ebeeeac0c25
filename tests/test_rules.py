"""
Composite constraint rule tests - pairing and all-or-unit checks.
"""

import pytest

from bounty_board.core.errors import ViolationCode
from bounty_board.core.rules import (
    both_or_neither,
    completeness_rule,
    composite_complete,
    is_number,
    pairing_rule,
)

REWARD_FIELDS = ("amount", "currency", "scale", "amountWithoutScale")
NUMERIC_FIELDS = ("amount", "scale", "amountWithoutScale")


class TestBothOrNeither:
    """Test the pairing rule over identity pairs."""

    @pytest.mark.parametrize("pair", [
        {"discordId": "1"},
        {"discordHandle": "h"},
        {"discordId": "1", "discordHandle": ""},
        {"discordId": None, "discordHandle": "h"},
    ])
    def test_exactly_one_member_is_invalid(self, pair):
        assert both_or_neither(pair, "discordId", "discordHandle") is False

    @pytest.mark.parametrize("pair", [
        {"discordId": "1", "discordHandle": "h"},
        {},
        {"discordId": None, "discordHandle": None},
        None,
    ])
    def test_both_or_neither_is_valid(self, pair):
        assert both_or_neither(pair, "discordId", "discordHandle") is True


class TestCompositeComplete:
    """Test the all-or-unit rule over reward objects."""

    def test_zero_values_count_as_present(self):
        """Test that zero amounts and scales are not treated as missing."""
        reward = {"amount": 0, "scale": 0, "currency": "BANK", "amountWithoutScale": 0}
        assert composite_complete(reward, REWARD_FIELDS, NUMERIC_FIELDS) is True

    def test_currency_only_is_incomplete(self):
        assert composite_complete({"currency": "BANK"}, REWARD_FIELDS, NUMERIC_FIELDS) is False

    def test_absent_object_is_valid(self):
        assert composite_complete(None, REWARD_FIELDS, NUMERIC_FIELDS) is True

    def test_boolean_is_not_a_number(self):
        """Test that booleans never satisfy numeric presence."""
        reward = {"amount": True, "scale": 0, "currency": "BANK", "amountWithoutScale": 1}
        assert composite_complete(reward, REWARD_FIELDS, NUMERIC_FIELDS) is False
        assert is_number(True) is False
        assert is_number(0.0) is True

    def test_empty_currency_is_missing(self):
        reward = {"amount": 1, "scale": 0, "currency": "", "amountWithoutScale": 1}
        assert composite_complete(reward, REWARD_FIELDS, NUMERIC_FIELDS) is False


class TestCompositeRule:
    """Test that rules report one violation keyed to the composite path."""

    def test_completeness_rule_message(self):
        rule = completeness_rule(REWARD_FIELDS, NUMERIC_FIELDS)
        violation = rule.check("reward", {"currency": "BANK"})

        assert violation.code is ViolationCode.INCOMPLETE_COMPOSITE
        assert violation.path == "reward"
        assert violation.message == "Missing one of [amount, currency, scale, amountWithoutScale] in reward."

    def test_pairing_rule_message(self):
        rule = pairing_rule("discordId", "discordHandle")
        violation = rule.check("claimedBy", {"discordId": "1"})

        assert violation.code is ViolationCode.INCONSISTENT_PAIR
        assert violation.message == "claimedBy.discordId or claimedBy.discordHandle is required"

    def test_passing_rule_returns_none(self):
        rule = pairing_rule("discordId", "discordHandle")
        assert rule.check("claimedBy", {"discordId": "1", "discordHandle": "h"}) is None
