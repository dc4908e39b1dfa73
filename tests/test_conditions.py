"""Test condition lookup and rendering."""

from cvupgrade.model.cluster import Condition, ConditionalUpdate, ConditionStatus, Release
from cvupgrade.upgrade.conditions import (
    ConditionTable,
    find_condition,
    indent_message,
    not_recommended_condition,
    reason_message_block,
)


class TestConditionTable:
    def test_lookup_by_type(self):
        """Test looking up conditions by type."""
        table = ConditionTable(
            [
                Condition(type="Degraded", status="False"),
                Condition(type="Progressing", status="True", message="Working towards 4.3.0"),
            ]
        )

        assert len(table) == 2
        assert table["Progressing"].message == "Working towards 4.3.0"
        assert table.get("Invalid") is None
        assert set(table) == {"Degraded", "Progressing"}

    def test_first_condition_wins(self):
        """Test that duplicate types keep the first entry."""
        table = ConditionTable(
            [
                Condition(type="Degraded", status="True", reason="First"),
                Condition(type="Degraded", status="False", reason="Second"),
            ]
        )
        assert table["Degraded"].reason == "First"

    def test_has_status(self):
        """Test checking a condition's status."""
        table = ConditionTable([Condition(type="Upgradeable", status="False")])

        assert table.has_status("Upgradeable", ConditionStatus.FALSE) is True
        assert table.has_status("Upgradeable", ConditionStatus.TRUE) is False
        assert table.has_status("Missing", ConditionStatus.FALSE) is False

    def test_find_condition(self):
        """Test the single lookup helper."""
        conditions = [Condition(type="RetrievedUpdates", status="Unknown")]

        assert find_condition(conditions, "RetrievedUpdates").status == ConditionStatus.UNKNOWN
        assert find_condition(conditions, "Degraded") is None
        assert find_condition([], "Degraded") is None


class TestNotRecommendedCondition:
    def _update(self, *conditions):
        return ConditionalUpdate(release=Release(version="4.3.1"), conditions=list(conditions))

    def test_false_is_not_recommended(self):
        """Test that Recommended=False is returned."""
        update = self._update(Condition(type="Recommended", status="False", reason="Risk"))
        assert not_recommended_condition(update).reason == "Risk"

    def test_unknown_is_not_recommended(self):
        """Test that Recommended=Unknown is returned."""
        update = self._update(Condition(type="Recommended", status="Unknown"))
        assert not_recommended_condition(update) is not None

    def test_true_is_recommended(self):
        """Test that Recommended=True yields nothing."""
        update = self._update(Condition(type="Recommended", status="True"))
        assert not_recommended_condition(update) is None

    def test_missing_condition(self):
        """Test that an update without a Recommended condition is skipped."""
        assert not_recommended_condition(self._update()) is None


class TestMessageRendering:
    def test_indent_message(self):
        """Test that continuation lines are indented."""
        assert indent_message("first\nsecond\nthird") == "first\n  second\n  third"
        assert indent_message("single") == "single"

    def test_reason_message_block(self):
        """Test the Reason/Message block."""
        block = reason_message_block(
            Condition(type="Degraded", status="True", reason="Broken", message="a\nb")
        )
        assert block == "  Reason: Broken\n  Message: a\n  b"
