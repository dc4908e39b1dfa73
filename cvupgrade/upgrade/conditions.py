"""Condition lookup and message rendering."""

from typing import Dict, Iterable, Iterator, Mapping, Optional

from ..model.cluster import Condition, ConditionalUpdate, ConditionStatus

# Cluster-level condition types
INVALID = "Invalid"
DEGRADED = "Degraded"
PROGRESSING = "Progressing"
UPGRADEABLE = "Upgradeable"
RETRIEVED_UPDATES = "RetrievedUpdates"

# Conditional update condition type
RECOMMENDED = "Recommended"


class ConditionTable(Mapping[str, Condition]):
    """Conditions keyed by type.

    The first condition of each type wins; collections are expected to hold
    at most one entry per type.
    """

    def __init__(self, conditions: Iterable[Condition] = ()):
        self._by_type: Dict[str, Condition] = {}
        for condition in conditions:
            self._by_type.setdefault(condition.type, condition)

    def __getitem__(self, condition_type: str) -> Condition:
        return self._by_type[condition_type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_type)

    def __len__(self) -> int:
        return len(self._by_type)

    def has_status(self, condition_type: str, status: ConditionStatus) -> bool:
        """Check whether the condition exists with the given status."""
        condition = self.get(condition_type)
        return condition is not None and condition.status == status


def find_condition(conditions: Iterable[Condition], condition_type: str) -> Optional[Condition]:
    """Find the condition of the given type."""
    return ConditionTable(conditions).get(condition_type)


def not_recommended_condition(update: ConditionalUpdate) -> Optional[Condition]:
    """Return the Recommended condition when it is present and not True."""
    condition = find_condition(update.conditions, RECOMMENDED)
    if condition is not None and condition.status != ConditionStatus.TRUE:
        return condition
    return None


def indent_message(message: str, indent: str = "  ") -> str:
    """Indent continuation lines of a multi-line message."""
    return message.replace("\n", "\n" + indent)


def reason_message_block(condition: Condition) -> str:
    """Render the indented Reason/Message block for a condition."""
    return f"  Reason: {condition.reason}\n  Message: {indent_message(condition.message)}"
