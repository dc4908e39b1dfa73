"""Upgrade gating on blocking cluster conditions."""

from typing import List, Optional, Tuple

from ..model.cluster import ConditionStatus
from ..utils.logger import get_logger
from .conditions import DEGRADED, INVALID, PROGRESSING, ConditionTable, reason_message_block
from .errors import GatedError

logger = get_logger(__name__)

FORCE_WARNING = (
    "--force overrides cluster verification of your supplied release image "
    "and waives any update precondition failures."
)

# Checked in this order; each True condition contributes one block
BLOCKING_CONDITIONS: List[Tuple[str, str]] = [
    (INVALID, "the cluster version object is invalid, you must correct the invalid state first"),
    (DEGRADED, "the cluster is experiencing an upgrade-blocking error"),
    (PROGRESSING, "the cluster is already upgrading"),
]


class UpgradeGate:
    """Decides whether a resolved update may be requested."""

    def __init__(self, conditions: ConditionTable, allow_upgrade_with_warnings: bool = False):
        self.conditions = conditions
        self.allow_upgrade_with_warnings = allow_upgrade_with_warnings

    def blocks(self) -> List[str]:
        """Render a block for every blocking condition that is True."""
        results = []
        for condition_type, summary in BLOCKING_CONDITIONS:
            if self.conditions.has_status(condition_type, ConditionStatus.TRUE):
                block = reason_message_block(self.conditions[condition_type])
                results.append(f"{summary}:\n\n{block}\n\n")
        return results

    def check(self) -> Optional[str]:
        """Return a warning when blocks are overridden, raise when they are not."""
        blocks = self.blocks()
        if not blocks:
            return None

        details = "".join(blocks)
        if not self.allow_upgrade_with_warnings:
            raise GatedError(
                f"{details}\n\nIf you want to upgrade anyway, use --allow-upgrade-with-warnings.",
                blocks,
            )

        logger.debug(f"Bypassing {len(blocks)} blocking condition(s)")
        return f"--allow-upgrade-with-warnings is bypassing: {details}"
