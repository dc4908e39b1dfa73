"""Data models for cvupgrade."""

from .cluster import (
    ClusterVersion,
    ClusterVersionSpec,
    ClusterVersionStatus,
    Condition,
    ConditionalUpdate,
    ConditionStatus,
    Release,
    Update,
)
from .intent import Intent, UpgradeMode, UpgradeOptions
from .outcome import Outcome, OutcomeKind
from .report import NotRecommendedEntry, ReportFormat, StatusReport, UpdateEntry

__all__ = [
    "ClusterVersion",
    "ClusterVersionSpec",
    "ClusterVersionStatus",
    "Condition",
    "ConditionalUpdate",
    "ConditionStatus",
    "Release",
    "Update",
    "Intent",
    "UpgradeMode",
    "UpgradeOptions",
    "Outcome",
    "OutcomeKind",
    "NotRecommendedEntry",
    "ReportFormat",
    "StatusReport",
    "UpdateEntry",
]
