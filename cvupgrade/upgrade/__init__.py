"""Cluster update target resolution and gating."""

from .conditions import ConditionTable, find_condition
from .errors import (
    GatedError,
    InputValidationError,
    NoMatchError,
    NotConnectedError,
    NotRecommendedError,
    TransportError,
    UpgradeError,
)
from .gate import UpgradeGate
from .reference import ImageReference, InvalidReferenceError, target_match
from .resolver import Resolution, TargetResolver
from .validation import validate_options
from .versions import compare_descending, sort_conditional_updates, sort_releases

__all__ = [
    "ConditionTable",
    "find_condition",
    "GatedError",
    "InputValidationError",
    "NoMatchError",
    "NotConnectedError",
    "NotRecommendedError",
    "TransportError",
    "UpgradeError",
    "UpgradeGate",
    "ImageReference",
    "InvalidReferenceError",
    "target_match",
    "Resolution",
    "TargetResolver",
    "validate_options",
    "compare_descending",
    "sort_conditional_updates",
    "sort_releases",
]
