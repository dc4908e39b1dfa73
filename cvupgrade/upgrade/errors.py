"""Errors raised while deciding on a cluster update."""

from typing import List, Optional

from ..model.cluster import Condition


class UpgradeError(Exception):
    """Base class for errors that end a single invocation."""


class InputValidationError(UpgradeError):
    """User supplied flags or targets are malformed."""


class NoMatchError(UpgradeError):
    """No eligible update matches the requested target."""

    def __init__(
        self,
        message: str,
        candidates: Optional[List[str]] = None,
        retrieved_updates: Optional[Condition] = None,
        suggested_flag: str = "",
    ):
        super().__init__(message)
        self.candidates = candidates or []
        self.retrieved_updates = retrieved_updates
        self.suggested_flag = suggested_flag


class NotRecommendedError(UpgradeError):
    """The target is only available as a not-recommended conditional update."""

    def __init__(self, message: str, condition: Condition):
        super().__init__(message)
        self.condition = condition


class GatedError(UpgradeError):
    """The cluster reports a state that blocks updates."""

    def __init__(self, message: str, blocks: List[str]):
        super().__init__(message)
        self.blocks = blocks


class TransportError(UpgradeError):
    """Reading or writing the ClusterVersion resource failed."""


class NotConnectedError(TransportError):
    """The cluster has no ClusterVersion resource."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "No cluster version information available - you must be connected to an "
            "OpenShift version 4 server to fetch the current version"
        )
