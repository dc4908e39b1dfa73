"""Resolve user intent against the updates a cluster reports."""

from typing import List, Optional

from pydantic import BaseModel

from ..model.cluster import ClusterVersionStatus, ConditionStatus, Release
from ..model.intent import UpgradeOptions
from ..utils.logger import get_logger
from .conditions import (
    RETRIEVED_UPDATES,
    ConditionTable,
    not_recommended_condition,
    reason_message_block,
)
from .errors import NoMatchError, NotRecommendedError
from .reference import InvalidReferenceError, target_match
from .versions import sort_releases

logger = get_logger(__name__)


class Resolution(BaseModel):
    """Either a release to request or a no-op message."""

    release: Optional[Release] = None
    message: str = ""

    @property
    def is_noop(self) -> bool:
        return self.release is None


class TargetResolver:
    """Matches a requested target against available and conditional updates.

    Non-fatal problems met along the way are collected in ``warnings`` and
    survive a raised error.
    """

    def __init__(self, status: ClusterVersionStatus, options: UpgradeOptions):
        self.status = status
        self.options = options
        self.conditions = ConditionTable(status.conditions)
        self.warnings: List[str] = []

    def resolve_latest(self) -> Resolution:
        """Pick the newest recommended update."""
        if not self.status.available_updates:
            return Resolution(
                message="info: Cluster is already at the latest available version "
                f"{self.status.desired.version}"
            )
        return Resolution(release=sort_releases(self.status.available_updates)[0])

    def resolve_explicit(self, version: str = "", image: str = "") -> Resolution:
        """Find the release matching a requested version or image."""
        desired = self.status.desired
        if version and version == desired.version:
            return Resolution(message=f"info: Cluster is already at version {version}")
        if image and image == desired.image:
            return Resolution(message=f"info: Cluster is already at {image}")

        candidates: List[str] = []
        release = self._match_available(version, image, candidates)
        if release is None:
            release = self._match_conditional(version, image, candidates)

        if release is None and image and self.options.allow_explicit_upgrade:
            release = Release(image=image)
            self.warnings.append(
                "The requested upgrade image is not one of the available updates. "
                "You have used --allow-explicit-upgrade for the update to proceed anyway"
            )

        if release is None:
            raise self._no_match(image, candidates)

        logger.debug(f"Resolved target {release.display_name}")
        return Resolution(release=release)

    def _match_available(
        self, version: str, image: str, candidates: List[str]
    ) -> Optional[Release]:
        for available in self.status.available_updates:
            candidates.append(available.version)
            try:
                if target_match(available, version, image):
                    return available
            except InvalidReferenceError as e:
                self.warnings.append(
                    f"unable to calculate match for the update target in available updates: {e}"
                )
        return None

    def _match_conditional(
        self, version: str, image: str, candidates: List[str]
    ) -> Optional[Release]:
        allow = self.options.allow_not_recommended
        for update in self.status.conditional_updates:
            condition = not_recommended_condition(update)
            if condition is None:
                continue

            release = update.release
            try:
                matched = target_match(release, version, image)
            except InvalidReferenceError as e:
                self.warnings.append(
                    "unable to calculate match for the update target in available "
                    f"conditional updates: {e}"
                )
                matched = False

            if matched:
                risk = f"{condition.type}={condition.status.value}"
                if not allow:
                    raise NotRecommendedError(
                        f"the update {release.version} is not one of the recommended updates, "
                        "but is available as a conditional update. To accept the "
                        f"{risk} risk and to proceed with update use --allow-not-recommended.\n"
                        f"{reason_message_block(condition)}\n",
                        condition,
                    )
                self.warnings.append(
                    f"with --allow-not-recommended you have accepted the risks with "
                    f"{release.version} and bypassed {risk} {condition.reason}: "
                    f"{condition.message}"
                )
                return release

            if allow:
                candidates.append(release.version)
        return None

    def _no_match(self, image: str, candidates: List[str]) -> NoMatchError:
        possible = sorted({version for version in candidates if version})
        retrieved = self.conditions.get(RETRIEVED_UPDATES)
        flag = "--allow-explicit-upgrade" if image else "--to-image"
        next_step = f"{flag} to continue with the update"

        if retrieved is not None and retrieved.status != ConditionStatus.TRUE:
            message = (
                f"cannot refresh available updates:\n{reason_message_block(retrieved)}\n\n"
                f"specify {next_step}."
            )
        elif not possible and self.options.allow_not_recommended:
            message = (
                f"no recommended or conditional updates, specify {next_step} "
                "or wait for new updates to be available."
            )
        elif not possible:
            message = (
                f"no recommended updates, specify {next_step} "
                "or wait for new updates to be available."
            )
        else:
            message = (
                f"the update is not one of the possible targets: {', '.join(possible)}. "
                f"specify {next_step}."
            )

        return NoMatchError(message, possible, retrieved, flag)
