"""Cluster update decisions."""

from typing import Callable, Dict, List

from ..k8s.cluster_version import ClusterVersionClient
from ..model.cluster import ClusterVersion, Release, Update
from ..model.intent import Intent, UpgradeMode, UpgradeOptions
from ..model.outcome import Outcome
from ..upgrade.conditions import ConditionTable
from ..upgrade.errors import TransportError, UpgradeError
from ..upgrade.gate import FORCE_WARNING, UpgradeGate
from ..upgrade.resolver import Resolution, TargetResolver
from ..upgrade.validation import validate_options
from ..utils.logger import get_logger
from .reporter import StatusReporter

logger = get_logger(__name__)


class UpgradeAdvisor:
    """Turns one intent and one ClusterVersion snapshot into an outcome.

    Flags are validated before the cluster is read. The snapshot is read
    once and at most one write follows; nothing is retried.
    """

    def __init__(self, client: ClusterVersionClient, options: UpgradeOptions):
        self.client = client
        self.options = options
        self.warnings: List[str] = []
        self._handlers: Dict[UpgradeMode, Callable[[ClusterVersion, Intent], Outcome]] = {
            UpgradeMode.CLEAR: self._clear,
            UpgradeMode.TO_LATEST: self._to_latest,
            UpgradeMode.TO_VERSION: self._to_target,
            UpgradeMode.TO_IMAGE: self._to_target,
            UpgradeMode.STATUS: self._status,
        }

    def decide(self) -> Outcome:
        """Run a single decision."""
        try:
            self.warnings.extend(validate_options(self.options))
            intent = self.options.intent
            logger.debug(f"Deciding {intent.mode.value} {intent.target}".rstrip())

            cluster_version = self.client.fetch_status()
            return self._handlers[intent.mode](cluster_version, intent)
        except UpgradeError as e:
            logger.debug(f"Decision failed: {type(e).__name__}")
            return Outcome.failure(str(e), self.warnings)

    def _clear(self, cluster_version: ClusterVersion, intent: Intent) -> Outcome:
        pending = cluster_version.spec.desired_update
        if pending is None:
            return Outcome.noop("info: No update in progress", self.warnings)

        try:
            desired = self.client.apply_patch()
        except TransportError as e:
            raise TransportError(f"Unable to cancel current rollout: {e}") from e

        if pending.is_equivalent(desired):
            return Outcome.noop(
                f"Cleared the update field, still at {desired.display_name}", self.warnings
            )
        return Outcome.applied(
            f"Cancelled requested upgrade to {pending.display_name}", self.warnings
        )

    def _to_latest(self, cluster_version: ClusterVersion, intent: Intent) -> Outcome:
        resolution = TargetResolver(cluster_version.status, self.options).resolve_latest()
        if resolution.is_noop:
            return Outcome.noop(resolution.message, self.warnings)

        update = self._request(cluster_version, resolution.release)
        try:
            self.client.apply_full_update(cluster_version.with_desired_update(update))
        except TransportError as e:
            raise TransportError(
                f"Unable to upgrade to latest version {update.version}: {e}"
            ) from e

        if update.version:
            return Outcome.applied(f"Updating to latest version {update.version}", self.warnings)
        return Outcome.applied(f"Updating to latest release image {update.image}", self.warnings)

    def _to_target(self, cluster_version: ClusterVersion, intent: Intent) -> Outcome:
        resolver = TargetResolver(cluster_version.status, self.options)
        try:
            resolution: Resolution = resolver.resolve_explicit(intent.version, intent.image)
        finally:
            self.warnings.extend(resolver.warnings)
        if resolution.is_noop:
            return Outcome.noop(resolution.message, self.warnings)

        update = self._request(cluster_version, resolution.release)
        try:
            self.client.apply_full_update(cluster_version.with_desired_update(update))
        except TransportError as e:
            raise TransportError(f"Unable to upgrade: {e}") from e

        if update.version:
            return Outcome.applied(f"Updating to {update.version}", self.warnings)
        return Outcome.applied(f"Updating to release image {update.image}", self.warnings)

    def _status(self, cluster_version: ClusterVersion, intent: Intent) -> Outcome:
        outcome = StatusReporter(cluster_version, self.options).build()
        outcome.warnings = self.warnings + outcome.warnings
        return outcome

    def _request(self, cluster_version: ClusterVersion, release: Release) -> Update:
        """Gate the resolved release against the same snapshot and build the request."""
        gate = UpgradeGate(
            ConditionTable(cluster_version.status.conditions),
            allow_upgrade_with_warnings=self.options.allow_upgrade_with_warnings,
        )
        warning = gate.check()
        if warning:
            self.warnings.append(warning)

        update = Update.from_release(release, force=self.options.force)
        if update.force:
            self.warnings.append(FORCE_WARNING)

        logger.debug(f"Requesting update to {update.display_name}")
        return update
