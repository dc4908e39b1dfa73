"""Cluster update status report."""

import json
from typing import List

import yaml

from ..model.cluster import ClusterVersion, ConditionStatus
from ..model.intent import UpgradeOptions
from ..model.outcome import Outcome
from ..model.report import NotRecommendedEntry, ReportFormat, StatusReport, UpdateEntry
from ..upgrade.conditions import (
    DEGRADED,
    PROGRESSING,
    RETRIEVED_UPDATES,
    UPGRADEABLE,
    ConditionTable,
    indent_message,
    not_recommended_condition,
    reason_message_block,
)
from ..upgrade.versions import sort_conditional_updates, sort_releases
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Minimum width of the VERSION column
TABLE_MIN_WIDTH = 14


class StatusReporter:
    """Builds the status-only report for a ClusterVersion snapshot."""

    def __init__(self, cluster_version: ClusterVersion, options: UpgradeOptions):
        self.cluster_version = cluster_version
        self.options = options
        self.conditions = ConditionTable(cluster_version.status.conditions)

    def build(self) -> Outcome:
        """Produce a report, or a failure when the cluster is degraded."""
        degraded = self.conditions.get(DEGRADED)
        if degraded is not None and degraded.is_true:
            return Outcome.failure(self._degraded_message())

        warnings: List[str] = []
        status = self.cluster_version.status
        spec = self.cluster_version.spec
        report = StatusReport(
            channel=spec.channel or "",
            upstream=spec.upstream or "",
            available_channels=list(status.desired.channels),
            include_not_recommended=self.options.include_not_recommended,
        )

        progressing = self.conditions.get(PROGRESSING)
        if progressing is not None and progressing.message:
            if progressing.is_true:
                report.progress = f"info: An upgrade is in progress. {progressing.message}"
            else:
                report.progress = progressing.message
        else:
            warnings.append(
                "No current status info, see `oc describe clusterversion` for more details"
            )

        upgradeable = self.conditions.get(UPGRADEABLE)
        if upgradeable is not None and upgradeable.is_false:
            report.upgradeable_reason = upgradeable.reason
            report.upgradeable_message = upgradeable.message

        report.recommended_updates = [
            UpdateEntry(version=release.version, image=release.image)
            for release in sort_releases(status.available_updates)
        ]

        if self.conditions.has_status(RETRIEVED_UPDATES, ConditionStatus.FALSE):
            retrieved = self.conditions[RETRIEVED_UPDATES]
            report.updates_retrieved = False
            verb = "refresh" if report.recommended_updates else "display"
            warnings.append(
                f"Cannot {verb} available updates:\n{reason_message_block(retrieved)}\n"
            )

        for update in sort_conditional_updates(status.conditional_updates):
            condition = not_recommended_condition(update)
            if condition is None:
                continue
            report.not_recommended_updates.append(
                NotRecommendedEntry(
                    version=update.release.version,
                    image=update.release.image,
                    recommended=condition.status.value,
                    reason=condition.reason,
                    message=condition.message,
                )
            )

        logger.debug(
            f"Status report with {len(report.recommended_updates)} recommended and "
            f"{len(report.not_recommended_updates)} not recommended updates"
        )
        return Outcome.status(report, warnings)

    def _degraded_message(self) -> str:
        degraded = self.conditions[DEGRADED]
        if not degraded.message:
            return "The cluster can't be upgraded, see `oc describe clusterversion`"

        prefix = "No upgrade is possible due to an error"
        progressing = self.conditions.get(PROGRESSING)
        if progressing is not None and progressing.is_true and progressing.message:
            prefix = progressing.message
        return f"{prefix}:\n\n{reason_message_block(degraded)}\n\n"


def render_report(report: StatusReport, output_format: ReportFormat) -> str:
    """Render a status report in the requested format."""
    if output_format == ReportFormat.JSON:
        return json.dumps(report.model_dump(mode="json"), indent=2)
    elif output_format == ReportFormat.YAML:
        return yaml.dump(report.model_dump(mode="json"), default_flow_style=False, sort_keys=False)
    else:
        return format_text_report(report)


def format_text_report(report: StatusReport) -> str:
    """Format report as human-readable text."""
    lines = []
    if report.progress is not None:
        lines.append(report.progress)
    lines.append("")

    if report.upgradeable_reason is not None:
        lines.append("Upgradeable=False")
        lines.append("")
        lines.append(f"  Reason: {report.upgradeable_reason}")
        lines.append(f"  Message: {indent_message(report.upgradeable_message or '')}")
        lines.append("")

    if report.channel:
        if report.upstream:
            lines.append(f"Upstream: {report.upstream}")
        else:
            lines.append("Upstream is unset, so the cluster will use an appropriate default.")
        if report.available_channels:
            channels = ", ".join(report.available_channels)
            lines.append(f"Channel: {report.channel} (available channels: {channels})")
        else:
            lines.append(f"Channel: {report.channel}")

    if report.recommended_updates:
        lines.append("")
        lines.append("Recommended updates:")
        lines.append("")
        lines.extend(_format_updates_table(report.recommended_updates))
    elif report.updates_retrieved:
        lines.append(
            "No updates available. You may force an upgrade to a specific release image, "
            "but doing so may not be supported and may result in downtime or data loss."
        )

    if report.include_not_recommended:
        if report.not_recommended_updates:
            lines.append("")
            lines.append("Supported but not recommended updates:")
            for entry in report.not_recommended_updates:
                lines.append("")
                lines.append(f"  Version: {entry.version}")
                lines.append(f"  Image: {entry.image}")
                lines.append(f"  Recommended: {entry.recommended}")
                lines.append(f"  Reason: {entry.reason}")
                lines.append(f"  Message: {indent_message(entry.message.strip())}")
        else:
            lines.append("")
            lines.append(
                "No updates which are not recommended based on your cluster configuration "
                "are available."
            )
    elif report.not_recommended_updates:
        lines.append("")
        lines.append(
            "Additional updates which are not recommended based on your cluster configuration "
            "are available, to view those re-run the command with --include-not-recommended."
        )

    return "\n".join(lines)


def _format_updates_table(updates: List[UpdateEntry]) -> List[str]:
    """Two aligned columns, VERSION and IMAGE."""
    cells = ["  VERSION"] + [f"  {update.version}" for update in updates]
    width = max(TABLE_MIN_WIDTH, max(len(cell) for cell in cells) + 1)
    images = ["IMAGE"] + [update.image for update in updates]
    return [f"{cell.ljust(width)}{image}".rstrip() for cell, image in zip(cells, images)]
