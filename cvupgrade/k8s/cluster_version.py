"""Reading and writing the ClusterVersion resource."""

import json
from typing import Any, Dict

from pydantic import ValidationError

from ..model.cluster import ClusterVersion, Release
from ..upgrade.errors import NotConnectedError, TransportError
from ..utils.logger import get_logger
from .client import K8sClient

logger = get_logger(__name__)

RESOURCE = "clusterversion"
RESOURCE_NAME = "version"
CLEAR_DESIRED_UPDATE_PATCH = '{"spec":{"desiredUpdate":null}}'

# kubectl output marking a missing resource or resource type
NOT_FOUND_MARKERS = ("(NotFound)", "doesn't have a resource type")


def _is_not_found(output: str) -> bool:
    return any(marker in output for marker in NOT_FOUND_MARKERS)


class ClusterVersionClient:
    """Fetches and mutates the cluster-scoped ClusterVersion object."""

    def __init__(self, client: K8sClient):
        self.client = client

    def fetch_status(self) -> ClusterVersion:
        """Read the current ClusterVersion snapshot."""
        success, output = self.client.execute(["get", RESOURCE, RESOURCE_NAME, "-o", "json"])
        if not success:
            if _is_not_found(output):
                raise NotConnectedError()
            raise TransportError(output.strip())

        cluster_version = self._parse(output)
        logger.debug(
            f"Fetched ClusterVersion at {cluster_version.status.desired.display_name} with "
            f"{len(cluster_version.status.available_updates)} available updates"
        )
        return cluster_version

    def apply_patch(self) -> Release:
        """Remove any pending desired update and return the resulting desired release."""
        success, output = self.client.execute(
            [
                "patch",
                RESOURCE,
                RESOURCE_NAME,
                "--type",
                "merge",
                "-p",
                CLEAR_DESIRED_UPDATE_PATCH,
                "-o",
                "json",
            ]
        )
        if not success:
            raise TransportError(output.strip())
        return self._parse(output).status.desired

    def apply_full_update(self, cluster_version: ClusterVersion) -> None:
        """Replace the ClusterVersion object with the given one."""
        manifest = cluster_version.to_manifest()
        logger.debug(f"Requesting update of {RESOURCE}/{cluster_version.name}")
        success, output = self.client.execute(
            ["replace", "-f", "-", "-o", "json"], stdin=json.dumps(manifest)
        )
        if not success:
            raise TransportError(output.strip())

    def _parse(self, output: str) -> ClusterVersion:
        try:
            data: Dict[str, Any] = json.loads(output)
        except json.JSONDecodeError as e:
            raise TransportError(f"Failed to parse ClusterVersion JSON: {e}") from e
        try:
            return ClusterVersion.model_validate(data)
        except ValidationError as e:
            raise TransportError(f"Unexpected ClusterVersion content: {e}") from e
