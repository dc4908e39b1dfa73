"""Test configuration and fixtures."""

import pytest
from unittest.mock import Mock
from typing import Any, Dict, List, Optional

from cvupgrade.k8s.cluster_version import ClusterVersionClient
from cvupgrade.model.cluster import ClusterVersion, Release

DIGEST_A = "sha256:" + "a" * 64
DIGEST_B = "sha256:" + "b" * 64
DIGEST_C = "sha256:" + "c" * 64
DIGEST_CURRENT = "sha256:" + "0" * 64

RELEASE_REPO = "quay.io/openshift-release-dev/ocp-release"


def release_image(digest: str) -> str:
    return f"{RELEASE_REPO}@{digest}"


def condition(
    condition_type: str, status: str, reason: str = "", message: str = ""
) -> Dict[str, Any]:
    return {"type": condition_type, "status": status, "reason": reason, "message": message}


def make_cluster_version(
    desired: Optional[Dict[str, Any]] = None,
    available: Optional[List[Dict[str, Any]]] = None,
    conditional: Optional[List[Dict[str, Any]]] = None,
    conditions: Optional[List[Dict[str, Any]]] = None,
    desired_update: Optional[Dict[str, Any]] = None,
    channel: str = "stable-4.3",
    upstream: str = "",
) -> ClusterVersion:
    """Build a ClusterVersion the way the API serves it."""
    spec: Dict[str, Any] = {"channel": channel, "clusterID": "0a1b2c"}
    if upstream:
        spec["upstream"] = upstream
    if desired_update is not None:
        spec["desiredUpdate"] = desired_update

    return ClusterVersion.model_validate(
        {
            "apiVersion": "config.openshift.io/v1",
            "kind": "ClusterVersion",
            "metadata": {"name": "version", "resourceVersion": "12345"},
            "spec": spec,
            "status": {
                "desired": desired
                or {
                    "version": "4.2.0",
                    "image": release_image(DIGEST_CURRENT),
                    "channels": ["stable-4.2", "stable-4.3"],
                },
                "availableUpdates": available,
                "conditionalUpdates": conditional,
                "conditions": conditions or [],
                "history": [],
            },
        }
    )


@pytest.fixture
def healthy_conditions():
    """Conditions of a cluster sitting idle at its current version."""
    return [
        condition("Available", "True"),
        condition("Degraded", "False"),
        condition("Progressing", "False", message="Cluster version is 4.2.0"),
        condition("RetrievedUpdates", "True"),
    ]


@pytest.fixture
def available_updates():
    """Recommended updates, deliberately out of order."""
    return [
        {"version": "4.2.1", "image": release_image(DIGEST_A)},
        {"version": "4.3.0", "image": release_image(DIGEST_B)},
    ]


@pytest.fixture
def conditional_updates():
    """One not recommended and one recommended conditional update."""
    return [
        {
            "release": {"version": "4.3.1", "image": release_image(DIGEST_C)},
            "conditions": [
                condition(
                    "Recommended",
                    "False",
                    reason="KnownIssue",
                    message="Upgrades can break ingress.\nSee the bug for details.",
                )
            ],
        },
        {
            "release": {"version": "4.2.2", "image": release_image("sha256:" + "d" * 64)},
            "conditions": [condition("Recommended", "True", reason="AsExpected")],
        },
    ]


@pytest.fixture
def cluster_version(healthy_conditions, available_updates, conditional_updates):
    """A healthy cluster with recommended and conditional updates."""
    return make_cluster_version(
        available=available_updates,
        conditional=conditional_updates,
        conditions=healthy_conditions,
    )


@pytest.fixture
def mock_cluster_client(cluster_version):
    """Mock ClusterVersion client serving the cluster_version fixture."""
    mock_client = Mock(spec=ClusterVersionClient)

    mock_client.fetch_status = Mock(return_value=cluster_version)
    mock_client.apply_patch = Mock(return_value=cluster_version.status.desired)
    mock_client.apply_full_update = Mock(return_value=None)

    return mock_client


@pytest.fixture
def current_release():
    return Release(version="4.2.0", image=release_image(DIGEST_CURRENT))


@pytest.fixture
def make_cv():
    """Factory for ClusterVersion snapshots."""
    return make_cluster_version


@pytest.fixture
def make_condition():
    """Factory for raw condition dicts."""
    return condition
