"""Kubernetes interaction module."""

from .client import K8sClient
from .cluster_version import ClusterVersionClient

__all__ = ["K8sClient", "ClusterVersionClient"]
