"""Cluster version update resolution and gating."""

__version__ = "0.1.0"
