"""Test the command line interface."""

import json

import pytest
from typer.testing import CliRunner
from unittest.mock import patch

from cvupgrade.cli.main import app
from cvupgrade.upgrade.errors import TransportError

runner = CliRunner()


@pytest.fixture
def k8s_client():
    with patch("cvupgrade.cli.main.K8sClient") as mock_k8s:
        yield mock_k8s


@pytest.fixture
def cli_client(k8s_client, mock_cluster_client):
    """Route the CLI to the mocked ClusterVersion client."""
    with patch("cvupgrade.cli.main.ClusterVersionClient", return_value=mock_cluster_client):
        yield mock_cluster_client


class TestUpgradeCommand:
    def test_status(self, cli_client):
        """Test the default status report."""
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "Recommended updates:" in result.output
        assert "4.3.0" in result.output
        cli_client.apply_full_update.assert_not_called()

    def test_status_json(self, cli_client):
        """Test the JSON status report."""
        result = runner.invoke(app, ["--output", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["channel"] == "stable-4.3"

    def test_to_latest(self, cli_client):
        """Test requesting the latest update."""
        result = runner.invoke(app, ["--to-latest"])

        assert result.exit_code == 0
        assert "Updating to latest version 4.3.0" in result.output
        cli_client.apply_full_update.assert_called_once()

    def test_to_version_with_force(self, cli_client):
        """Test that the force warning is printed."""
        result = runner.invoke(app, ["--to", "4.2.1", "--force"])

        assert result.exit_code == 0
        assert "Updating to 4.2.1" in result.output
        assert "warning: --force overrides cluster verification" in result.output

    def test_invalid_flags(self, cli_client):
        """Test that conflicting flags exit non-zero without reading the cluster."""
        result = runner.invoke(app, ["--clear", "--to-latest"])

        assert result.exit_code == 1
        assert "error: --clear may not be specified with any other flags" in result.output
        cli_client.fetch_status.assert_not_called()

    def test_not_recommended(self, cli_client):
        """Test that a not recommended target exits non-zero."""
        result = runner.invoke(app, ["--to", "4.3.1"])

        assert result.exit_code == 1
        assert "--allow-not-recommended" in result.output
        cli_client.apply_full_update.assert_not_called()

    def test_clear_without_pending(self, cli_client):
        result = runner.invoke(app, ["--clear"])

        assert result.exit_code == 0
        assert "info: No update in progress" in result.output

    def test_context_and_kubeconfig(self, k8s_client, cli_client):
        """Test that cluster selection flags reach the kubectl wrapper."""
        runner.invoke(app, ["--context", "admin", "--kubeconfig", "/tmp/kubeconfig"])

        k8s_client.assert_called_once_with(context="admin", kubeconfig="/tmp/kubeconfig")

    def test_kubectl_missing(self, k8s_client):
        """Test the exit status when kubectl cannot be found."""
        k8s_client.side_effect = TransportError("kubectl command not found. Please install kubectl.")

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "kubectl command not found" in result.output

    def test_invalid_flags_reported_before_kubectl(self, k8s_client):
        """Test that malformed input wins over a missing kubectl."""
        k8s_client.side_effect = TransportError("kubectl command not found. Please install kubectl.")

        result = runner.invoke(app, ["--to", "4.3"])

        assert result.exit_code == 1
        assert "--to must be a semantic version" in result.output
        assert "kubectl command not found" not in result.output
        k8s_client.assert_not_called()

    def test_tag_warning_printed_once(self, cli_client):
        """Test that validation warnings are not repeated."""
        image = "quay.io/openshift-release-dev/ocp-release:4.3.0-x86_64"

        result = runner.invoke(app, ["--to-image", image, "--force"])

        assert result.output.count("Using by-tag pull specs is dangerous") == 1
