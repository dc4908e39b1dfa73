"""Test upgrade gating."""

import pytest

from cvupgrade.model.cluster import Condition
from cvupgrade.upgrade.conditions import ConditionTable
from cvupgrade.upgrade.errors import GatedError
from cvupgrade.upgrade.gate import UpgradeGate


def _table(*conditions):
    return ConditionTable(list(conditions))


class TestUpgradeGate:
    def test_healthy_cluster_passes(self):
        """Test that no blocking condition means no warning."""
        gate = UpgradeGate(
            _table(
                Condition(type="Degraded", status="False"),
                Condition(type="Progressing", status="False", message="Cluster version is 4.2.0"),
            )
        )
        assert gate.blocks() == []
        assert gate.check() is None

    def test_degraded_blocks(self):
        """Test that Degraded=True fails without the override."""
        degraded = Condition(
            type="Degraded",
            status="True",
            reason="ClusterOperatorDegraded",
            message="Cluster operator etcd is degraded",
        )
        gate = UpgradeGate(_table(degraded))

        with pytest.raises(GatedError) as exc_info:
            gate.check()

        message = str(exc_info.value)
        assert "the cluster is experiencing an upgrade-blocking error" in message
        assert "Reason: ClusterOperatorDegraded" in message
        assert "Message: Cluster operator etcd is degraded" in message
        assert message.endswith("If you want to upgrade anyway, use --allow-upgrade-with-warnings.")

    def test_blocks_in_fixed_order(self):
        """Test that Invalid, Degraded and Progressing are reported in order."""
        gate = UpgradeGate(
            _table(
                Condition(type="Progressing", status="True", reason="Upgrading"),
                Condition(type="Degraded", status="True", reason="Broken"),
                Condition(type="Invalid", status="True", reason="BadSpec"),
            )
        )

        blocks = gate.blocks()

        assert len(blocks) == 3
        assert blocks[0].startswith("the cluster version object is invalid")
        assert blocks[1].startswith("the cluster is experiencing an upgrade-blocking error")
        assert blocks[2].startswith("the cluster is already upgrading")

    def test_override_downgrades_to_warning(self):
        """Test that the override returns every block as one warning."""
        gate = UpgradeGate(
            _table(
                Condition(type="Degraded", status="True", reason="Broken", message="etcd"),
                Condition(type="Progressing", status="True", reason="Upgrading"),
            ),
            allow_upgrade_with_warnings=True,
        )

        warning = gate.check()

        assert warning.startswith("--allow-upgrade-with-warnings is bypassing: ")
        assert "Reason: Broken" in warning
        assert "the cluster is already upgrading" in warning

    def test_unknown_status_does_not_block(self):
        """Test that only True conditions block."""
        gate = UpgradeGate(_table(Condition(type="Degraded", status="Unknown")))
        assert gate.check() is None
