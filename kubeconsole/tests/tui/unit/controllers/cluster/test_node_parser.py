"""Tests for node parser."""

from __future__ import annotations

from typing import Any

import pytest

from kubeconsole.constants.enums import CloudProvider, NodeHealthState, OperatingSystem
from kubeconsole.controllers.cluster.parsers.node_parser import NodeParser
from kubeconsole.models.core.node_info import NodeHealthStatus


def _raw_node(**overrides: Any) -> dict[str, Any]:
    node: dict[str, Any] = {
        "metadata": {
            "name": "ip-10-0-1-10.eu-central-1.compute.internal",
            "creationTimestamp": "2024-03-01T10:00:00Z",
            "labels": {
                "node.kubernetes.io/instance-type": "m5.large",
                "topology.kubernetes.io/zone": "eu-central-1a",
            },
            "annotations": {
                "cluster.k8s.io/machine": "kube-system/machine-abc123",
            },
        },
        "spec": {"providerID": "aws:///eu-central-1a/i-0123456789"},
        "status": {
            "addresses": [
                {"type": "InternalIP", "address": "10.0.1.10"},
                {"type": "Hostname", "address": "ip-10-0-1-10"},
            ],
            "capacity": {"cpu": "2", "memory": "8009276Ki"},
            "allocatable": {"cpu": "1930m", "memory": "7292476Ki"},
            "conditions": [{"type": "Ready", "status": "True"}],
            "nodeInfo": {
                "kernelVersion": "5.15.0-1051-aws",
                "kubeletVersion": "v1.28.4",
                "osImage": "Ubuntu 22.04.3 LTS",
                "architecture": "amd64",
                "containerRuntimeVersion": "containerd://1.7.2",
            },
        },
    }
    node.update(overrides)
    return node


class TestNodeParser:
    """Tests for NodeParser class."""

    @pytest.fixture
    def parser(self) -> NodeParser:
        """Create NodeParser instance."""
        return NodeParser()

    def test_get_label_value_found(self, parser: NodeParser) -> None:
        """Test _get_label_value returns the first matching label."""
        labels = {"beta.kubernetes.io/instance-type": "m5.xlarge"}
        result = parser._get_label_value(
            labels, ("node.kubernetes.io/instance-type", "beta.kubernetes.io/instance-type")
        )
        assert result == "m5.xlarge"

    def test_get_label_value_fallback(self, parser: NodeParser) -> None:
        """Test _get_label_value returns default when not found."""
        result = parser._get_label_value({}, ("topology.kubernetes.io/zone",), "Unknown")
        assert result == "Unknown"

    def test_machine_ref_from_annotation(self, parser: NodeParser) -> None:
        """Test machine_ref splits namespace and machine name."""
        assert parser.machine_ref(_raw_node()) == ("kube-system", "machine-abc123")

    def test_machine_ref_defaults_namespace(self, parser: NodeParser) -> None:
        """Test machine_ref falls back to kube-system without a namespace."""
        node = _raw_node(
            metadata={"name": "n1", "annotations": {"cluster.k8s.io/machine": "machine-x"}}
        )
        assert parser.machine_ref(node) == ("kube-system", "machine-x")

    def test_machine_ref_missing(self, parser: NodeParser) -> None:
        """Test machine_ref returns None for unmanaged nodes."""
        assert parser.machine_ref(_raw_node(metadata={"name": "n1"})) is None

    def test_parse_node(self, parser: NodeParser) -> None:
        """Test parse_node maps kubectl output onto Node."""
        node = parser.parse_node(_raw_node())

        assert node.id == "machine-abc123"
        assert node.name == "ip-10-0-1-10.eu-central-1.compute.internal"
        assert node.kubelet_version == "v1.28.4"
        assert node.spec.cloud.provider == CloudProvider.AWS
        assert node.spec.cloud.aws == {
            "instanceType": "m5.large",
            "availabilityZone": "eu-central-1a",
        }
        assert node.spec.operating_system.name == OperatingSystem.UBUNTU
        assert node.status.capacity.memory == "8009276Ki"
        assert node.status.node_info.container_runtime_version == "containerd://1.7.2"
        assert NodeHealthStatus.for_node(node).state == NodeHealthState.RUNNING

    def test_parse_node_without_machine_uses_name(self, parser: NodeParser) -> None:
        """Test parse_node uses the node name as id when no machine backs it."""
        node = parser.parse_node(
            _raw_node(metadata={"name": "kind-worker", "creationTimestamp": "2024-03-01T10:00:00Z"})
        )
        assert node.id == "kind-worker"

    def test_parse_node_not_ready_is_failed(self, parser: NodeParser) -> None:
        """Test a Ready=False condition is reported as an error."""
        raw = _raw_node()
        raw["status"]["conditions"] = [
            {
                "type": "Ready",
                "status": "False",
                "reason": "KubeletNotReady",
                "message": "container runtime is down",
            }
        ]

        node = parser.parse_node(raw)
        status = NodeHealthStatus.for_node(node)

        assert node.status.error_reason == "KubeletNotReady"
        assert status.state == NodeHealthState.FAILED
        assert status.message == "container runtime is down"

    def test_parse_node_deleting(self, parser: NodeParser) -> None:
        """Test a deletion timestamp is carried over."""
        raw = _raw_node()
        raw["metadata"]["deletionTimestamp"] = "2024-03-02T10:00:00Z"

        node = parser.parse_node(raw)

        assert NodeHealthStatus.for_node(node).state == NodeHealthState.DELETING

    def test_parse_node_unknown_provider(self, parser: NodeParser) -> None:
        """Test nodes without a known providerID have no cloud provider."""
        node = parser.parse_node(_raw_node(spec={"providerID": "kind://docker/kind/kind-worker"}))
        assert node.spec.cloud.provider is None
        assert node.spec.cloud.tags == {}

    def test_parse_nodes_skips_invalid(self, parser: NodeParser) -> None:
        """Test parse_nodes drops nodes that fail validation."""
        broken = _raw_node(metadata={"name": "broken"})  # no creationTimestamp

        nodes = parser.parse_nodes([_raw_node(), broken])

        assert [n.id for n in nodes] == ["machine-abc123"]
