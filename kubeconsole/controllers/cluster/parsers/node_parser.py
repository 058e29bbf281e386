"""Node parser for cluster controller - parses kubectl node objects into Node models."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from kubeconsole.constants.values import MACHINE_ANNOTATION
from kubeconsole.models.core.node_info import Node

logger = logging.getLogger(__name__)


class NodeParser:
    """Parses node data into structured formats."""

    _PROVIDER_ID_PREFIXES = (
        ("aws://", "aws"),
        ("azure://", "azure"),
        ("gce://", "gcp"),
        ("openstack://", "openstack"),
        ("vsphere://", "vsphere"),
        ("hcloud://", "hetzner"),
        ("digitalocean://", "digitalocean"),
    )
    _OS_IMAGE_MARKERS = (
        ("ubuntu", "ubuntu"),
        ("flatcar", "flatcar"),
        ("centos", "centos"),
        ("red hat", "rhel"),
        ("suse", "sles"),
        ("amazon linux", "amzn2"),
        ("rocky", "rockylinux"),
    )
    _ZONE_LABELS = (
        "topology.kubernetes.io/zone",
        "failure-domain.beta.kubernetes.io/zone",
    )
    _INSTANCE_TYPE_LABELS = (
        "node.kubernetes.io/instance-type",
        "beta.kubernetes.io/instance-type",
    )

    def _get_label_value(
        self, labels: dict[str, str], label_tuples: tuple[str, ...], default: str = ""
    ) -> str:
        """Extract label value from labels dict using ordered label tuples."""
        for label in label_tuples:
            value = labels.get(label)
            if value:
                return value
        return default

    def machine_ref(self, node: dict) -> tuple[str, str] | None:
        """Return ``(namespace, machine)`` for machine-controller backed nodes."""
        annotations = node.get("metadata", {}).get("annotations") or {}
        value = annotations.get(MACHINE_ANNOTATION, "")
        if not value:
            return None
        namespace, _, machine = value.rpartition("/")
        return (namespace or "kube-system", machine)

    def _cloud_spec(self, spec: dict, labels: dict[str, str]) -> dict[str, Any]:
        provider_id = spec.get("providerID", "")
        for prefix, provider in self._PROVIDER_ID_PREFIXES:
            if provider_id.startswith(prefix):
                details: dict[str, Any] = {}
                instance_type = self._get_label_value(labels, self._INSTANCE_TYPE_LABELS)
                zone = self._get_label_value(labels, self._ZONE_LABELS)
                if instance_type:
                    details["instanceType"] = instance_type
                if zone:
                    details["availabilityZone"] = zone
                return {provider: details}
        return {}

    def _operating_system(self, os_image: str) -> dict[str, Any]:
        lowered = os_image.lower()
        for marker, name in self._OS_IMAGE_MARKERS:
            if marker in lowered:
                return {name: {}}
        return {}

    @staticmethod
    def _error_from_conditions(conditions: list[dict]) -> tuple[str, str]:
        for condition in conditions:
            if condition.get("type") == "Ready" and condition.get("status") == "False":
                return condition.get("reason", "NotReady"), condition.get("message", "")
        return "", ""

    def parse_node(self, node: dict) -> Node:
        """Parse a single kubectl node object into a Node.

        Raises:
            ValidationError: If required fields are missing or malformed.
        """
        metadata = node.get("metadata", {})
        status = node.get("status", {})
        spec = node.get("spec", {})
        labels = metadata.get("labels") or {}

        name = metadata.get("name", "")
        machine = self.machine_ref(node)
        node_info = status.get("nodeInfo", {})
        error_reason, error_message = self._error_from_conditions(status.get("conditions", []))

        return Node.model_validate(
            {
                "id": machine[1] if machine else name,
                "name": name,
                "creationTimestamp": metadata.get("creationTimestamp"),
                "deletionTimestamp": metadata.get("deletionTimestamp"),
                "spec": {
                    "cloud": self._cloud_spec(spec, labels),
                    "versions": {"kubelet": node_info.get("kubeletVersion", "")},
                    "operatingSystem": self._operating_system(node_info.get("osImage", "")),
                },
                "status": {
                    "addresses": status.get("addresses", []),
                    "capacity": status.get("capacity", {}),
                    "allocatable": status.get("allocatable", {}),
                    "nodeInfo": node_info,
                    "errorReason": error_reason,
                    "errorMessage": error_message,
                },
            }
        )

    def parse_nodes(self, nodes: list[dict]) -> list[Node]:
        """Parse node objects, skipping the ones that fail validation."""
        parsed: list[Node] = []
        for raw in nodes:
            try:
                parsed.append(self.parse_node(raw))
            except ValidationError as e:
                name = raw.get("metadata", {}).get("name", "<unknown>")
                logger.warning("Skipping node %r: %d validation errors", name, e.error_count())
        return parsed
