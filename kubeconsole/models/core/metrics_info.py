"""Node metrics models."""

from pydantic import BaseModel


class NodeMetrics(BaseModel):
    """Live resource usage of a node, keyed by node name."""

    name: str
    cpu_total_millicores: float = 0.0
    memory_total_bytes: float = 0.0
    cpu_percent: float | None = None
    memory_percent: float | None = None
