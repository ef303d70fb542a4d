"""Node row model."""

from pydantic import BaseModel, ConfigDict


class NodeInfo(BaseModel):
    """Usage snapshot for one node, joined from metrics and the node spec."""

    model_config = ConfigDict(frozen=True)

    name: str
    pod_count: int = 0
    memory_used: int = 0  # bytes
    memory_total: int = 0  # bytes, allocatable
    cpu_used: int = 0  # millicores
    cpu_total: int = 0  # millicores, allocatable
    external_ip: str = ""
    internal_ip: str = ""

    @property
    def cpu_usage_pct(self) -> float | None:
        if self.cpu_total <= 0:
            return None
        return self.cpu_used * 100.0 / self.cpu_total

    @property
    def memory_usage_pct(self) -> float | None:
        if self.memory_total <= 0:
            return None
        return self.memory_used * 100.0 / self.memory_total
