"""Pod, container and pod detail models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from kubetop.constants.enums import StatusRank


class PodInfo(BaseModel):
    """Aggregated row for one pod.

    Usage values are summed over the containers found in the metrics
    snapshot; limits are summed over the containers in the pod spec.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str
    name: str
    node_name: str = ""
    cpu: int = 0
    memory: int = 0
    cpu_limit: int = 0
    cpu_limit_container_count: int = 0
    memory_limit: int = 0
    memory_limit_container_count: int = 0
    container_count: int = 0
    ready_count: int = 0
    status: str = "Running"
    status_rank: StatusRank = StatusRank.RUNNING
    restarts: int = 0
    created_at: datetime | None = None
    ip: str = ""


class ContainerInfo(BaseModel):
    """Per-container usage, requests and limits for the pod details view."""

    model_config = ConfigDict(frozen=True)

    name: str
    restarts: int = 0
    status: str = "-"
    cpu: int = 0
    memory: int = 0
    cpu_request: int = 0
    memory_request: int = 0
    cpu_limit: int = 0
    memory_limit: int = 0


class OwnerReference(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    name: str

    def __str__(self) -> str:
        return f"{self.kind}/{self.name}"


class PodEventInfo(BaseModel):
    """An event scoped to a single pod."""

    model_config = ConfigDict(frozen=True)

    message: str = ""
    timestamp: datetime | None = None


class PodDetail(BaseModel):
    """Full record for one pod, rebuilt on every refresh of the details view."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str
    node_name: str = ""
    status: str = "Running"
    ip: str = ""
    created_at: datetime | None = None
    owners: list[OwnerReference] = Field(default_factory=list)
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)
    events: list[PodEventInfo] = Field(default_factory=list)
    containers: list[ContainerInfo] = Field(default_factory=list)
    log_lines: list[str] = Field(default_factory=list)
    selected_container: int = 0

    @property
    def sorted_labels(self) -> list[str]:
        return [f"{key}={self.labels[key]}" for key in sorted(self.labels)]

    @property
    def sorted_annotations(self) -> list[str]:
        return [f"{key}={self.annotations[key]}" for key in sorted(self.annotations)]
