"""Cluster event model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class EventInfo(BaseModel):
    """One Kubernetes event as listed in the events view.

    ``name`` is the event object's own name, used to look it up again;
    ``involved_name`` is the name of the object the event is about.
    """

    model_config = ConfigDict(frozen=True)

    uid: str
    namespace: str = ""
    name: str = ""
    involved_kind: str = ""
    involved_name: str = ""
    type: str = ""
    reason: str = ""
    source: str = ""
    node: str = ""
    message: str = ""
    first_seen: datetime | None = None
    last_seen: datetime | None = None
    count: int = 0
