"""Event parser for cluster controller - parses event data into EventInfo."""

from __future__ import annotations

from typing import Any

from kubetop.controllers.cluster.parsers.common import parse_timestamp
from kubetop.models.core.event_info import EventInfo


class EventParser:
    """Parses core/v1 events into structured formats."""

    @staticmethod
    def _source(event: dict[str, Any]) -> str:
        source = event.get("source") or {}
        return source.get("component") or event.get("reportingComponent") or ""

    @staticmethod
    def _count(event: dict[str, Any]) -> int:
        raw_value = event.get("count") or (event.get("series") or {}).get("count") or 1
        try:
            return max(1, int(raw_value))
        except (TypeError, ValueError):
            return 1

    def parse_event(self, event: dict[str, Any]) -> EventInfo:
        metadata = event.get("metadata") or {}
        involved = event.get("involvedObject") or {}
        first_seen = parse_timestamp(
            event.get("firstTimestamp") or event.get("eventTime") or metadata.get("creationTimestamp")
        )
        last_seen = parse_timestamp(
            event.get("lastTimestamp")
            or (event.get("series") or {}).get("lastObservedTime")
            or event.get("eventTime")
            or metadata.get("creationTimestamp")
        )
        return EventInfo(
            uid=metadata.get("uid", ""),
            namespace=metadata.get("namespace", "") or involved.get("namespace", ""),
            name=metadata.get("name", ""),
            involved_kind=involved.get("kind", ""),
            involved_name=involved.get("name", ""),
            type=event.get("type", ""),
            reason=event.get("reason", ""),
            source=self._source(event),
            node=(event.get("source") or {}).get("host", ""),
            message=(event.get("message") or "").strip(),
            first_seen=first_seen,
            last_seen=last_seen or first_seen,
            count=self._count(event),
        )
