"""Events view - cluster events, newest first by default."""

from __future__ import annotations

from kubetop.constants.enums import ViewType
from kubetop.screens.dashboard.components.base_view import DrillTarget, TableView
from kubetop.screens.dashboard.config import (
    EVENT_COLUMNS,
    EVENT_NAME_COLUMN,
    EVENT_NAMESPACE_COLUMN,
)
from kubetop.utils.formatting import format_age


class EventsView(TableView):
    view_type = ViewType.EVENTS
    COLUMNS = EVENT_COLUMNS
    UNIQUE_COLUMN = 0

    async def fetch_rows(self) -> list[list[str]]:
        events = await self.controller.fetch_events(self.resource_filter, self.sort_by)
        now = self.now()
        return [
            [
                event.uid,
                format_age(event.last_seen, now),
                str(event.count),
                event.type,
                event.namespace,
                event.involved_name,
                event.message.replace("\n", " "),
                event.involved_kind,
                event.reason,
                event.source,
                event.node,
                event.name,
            ]
            for event in events
        ]

    def selected_event(self) -> tuple[str, str] | None:
        """Return (event name, namespace) of the event under the cursor."""
        values = self.selected_values()
        if not values:
            return None
        return values[EVENT_NAME_COLUMN], values[EVENT_NAMESPACE_COLUMN]

    def drill_target(self) -> DrillTarget | None:
        event = self.selected_event()
        if event is None:
            return None
        name, namespace = event
        return DrillTarget(ViewType.EVENT_DETAILS, name=name, namespace=namespace)
