"""Tests for the dashboard navigator state machine."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from kubetop.constants.enums import ListType, SortOrder, StatusRank, ViewType
from kubetop.models.core.resource_filter import ResourceFilter
from kubetop.screens.dashboard.components import (
    EventDetailsView,
    NodesView,
    PodDetailsView,
    PodsView,
)
from kubetop.screens.dashboard.config import SelectionListConfig
from kubetop.screens.dashboard.navigator import Navigator, default_sort_order
from kubetop.widgets.selection import SelectionOverlay


def _navigator(controller: MagicMock, view_type: ViewType, resource_filter: ResourceFilter | None = None) -> Navigator:
    overlay = SelectionOverlay(SelectionListConfig(), controller)
    return Navigator(controller, overlay, view_type, resource_filter)


class TestNavigatorInitialState:
    """Tests for the starting view."""

    def test_initial_view(self, controller: MagicMock) -> None:
        navigator = _navigator(controller, ViewType.PODS, ResourceFilter(namespace="default"))
        assert isinstance(navigator.view, PodsView)
        assert navigator.view.sort_by is SortOrder.NAMESPACE
        assert navigator.view.resource_filter.namespace == "default"
        assert navigator.list_shown is False

    def test_default_sort_orders(self) -> None:
        assert default_sort_order(ViewType.NODES) is SortOrder.NAME
        assert default_sort_order(ViewType.EVENTS) is SortOrder.TIMESTAMP_DESC


class TestNavigatorDrillDown:
    """Tests for Enter without the overlay."""

    @pytest.mark.asyncio
    async def test_node_to_pods_on_node(self, controller: MagicMock) -> None:
        navigator = _navigator(controller, ViewType.NODES)
        await navigator.view.update()
        navigator.move("next")

        assert navigator.confirm() is True
        assert isinstance(navigator.view, PodsView)
        assert navigator.view.resource_filter == ResourceFilter(node="node-b")
        assert navigator.view.sort_by is SortOrder.NAMESPACE

    @pytest.mark.asyncio
    async def test_pod_details_and_back_restore_parent(self, controller: MagicMock) -> None:
        parent_filter = ResourceFilter(namespace="default", status=StatusRank.RUNNING)
        navigator = _navigator(controller, ViewType.PODS, parent_filter)
        navigator.view.set_sort_and_filter(SortOrder.CPU_DESC, parent_filter)
        await navigator.view.update()

        assert navigator.confirm() is True
        assert isinstance(navigator.view, PodDetailsView)
        assert (navigator.view.pod_name, navigator.view.pod_namespace) == ("web-1", "default")

        assert navigator.back() is True
        assert isinstance(navigator.view, PodsView)
        assert navigator.view.resource_filter == parent_filter
        assert navigator.view.sort_by is SortOrder.CPU_DESC

    @pytest.mark.asyncio
    async def test_event_details(self, controller: MagicMock) -> None:
        navigator = _navigator(controller, ViewType.EVENTS)
        await navigator.view.update()

        assert navigator.confirm() is True
        assert isinstance(navigator.view, EventDetailsView)
        assert (navigator.view.event_name, navigator.view.event_namespace) == ("web-1.17a", "default")

        assert navigator.back() is True
        assert navigator.view_type is ViewType.EVENTS

    def test_empty_list_does_nothing(self, controller: MagicMock) -> None:
        navigator = _navigator(controller, ViewType.PODS)
        assert navigator.confirm() is False
        assert isinstance(navigator.view, PodsView)

    def test_back_on_list_view(self, controller: MagicMock) -> None:
        navigator = _navigator(controller, ViewType.NODES)
        view = navigator.view
        assert navigator.back() is False
        assert navigator.view is view


class TestNavigatorOverlay:
    """Tests for transitions through the selection overlay."""

    @pytest.mark.asyncio
    async def test_move_goes_to_overlay_when_shown(self, controller: MagicMock) -> None:
        navigator = _navigator(controller, ViewType.PODS)
        await navigator.view.update()
        assert await navigator.open_list(ListType.SORT) is True

        navigator.move("next")

        assert navigator.overlay.table.selected_row == 1
        assert navigator.view.table.selected_row == 0

    @pytest.mark.asyncio
    async def test_sort_selection_keeps_view(self, controller: MagicMock) -> None:
        navigator = _navigator(controller, ViewType.PODS)
        view = navigator.view
        await navigator.open_list(ListType.SORT)
        navigator.move("next")

        assert navigator.confirm() is True
        assert navigator.view is view
        assert view.sort_by is SortOrder.CPU_DESC
        assert navigator.list_shown is False

    @pytest.mark.asyncio
    async def test_unchanged_selection_reports_no_change(self, controller: MagicMock) -> None:
        navigator = _navigator(controller, ViewType.PODS)
        await navigator.open_list(ListType.NAMESPACE)
        assert navigator.confirm() is False

    @pytest.mark.asyncio
    async def test_view_switch_builds_fresh_view(self, controller: MagicMock) -> None:
        navigator = _navigator(controller, ViewType.PODS, ResourceFilter(namespace="default"))
        navigator.toggle_pause()
        await navigator.open_list(ListType.VIEW)
        navigator.move("next")

        assert navigator.confirm() is True
        assert isinstance(navigator.view, NodesView)
        assert navigator.view.paused is False
        assert navigator.view.resource_filter == ResourceFilter()

    @pytest.mark.asyncio
    async def test_list_not_offered(self, controller: MagicMock) -> None:
        navigator = _navigator(controller, ViewType.NODES)
        assert await navigator.open_list(ListType.NAMESPACE) is False
        assert navigator.list_shown is False

    @pytest.mark.asyncio
    async def test_escape_closes_overlay_only(self, controller: MagicMock) -> None:
        navigator = _navigator(controller, ViewType.EVENTS)
        await navigator.view.update()
        navigator.confirm()
        await navigator.open_list(ListType.VIEW)

        assert navigator.back() is False
        assert navigator.list_shown is False
        assert navigator.view_type is ViewType.EVENT_DETAILS


class TestNavigatorTabs:
    """Tests for container switching."""

    @pytest.mark.asyncio
    async def test_tab_only_on_pod_details(self, controller: MagicMock) -> None:
        navigator = _navigator(controller, ViewType.PODS)
        await navigator.view.update()
        assert navigator.tab_next() is False

        navigator.confirm()
        await navigator.view.update()
        assert navigator.tab_next() is True
        assert navigator.view.selected_container == 1
        assert navigator.tab_prev() is True
        assert navigator.view.selected_container == 0

    @pytest.mark.asyncio
    async def test_tab_ignored_with_overlay(self, controller: MagicMock) -> None:
        navigator = _navigator(controller, ViewType.PODS)
        await navigator.view.update()
        navigator.confirm()
        await navigator.open_list(ListType.VIEW)
        assert navigator.tab_next() is False
