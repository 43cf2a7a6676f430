"""Tests for SortableHook reorder events."""

from unittest.mock import MagicMock

import pytest

from maestro_hooks.core.page import Page, child_elements, dataset
from maestro_hooks.hooks.sortable_hook import DragItem, SortableHook, collect_drag_items
from maestro_hooks.session import LiveSession


def _markup(n, project="proj-1"):
    items = "".join(
        f'<li id="item-{i}" data-path="p{i}"><span class="drag-handle">::</span>'
        f'<span class="title">Item {i}</span></li>'
        for i in range(n)
    )
    return (
        f'<ul id="startup" phx-hook="SortableHook" data-project="{project}">'
        f"{items}</ul>"
    )


def _make_session(n=3):
    transport = MagicMock()
    session = LiveSession(Page(_markup(n)), transport=transport)
    session.connect()
    ul = session.page.get_element_by_id("startup")
    return session, session.hook_for(ul), transport


def _drag(hook, from_index, to_index):
    item = child_elements(hook.el)[from_index]
    return hook.sortable.drag(item, to_index, grip=item.select_one(".drag-handle"))


def test_mount_attaches_engine_with_configured_options():
    session, hook, _ = _make_session()
    assert isinstance(hook, SortableHook)
    assert hook.sortable.options.handle == ".drag-handle"
    assert hook.sortable.options.ghost_class == "opacity-50"
    assert hook.sortable.options.animation == 150


def test_drop_pushes_reorder_event():
    session, hook, transport = _make_session()
    _drag(hook, 0, 2)

    transport.assert_called_once()
    event, payload, el_id = transport.call_args.args
    assert event == "reorder_startup"
    assert el_id == "startup"
    assert payload == {
        "items": [
            {"path": "p1", "index": 0},
            {"path": "p2", "index": 1},
            {"path": "p0", "index": 2},
        ],
        "project": "proj-1",
    }


@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_items_are_index_permutation_in_dom_order(n):
    for from_index in range(n):
        for to_index in range(n):
            session, hook, transport = _make_session(n)
            expected = [f"p{i}" for i in range(n)]
            expected.insert(to_index, expected.pop(from_index))

            _drag(hook, from_index, to_index)

            payload = transport.call_args.args[1]
            assert [item["index"] for item in payload["items"]] == list(range(n))
            assert [item["path"] for item in payload["items"]] == expected
            assert [dataset(li, "path") for li in child_elements(hook.el)] == expected


def test_project_read_at_emission_time():
    session, hook, transport = _make_session()
    hook.el["data-project"] = "proj-2"
    _drag(hook, 1, 0)
    assert transport.call_args.args[1]["project"] == "proj-2"


def test_drag_from_outside_handle_emits_nothing():
    session, hook, transport = _make_session()
    item = child_elements(hook.el)[0]
    assert hook.sortable.drag(item, 2, grip=item.select_one(".title")) is None
    transport.assert_not_called()


def test_every_drop_emits():
    session, hook, transport = _make_session()
    _drag(hook, 0, 1)
    _drag(hook, 2, 0)
    assert transport.call_count == 2


def test_collect_drag_items_empty_container():
    page = Page(_markup(0))
    assert collect_drag_items(page.get_element_by_id("startup")) == []


def test_drag_item_to_dict():
    assert DragItem("a/b", 3).to_dict() == {"path": "a/b", "index": 3}
