"""Tests for the page model: event dispatch, ancestry and element helpers."""

from maestro_hooks.core.page import (
    Event,
    Page,
    add_class,
    child_elements,
    class_list,
    closest,
    contains,
    dataset,
    get_style,
    get_value,
    has_class,
    remove_class,
    set_inner_html,
    set_style,
    set_value,
)

MARKUP = """
<html><body>
<div id="root" data-project-path="/repo/a">
  <a id="link" href="/x"><span id="inside-link">go</span></a>
  <button id="btn">Click</button>
  <input id="name" value="ada">
  <textarea id="notes">hello</textarea>
</div>
<div id="other"></div>
</body></html>
"""


def _page():
    return Page(MARKUP)


def test_click_bubbles_to_ancestors_and_document():
    page = _page()
    seen = []
    page.add_event_listener(page.get_element_by_id("btn"), "click", lambda e: seen.append("btn"))
    page.add_event_listener(page.get_element_by_id("root"), "click", lambda e: seen.append("root"))
    page.add_event_listener(page.document, "click", lambda e: seen.append("document"))

    page.click(page.get_element_by_id("btn"))
    assert seen == ["btn", "root", "document"]


def test_event_target_and_current_target():
    page = _page()
    btn = page.get_element_by_id("btn")
    root = page.get_element_by_id("root")
    captured = []
    page.add_event_listener(root, "click", lambda e: captured.append((e.target, e.current_target)))

    page.click(btn)
    target, current = captured[0]
    assert target is btn
    assert current is root


def test_non_bubbling_event_stays_on_target():
    page = _page()
    seen = []
    page.add_event_listener(page.get_element_by_id("root"), "input", seen.append)
    page.dispatch_event(page.get_element_by_id("name"), Event("input", bubbles=False))
    assert seen == []


def test_stop_propagation():
    page = _page()
    seen = []
    page.add_event_listener(page.get_element_by_id("btn"), "click", lambda e: e.stop_propagation())
    page.add_event_listener(page.document, "click", seen.append)
    page.click(page.get_element_by_id("btn"))
    assert seen == []


def test_prevent_default_reported():
    page = _page()
    page.add_event_listener(page.get_element_by_id("link"), "click", lambda e: e.prevent_default())
    event = Event("click")
    assert page.dispatch_event(page.get_element_by_id("link"), event) is False
    assert event.default_prevented


def test_remove_event_listener():
    page = _page()
    seen = []
    btn = page.get_element_by_id("btn")
    page.add_event_listener(btn, "click", seen.append)
    page.remove_event_listener(btn, "click", seen.append)
    page.click(btn)
    assert seen == []
    assert page.listener_count(btn, "click") == 0


def test_removing_last_listener_forgets_node():
    page = _page()
    btn = page.get_element_by_id("btn")
    page.add_event_listener(btn, "click", print)
    page.add_event_listener(btn, "input", print)

    page.remove_event_listener(btn, "click", print)
    assert id(btn) in page._listeners
    page.remove_event_listener(btn, "input", print)
    assert id(btn) not in page._listeners

    page.remove_event_listener(btn, "input", print)
    page.add_event_listener(btn, "click", print)
    assert page.listener_count(btn, "click") == 1


def test_contains_and_closest():
    page = _page()
    root = page.get_element_by_id("root")
    span = page.get_element_by_id("inside-link")
    assert contains(root, root)
    assert contains(root, span)
    assert not contains(root, page.get_element_by_id("other"))
    assert not contains(root, None)
    assert closest(span, "a") is page.get_element_by_id("link")
    assert closest(page.get_element_by_id("btn"), "a") is None


def test_dataset_reads_data_attributes():
    page = _page()
    root = page.get_element_by_id("root")
    assert dataset(root, "project-path") == "/repo/a"
    assert dataset(root, "missing") is None


def test_values_of_input_and_textarea():
    page = _page()
    name = page.get_element_by_id("name")
    notes = page.get_element_by_id("notes")
    assert get_value(name) == "ada"
    assert get_value(notes) == "hello"

    set_value(name, "grace")
    set_value(notes, "")
    assert get_value(name) == "grace"
    assert get_value(notes) == ""


def test_class_helpers():
    page = _page()
    btn = page.get_element_by_id("btn")
    add_class(btn, "opacity-50")
    add_class(btn, "opacity-50")
    assert class_list(btn) == ["opacity-50"]
    assert has_class(btn, "opacity-50")
    remove_class(btn, "opacity-50")
    assert not has_class(btn, "opacity-50")
    assert "class" not in btn.attrs


def test_style_helpers_preserve_other_declarations():
    page = Page('<ul id="menu" style="display:none; color: red"></ul>')
    menu = page.get_element_by_id("menu")
    assert get_style(menu, "display") == "none"
    set_style(menu, "display", "block")
    assert get_style(menu, "display") == "block"
    assert get_style(menu, "color") == "red"


def test_set_inner_html_replaces_children():
    page = Page('<ul id="list"><li>old</li></ul>')
    ul = page.get_element_by_id("list")
    set_inner_html(ul, "<li>a</li><li>b</li>")
    assert [li.get_text() for li in child_elements(ul)] == ["a", "b"]


def test_child_elements_skips_text_nodes():
    page = Page("<ul id='l'>\n  <li>1</li>\n  <li>2</li>\n</ul>")
    assert len(child_elements(page.get_element_by_id("l"))) == 2


def test_outside_click_router_is_one_document_listener():
    page = _page()
    router = page.outside_clicks
    assert page.outside_clicks is router
    assert page.listener_count(page.document, "click") == 1

    outside = []
    root = page.get_element_by_id("root")
    router.subscribe(root, outside.append)
    router.subscribe(page.get_element_by_id("other"), lambda e: None)
    assert page.listener_count(page.document, "click") == 1

    page.click(page.get_element_by_id("btn"))
    assert outside == []
    page.click(page.get_element_by_id("other"))
    assert len(outside) == 1

    router.unsubscribe(root)
    page.click(page.get_element_by_id("other"))
    assert len(outside) == 1
    assert len(router) == 1


def test_repr_html():
    page = Page("<p>hi</p>")
    assert page._repr_html_() == "<p>hi</p>"
