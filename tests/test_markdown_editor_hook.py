"""Tests for MarkdownEditorHook: editor to input sync and clear-editor."""

from unittest.mock import MagicMock

from maestro_hooks.core.page import Page, get_value
from maestro_hooks.engines.buffer_editor import BufferEditor
from maestro_hooks.session import LiveSession

MARKUP = """
<form id="note-form">
  <textarea id="notes" name="note[body]" phx-hook="MarkdownEditorHook">draft text</textarea>
</form>
"""


class CountingEditor(BufferEditor):
    """BufferEditor that counts attach calls."""

    def __init__(self):
        self.attach_calls = 0

    def attach(self, node, options):
        self.attach_calls += 1
        return super().attach(node, options)


def _make_session(markup=MARKUP):
    engine = CountingEditor()
    session = LiveSession(Page(markup), transport=MagicMock(), editor_engine=engine)
    session.connect()
    textarea = session.page.get_element_by_id("notes")
    input_events = []
    session.page.add_event_listener(
        session.page.get_element_by_id("note-form"), "input", input_events.append
    )
    return session, session.hook_for(textarea), engine, input_events


def test_editor_seeded_with_input_value():
    session, hook, engine, _ = _make_session()
    assert engine.get_value(hook.editor) == "draft text"
    assert hook.editor.options.spell_checker is False
    assert hook.editor.options.status is False


def test_editor_seeded_with_empty_string_when_no_value():
    session, hook, engine, _ = _make_session(
        '<form id="note-form"><textarea id="notes" phx-hook="MarkdownEditorHook"></textarea></form>'
    )
    assert engine.get_value(hook.editor) == ""


def test_change_copies_content_and_fires_input():
    session, hook, engine, input_events = _make_session()
    engine.type_text(hook.editor, " more")

    assert get_value(hook.el) == "draft text more"
    assert len(input_events) == 1
    assert input_events[0].target is hook.el
    assert input_events[0].bubbles


def test_input_matches_engine_after_every_change():
    session, hook, engine, input_events = _make_session()
    for chunk in ["a", "b", "c"]:
        engine.type_text(hook.editor, chunk)
        assert get_value(hook.el) == engine.get_value(hook.editor)
    assert len(input_events) == 3


def test_clear_editor_empties_input_once():
    session, hook, engine, input_events = _make_session()
    reached = session.dispatch_command("clear-editor")

    assert reached == 1
    assert engine.get_value(hook.editor) == ""
    assert get_value(hook.el) == ""
    assert len(input_events) == 1


def test_clear_editor_keeps_same_editor():
    session, hook, engine, _ = _make_session()
    editor = hook.editor
    session.dispatch_command("clear-editor", el_id="notes")
    session.dispatch_command("clear-editor", el_id="notes")

    assert hook.editor is editor
    assert engine.attach_calls == 1
    engine.type_text(hook.editor, "again")
    assert get_value(hook.el) == "again"


def test_clear_editor_when_already_empty_still_notifies_once():
    session, hook, engine, input_events = _make_session()
    session.dispatch_command("clear-editor")
    session.dispatch_command("clear-editor")
    assert get_value(hook.el) == ""
    assert len(input_events) == 2
