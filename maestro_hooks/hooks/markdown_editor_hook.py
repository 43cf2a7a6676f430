"""Bridge between a rich-text engine and a plain form control."""

from typing import Any, Dict

from maestro_hooks.core.page import Event, get_value, set_value
from maestro_hooks.engines.base import EditorOptions
from maestro_hooks.hooks.base_hook import Hook


class MarkdownEditorHook(Hook):
    """Mirror editor content into the bound input.

    Every engine change is copied into the input's value and announced with
    a bubbling ``input`` event, so form-change handling sees it as typing.
    The ``clear-editor`` command empties the editor in place.
    """

    CLEAR_COMMAND = "clear-editor"

    def mounted(self) -> None:
        self.engine = self.session.editor_engine
        self.editor = self.engine.attach(
            self.el,
            EditorOptions(
                spell_checker=False,
                toolbar=list(self.session.config.editor_toolbar),
                status=False,
                initial_value=get_value(self.el) or "",
            ),
        )
        self.engine.on_change(self.editor, self._sync_input)
        self.handle_event(self.CLEAR_COMMAND, self._clear)

    def _sync_input(self) -> None:
        set_value(self.el, self.engine.get_value(self.editor))
        self.page.dispatch_event(self.el, Event("input", bubbles=True))

    def _clear(self, payload: Dict[str, Any]) -> None:
        # keep the attached editor (toolbar, history); only the content resets
        self.engine.set_value(self.editor, "")
