"""Shift+click gesture that toggles fullscreen."""

from maestro_hooks.core.page import Event, closest
from maestro_hooks.hooks.base_hook import Hook


class ShiftClickHook(Hook):
    """Push ``toggle_fullscreen`` on shift+click outside of links.

    Plain clicks and clicks on or inside an ``<a>`` are left alone.
    """

    EVENT = "toggle_fullscreen"

    def mounted(self) -> None:
        self.page.add_event_listener(self.el, "click", self._on_click)

    def destroyed(self) -> None:
        self.page.remove_event_listener(self.el, "click", self._on_click)

    def _on_click(self, event: Event) -> None:
        if event.shift_key and closest(event.target, "a") is None:
            event.prevent_default()
            self.push_event(self.EVENT, {})
