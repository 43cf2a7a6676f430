"""In-memory rich-text engine keeping the editor buffer as a plain string."""

from typing import Callable, List

from bs4 import Tag

from maestro_hooks.engines.base import EditorOptions, RichTextEngine


class EditorHandle:
    def __init__(self, node: Tag, options: EditorOptions) -> None:
        self.node = node
        self.options = options
        self.value = options.initial_value
        self.listeners: List[Callable[[], None]] = []

    def notify(self) -> None:
        for listener in list(self.listeners):
            listener()


class BufferEditor(RichTextEngine):
    """Editor engine whose content is a single markdown string.

    Like a code editor widget, it reports programmatic ``set_value`` calls
    as changes too.
    """

    def attach(self, node: Tag, options: EditorOptions) -> EditorHandle:
        return EditorHandle(node, options)

    def on_change(self, handle: EditorHandle, callback: Callable[[], None]) -> None:
        handle.listeners.append(callback)

    def get_value(self, handle: EditorHandle) -> str:
        return handle.value

    def set_value(self, handle: EditorHandle, value: str) -> None:
        handle.value = value
        handle.notify()

    def type_text(self, handle: EditorHandle, text: str) -> None:
        """Append ``text`` as if typed into the editor."""
        handle.value += text
        handle.notify()
