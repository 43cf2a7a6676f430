"""Reordering and rich-text engines."""

from maestro_hooks.engines.base import (
    DropEvent,
    EditorOptions,
    RichTextEngine,
    SortableEngine,
    SortableOptions,
)
from maestro_hooks.engines.buffer_editor import BufferEditor
from maestro_hooks.engines.sortable import DomSortable

__all__ = [
    "DropEvent",
    "EditorOptions",
    "RichTextEngine",
    "SortableEngine",
    "SortableOptions",
    "BufferEditor",
    "DomSortable",
]
