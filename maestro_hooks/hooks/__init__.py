"""Hooks attached to page elements through their ``phx-hook`` attribute."""

from maestro_hooks.hooks.base_hook import Hook
from maestro_hooks.hooks.git_dropdown_hook import GitDropdownHook, PanelPhase, PanelState
from maestro_hooks.hooks.markdown_editor_hook import MarkdownEditorHook
from maestro_hooks.hooks.shift_click_hook import ShiftClickHook
from maestro_hooks.hooks.sortable_hook import DragItem, SortableHook

HOOKS = {
    "SortableHook": SortableHook,
    "MarkdownEditorHook": MarkdownEditorHook,
    "GitDropdownHook": GitDropdownHook,
    "ShiftClickHook": ShiftClickHook,
}

__all__ = [
    "Hook",
    "HOOKS",
    "SortableHook",
    "DragItem",
    "MarkdownEditorHook",
    "GitDropdownHook",
    "PanelPhase",
    "PanelState",
    "ShiftClickHook",
]
