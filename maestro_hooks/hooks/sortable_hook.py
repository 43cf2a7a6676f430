"""Drag-based reordering of a container's children."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from bs4 import Tag

from maestro_hooks.core.page import child_elements, dataset
from maestro_hooks.engines.base import DropEvent, SortableOptions
from maestro_hooks.hooks.base_hook import Hook


@dataclass
class DragItem:
    """Position of one reorderable child after a drop."""

    path: Optional[str]
    index: int

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "index": self.index}


def collect_drag_items(container: Tag) -> List[DragItem]:
    """Read ``data-path`` of every direct child, in current DOM order."""
    return [
        DragItem(path=dataset(child, "path"), index=index)
        for index, child in enumerate(child_elements(container))
    ]


class SortableHook(Hook):
    """Reorder children by their drag handle and report the new order.

    After each drop, pushes ``reorder_startup`` with the full ordering and
    the container's ``data-project`` as it reads at that moment.
    """

    EVENT = "reorder_startup"

    def mounted(self) -> None:
        config = self.session.config
        self.sortable = self.session.sortable_engine.attach(
            self.el,
            SortableOptions(
                animation=config.sortable_animation_ms,
                ghost_class=config.sortable_ghost_class,
                handle=config.sortable_handle,
                on_end=self._on_end,
            ),
        )

    def _on_end(self, event: DropEvent) -> None:
        items = collect_drag_items(self.el)
        self.push_event(
            self.EVENT,
            {"items": [item.to_dict() for item in items], "project": dataset(self.el, "project")},
        )
