"""In-process sortable engine that reorders children of a page element."""

from typing import Optional

from bs4 import Tag

from maestro_hooks.core.page import add_class, child_elements, closest, contains, remove_class
from maestro_hooks.engines.base import DropEvent, SortableEngine, SortableOptions


def _index_of(children: list, item: Tag) -> int:
    for i, child in enumerate(children):
        if child is item:
            return i
    raise ValueError("item is not a direct child of the sortable container")


class SortableHandle:
    """Drag state for one sortable container.

    A drag starts from a grip element inside a child, optionally constrained
    to ``options.handle``; the child carries ``options.ghost_class`` until it
    is dropped.
    """

    def __init__(self, node: Tag, options: SortableOptions) -> None:
        self.node = node
        self.options = options
        self._dragged: Optional[Tag] = None
        self._old_index = 0

    @property
    def dragging(self) -> bool:
        return self._dragged is not None

    def start(self, item: Tag, grip: Optional[Tag] = None) -> bool:
        """Begin dragging ``item``. Returns False if ``grip`` is not a handle."""
        if self._dragged is not None:
            raise RuntimeError("A drag is already in progress")
        old_index = _index_of(child_elements(self.node), item)
        grip = grip if grip is not None else item
        if self.options.handle:
            handle = closest(grip, self.options.handle)
            if handle is None or not contains(item, handle):
                return False

        self._dragged = item
        self._old_index = old_index
        add_class(item, self.options.ghost_class)
        return True

    def drop(self, new_index: int) -> DropEvent:
        """Move the dragged child to ``new_index`` and finish the drag."""
        if self._dragged is None:
            raise RuntimeError("No drag in progress")

        item = self._dragged
        siblings = [c for c in child_elements(self.node) if c is not item]
        new_index = max(0, min(new_index, len(siblings)))
        item.extract()
        if new_index == len(siblings):
            self.node.append(item)
        else:
            siblings[new_index].insert_before(item)

        remove_class(item, self.options.ghost_class)
        self._dragged = None

        event = DropEvent(item=item, old_index=self._old_index, new_index=new_index)
        if self.options.on_end is not None:
            self.options.on_end(event)
        return event

    def drag(self, item: Tag, new_index: int, grip: Optional[Tag] = None) -> Optional[DropEvent]:
        """Start and drop in one step; None if the drag never started."""
        if not self.start(item, grip):
            return None
        return self.drop(new_index)


class DomSortable(SortableEngine):
    def attach(self, node: Tag, options: SortableOptions) -> SortableHandle:
        return SortableHandle(node, options)
