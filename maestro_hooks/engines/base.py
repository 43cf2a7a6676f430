"""Capability interfaces for the reordering and rich-text engines hooks drive."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from bs4 import Tag

from maestro_hooks.config import (
    DEFAULT_TOOLBAR,
    SORTABLE_ANIMATION_MS,
    SORTABLE_GHOST_CLASS,
    SORTABLE_HANDLE,
)


@dataclass
class DropEvent:
    """A completed drag: ``item`` moved from ``old_index`` to ``new_index``."""

    item: Tag
    old_index: int
    new_index: int


@dataclass
class SortableOptions:
    animation: int = SORTABLE_ANIMATION_MS
    ghost_class: str = SORTABLE_GHOST_CLASS
    handle: Optional[str] = SORTABLE_HANDLE
    on_end: Optional[Callable[[DropEvent], None]] = None


@dataclass
class EditorOptions:
    spell_checker: bool = False
    toolbar: List[str] = field(default_factory=lambda: list(DEFAULT_TOOLBAR))
    status: bool = False
    initial_value: str = ""


class SortableEngine(ABC):
    """Pointer-driven reordering of a container's direct children."""

    @abstractmethod
    def attach(self, node: Tag, options: SortableOptions) -> Any:
        """Enable reordering under ``node`` and return a handle."""


class RichTextEngine(ABC):
    """Rich-text editor bound to a form control.

    Handles returned by ``attach`` are opaque to callers; every other
    operation takes one.
    """

    @abstractmethod
    def attach(self, node: Tag, options: EditorOptions) -> Any: ...

    @abstractmethod
    def on_change(self, handle: Any, callback: Callable[[], None]) -> None:
        """Call ``callback`` after every content change, programmatic ones included."""

    @abstractmethod
    def get_value(self, handle: Any) -> str: ...

    @abstractmethod
    def set_value(self, handle: Any, value: str) -> None: ...
