"""Base hook class."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Dict, List

from bs4 import Tag

if TYPE_CHECKING:
    from maestro_hooks.session import LiveSession

CommandHandler = Callable[[Dict[str, Any]], None]


class Hook(ABC):
    """Client-local behavior attached to one page element.

    The session instantiates a hook when its element is mounted, calls
    ``mounted()``, and calls ``destroyed()`` when the element leaves the page.
    Subclasses talk to the server only through ``push_event`` (outbound) and
    ``handle_event`` (inbound commands).
    """

    def __init__(self, el: Tag, session: "LiveSession") -> None:
        self.el = el
        self.session = session
        self.page = session.page
        self._command_handlers: Dict[str, List[CommandHandler]] = {}

    @abstractmethod
    def mounted(self) -> None: ...

    def destroyed(self) -> None:
        """Release anything registered outside ``self.el``."""

    def push_event(self, event: str, payload: Dict[str, Any]) -> None:
        self.session.push_event(self.el, event, payload)

    def handle_event(self, command: str, callback: CommandHandler) -> None:
        self._command_handlers.setdefault(command, []).append(callback)

    def handles(self, command: str) -> bool:
        return bool(self._command_handlers.get(command))

    def receive(self, command: str, payload: Dict[str, Any]) -> None:
        for callback in list(self._command_handlers.get(command, [])):
            callback(payload)
