"""
Maestro Hooks — client-side interactive behavior for server-driven pages.
"""

__version__ = "0.1.0"

from maestro_hooks.config import SessionConfig
from maestro_hooks.core.git_info import BranchStatus, GitInfoClient, GitInfoError, RepoStatus
from maestro_hooks.core.page import Event, Page
from maestro_hooks.core.progress import ProgressBar
from maestro_hooks.hooks import (
    HOOKS,
    DragItem,
    GitDropdownHook,
    Hook,
    MarkdownEditorHook,
    PanelPhase,
    PanelState,
    ShiftClickHook,
    SortableHook,
)
from maestro_hooks.session import LiveSession, UnknownHookError


def connect(markup: str, transport, **kwargs):  # type: ignore[no-untyped-def]
    """Convenience function to build a page from markup and connect a session to it."""
    session = LiveSession(Page(markup), transport=transport, **kwargs)
    session.connect()
    return session


__all__ = [
    "SessionConfig",
    "BranchStatus",
    "GitInfoClient",
    "GitInfoError",
    "RepoStatus",
    "Event",
    "Page",
    "ProgressBar",
    "HOOKS",
    "DragItem",
    "GitDropdownHook",
    "Hook",
    "MarkdownEditorHook",
    "PanelPhase",
    "PanelState",
    "ShiftClickHook",
    "SortableHook",
    "LiveSession",
    "UnknownHookError",
    "connect",
    "__version__",
]
