"""Session and hook defaults."""

from dataclasses import dataclass, field
from typing import Dict, List

GIT_INFO_ENDPOINT = "/api/git/info"

LIVE_PATH = "/live"
LONG_POLL_FALLBACK_MS = 2500

SORTABLE_ANIMATION_MS = 150
SORTABLE_GHOST_CLASS = "opacity-50"
SORTABLE_HANDLE = ".drag-handle"

# "|" entries are toolbar separators
DEFAULT_TOOLBAR: List[str] = [
    "bold",
    "italic",
    "heading",
    "|",
    "quote",
    "unordered-list",
    "ordered-list",
    "|",
    "link",
    "image",
    "|",
    "preview",
    "side-by-side",
    "fullscreen",
]

PROGRESS_BAR_COLORS: Dict[float, str] = {0: "#29d"}
PROGRESS_SHADOW_COLOR = "rgba(0, 0, 0, .3)"
PROGRESS_SHOW_DELAY_MS = 300


@dataclass
class SessionConfig:
    """Settings shared by a session and every hook it mounts.

    Attributes
    ----------
    base_url : str
        Prefix for HTTP requests issued by hooks ("" keeps them relative).
    git_info_endpoint : str
        Path of the repository status endpoint.
    live_path : str
        Path of the long-lived session endpoint.
    long_poll_fallback_ms : int
        Delay before the session falls back to long polling.
    sortable_animation_ms : int
        Reorder animation duration handed to the sortable engine.
    sortable_ghost_class : str
        Class applied to a child while it is being dragged.
    sortable_handle : str
        Selector of the drag handle inside each reorderable child.
    editor_toolbar : List[str]
        Toolbar buttons handed to the rich-text engine.
    progress_bar_colors : Dict[float, str]
        Gradient stops for the page-loading progress bar.
    progress_shadow_color : str
        Shadow color for the page-loading progress bar.
    progress_show_delay_ms : int
        Delay before the progress bar appears on page-loading-start.
    """

    base_url: str = ""
    git_info_endpoint: str = GIT_INFO_ENDPOINT
    live_path: str = LIVE_PATH
    long_poll_fallback_ms: int = LONG_POLL_FALLBACK_MS
    sortable_animation_ms: int = SORTABLE_ANIMATION_MS
    sortable_ghost_class: str = SORTABLE_GHOST_CLASS
    sortable_handle: str = SORTABLE_HANDLE
    editor_toolbar: List[str] = field(default_factory=lambda: list(DEFAULT_TOOLBAR))
    progress_bar_colors: Dict[float, str] = field(
        default_factory=lambda: dict(PROGRESS_BAR_COLORS)
    )
    progress_shadow_color: str = PROGRESS_SHADOW_COLOR
    progress_show_delay_ms: int = PROGRESS_SHOW_DELAY_MS
