"""Page model, repository status client and page indicators."""

from maestro_hooks.core.git_info import (
    BranchStatus,
    GitInfoClient,
    GitInfoError,
    RepoStatus,
    build_git_info_url,
)
from maestro_hooks.core.page import Event, OutsideClickRouter, Page
from maestro_hooks.core.progress import ProgressBar

__all__ = [
    "BranchStatus",
    "GitInfoClient",
    "GitInfoError",
    "RepoStatus",
    "build_git_info_url",
    "Event",
    "OutsideClickRouter",
    "Page",
    "ProgressBar",
]
