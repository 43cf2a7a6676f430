"""
Git status dropdown.

The dropdown fetches repository status on the first click of its trigger,
renders it once, and afterwards only toggles visibility. Clicks anywhere
outside the dropdown close it.
"""

import html
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from loguru import logger

from maestro_hooks.core.git_info import BranchStatus, GitInfoError, RepoStatus
from maestro_hooks.core.page import Event, dataset, set_inner_html, set_style, set_text
from maestro_hooks.hooks.base_hook import Hook
from maestro_hooks.styles.badges import (
    AHEAD,
    BADGE_CLASSES,
    BADGE_PREFIXES,
    BEHIND,
    OTHER_BRANCHES_TITLE,
)


class PanelPhase(Enum):
    """Load progress of a dropdown."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"


@dataclass(frozen=True)
class PanelState:
    """Load phase plus visibility. Only a loaded panel can be open."""

    phase: PanelPhase = PanelPhase.IDLE
    open: bool = False

    def __post_init__(self) -> None:
        if self.open and self.phase is not PanelPhase.LOADED:
            raise ValueError(f"A {self.phase.value} panel cannot be open")

    @property
    def loaded(self) -> bool:
        return self.phase is PanelPhase.LOADED

    def toggled(self) -> "PanelState":
        if not self.loaded:
            raise ValueError("Only a loaded panel can be toggled")
        return PanelState(PanelPhase.LOADED, open=not self.open)

    def closed(self) -> "PanelState":
        return PanelState(self.phase, open=False)


def badge_html(kind: str, count: Optional[int]) -> str:
    """Badge markup for a count; "" when the count is absent or zero."""
    if not count:
        return ""
    return (
        f'<span class="{BADGE_CLASSES[kind]}">'
        f"{BADGE_PREFIXES[kind]}{html.escape(str(count))}</span>"
    )


def other_branches_html(branches: List[BranchStatus]) -> str:
    rows = [f'<li class="menu-title mt-2">{OTHER_BRANCHES_TITLE}</li>']
    for b in branches:
        rows.append(
            "<li>"
            '<div class="flex items-center justify-between">'
            f'<span class="font-mono text-xs">{html.escape(b.branch)}</span>'
            '<div class="flex gap-1">'
            f"{badge_html(AHEAD, b.ahead)}"
            f"{badge_html(BEHIND, b.behind)}"
            "</div>"
            "</div>"
            "</li>"
        )
    return "\n".join(rows)


class GitDropdownHook(Hook):
    """Lazily loaded repository status dropdown.

    Expected markup under the hook element::

        #git-dropdown-button   trigger
        #git-dropdown-menu     shown/hidden container
        #git-branch-label      branch name on the trigger
        #git-current-branch    branch name inside the menu
        #git-commits-ahead     badge slot
        #git-commits-behind    badge slot
        #git-other-branches    list of the remaining branches

    The hook element's ``data-project-path`` selects the repository.
    """

    def mounted(self) -> None:
        self.button = self.page.select_one("#git-dropdown-button", self.el)
        self.menu = self.page.select_one("#git-dropdown-menu", self.el)
        self._set_state(PanelState())

        self.page.add_event_listener(self.button, "click", self._on_trigger)
        self.page.outside_clicks.subscribe(self.el, self._on_outside_click)

    def destroyed(self) -> None:
        self.page.outside_clicks.unsubscribe(self.el)
        self.page.remove_event_listener(self.button, "click", self._on_trigger)

    def _on_trigger(self, event: Event) -> None:
        phase = self.state.phase
        if phase is PanelPhase.IDLE:
            # the task only runs once this handler returns
            self.session.spawn(self.load_git_info())
            self._set_state(PanelState(PanelPhase.LOADING))
        elif phase is PanelPhase.LOADED:
            self._set_state(self.state.toggled())
        # LOADING: the request in flight will open the menu

    def _on_outside_click(self, event: Event) -> None:
        self._set_state(self.state.closed())

    async def load_git_info(self) -> None:
        project_path = dataset(self.el, "project-path")
        try:
            status = await self.session.git_info.fetch(project_path)
            self.render_git_info(status)
        except GitInfoError as e:
            logger.error("Failed to load git info: {}", e)
            self._set_state(PanelState())
            return
        except Exception:
            logger.exception("Failed to render git info")
            self._set_state(PanelState())
            return

        self._set_state(PanelState(PanelPhase.LOADED, open=True))

    def render_git_info(self, status: RepoStatus) -> None:
        select = self.page.select_one
        set_text(select("#git-branch-label", self.el), status.current_branch)
        set_text(select("#git-current-branch", self.el), status.current_branch)

        if status.commits_ahead:
            set_inner_html(
                select("#git-commits-ahead", self.el), badge_html(AHEAD, status.commits_ahead)
            )
        if status.commits_behind:
            set_inner_html(
                select("#git-commits-behind", self.el), badge_html(BEHIND, status.commits_behind)
            )

        if status.other_branches:
            set_inner_html(
                select("#git-other-branches", self.el), other_branches_html(status.other_branches)
            )

    def _set_state(self, state: PanelState) -> None:
        self.state = state
        set_style(self.menu, "display", "block" if state.open else "none")
