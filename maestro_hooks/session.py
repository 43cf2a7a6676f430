"""LiveSession — mounts hooks and carries their traffic to and from the server."""

import asyncio
from typing import Any, Awaitable, Callable, Dict, List, Optional, Set, Type

from bs4 import Tag
from loguru import logger

from maestro_hooks.config import SessionConfig
from maestro_hooks.core.git_info import GitInfoClient
from maestro_hooks.core.page import Page, contains
from maestro_hooks.core.progress import ProgressBar
from maestro_hooks.engines.base import RichTextEngine, SortableEngine
from maestro_hooks.engines.buffer_editor import BufferEditor
from maestro_hooks.engines.sortable import DomSortable
from maestro_hooks.hooks import HOOKS
from maestro_hooks.hooks.base_hook import Hook

Transport = Callable[[str, Dict[str, Any], Optional[str]], None]
WindowListener = Callable[[Dict[str, Any]], None]

HOOK_ATTRIBUTE = "phx-hook"


class UnknownHookError(KeyError):
    """An element names a hook that is not registered."""


class LiveSession:
    """Server-driven session for one page.

    Parameters
    ----------
    page : Page
        The page hooks are mounted on.
    transport : callable
        Receives every outbound event as ``(event, payload, element_id)``.
        Delivery is fire-and-forget.
    hooks : dict, optional
        Hook name -> Hook subclass. Defaults to ``HOOKS``.
    config : SessionConfig, optional
        Endpoint and option defaults.
    sortable_engine : SortableEngine, optional
        Reordering engine. Defaults to ``DomSortable``.
    editor_engine : RichTextEngine, optional
        Rich-text engine. Defaults to ``BufferEditor``.
    git_info : GitInfoClient, optional
        Client for the repository status endpoint.
    progress : ProgressBar, optional
        Page-loading indicator.

    Examples
    --------
    >>> page = Page(markup)
    >>> session = LiveSession(page, transport=channel.push)
    >>> session.connect()
    >>> session.dispatch_command("clear-editor")
    """

    def __init__(
        self,
        page: Page,
        transport: Transport,
        hooks: Optional[Dict[str, Type[Hook]]] = None,
        config: Optional[SessionConfig] = None,
        sortable_engine: Optional[SortableEngine] = None,
        editor_engine: Optional[RichTextEngine] = None,
        git_info: Optional[GitInfoClient] = None,
        progress: Optional[ProgressBar] = None,
    ) -> None:
        self.page = page
        self.transport = transport
        self.hooks: Dict[str, Type[Hook]] = dict(HOOKS if hooks is None else hooks)
        self.config = config or SessionConfig()
        self.sortable_engine = sortable_engine or DomSortable()
        self.editor_engine = editor_engine or BufferEditor()
        self.git_info = git_info or GitInfoClient(
            base_url=self.config.base_url, endpoint=self.config.git_info_endpoint
        )
        self.progress = progress or ProgressBar()
        self.progress.config(
            bar_colors=self.config.progress_bar_colors,
            shadow_color=self.config.progress_shadow_color,
        )

        self.params: Dict[str, Any] = {}
        self.connected = False
        self._mounted: List[Hook] = []
        self._tasks: Set[asyncio.Task] = set()
        self._window_listeners: Dict[str, List[WindowListener]] = {}

        self.on_window_event("phx:theme-changed", self._on_theme_changed)
        self.on_window_event(
            "phx:page-loading-start",
            lambda detail: self.progress.show(self.config.progress_show_delay_ms),
        )
        self.on_window_event("phx:page-loading-stop", lambda detail: self.progress.hide())

    @property
    def url(self) -> str:
        return f"{self.config.base_url}{self.config.live_path}"

    @property
    def mounted_hooks(self) -> List[Hook]:
        return list(self._mounted)

    # ---------------------------------------------------------- lifecycle
    def connect(self) -> None:
        """Read connect params from the page and mount every hooked element."""
        meta = self.page.select_one("meta[name='csrf-token']")
        if meta is not None:
            self.params["_csrf_token"] = meta.get("content")

        for el in self.page.select(f"[{HOOK_ATTRIBUTE}]"):
            try:
                self.mount(el)
            except UnknownHookError as e:
                logger.warning("Unknown hook found for {}", e)
        self.connected = True
        logger.debug("Session connected to {} with {} hooks", self.url, len(self._mounted))

    def mount(self, el: Tag) -> Hook:
        """Instantiate and mount the hook named by ``el``'s hook attribute."""
        existing = self.hook_for(el)
        if existing is not None:
            return existing

        name = el.get(HOOK_ATTRIBUTE)
        if name not in self.hooks:
            raise UnknownHookError(name)

        hook = self.hooks[name](el, self)
        self._mounted.append(hook)
        hook.mounted()
        logger.debug("Mounted {} on #{}", name, el.get("id"))
        return hook

    def unmount(self, el: Tag) -> None:
        hook = self.hook_for(el)
        if hook is None:
            return
        self._mounted.remove(hook)
        hook.destroyed()
        logger.debug("Destroyed {} on #{}", type(hook).__name__, el.get("id"))

    def remove_element(self, el: Tag) -> None:
        """Detach ``el`` from the page, destroying hooks mounted inside it."""
        for hook in [h for h in self._mounted if contains(el, h.el)]:
            self.unmount(hook.el)
        el.extract()

    def hook_for(self, el: Tag) -> Optional[Hook]:
        for hook in self._mounted:
            if hook.el is el:
                return hook
        return None

    # ------------------------------------------------------------ traffic
    def push_event(self, el: Tag, event: str, payload: Dict[str, Any]) -> None:
        logger.debug("Push {} from #{}", event, el.get("id"))
        self.transport(event, payload, el.get("id"))

    def dispatch_command(
        self,
        command: str,
        payload: Optional[Dict[str, Any]] = None,
        el_id: Optional[str] = None,
    ) -> int:
        """Deliver an inbound command to the hooks that handle it.

        With ``el_id`` only the hook mounted on that element is considered;
        otherwise every mounted hook is. Returns the number of hooks reached.
        """
        payload = payload or {}
        targets = [
            h
            for h in self._mounted
            if h.handles(command) and (el_id is None or h.el.get("id") == el_id)
        ]
        if not targets:
            logger.debug("No hook handles {} (target: {})", command, el_id)
        for hook in targets:
            hook.receive(command, payload)
        return len(targets)

    # -------------------------------------------------------------- async
    def spawn(self, coro: Awaitable[None]) -> asyncio.Task:
        """Run ``coro`` on the running loop without waiting for it."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise
        task = loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def drain(self) -> None:
        """Wait for every spawned task, including ones spawned meanwhile."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def aclose(self) -> None:
        await self.drain()
        await self.git_info.aclose()

    # ------------------------------------------------------- window events
    def on_window_event(self, name: str, listener: WindowListener) -> None:
        self._window_listeners.setdefault(name, []).append(listener)

    def dispatch_window_event(self, name: str, detail: Optional[Dict[str, Any]] = None) -> None:
        for listener in list(self._window_listeners.get(name, [])):
            listener(detail or {})

    def _on_theme_changed(self, detail: Dict[str, Any]) -> None:
        root = self.page.document_element
        if root is None:
            return
        theme = detail.get("theme")
        if theme is None:
            return
        if theme == "both":
            root.attrs.pop("data-theme", None)
        else:
            root["data-theme"] = str(theme)
