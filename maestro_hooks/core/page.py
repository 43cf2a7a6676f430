"""
Page model for hook behavior.

A Page wraps a BeautifulSoup document and adds the small part of the DOM
that hooks rely on: event listeners, bubbling dispatch, form-control values,
class lists and inline styles.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

Listener = Callable[["Event"], None]


@dataclass
class Event:
    """A DOM-style event travelling from its target up to the document.

    Attributes
    ----------
    type : str
        Event name ("click", "input", ...).
    target : Tag, optional
        Element the event was dispatched on. Set by ``Page.dispatch_event``.
    shift_key : bool
        Whether the shift modifier was held.
    bubbles : bool
        If False, only listeners on the target run.
    detail : dict
        Free-form payload for custom events.
    """

    type: str
    target: Optional[Tag] = None
    shift_key: bool = False
    bubbles: bool = True
    detail: Dict[str, Any] = field(default_factory=dict)
    default_prevented: bool = False
    current_target: Optional[Tag] = None
    propagation_stopped: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


# ------------------------------------------------------------------ helpers
def class_list(el: Tag) -> List[str]:
    """Return the element's classes as a list."""
    classes = el.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    return list(classes)


def has_class(el: Tag, name: str) -> bool:
    return name in class_list(el)


def add_class(el: Tag, name: str) -> None:
    classes = class_list(el)
    if name not in classes:
        classes.append(name)
    el["class"] = classes


def remove_class(el: Tag, name: str) -> None:
    classes = [c for c in class_list(el) if c != name]
    if classes:
        el["class"] = classes
    else:
        el.attrs.pop("class", None)


def _style_declarations(el: Tag) -> Dict[str, str]:
    declarations: Dict[str, str] = {}
    for part in (el.get("style") or "").split(";"):
        if ":" in part:
            name, _, value = part.partition(":")
            declarations[name.strip()] = value.strip()
    return declarations


def get_style(el: Tag, prop: str) -> str:
    """Read one inline style property ("" when unset)."""
    return _style_declarations(el).get(prop, "")


def set_style(el: Tag, prop: str, value: str) -> None:
    declarations = _style_declarations(el)
    declarations[prop] = value
    el["style"] = "; ".join(f"{k}: {v}" for k, v in declarations.items())


def dataset(el: Tag, key: str) -> Optional[str]:
    """Read a ``data-*`` attribute, e.g. ``dataset(el, "project-path")``."""
    return el.get(f"data-{key}")


def get_value(el: Tag) -> str:
    """Current value of a form control."""
    if el.name == "textarea":
        return el.get_text()
    return el.get("value") or ""


def set_value(el: Tag, value: str) -> None:
    if el.name == "textarea":
        el.string = value
    else:
        el["value"] = value


def set_text(el: Tag, text: str) -> None:
    el.string = text


def set_inner_html(el: Tag, markup: str) -> None:
    """Replace the element's children with parsed markup."""
    fragment = BeautifulSoup(markup, "html.parser")
    el.clear()
    for child in list(fragment.contents):
        el.append(child.extract())


def child_elements(el: Tag) -> List[Tag]:
    """Direct element children in document order (text nodes skipped)."""
    return el.find_all(recursive=False)


def contains(root: Tag, node: Optional[Tag]) -> bool:
    """True if ``node`` is ``root`` or one of its descendants."""
    if node is None:
        return False
    if node is root:
        return True
    return any(parent is root for parent in node.parents)


def closest(node: Tag, selector: str) -> Optional[Tag]:
    """Nearest ancestor-or-self matching a CSS selector."""
    if isinstance(node, BeautifulSoup):
        return None
    return node.css.closest(selector)


# --------------------------------------------------------------------- Page
class Page:
    """A document plus its event listeners.

    Parameters
    ----------
    markup : str
        Initial HTML.

    Examples
    --------
    >>> page = Page('<div id="root"><button id="b">Go</button></div>')
    >>> page.add_event_listener(page.get_element_by_id("root"), "click", print)
    >>> page.click(page.get_element_by_id("b"))
    """

    def __init__(self, markup: str = "") -> None:
        self.soup = BeautifulSoup(markup, "html.parser")
        # keyed by id(); the node is kept alongside so the id stays unique
        self._listeners: Dict[int, Tuple[Tag, Dict[str, List[Listener]]]] = {}
        self._outside_clicks: Optional["OutsideClickRouter"] = None

    @property
    def document(self) -> BeautifulSoup:
        return self.soup

    @property
    def document_element(self) -> Optional[Tag]:
        """The ``<html>`` element, if the markup has one."""
        return self.soup.find("html")

    @property
    def outside_clicks(self) -> "OutsideClickRouter":
        """The page's single delegated outside-click listener."""
        if self._outside_clicks is None:
            self._outside_clicks = OutsideClickRouter(self)
        return self._outside_clicks

    def get_element_by_id(self, el_id: str) -> Optional[Tag]:
        return self.soup.find(id=el_id)

    def select_one(self, selector: str, root: Optional[Tag] = None) -> Optional[Tag]:
        scope = root if root is not None else self.soup
        return scope.select_one(selector)

    def select(self, selector: str, root: Optional[Tag] = None) -> List[Tag]:
        scope = root if root is not None else self.soup
        return list(scope.select(selector))

    # ---------------------------------------------------------- listeners
    def add_event_listener(self, node: Tag, event_type: str, listener: Listener) -> None:
        _, by_type = self._listeners.setdefault(id(node), (node, {}))
        by_type.setdefault(event_type, []).append(listener)

    def remove_event_listener(self, node: Tag, event_type: str, listener: Listener) -> None:
        entry = self._listeners.get(id(node))
        if entry is None:
            return
        listeners = entry[1].get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)
        if not any(entry[1].values()):
            del self._listeners[id(node)]

    def listener_count(self, node: Tag, event_type: str) -> int:
        entry = self._listeners.get(id(node))
        if entry is None:
            return 0
        return len(entry[1].get(event_type, []))

    def dispatch_event(self, target: Tag, event: Event) -> bool:
        """Run listeners from ``target`` up to the document.

        Returns False if a listener called ``prevent_default``.
        """
        event.target = target
        path = [target]
        if event.bubbles:
            path.extend(target.parents)

        for node in path:
            entry = self._listeners.get(id(node))
            if entry is None or entry[0] is not node:
                continue
            event.current_target = node
            for listener in list(entry[1].get(event.type, [])):
                listener(event)
            if event.propagation_stopped:
                break

        event.current_target = None
        return not event.default_prevented

    def click(self, target: Tag, shift_key: bool = False) -> Event:
        """Dispatch a click on ``target`` and return the event."""
        event = Event("click", shift_key=shift_key)
        self.dispatch_event(target, event)
        return event

    # ------------------------------------------------------------ display
    def to_html(self) -> str:
        return str(self.soup)

    def _repr_html_(self) -> str:
        """Jupyter auto-display."""
        return self.to_html()

    def display(self) -> None:
        """Display in IPython/Jupyter."""
        from IPython.display import HTML
        from IPython.display import display as ipy_display

        ipy_display(HTML(self.to_html()))


class OutsideClickRouter:
    """Document-level click listener shared by every subscriber on a page.

    Each subscriber names a root element; its callback runs for every click
    whose target lies outside that root.
    """

    def __init__(self, page: Page) -> None:
        self._page = page
        self._subscribers: List[Tuple[Tag, Listener]] = []
        page.add_event_listener(page.document, "click", self._on_click)

    def __len__(self) -> int:
        return len(self._subscribers)

    def subscribe(self, root: Tag, callback: Listener) -> None:
        self._subscribers.append((root, callback))

    def unsubscribe(self, root: Tag) -> None:
        self._subscribers = [(r, cb) for r, cb in self._subscribers if r is not root]

    def _on_click(self, event: Event) -> None:
        for root, callback in list(self._subscribers):
            if not contains(root, event.target):
                callback(event)
