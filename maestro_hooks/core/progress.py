"""Page-loading progress bar state."""

import time
from typing import Callable, Dict, Optional

from maestro_hooks.config import PROGRESS_BAR_COLORS, PROGRESS_SHADOW_COLOR


class ProgressBar:
    """Top-of-page loading bar with a delayed reveal.

    ``show(delay_ms)`` only makes the bar visible once the delay has elapsed,
    so a ``hide()`` that arrives first means it never appears.

    Parameters
    ----------
    clock : callable, optional
        Returns the current time in seconds. Defaults to ``time.monotonic``.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or time.monotonic
        self.bar_colors: Dict[float, str] = dict(PROGRESS_BAR_COLORS)
        self.shadow_color = PROGRESS_SHADOW_COLOR
        self._reveal_at: Optional[float] = None

    def config(
        self,
        bar_colors: Optional[Dict[float, str]] = None,
        shadow_color: Optional[str] = None,
    ) -> None:
        if bar_colors is not None:
            self.bar_colors = dict(bar_colors)
        if shadow_color is not None:
            self.shadow_color = shadow_color

    def show(self, delay_ms: int = 0) -> None:
        if self._reveal_at is None:
            self._reveal_at = self._clock() + delay_ms / 1000

    def hide(self) -> None:
        self._reveal_at = None

    @property
    def pending(self) -> bool:
        return self._reveal_at is not None and not self.visible

    @property
    def visible(self) -> bool:
        return self._reveal_at is not None and self._clock() >= self._reveal_at
