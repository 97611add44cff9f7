"""Port: session patcher."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from kitty_colours.l1_entities.palette import Palette


class SessionPatcher(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract in-place rewriter of session colour lines."""

    def patch(self, palette: Palette, path: Path) -> int:
        """Rewrite colour lines of *path* from *palette*. Returns the number of lines rewritten."""
        ...
