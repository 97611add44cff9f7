"""Port: palette loader."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from kitty_colours.l1_entities.palette import Palette


class PaletteLoader(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract theme-file reader."""

    def load(self, path: Path) -> Palette:
        """Read every palette entry from *path*. Does not validate the entry count."""
        ...
