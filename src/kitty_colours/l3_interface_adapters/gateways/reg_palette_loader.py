"""Gateway: base16-putty registry theme reader — implements PaletteLoader port."""

from __future__ import annotations

import logging
from pathlib import Path

from kitty_colours.l1_entities.palette import Palette, is_palette_line, parse_palette_line

log = logging.getLogger('kc.palette')

THEME_PREFIX = 'base16-'
THEME_SUFFIX = '.reg'


class RegPaletteLoader:
    """Reads ``"ColourN"="R,G,B"`` entries out of a ``.reg`` theme export."""

    def load(self, path: Path) -> Palette:
        palette: Palette = {}
        # Binary iteration splits on LF only; a lone CR stays inside the line.
        with path.open('rb') as f:
            for raw in f:
                line = raw.decode('utf-8', errors='replace').removesuffix('\n').removesuffix('\r')
                if is_palette_line(line):
                    key, value = parse_palette_line(line)
                    palette[key] = value
        log.debug('Loaded %d palette entries from %s', len(palette), path)
        return palette


def list_themes(theme_dir: Path) -> list[str]:
    """Theme names for every ``base16-<name>.reg`` file in *theme_dir*, sorted."""
    if not theme_dir.is_dir():
        return []
    names = [
        p.name.removeprefix(THEME_PREFIX).removesuffix(THEME_SUFFIX)
        for p in theme_dir.iterdir()
        if p.name.startswith(THEME_PREFIX) and p.name.endswith(THEME_SUFFIX) and p.is_file()
    ]
    return sorted(n for n in names if n)
