"""Palette entity and the theme-line classification rules."""

from __future__ import annotations

import re

from kitty_colours.l1_entities.errors import PaletteParseError

# Slot name ("Colour0".."Colour21") -> "R,G,B".
Palette = dict[str, str]

PALETTE_SIZE = 22  # 16 ANSI colours + default fg/bg (normal, bold) + cursor text/colour

SLOT_PREFIX = 'Colour'

_PALETTE_LINE_RE = re.compile(r'"Colour\d+"="\d+,\d+,\d+"', re.ASCII)


def is_palette_line(line: str) -> bool:
    """True if *line* is a whole ``"Colour<N>"="<R>,<G>,<B>"`` registry entry."""
    return _PALETTE_LINE_RE.fullmatch(line) is not None


def parse_palette_line(line: str) -> tuple[str, str]:
    """Split a palette line into its unquoted ``(slot, value)`` pair."""
    parts = line.split('=', 1)
    if len(parts) != 2:
        raise PaletteParseError(f'cannot load putty colors, string {line!r} is invalid')
    key, value = parts
    return key.strip('"'), value.strip('"')


def slot_name(line: str) -> str | None:
    """Return the slot name of a session line, or None if it is not a colour line."""
    if not line.startswith(SLOT_PREFIX):
        return None
    return line.split('\\', 1)[0]


def format_session_line(name: str, value: str) -> str:
    return f'{name}\\{value}\\'
