"""Gateway: in-place KiTTY session rewriter — implements SessionPatcher port."""

from __future__ import annotations

import logging
from pathlib import Path

from kitty_colours.l1_entities.palette import Palette, format_session_line, slot_name

log = logging.getLogger('kc.session')

# Session files may carry non-UTF-8 bytes; surrogateescape writes them back untouched.
_ENCODING = 'utf-8'
_ERRORS = 'surrogateescape'


def split_lines(content: str) -> list[str]:
    """Split on LF, dropping one trailing CR per line and the empty tail after a final newline."""
    if not content:
        return []
    lines = content.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line.removesuffix('\r') for line in lines]


def patch_lines(palette: Palette, lines: list[str]) -> list[str]:
    """Replace each known ``Colour`` line with ``name\\value\\``; keep everything else."""
    out: list[str] = []
    for line in lines:
        name = slot_name(line)
        if name is not None and name in palette:
            line = format_session_line(name, palette[name])
        out.append(line)
    return out


class FileSessionPatcher:
    """Rewrites a session file in place.

    The whole file is read before it is reopened for writing, and the write
    truncates, so a shorter result never leaves stale bytes behind. Every
    line is written with a trailing LF.
    """

    def patch(self, palette: Palette, path: Path) -> int:
        with path.open(encoding=_ENCODING, errors=_ERRORS, newline='') as f:
            snapshot = f.read()

        original = split_lines(snapshot)
        patched = patch_lines(palette, original)

        with path.open('w', encoding=_ENCODING, errors=_ERRORS, newline='') as f:
            for line in patched:
                f.write(line + '\n')

        rewritten = sum(1 for line in original if slot_name(line) in palette)
        log.debug('Wrote %d lines to %s (%d rewritten)', len(patched), path, rewritten)
        return rewritten
