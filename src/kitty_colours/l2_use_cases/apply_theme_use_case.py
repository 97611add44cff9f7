"""Use case: copy a theme's palette into a KiTTY session file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from kitty_colours.l1_entities.config import AppConfig
from kitty_colours.l1_entities.errors import IncompletePaletteError, SessionNotFoundError, ThemeNotFoundError
from kitty_colours.l1_entities.palette import PALETTE_SIZE
from kitty_colours.l2_use_cases.ports.palette_loader import PaletteLoader
from kitty_colours.l2_use_cases.ports.session_patcher import SessionPatcher

log = logging.getLogger('kc.apply')


@dataclass(frozen=True)
class ApplyResult:
    theme_path: Path
    session_path: Path
    rewritten: int


class ApplyThemeUseCase:
    """Resolves both files, loads and validates the palette, then patches the session.

    The palette size check lives here rather than in the loader, so loaders
    stay plain parsers and can return partial palettes.
    """

    def __init__(
        self,
        config: AppConfig,
        palette_loader: PaletteLoader,
        session_patcher: SessionPatcher,
    ) -> None:
        self._config = config
        self._loader = palette_loader
        self._patcher = session_patcher

    def execute(self, session: str, theme: str) -> ApplyResult:
        theme_path = self._config.theme_path(theme)
        if not theme_path.is_file():
            raise ThemeNotFoundError(f"can't find theme {theme}")

        palette = self._loader.load(theme_path)
        if len(palette) != PALETTE_SIZE:
            log.debug('Palette from %s has %d entries, expected %d', theme_path, len(palette), PALETTE_SIZE)
            raise IncompletePaletteError('color palette is not complete')

        session_path = self._config.session_path(session)
        if not session_path.is_file():
            raise SessionNotFoundError(f"can't find session {session}")

        rewritten = self._patcher.patch(palette, session_path)
        log.info('Applied %s to %s (%d lines rewritten)', theme_path.name, session_path, rewritten)
        return ApplyResult(theme_path=theme_path, session_path=session_path, rewritten=rewritten)
