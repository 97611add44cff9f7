"""Configuration Pydantic model — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class AppConfig(BaseModel):
    model_config = ConfigDict(extra='forbid')

    kitty_dir: Path
    theme_dir: Path

    def theme_path(self, theme: str) -> Path:
        """Resolve a theme name to its base16-putty registry file."""
        return self.theme_dir / f'base16-{theme}.reg'

    def session_path(self, session: str) -> Path:
        return self.kitty_dir / 'Sessions' / session
