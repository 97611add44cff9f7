"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from pathlib import Path

import pytest

from kitty_colours.l1_entities.config import AppConfig
from kitty_colours.l1_entities.palette import Palette
from kitty_colours.l4_frameworks_and_drivers.config import build_app_config

FULL_PALETTE: Palette = {f'Colour{i}': f'{i},{i * 2},{i * 3}' for i in range(22)}

# --- Protocol-conforming Fakes ---


class FakePaletteLoader:
    """Fake palette loader for L2 use case tests."""

    def __init__(self, palette: Palette | None = None):
        self._palette = dict(FULL_PALETTE if palette is None else palette)
        self.load_calls: list[Path] = []

    def load(self, path: Path) -> Palette:
        self.load_calls.append(path)
        return dict(self._palette)


class FakeSessionPatcher:
    """Fake session patcher for L2 use case tests."""

    def __init__(self, rewritten: int = 22):
        self._rewritten = rewritten
        self.patch_calls: list[tuple[Palette, Path]] = []

    def patch(self, palette: Palette, path: Path) -> int:
        self.patch_calls.append((palette, path))
        return self._rewritten


# --- Helpers ---


def write_theme(path: Path, palette: Palette, *, header: bool = True, newline: str = '\n') -> Path:
    lines = []
    if header:
        lines += [
            'Windows Registry Editor Version 5.00',
            '',
            '; base16',
            r'[HKEY_CURRENT_USER\Software\SimonTatham\PuTTY\Sessions\base16-test]',
        ]
    lines += [f'"{k}"="{v}"' for k, v in palette.items()]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(newline.join(lines).encode('utf-8') + newline.encode('utf-8'))
    return path


SAMPLE_SESSION = """\
Present\\1\\
HostName\\example.org\\
Colour0\\187,187,187\\
Colour1\\255,255,255\\
Colour2\\0,0,0\\extra
Font\\Consolas\\
"""

# --- Standard Fixtures ---


@pytest.fixture
def kitty_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'kitty'
    (d / 'Sessions').mkdir(parents=True)
    return d


@pytest.fixture
def theme_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'themes'
    d.mkdir()
    return d


@pytest.fixture
def theme_file(theme_dir: Path) -> Path:
    return write_theme(theme_dir / 'base16-test.reg', FULL_PALETTE)


@pytest.fixture
def session_file(kitty_dir: Path) -> Path:
    p = kitty_dir / 'Sessions' / 'work'
    p.write_bytes(SAMPLE_SESSION.encode('utf-8'))
    return p


@pytest.fixture
def app_config(kitty_dir: Path, theme_dir: Path) -> AppConfig:
    return build_app_config({'kitty_dir': str(kitty_dir), 'theme_dir': str(theme_dir)})


@pytest.fixture
def fake_loader() -> FakePaletteLoader:
    return FakePaletteLoader()


@pytest.fixture
def fake_patcher() -> FakeSessionPatcher:
    return FakeSessionPatcher()
