"""CLI entry point for kitty-colours."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import click

from kitty_colours import __version__
from kitty_colours.l1_entities.errors import KittyColoursError

if TYPE_CHECKING:
    from pydantic import ValidationError

    from kitty_colours.l1_entities.config import AppConfig

log = logging.getLogger('kc.cli')


def _fail(err: Exception | str) -> NoReturn:
    click.echo(f'error: {err}', err=True)
    sys.exit(1)


def _validation_message(err: ValidationError) -> str:
    """Flatten pydantic's multi-line report to ``loc: msg; loc: msg``."""
    return '; '.join(f"{'.'.join(map(str, e['loc']))}: {e['msg']}" for e in err.errors())


def _build_overrides(kitty_dir: str | None, theme_dir: str | None) -> dict:
    overrides: dict = {}
    if kitty_dir:
        overrides['kitty_dir'] = kitty_dir
    if theme_dir:
        overrides['theme_dir'] = theme_dir
    return overrides


@click.command()
@click.argument('session', required=False)
@click.argument('theme', required=False)
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(),
    help='Path to YAML config file.',
)
@click.option(
    '--kitty-dir',
    default=None,
    type=click.Path(file_okay=False),
    help='Set path to kitty directory (the one holding Sessions/).',
)
@click.option(
    '--theme-dir',
    default=None,
    type=click.Path(file_okay=False),
    help='Set path to base16-putty repository.',
)
@click.option(
    '--list-themes',
    is_flag=True,
    default=False,
    help='List theme names found in the theme directory and exit.',
)
@click.option(
    '--log-file',
    default=None,
    type=click.Path(dir_okay=False),
    help='Write a debug log to this file.',
)
@click.version_option(version=__version__)
def cli(session, theme, config_path, kitty_dir, theme_dir, list_themes, log_file):
    """kitty-colours -- copy a base16 PuTTY theme into a KiTTY SESSION."""
    from pydantic import ValidationError  # noqa: PLC0415 -- deferred: pydantic not loaded on --help

    from kitty_colours.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from kitty_colours.l4_frameworks_and_drivers.config import (  # noqa: PLC0415 -- deferred: pydantic not loaded on --help
        build_app_config,
    )

    if not list_themes and (session is None or theme is None):
        raise click.UsageError('expected SESSION and THEME arguments')

    if log_file:
        from kitty_colours.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: only with --log-file
            setup_file_logging,
        )

        try:
            setup_file_logging(Path(log_file))
        except OSError as e:
            _fail(e)

    try:
        overrides = _build_overrides(kitty_dir, theme_dir)
        raw = YamlConfigLoader().load_raw(config_path, overrides=overrides if overrides else None)
        config = build_app_config(raw)
    except ValidationError as e:
        _fail(_validation_message(e))
    except (OSError, ValueError) as e:
        _fail(e)
    log.debug('Config: kitty_dir=%s theme_dir=%s', config.kitty_dir, config.theme_dir)

    if list_themes:
        _print_themes(config.theme_dir)
        return

    _apply(config, session, theme)


def _print_themes(theme_dir: Path) -> None:
    from kitty_colours.l3_interface_adapters.gateways.reg_palette_loader import (  # noqa: PLC0415 -- deferred: listing only
        list_themes,
    )

    try:
        names = list_themes(theme_dir)
    except OSError as e:
        _fail(e)
    if not names:
        click.echo(f'No themes found in {theme_dir}', err=True)
        return
    for name in names:
        click.echo(name)


def _apply(config: AppConfig, session: str, theme: str) -> None:
    from kitty_colours.l2_use_cases.apply_theme_use_case import (  # noqa: PLC0415 -- deferred: not needed for --help
        ApplyThemeUseCase,
    )
    from kitty_colours.l3_interface_adapters.gateways.file_session_patcher import (  # noqa: PLC0415 -- deferred: not needed for --help
        FileSessionPatcher,
    )
    from kitty_colours.l3_interface_adapters.gateways.reg_palette_loader import (  # noqa: PLC0415 -- deferred: not needed for --help
        RegPaletteLoader,
    )

    use_case = ApplyThemeUseCase(config, RegPaletteLoader(), FileSessionPatcher())
    try:
        use_case.execute(session, theme)
    except (KittyColoursError, OSError) as e:
        log.debug('Apply failed', exc_info=True)
        _fail(e)
