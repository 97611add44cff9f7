"""Built-in configuration defaults — lives in L4, not domain."""

from __future__ import annotations

import copy

from kitty_colours.l1_entities.config import AppConfig
from kitty_colours.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'kitty_dir': '.',
    'theme_dir': '.',
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)
