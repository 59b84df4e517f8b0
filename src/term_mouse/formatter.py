"""Output formatting utilities for term-mouse.

This module renders resolved configuration for console output,
including TOML configuration fragments.
"""

import json
from typing import Any

from .models import MouseConfig


def _toml_value(value: Any) -> str:
    """Format a scalar or list as a TOML value."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, list):
        return '[' + ', '.join(_toml_value(v) for v in value) + ']'
    # TOML rejects surrogate pair escapes and raw DEL
    return json.dumps(str(value), ensure_ascii=False).replace('\x7f', '\\u007f')


def _format_table(name: str, table: dict[str, Any]) -> list[str]:
    scalars = [(k, v) for k, v in table.items() if not isinstance(v, dict)]
    tables = [(k, v) for k, v in table.items() if isinstance(v, dict)]

    lines = [f'[{name}]']
    lines.extend(f'{key} = {_toml_value(value)}' for key, value in scalars)
    for key, value in tables:
        lines.append('')
        lines.extend(_format_table(f'{name}.{key}', value))
    return lines


def format_config_toml(config: MouseConfig) -> str:
    """Format a resolved configuration as a TOML fragment.

    Args:
        config: Resolved mouse configuration

    Returns:
        str: TOML text that loads back into an equal configuration
    """
    return '\n'.join(_format_table('mouse', config.to_raw())) + '\n'


def format_summary(config: MouseConfig) -> str:
    """Format a short human-readable summary of a configuration.

    Args:
        config: Resolved mouse configuration

    Returns:
        str: Multi-line summary
    """
    url = config.url
    if url.launcher is None:
        launcher = 'disabled'
    else:
        launcher = ' '.join(url.launcher.argv())
    pattern = url.url_pattern.source if url.url_pattern is not None else 'built-in'

    return (
        f'Double click threshold: {config.double_click.to_raw()["threshold"]}ms\n'
        f'Triple click threshold: {config.triple_click.to_raw()["threshold"]}ms\n'
        f'Hide when typing: {config.hide_when_typing}\n'
        f'URL launcher: {launcher}\n'
        f'URL modifiers: {url.to_raw()["modifiers"]}\n'
        f'URL pattern: {pattern}'
    )
