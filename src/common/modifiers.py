"""Modifier key utilities for term-mouse.

This module operates on modifier names as written in config files
(e.g. "Control", "Shift") as well as canonical key names
("ctrl_l", "shift_r", "super").
"""

from enum import Flag
from enum import auto
from typing import Any


class Modifiers(Flag):
    """Set of keyboard modifiers that must be held.

    An empty set (``Modifiers.NONE``) means no modifier is required.
    """
    NONE = 0
    SHIFT = auto()
    CONTROL = auto()
    ALT = auto()
    SUPER = auto()


MODIFIER_NAMES: dict[str, Modifiers] = {
    # Config spellings
    'shift': Modifiers.SHIFT,
    'control': Modifiers.CONTROL, 'ctrl': Modifiers.CONTROL,
    'alt': Modifiers.ALT, 'option': Modifiers.ALT,
    'super': Modifiers.SUPER, 'command': Modifiers.SUPER, 'logo': Modifiers.SUPER,
    'none': Modifiers.NONE,

    # Canonical key names - Left/Right
    'shift_l': Modifiers.SHIFT, 'shift_r': Modifiers.SHIFT,
    'ctrl_l': Modifiers.CONTROL, 'ctrl_r': Modifiers.CONTROL,
    'alt_l': Modifiers.ALT, 'alt_r': Modifiers.ALT, 'alt_gr': Modifiers.ALT,
    'super_l': Modifiers.SUPER, 'super_r': Modifiers.SUPER,
}

# Display order when formatting
_DISPLAY_ORDER: list[tuple[Modifiers, str]] = [
    (Modifiers.CONTROL, 'Control'),
    (Modifiers.SHIFT, 'Shift'),
    (Modifiers.ALT, 'Alt'),
    (Modifiers.SUPER, 'Super'),
]


def normalize_key(key: Any) -> str:
    """Normalize a modifier name to its lookup form.

    Args:
        key: Modifier name (str), surrounding whitespace allowed

    Returns:
        str: Lowercased, stripped name (e.g., "control", "ctrl_l")

    Examples:
        >>> normalize_key(' Control ')
        'control'
        >>> normalize_key('CTRL_L')
        'ctrl_l'
    """
    return str(key).strip().lower()


def parse_modifiers(value: Any) -> Modifiers:
    """Parse a modifier set from its config representation.

    Accepts either a ``|``-separated string or a list of names.

    Args:
        value: Raw config value, e.g. "Control|Shift" or ["ctrl", "shift"]

    Returns:
        Modifiers: Combined modifier flags

    Raises:
        TypeError: If the value is neither a string nor a list of strings
        ValueError: If a name is not a known modifier

    Examples:
        >>> parse_modifiers('Control|Shift') == Modifiers.CONTROL | Modifiers.SHIFT
        True
        >>> parse_modifiers('None')
        <Modifiers.NONE: 0>
    """
    if isinstance(value, str):
        names = value.split('|')
    elif isinstance(value, list) and all(isinstance(v, str) for v in value):
        names = value
    else:
        raise TypeError(f'expected a modifier string or list of strings, got {value!r}')  # noqa: TRY003

    result = Modifiers.NONE
    for name in names:
        normalized = normalize_key(name)
        if normalized not in MODIFIER_NAMES:
            raise ValueError(  # noqa: TRY003
                f'invalid modifier {name!r}, expected a subset of '
                f'Shift|Control|Super|Command|Alt|Option'
            )
        result |= MODIFIER_NAMES[normalized]
    return result


def format_modifiers(mods: Modifiers) -> str:
    """Format a modifier set for TOML config.

    Args:
        mods: Modifier flags

    Returns:
        str: String like "Control|Shift", or "None" for the empty set

    Examples:
        >>> format_modifiers(Modifiers.SHIFT | Modifiers.CONTROL)
        'Control|Shift'
        >>> format_modifiers(Modifiers.NONE)
        'None'
    """
    names = [name for flag, name in _DISPLAY_ORDER if flag in mods]
    return '|'.join(names) if names else 'None'
