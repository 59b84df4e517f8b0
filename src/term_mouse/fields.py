"""Field-level deserializers with fallback to defaults.

Each deserializer takes the raw value of one config field (None when
the field is absent) and returns either the parsed value or, when the
value is malformed, a default. Malformed values are logged, never
raised.
"""

import logging
from collections.abc import Callable
from collections.abc import Mapping
from datetime import timedelta
from typing import Any
from typing import TypeVar

from common.modifiers import Modifiers
from common.modifiers import parse_modifiers

from .commands import Command
from .commands import default_launcher
from .commands import parse_command

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_THRESHOLD = timedelta(milliseconds=300)


class FieldError(ValueError):
    """Raised by field parsers for input that can be replaced by a default."""
    pass


def failure_default(
    name: str,
    raw: Any,
    parse: Callable[[Any], T],
    default: T,
    using: str = 'default value',
) -> T:
    """Parse a field, substituting the default on recoverable errors.

    Args:
        name: Field name used in the log message
        raw: Raw field value, None if the field is absent
        parse: Parser raising FieldError on malformed input
        default: Value returned when the field is absent or malformed
        using: Description of the default for the log message

    Returns:
        The parsed value, or default
    """
    if raw is None:
        return default

    try:
        return parse(raw)
    except FieldError as e:
        logger.warning(f'Problem with config: {name}: {e}; using {using}')
        return default


def expect_mapping(raw: Any) -> Mapping[str, Any]:
    """Return raw as a mapping, or raise FieldError."""
    if not isinstance(raw, Mapping):
        raise FieldError(f'expected a table, got {raw!r}')  # noqa: TRY003
    return raw


def parse_duration_ms(raw: Any) -> timedelta:
    """Parse a non-negative integer count of milliseconds.

    Raises:
        FieldError: If raw is not an int (bools excluded) or is negative
    """
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        raise FieldError(  # noqa: TRY003
            f'expected a non-negative integer number of milliseconds, got {raw!r}'
        )
    try:
        return timedelta(milliseconds=raw)
    except OverflowError as e:
        raise FieldError(f'duration of {raw!r} milliseconds is too large') from e  # noqa: TRY003


def duration_to_ms(value: timedelta) -> int:
    return value // timedelta(milliseconds=1)


def deserialize_duration_ms(raw: Any, name: str = 'threshold') -> timedelta:
    return failure_default(
        name, raw, parse_duration_ms, DEFAULT_THRESHOLD,
        using=f'{duration_to_ms(DEFAULT_THRESHOLD)}ms',
    )


def parse_bool(raw: Any) -> bool:
    if not isinstance(raw, bool):
        raise FieldError(f'expected true or false, got {raw!r}')  # noqa: TRY003
    return raw


def deserialize_bool(raw: Any, name: str, default: bool = False) -> bool:
    return failure_default(name, raw, parse_bool, default, using=str(default).lower())


def parse_mods(raw: Any) -> Modifiers:
    try:
        return parse_modifiers(raw)
    except (TypeError, ValueError) as e:
        raise FieldError(str(e)) from e


def deserialize_modifiers(raw: Any, name: str = 'modifiers') -> Modifiers:
    return failure_default(name, raw, parse_mods, Modifiers.NONE, using='no modifiers')


def parse_launcher(raw: Any) -> Command | None:
    """Parse the launcher field.

    The case-insensitive string "none" disables the launcher and yields
    None. Anything else must be a valid command.

    Raises:
        FieldError: If raw is neither "none" nor a valid command
    """
    if isinstance(raw, str) and raw.lower() == 'none':
        return None
    try:
        return parse_command(raw)
    except (TypeError, ValueError) as e:
        raise FieldError(str(e)) from e


def deserialize_launcher(raw: Any, name: str = 'launcher') -> Command | None:
    """Deserialize the launcher, falling back to the platform opener.

    An absent field resolves to the platform default without logging.
    """
    default = default_launcher()
    return failure_default(name, raw, parse_launcher, default, using=default.program)
