"""Launcher command models for term-mouse.

A launcher is either a bare program name or a program with a fixed
list of arguments. The URL being opened is always appended last.
"""

import sys
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class JustProgram:
    """Launcher given as a bare program name.

    Attributes:
        program: Program name or path (e.g., "xdg-open")
    """
    program: str

    @property
    def args(self) -> tuple[str, ...]:
        return ()

    def argv(self) -> list[str]:
        return [self.program]

    def to_raw(self) -> str:
        return self.program


@dataclass(frozen=True)
class ProgramWithArgs:
    """Launcher given as a program plus fixed arguments.

    Attributes:
        program: Program name or path
        args: Arguments placed between the program and the URL
    """
    program: str
    args: tuple[str, ...] = ()

    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def to_raw(self) -> dict[str, Any]:
        return {'program': self.program, 'args': list(self.args)}


Command = JustProgram | ProgramWithArgs


def parse_command(value: Any) -> Command:
    """Parse a launcher command from its config representation.

    Args:
        value: Either a program name, or a table with 'program' and
            optional 'args' keys

    Returns:
        Command: JustProgram for a string, ProgramWithArgs for a table

    Raises:
        TypeError: If the value has the wrong shape
        ValueError: If the program name is empty

    Examples:
        >>> parse_command('firefox')
        JustProgram(program='firefox')
        >>> parse_command({'program': 'firefox', 'args': ['--new-tab']})
        ProgramWithArgs(program='firefox', args=('--new-tab',))
    """
    if isinstance(value, str):
        if not value.strip():
            raise ValueError('launcher program must not be empty')  # noqa: TRY003
        return JustProgram(value)

    if not isinstance(value, dict):
        raise TypeError(  # noqa: TRY003
            f'launcher must be a program name or a table with program and args, got {value!r}'
        )

    program = value.get('program')
    if not isinstance(program, str):
        raise TypeError(f"launcher 'program' must be a string, got {program!r}")  # noqa: TRY003
    if not program.strip():
        raise ValueError('launcher program must not be empty')  # noqa: TRY003

    args = value.get('args', [])
    if not isinstance(args, list):
        raise TypeError(f"launcher 'args' must be a list, got {args!r}")  # noqa: TRY003
    if not all(isinstance(arg, str) for arg in args):
        raise TypeError("All launcher 'args' must be strings")  # noqa: TRY003

    return ProgramWithArgs(program, tuple(args))


def default_launcher(platform: str | None = None) -> Command:
    """Return the link opener used when none is configured.

    Args:
        platform: Value in the form of sys.platform. Defaults to the
            running interpreter's platform.

    Returns:
        Command: "open" on macOS, "explorer" on Windows, "xdg-open" on
        Linux, BSD and other Unix-like systems
    """
    if platform is None:
        platform = sys.platform

    if platform == 'darwin':
        return JustProgram('open')
    if platform in ('win32', 'cygwin'):
        return JustProgram('explorer')
    return JustProgram('xdg-open')
