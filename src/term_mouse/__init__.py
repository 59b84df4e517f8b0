"""Term Mouse - mouse, click and URL settings for a terminal emulator.

Every field of the [mouse] section is validated on its own; malformed
values are logged and replaced by defaults instead of failing the load.
"""

from .commands import Command
from .commands import JustProgram
from .commands import ProgramWithArgs
from .commands import default_launcher
from .fields import FieldError
from .models import ClickHandler
from .models import MouseConfig
from .models import UrlConfig
from .patterns import ComparablePattern
from .patterns import PatternError

__version__ = '0.1.0'

__all__ = [
    'ClickHandler',
    'Command',
    'ComparablePattern',
    'FieldError',
    'JustProgram',
    'MouseConfig',
    'PatternError',
    'ProgramWithArgs',
    'UrlConfig',
    'default_launcher',
    '__version__',
]
