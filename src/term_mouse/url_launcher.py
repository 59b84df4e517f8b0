"""Link opening for term-mouse.

This module runs the configured launcher with a URL appended.
"""

import logging
import os
import shutil
import subprocess
from pathlib import Path

from .models import UrlConfig


class UrlLauncher:
    """Open URLs with the configured launcher in non-blocking mode.

    The launcher process is started in a new session, so it keeps running
    after the caller exits.
    """

    def __init__(self, url_config: UrlConfig, log_commands: bool = True):
        """Initialize the launcher.

        Args:
            url_config: Resolved URL settings
            log_commands: Whether to log launched commands
        """
        self.url_config = url_config
        self.log_commands = log_commands
        self.logger = logging.getLogger('term_mouse.launcher')

    def open(self, url: str) -> bool:
        """Open a URL with the configured launcher.

        Args:
            url: Link text to pass as the last argument

        Returns:
            bool: True if the launcher was started, False if it is disabled
            or could not be started

        Example:
            >>> launcher = UrlLauncher(UrlConfig(launcher=JustProgram('xdg-open')))
            >>> launcher.open('https://example.org')
        """
        command = self.url_config.launcher
        if command is None:
            self.logger.info(f'URL launcher disabled, not opening {url}')
            return False

        cmd = command.argv() + [url]

        if self.log_commands:
            self.logger.info(f"Opening: {' '.join(cmd)}")

        try:
            subprocess.Popen(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
            return True

        except FileNotFoundError:
            self.logger.error(
                f'Launcher not found: {command.program}\n'
                f'Make sure the program exists and is in PATH'
            )
            return False

        except PermissionError:
            self.logger.error(
                f'Permission denied executing: {command.program}\n'
                f'Check file permissions and executable flag'
            )
            return False

        except OSError as e:
            self.logger.error(f"Failed to run launcher '{command.program}': {e}")
            return False

    def check_launcher_exists(self) -> bool:
        """Check if the configured launcher exists and is executable.

        Returns:
            bool: True if the program is found, False if missing or disabled
        """
        command = self.url_config.launcher
        if command is None:
            return False

        path = Path(command.program)
        if path.is_absolute():
            return path.is_file() and os.access(path, os.X_OK)

        return shutil.which(command.program) is not None
