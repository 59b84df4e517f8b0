"""Configuration loader for term-mouse.

This module handles loading TOML configuration files and resolving
their [mouse] section.
"""

import tomllib
from pathlib import Path
from typing import ClassVar

from .models import MouseConfig
from .patterns import PatternError


class ConfigLoader:
    """Load TOML configuration files into a MouseConfig."""

    SECTION: ClassVar[str] = 'mouse'

    DEFAULT_PATHS: ClassVar[list[Path]] = [
        Path.home() / '.config/term-mouse/config.toml',
        Path('/etc/term-mouse/config.toml'),
    ]

    @staticmethod
    def find_config_path(config_path: Path | None = None) -> Path:
        """Resolve which config file to read.

        Args:
            config_path: Explicit path. If None, the first existing
                entry of DEFAULT_PATHS is used.

        Returns:
            Path: Resolved path of an existing config file

        Raises:
            FileNotFoundError: If no candidate file exists
        """
        candidates = [config_path] if config_path else ConfigLoader.DEFAULT_PATHS
        found = next((path for path in candidates if path.is_file()), None)
        if found is not None:
            return found.resolve()

        if config_path:
            raise FileNotFoundError(f'Config file not found: {config_path}')  # noqa: TRY003
        tried = ', '.join(str(p) for p in candidates)
        raise FileNotFoundError(  # noqa: TRY003
            f'Config file not found. Tried: {tried}\n'
            f'Create a config file at one of these locations.'
        )

    @staticmethod
    def load(config_path: Path | None = None) -> tuple[MouseConfig, Path]:
        """Load the [mouse] section from a TOML file.

        Args:
            config_path: Path to config file. If None, tries default paths.

        Returns:
            tuple[MouseConfig, Path]: Resolved configuration and path to loaded file

        Raises:
            FileNotFoundError: If config file not found
            ValueError: If the file is not valid UTF-8 TOML or the URL
                pattern is invalid
        """
        path = ConfigLoader.find_config_path(config_path)
        return (ConfigLoader._load_from_path(path), path)

    @staticmethod
    def loads(text: str, source: str = '<string>') -> MouseConfig:
        """Resolve configuration from TOML text.

        Args:
            text: TOML document
            source: Name used in error messages

        Returns:
            MouseConfig: Resolved configuration

        Raises:
            ValueError: If the TOML syntax or the URL pattern is invalid
        """
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f'Invalid TOML syntax in {source}: {e}') from e  # noqa: TRY003

        return ConfigLoader._parse_config(data, source)

    @staticmethod
    def _load_from_path(path: Path) -> MouseConfig:
        """Load and parse TOML from specific path.

        Args:
            path: Path to TOML config file

        Returns:
            MouseConfig: Resolved configuration

        Raises:
            ValueError: If the TOML syntax or the URL pattern is invalid
        """
        try:
            with path.open('rb') as f:
                data = tomllib.load(f)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise ValueError(f'Invalid TOML syntax in {path}: {e}') from e  # noqa: TRY003

        return ConfigLoader._parse_config(data, str(path))

    @staticmethod
    def _parse_config(data: dict, source: str) -> MouseConfig:
        """Resolve the mouse section of parsed TOML data.

        Malformed fields are logged and defaulted by MouseConfig itself;
        only errors without a safe default reach this point.

        Args:
            data: Parsed TOML data
            source: Name used in error messages

        Returns:
            MouseConfig: Resolved configuration

        Raises:
            ValueError: If the URL pattern is invalid
        """
        try:
            return MouseConfig.from_raw(data.get(ConfigLoader.SECTION))
        except PatternError as e:
            raise ValueError(f'Invalid configuration in {source}: {e}') from e  # noqa: TRY003
