"""Data models for the mouse section of the terminal configuration."""

from dataclasses import dataclass
from dataclasses import field
from datetime import timedelta
from typing import Any

from common.modifiers import Modifiers
from common.modifiers import format_modifiers

from .commands import Command
from .commands import default_launcher
from .fields import DEFAULT_THRESHOLD
from .fields import deserialize_bool
from .fields import deserialize_duration_ms
from .fields import deserialize_launcher
from .fields import deserialize_modifiers
from .fields import duration_to_ms
from .fields import expect_mapping
from .fields import failure_default
from .patterns import ComparablePattern


@dataclass(frozen=True)
class ClickHandler:
    """Timing window for classifying repeated clicks.

    Attributes:
        threshold: Maximum delay between clicks that still counts as
            a double (or triple) click
    """
    threshold: timedelta = DEFAULT_THRESHOLD

    def __post_init__(self) -> None:
        """Validate the click handler."""
        if self.threshold < timedelta(0):
            raise ValueError(f'threshold must not be negative, got {self.threshold}')  # noqa: TRY003

    @classmethod
    def from_raw(cls, raw: Any, name: str = 'click') -> 'ClickHandler':
        """Build a click handler from a raw config table.

        Args:
            raw: Table with an optional 'threshold' key (milliseconds),
                or None for the default
            name: Section name used in log messages

        Returns:
            ClickHandler: Handler with a malformed threshold replaced by 300ms

        Raises:
            FieldError: If raw is not a table
        """
        if raw is None:
            return cls()
        data = expect_mapping(raw)
        return cls(threshold=deserialize_duration_ms(data.get('threshold'), f'{name}.threshold'))

    def to_raw(self) -> dict[str, Any]:
        return {'threshold': duration_to_ms(self.threshold)}


@dataclass(frozen=True)
class UrlConfig:
    """Link opening settings.

    Attributes:
        launcher: Program used to open links, None when disabled
        modifiers: Modifiers that must be held to highlight and open links
        url_pattern: Custom URL pattern, None to use the built-in one
    """
    launcher: Command | None = field(default_factory=default_launcher)
    modifiers: Modifiers = Modifiers.NONE
    url_pattern: ComparablePattern | None = None

    @property
    def mods(self) -> Modifiers:
        return self.modifiers

    @classmethod
    def from_raw(cls, raw: Any, name: str = 'url') -> 'UrlConfig':
        """Build URL settings from a raw config table.

        Malformed launcher and modifiers fall back to their defaults.
        An invalid url_pattern is not recovered from.

        Args:
            raw: Table with optional 'launcher', 'modifiers' and
                'url_pattern' keys, or None for the default
            name: Section name used in log messages

        Returns:
            UrlConfig: Resolved URL settings

        Raises:
            FieldError: If raw is not a table
            PatternError: If url_pattern is not a valid regular expression
        """
        if raw is None:
            return cls()
        data = expect_mapping(raw)

        url_pattern = data.get('url_pattern')
        return cls(
            launcher=deserialize_launcher(data.get('launcher'), f'{name}.launcher'),
            modifiers=deserialize_modifiers(data.get('modifiers'), f'{name}.modifiers'),
            url_pattern=ComparablePattern(url_pattern) if url_pattern is not None else None,
        )

    def to_raw(self) -> dict[str, Any]:
        raw: dict[str, Any] = {
            'launcher': self.launcher.to_raw() if self.launcher is not None else 'None',
            'modifiers': format_modifiers(self.modifiers),
        }
        if self.url_pattern is not None:
            raw['url_pattern'] = self.url_pattern.source
        return raw


@dataclass(frozen=True)
class MouseConfig:
    """Mouse section of the terminal configuration.

    Every field is always populated. Absent or malformed values resolve
    to that field's default without affecting the other fields.

    Attributes:
        double_click: Timing window for double clicks
        triple_click: Timing window for triple clicks
        hide_when_typing: Hide the mouse cursor while typing
        url: Link detection and opening settings
    """
    double_click: ClickHandler = field(default_factory=ClickHandler)
    triple_click: ClickHandler = field(default_factory=ClickHandler)
    hide_when_typing: bool = False
    url: UrlConfig = field(default_factory=UrlConfig)

    @classmethod
    def from_raw(cls, raw: Any) -> 'MouseConfig':
        """Build the mouse configuration from the raw [mouse] table.

        Args:
            raw: Parsed [mouse] table, or None if the section is absent

        Returns:
            MouseConfig: Fully populated configuration

        Raises:
            PatternError: If url.url_pattern is not a valid regular expression
        """
        return failure_default('mouse', raw, cls._from_mapping, cls())

    @classmethod
    def _from_mapping(cls, raw: Any) -> 'MouseConfig':
        data = expect_mapping(raw)
        return cls(
            double_click=failure_default(
                'double_click', data.get('double_click'),
                lambda v: ClickHandler.from_raw(v, 'double_click'), ClickHandler(),
            ),
            triple_click=failure_default(
                'triple_click', data.get('triple_click'),
                lambda v: ClickHandler.from_raw(v, 'triple_click'), ClickHandler(),
            ),
            hide_when_typing=deserialize_bool(data.get('hide_when_typing'), 'hide_when_typing'),
            url=failure_default('url', data.get('url'), UrlConfig.from_raw, UrlConfig()),
        )

    def to_raw(self) -> dict[str, Any]:
        """Return the canonical config table for this configuration.

        Feeding the result back into from_raw yields an equal MouseConfig.
        """
        return {
            'double_click': self.double_click.to_raw(),
            'triple_click': self.triple_click.to_raw(),
            'hide_when_typing': self.hide_when_typing,
            'url': self.url.to_raw(),
        }
