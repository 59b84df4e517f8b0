"""Comparable wrapper around compiled URL patterns."""

import re
from collections.abc import Iterator
from typing import Any


class PatternError(ValueError):
    """Raised when a URL pattern cannot be compiled.

    There is no sensible default pattern, so this error is never
    recovered from while loading configuration.
    """
    pass


class ComparablePattern:
    """Compiled regular expression that compares by source text.

    Two instances are equal iff they were built from the same pattern
    string. The compiled form is kept for matching only.

    Attributes:
        source: Pattern string as written in the config
        regex: Compiled pattern
    """

    __slots__ = ('_regex', '_source')

    def __init__(self, source: Any) -> None:
        """Compile the pattern.

        Args:
            source: Regular expression source string

        Raises:
            PatternError: If source is not a string or not a valid pattern
        """
        if not isinstance(source, str):
            raise PatternError(f'URL pattern must be a string, got {source!r}')  # noqa: TRY003
        try:
            regex = re.compile(source)
        except re.error as e:
            raise PatternError(f'Invalid URL pattern {source!r}: {e}') from e  # noqa: TRY003
        self._source = source
        self._regex = regex

    @property
    def source(self) -> str:
        return self._source

    @property
    def regex(self) -> re.Pattern[str]:
        return self._regex

    def search(self, text: str) -> re.Match[str] | None:
        return self._regex.search(text)

    def finditer(self, text: str) -> Iterator[re.Match[str]]:
        return self._regex.finditer(text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComparablePattern):
            return NotImplemented
        return self._source == other._source

    def __hash__(self) -> int:
        return hash(self._source)

    def __repr__(self) -> str:
        return f'ComparablePattern({self._source!r})'
