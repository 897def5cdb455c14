"""Exclusion pattern matching.

Compiles user-supplied glob strings and decides whether an ignored
path should be spared from deletion. A pattern is tried against the
full relative path, the final path component, and every component of
the path, so ``*.log``, ``build/*`` and ``node_modules`` all behave the
way users expect regardless of how deep the path is.
"""

import fnmatch
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import PurePath

from cleanrepo.errors import InvalidPatternError


@dataclass(frozen=True, slots=True)
class ExclusionPattern:
    """A compiled glob pattern.

    Attributes:
        source: Pattern string as given by the user.
        regex: Compiled case-sensitive regular expression.
    """

    source: str
    regex: re.Pattern[str]

    @classmethod
    def compile(cls, pattern: str) -> "ExclusionPattern":
        """Validate and compile a glob pattern.

        Raises:
            InvalidPatternError: If the pattern is not valid glob syntax.
        """
        validate_pattern(pattern)
        return cls(source=pattern, regex=re.compile(fnmatch.translate(pattern)))

    def matches(self, text: str) -> bool:
        """Check whether the whole of ``text`` matches this pattern."""
        return self.regex.match(text) is not None


def validate_pattern(pattern: str) -> None:
    """Check glob syntax that fnmatch would silently accept.

    Rejects unterminated character classes (``[``, ``[!``, ``[]``) and
    recursive wildcards that are not a whole path component (``a**``,
    ``**b``, ``***``).

    Args:
        pattern: Glob pattern string.

    Raises:
        InvalidPatternError: If the pattern is malformed.
    """
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == "[":
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            # A leading ']' is a literal member of the class
            if j < n and pattern[j] == "]":
                j += 1
            close = pattern.find("]", j)
            if close == -1:
                raise InvalidPatternError(pattern, f"unterminated character class at {i}")
            i = close + 1
            continue
        if char == "*":
            j = i
            while j < n and pattern[j] == "*":
                j += 1
            run = j - i
            if run > 2:
                raise InvalidPatternError(pattern, "wildcards are either '*' or '**'")
            if run == 2:
                before_ok = i == 0 or pattern[i - 1] == "/"
                after_ok = j == n or pattern[j] == "/"
                if not (before_ok and after_ok):
                    raise InvalidPatternError(
                        pattern, "'**' must form a whole path component"
                    )
            i = j
            continue
        i += 1


class PatternMatcher:
    """Decides whether a path is covered by any exclusion pattern.

    The matcher is immutable after construction. An empty matcher
    matches nothing.

    Example:
        >>> matcher = PatternMatcher(["*.log", "node_modules"])
        >>> matcher.matches(PurePath("web/node_modules/react"))
        True
    """

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        """Compile all patterns.

        Args:
            patterns: Glob pattern strings, in order.

        Raises:
            InvalidPatternError: On the first malformed pattern. No
                matcher is produced in that case.
        """
        self._patterns: tuple[ExclusionPattern, ...] = tuple(
            ExclusionPattern.compile(p) for p in patterns
        )

    @property
    def patterns(self) -> tuple[str, ...]:
        """Source strings of the compiled patterns."""
        return tuple(p.source for p in self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __bool__(self) -> bool:
        return bool(self._patterns)

    def __repr__(self) -> str:
        return f"PatternMatcher({list(self.patterns)!r})"

    def matches(self, path: PurePath | str) -> bool:
        """Check if a path matches any exclusion pattern.

        For each pattern, tries the full path (with forward slashes),
        then the final component, then every component.

        Args:
            path: Path relative to the repository root.

        Returns:
            True if any pattern matches, False otherwise.
        """
        if not self._patterns:
            return False

        pure = PurePath(path)
        full = pure.as_posix()
        name = pure.name
        parts = pure.parts

        for pattern in self._patterns:
            if pattern.matches(full):
                return True
            if name and pattern.matches(name):
                return True
            if any(pattern.matches(part) for part in parts):
                return True

        return False
