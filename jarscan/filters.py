"""Test filters — decide which archive entries are tests to run."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from jarscan.errors import ConfigurationError

DEFAULT_INCLUDES: tuple[str, ...] = (
    "**/Test*.class",
    "**/*Test.class",
    "**/*Tests.class",
    "**/*TestCase.class",
)

# inner and anonymous classes
DEFAULT_EXCLUDES: tuple[str, ...] = ("**/*$*",)

_REGEX_PREFIX = "%regex["
_REGEX_SUFFIX = "]"


@runtime_checkable
class TestFilter(Protocol):
    """Interface that every entry filter must satisfy.

    ``test_class_file`` is the raw archive entry name. ``method_name`` is
    unused by archive scanning and always passed as ``None``.
    """

    def should_run(self, test_class_file: str, method_name: str | None) -> bool: ...


def glob_to_regex(pattern: str) -> str:
    """Translate an Ant-style glob over ``/``-separated paths into a regex.

    ``**`` spans directories, ``*`` and ``?`` stay within one path segment.
    A leading ``**/`` also matches entries at the archive root.
    """
    out: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        if pattern.startswith("**/", i):
            out.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("**", i):
            out.append(".*")
            i += 2
        elif pattern[i] == "*":
            out.append("[^/]*")
            i += 1
        elif pattern[i] == "?":
            out.append("[^/]")
            i += 1
        else:
            out.append(re.escape(pattern[i]))
            i += 1
    return "".join(out)


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a glob or ``%regex[...]`` pattern for full-string matching."""
    pattern = pattern.strip()
    if pattern.startswith(_REGEX_PREFIX) and pattern.endswith(_REGEX_SUFFIX):
        source = pattern[len(_REGEX_PREFIX) : -len(_REGEX_SUFFIX)]
    else:
        if pattern.endswith(".java"):
            pattern = pattern[: -len(".java")] + ".class"
        source = glob_to_regex(pattern)
    try:
        return re.compile(source)
    except re.error as e:
        raise ConfigurationError(
            f"Invalid test filter pattern: {pattern}", pattern=pattern
        ) from e


def _compile_all(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    return [compile_pattern(p) for p in patterns if p and p.strip()]


class IncludeExcludeFilter:
    """
    Accept an entry when it matches any include and no exclude.

    ``None`` selects the conventional defaults; an empty list means
    "no includes" (nothing runs) or "no excludes" respectively.
    """

    def __init__(
        self,
        includes: Iterable[str] | None = None,
        excludes: Iterable[str] | None = None,
    ) -> None:
        self.includes = list(DEFAULT_INCLUDES if includes is None else includes)
        self.excludes = list(DEFAULT_EXCLUDES if excludes is None else excludes)
        self._includes = _compile_all(self.includes)
        self._excludes = _compile_all(self.excludes)

    def should_run(self, test_class_file: str, method_name: str | None = None) -> bool:
        if not any(p.fullmatch(test_class_file) for p in self._includes):
            return False
        return not any(p.fullmatch(test_class_file) for p in self._excludes)

    def and_(self, other: TestFilter) -> AllOfFilter:
        return AllOfFilter(self, other)

    def __repr__(self) -> str:
        return f"IncludeExcludeFilter(includes={self.includes!r}, excludes={self.excludes!r})"


class AllOfFilter:
    """Accept an entry only when every wrapped filter accepts it."""

    def __init__(self, *filters: TestFilter) -> None:
        self.filters = filters

    def should_run(self, test_class_file: str, method_name: str | None = None) -> bool:
        return all(f.should_run(test_class_file, method_name) for f in self.filters)

    def and_(self, other: TestFilter) -> AllOfFilter:
        return AllOfFilter(*self.filters, other)
