"""Tests for test filters — glob translation, defaults, %regex patterns."""

from __future__ import annotations

import pytest

from jarscan.errors import ConfigurationError
from jarscan.filters import (
    DEFAULT_EXCLUDES,
    DEFAULT_INCLUDES,
    AllOfFilter,
    IncludeExcludeFilter,
    compile_pattern,
    glob_to_regex,
)
from jarscan.filters import TestFilter as EntryFilter


class TestGlobToRegex:
    @pytest.mark.parametrize(
        "glob, path, expected",
        [
            ("**/*Test.class", "FooTest.class", True),
            ("**/*Test.class", "a/b/c/FooTest.class", True),
            ("**/*Test.class", "a/FooTest.classes", False),
            ("*Test.class", "a/FooTest.class", False),
            ("org/**/*.class", "org/acme/deep/A.class", True),
            ("org/*/A.class", "org/acme/deep/A.class", False),
            ("org/?/A.class", "org/x/A.class", True),
            ("**/*$*", "pkg/A$1.class", True),
            ("**/*$*", "pkg/A.class", False),
            ("a.b", "aXb", False),
        ],
    )
    def test_translation(self, glob, path, expected):
        assert bool(compile_pattern(glob).fullmatch(path)) is expected

    def test_literal_characters_escaped(self):
        assert glob_to_regex("a.b") == "a\\.b"


class TestCompilePattern:
    def test_java_suffix_becomes_class(self):
        assert compile_pattern("**/*Test.java").fullmatch("pkg/FooTest.class")

    def test_regex_pattern(self):
        p = compile_pattern("%regex[.*IT\\.class]")
        assert p.fullmatch("pkg/FooIT.class")
        assert not p.fullmatch("pkg/FooIT.classx")

    def test_invalid_regex_pattern(self):
        with pytest.raises(ConfigurationError) as exc_info:
            compile_pattern("%regex[(unclosed]")
        assert exc_info.value.pattern == "%regex[(unclosed]"


class TestIncludeExcludeFilter:
    def test_defaults(self):
        f = IncludeExcludeFilter()
        assert f.includes == list(DEFAULT_INCLUDES)
        assert f.excludes == list(DEFAULT_EXCLUDES)
        assert f.should_run("pkg/FooTest.class", None)
        assert f.should_run("pkg/TestFoo.class", None)
        assert not f.should_run("pkg/Foo.class", None)
        assert not f.should_run("pkg/FooTest$1.class", None)
        assert not f.should_run("META-INF/MANIFEST.MF", None)

    def test_custom_includes_keep_default_excludes(self):
        f = IncludeExcludeFilter(includes=["**/*.class"])
        assert f.should_run("pkg/A.class", None)
        assert not f.should_run("pkg/A$Inner.class", None)
        assert not f.should_run("pkg/", None)

    def test_empty_excludes(self):
        f = IncludeExcludeFilter(includes=["**/*.class"], excludes=[])
        assert f.should_run("pkg/A$Inner.class", None)

    def test_empty_includes_runs_nothing(self):
        f = IncludeExcludeFilter(includes=[])
        assert not f.should_run("pkg/FooTest.class", None)

    def test_blank_patterns_ignored(self):
        f = IncludeExcludeFilter(includes=["", "  ", "**/*IT.class"], excludes=[""])
        assert f.should_run("pkg/FooIT.class", None)

    def test_exclude_wins(self):
        f = IncludeExcludeFilter(includes=["**/*Test.class"], excludes=["**/slow/**"])
        assert f.should_run("pkg/FastTest.class", None)
        assert not f.should_run("pkg/slow/SlowTest.class", None)

    def test_satisfies_protocol(self):
        assert isinstance(IncludeExcludeFilter(), EntryFilter)


class TestAllOfFilter:
    def test_and(self):
        tests = IncludeExcludeFilter()
        acme_only = IncludeExcludeFilter(includes=["org/acme/**"], excludes=[])
        combined = tests.and_(acme_only)
        assert isinstance(combined, AllOfFilter)
        assert combined.should_run("org/acme/FooTest.class", None)
        assert not combined.should_run("org/other/FooTest.class", None)
        assert not combined.should_run("org/acme/Foo.class", None)

    def test_chained(self):
        combined = (
            IncludeExcludeFilter(includes=["**/*.class"], excludes=[])
            .and_(IncludeExcludeFilter(includes=["org/**"], excludes=[]))
            .and_(IncludeExcludeFilter(includes=["**/A*"], excludes=[]))
        )
        assert len(combined.filters) == 3
        assert combined.should_run("org/x/Abc.class", None)
        assert not combined.should_run("org/x/Bcd.class", None)
