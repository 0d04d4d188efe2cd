"""Shared pytest fixtures for jarscan tests."""

from __future__ import annotations

import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_jar(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a zip archive with the given entry names."""

    def _make(name: str, entries: list[str]) -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as zf:
            for entry in entries:
                zf.writestr(entry, b"" if entry.endswith("/") else b"\xca\xfe\xba\xbe")
        return path

    return _make


class ClassesOnly:
    """Accepts top-level class files, rejects inner classes."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None]] = []

    def should_run(self, test_class_file: str, method_name: str | None) -> bool:
        self.calls.append((test_class_file, method_name))
        return test_class_file.endswith(".class") and "$" not in test_class_file


@pytest.fixture
def classes_only() -> ClassesOnly:
    return ClassesOnly()
