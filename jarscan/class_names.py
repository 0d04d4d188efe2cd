"""Conversion between archive entry paths and Java class names."""

from __future__ import annotations

_CLASS_SUFFIX = ".class"


def convert_archive_entry_to_class_name(entry: str) -> str:
    """``com/foo/BarTest.class`` -> ``com.foo.BarTest``."""
    if entry.endswith(_CLASS_SUFFIX):
        entry = entry[: -len(_CLASS_SUFFIX)]
    return entry.replace("/", ".")


def class_name_to_entry(class_name: str) -> str:
    """``com.foo.BarTest`` -> ``com/foo/BarTest.class``."""
    return class_name.replace(".", "/") + _CLASS_SUFFIX
