"""Data models for dependency selection and archive scanning."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from jarscan.class_names import class_name_to_entry

if TYPE_CHECKING:
    from jarscan.filters import TestFilter


@dataclass(frozen=True)
class Artifact:
    """A resolved dependency as supplied by the build's artifact resolution."""

    group_id: str
    artifact_id: str
    version: str
    type: str | None = None  # packaging, e.g. "jar" / "test-jar"
    classifier: str | None = None  # e.g. "tests"
    file: Path | None = None  # None until downloaded

    @property
    def coordinates(self) -> str:
        parts = [self.group_id, self.artifact_id, self.type or ""]
        if self.classifier:
            parts.append(self.classifier)
        parts.append(self.version)
        return ":".join(parts)


@dataclass
class ScanResult:
    """Ordered, duplicate-free class names discovered by a scan."""

    classes: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        # dict keys keep first-insertion order
        self.classes = list(dict.fromkeys(self.classes))

    def __len__(self) -> int:
        return len(self.classes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.classes)

    def size(self) -> int:
        return len(self.classes)

    def is_empty(self) -> bool:
        return not self.classes

    def class_name(self, index: int) -> str:
        return self.classes[index]

    def append(self, other: ScanResult | Iterable[str] | None) -> ScanResult:
        """Return a new result with ``other``'s classes after ours."""
        if other is None:
            return ScanResult(list(self.classes))
        return ScanResult([*self.classes, *other])

    def apply_filter(self, test_filter: TestFilter) -> ScanResult:
        """Keep only the classes whose class-file path passes ``test_filter``."""
        return ScanResult(
            [
                name
                for name in self.classes
                if test_filter.should_run(class_name_to_entry(name), None)
            ]
        )
