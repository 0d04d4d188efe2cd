"""Artifact selector — pick dependency archives by coordinate pattern.

Pattern format::

    groupId:artifactId[:type[:classifier[:version]]]

groupId, artifactId and classifier are regular expressions (full match);
type and version are compared literally. Blank optional fields match anything.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from jarscan.errors import ConfigurationError
from jarscan.logging import get_logger
from jarscan.models import Artifact

log = get_logger("jarscan.selector")

PATTERN_FORMAT = "groupId:artifactId[:packaging/type[:classifier[:version]]]"


def _optional(fields: list[str], index: int) -> str | None:
    if index < len(fields) and fields[index].strip():
        return fields[index]
    return None


def _compile(source: str, pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(source)
    except re.error as e:
        raise ConfigurationError(
            f"dependencyToScan argument contains an invalid regular expression: {pattern}",
            pattern=pattern,
        ) from e


@dataclass(frozen=True)
class CoordinatePattern:
    """A parsed ``groupId:artifactId[:type[:classifier[:version]]]`` pattern."""

    source: str
    group_id: re.Pattern[str]
    artifact_id: re.Pattern[str]
    type: str | None = None
    classifier: re.Pattern[str] | None = None
    version: str | None = None

    @classmethod
    def parse(cls, pattern: str) -> CoordinatePattern:
        if ":" not in pattern:
            raise ConfigurationError(
                f"dependencyToScan argument should be in format '{PATTERN_FORMAT}': {pattern}",
                pattern=pattern,
            )
        # str.split keeps empty fields, so "g:a::tests" has a blank type
        fields = pattern.split(":")
        classifier = _optional(fields, 3)
        return cls(
            source=pattern,
            group_id=_compile(fields[0], pattern),
            artifact_id=_compile(fields[1], pattern),
            type=_optional(fields, 2),
            classifier=_compile(classifier, pattern) if classifier is not None else None,
            version=_optional(fields, 4),
        )

    def matches(self, artifact: Artifact) -> bool:
        if not (
            self.group_id.fullmatch(artifact.group_id)
            and self.artifact_id.fullmatch(artifact.artifact_id)
        ):
            return False
        if self.version is not None and artifact.version != self.version:
            return False
        if self.type is not None and artifact.type != self.type:
            return False
        if self.classifier is not None and (
            artifact.classifier is None or not self.classifier.fullmatch(artifact.classifier)
        ):
            return False
        return True


class ArtifactSelector:
    """Filters resolved artifacts by a list of coordinate patterns."""

    def __init__(self, patterns: Sequence[str] | None) -> None:
        self._raw = list(patterns or [])

    def select(self, artifacts: Sequence[Artifact] | None) -> list[Path | None]:
        """
        Return the file of every artifact matching any pattern.

        One entry is appended per (artifact, pattern) match, so an artifact
        matched by two patterns appears twice.

        Raises:
            ConfigurationError: a pattern is malformed. Nothing is returned.
        """
        matches: list[Path | None] = []
        if not self._raw or not artifacts:
            return matches

        # Validate everything before matching anything.
        patterns = [CoordinatePattern.parse(p) for p in self._raw]

        for artifact in artifacts:
            for pattern in patterns:
                if pattern.matches(artifact):
                    log.debug(
                        "selector.matched",
                        artifact=artifact.coordinates,
                        pattern=pattern.source,
                        file=str(artifact.file) if artifact.file else None,
                    )
                    matches.append(artifact.file)
        return matches


def select(
    artifacts: Sequence[Artifact] | None, patterns: Sequence[str] | None
) -> list[Path | None]:
    """Return the files of ``artifacts`` matching any of ``patterns``."""
    return ArtifactSelector(patterns).select(artifacts)
