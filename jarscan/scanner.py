"""DependencyScanner — find test classes inside dependency archives."""

from __future__ import annotations

import zipfile
from collections.abc import Sequence
from pathlib import Path

from jarscan.class_names import convert_archive_entry_to_class_name
from jarscan.errors import ArchiveScanError
from jarscan.filters import TestFilter
from jarscan.logging import get_logger
from jarscan.models import Artifact, ScanResult
from jarscan.selector import select

log = get_logger("jarscan.scanner")

_READ_ERRORS = (OSError, zipfile.BadZipFile, zipfile.LargeZipFile)


def _scan_archive(archive: Path, test_filter: TestFilter, classes: dict[str, None]) -> None:
    """Add the filtered class names of one archive to ``classes``."""
    try:
        jar = zipfile.ZipFile(archive)
    except _READ_ERRORS as e:
        raise ArchiveScanError(archive) from e

    with jar:
        before = len(classes)
        for name in jar.namelist():
            if test_filter.should_run(name, None):
                classes.setdefault(convert_archive_entry_to_class_name(name), None)
    log.debug("scanner.archive_scanned", archive=str(archive), added=len(classes) - before)


class DependencyScanner:
    """Scans dependency archives looking for tests."""

    def __init__(
        self,
        dependencies_to_scan: Sequence[Path | str | None],
        test_filter: TestFilter,
    ) -> None:
        self.dependencies_to_scan = list(dependencies_to_scan)
        self.filter = test_filter

    @classmethod
    def from_artifacts(
        cls,
        artifacts: Sequence[Artifact] | None,
        patterns: Sequence[str] | None,
        test_filter: TestFilter,
    ) -> DependencyScanner:
        """Build a scanner over the archives of the artifacts matching ``patterns``."""
        return cls(select(artifacts, patterns), test_filter)

    def scan(self) -> ScanResult:
        """
        Scan every archive in order and collect the accepted class names.

        Missing archives are skipped. The first unreadable archive aborts
        the scan with :class:`ArchiveScanError`.
        """
        # dict keys: set membership + insertion order
        classes: dict[str, None] = {}
        for dependency in self.dependencies_to_scan:
            if dependency is None:
                continue
            archive = Path(dependency)
            if not archive.is_file():
                log.debug("scanner.archive_skipped", archive=str(archive))
                continue
            _scan_archive(archive, self.filter, classes)
        return ScanResult(list(classes))


def scan(
    archives: Sequence[Path | str | None], test_filter: TestFilter
) -> ScanResult:
    """Scan ``archives`` for entries accepted by ``test_filter``."""
    return DependencyScanner(archives, test_filter).scan()
