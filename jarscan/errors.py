"""Custom exceptions for jarscan."""

from __future__ import annotations

from pathlib import Path


class JarScanError(Exception):
    """Base exception for all jarscan errors."""


class ConfigurationError(JarScanError, ValueError):
    """Raised when a coordinate or filter pattern is malformed."""

    def __init__(self, message: str, pattern: str | None = None):
        self.pattern = pattern
        super().__init__(message)


class ArchiveScanError(JarScanError):
    """Raised when a dependency archive cannot be opened or read."""

    def __init__(self, archive: Path):
        self.archive = archive
        super().__init__(f"Could not scan dependency {archive}")
