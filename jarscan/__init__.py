"""jarscan: find test classes inside dependency archives."""

__version__ = "0.1.0"

import logging

logging.getLogger("jarscan").addHandler(logging.NullHandler())

from jarscan.errors import ArchiveScanError, ConfigurationError, JarScanError
from jarscan.filters import AllOfFilter, IncludeExcludeFilter, TestFilter
from jarscan.models import Artifact, ScanResult
from jarscan.run_mode import MODES, RunMode
from jarscan.scanner import DependencyScanner, scan
from jarscan.selector import ArtifactSelector, CoordinatePattern, select

__all__ = [
    "MODES",
    "AllOfFilter",
    "ArchiveScanError",
    "Artifact",
    "ArtifactSelector",
    "ConfigurationError",
    "CoordinatePattern",
    "DependencyScanner",
    "IncludeExcludeFilter",
    "JarScanError",
    "RunMode",
    "ScanResult",
    "TestFilter",
    "scan",
    "select",
]
