"""Directory scanning used by the archive and link operations."""

from latexoptimizer.scanning.directory_scanner import DirectoryScanner

__all__ = [
    "DirectoryScanner",
]
