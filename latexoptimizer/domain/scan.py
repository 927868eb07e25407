"""Directory scan domain models."""

from pathlib import Path

from pydantic import BaseModel


class ScanEntry(BaseModel):
    """A filesystem entry found while walking a directory tree.

    Attributes:
        path: Path of the entry.
        is_file: Whether the entry is a regular file. Symlinks are not followed.
        is_symlink: Whether the entry itself is a symlink.
        is_dir: Whether the entry is a real directory (not a link to one).
    """

    path: Path
    is_file: bool
    is_symlink: bool
    is_dir: bool = False

    @property
    def name(self) -> str:
        return self.path.name


class SkippedEntry(BaseModel):
    """An entry the scanner could not read."""

    path: Path
    reason: str


class ScanReport(BaseModel):
    """Entries skipped during a single walk."""

    skipped: list[SkippedEntry] = []

    def add(self, path: Path, reason: str) -> None:
        self.skipped.append(SkippedEntry(path=path, reason=reason))
