"""Best-effort recursive directory walking."""

import os
import stat
from pathlib import Path
from typing import Iterable, Iterator, Optional

from loguru import logger

from latexoptimizer.domain.scan import ScanEntry, ScanReport


class DirectoryScanner:
    """Walk a directory tree, skipping entries that cannot be read.

    Unreadable entries never abort a walk. They are recorded in ``report``,
    which is reset at the start of every walk.
    """

    def __init__(self) -> None:
        self.report = ScanReport()

    def scan(self, root: Path, exclude: Iterable[Path] = ()) -> Iterator[ScanEntry]:
        """Lazily yield every entry below root.

        Directories reached through a symlink are yielded as symlink entries but
        never descended into. Directories in ``exclude`` are neither yielded nor
        entered.

        Args:
            root: Directory to walk. The root itself is not yielded.
            exclude: Directories to prune from the walk.

        Yields:
            One ScanEntry per readable entry, in no particular order.
        """
        self.report = ScanReport()
        root = Path(root)
        excluded = {Path(path) for path in exclude}

        if not root.is_dir():
            self._skip(root, "not a directory")
            return

        def on_error(exc: OSError) -> None:
            self._skip(Path(exc.filename) if exc.filename else root, exc.strerror or str(exc))

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
            parent = Path(dirpath)
            dirnames[:] = [name for name in dirnames if parent / name not in excluded]

            for name in dirnames + filenames:
                entry = self._classify(parent / name)
                if entry is not None:
                    yield entry

    def _classify(self, path: Path) -> Optional[ScanEntry]:
        try:
            mode = path.lstat().st_mode
        except OSError as e:
            # Vanished or unreadable since the directory was listed
            self._skip(path, e.strerror or str(e))
            return None

        return ScanEntry(
            path=path,
            is_file=stat.S_ISREG(mode),
            is_symlink=stat.S_ISLNK(mode),
            is_dir=stat.S_ISDIR(mode),
        )

    def _skip(self, path: Path, reason: str) -> None:
        logger.debug(f"Skipping {path}: {reason}")
        self.report.add(path, reason)
