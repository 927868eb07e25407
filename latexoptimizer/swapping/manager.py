"""Archive and link operations swapping real images for placeholder symlinks."""

import os
from collections import defaultdict
from pathlib import Path
from typing import Iterator

from loguru import logger

from latexoptimizer.domain.errors import OperationError
from latexoptimizer.domain.image import is_image
from latexoptimizer.domain.scan import ScanEntry
from latexoptimizer.image_store.base import ImageStore
from latexoptimizer.scanning import DirectoryScanner


class ArchiveLinkManager:
    """Moves images between the working tree and the hidden store.

    Files are identified by file name only: the hidden store is flat, and a name
    is expected to occur at most once across the working tree and the store.
    Every mutation failure raises OperationError and stops the running operation.
    """

    def __init__(self, *, store: ImageStore, scanner: DirectoryScanner | None = None):
        """Initialize the manager.

        Args:
            store: Hidden store of the working tree to operate on
            scanner: Scanner used to walk the working tree
        """
        self.store = store
        self.scanner = scanner or DirectoryScanner()

    @property
    def root(self) -> Path:
        return self.store.root

    def is_archived(self) -> bool:
        """Report whether the hidden store exists.

        The store is never deleted, so once created this stays True even after
        every image has been restored.
        """
        return self.store.exists()

    def archive(self) -> list[str]:
        """Move every real image in the working tree into the hidden store.

        Images whose name is already taken in the store are left where they are.

        Returns:
            Names of the archived images
        """
        archived = []
        for entry in self._scan_working_tree():
            if not entry.is_file or not is_image(entry.path):
                continue

            if self.store.contains(entry.name):
                logger.debug(f"{entry.name} already archived, leaving {entry.path} in place")
                continue

            self.store.add_image(entry.path)
            logger.debug(f"Archived {entry.path}")
            archived.append(entry.name)

        self._log_skipped("archive")
        logger.info(f"Archived {len(archived)} images")
        return archived

    def link(self) -> list[str]:
        """Create a placeholder symlink in the working tree for every archived image.

        Links are created at the root of the working tree. Names that already have
        a working tree entry, real or symlink, are skipped.

        Returns:
            Names of the created links
        """
        existing = self.working_tree_index()
        target = self.store.placeholder_path

        linked = []
        for name in sorted(self.store.get_images()):
            link_path = self.root / name
            if name in existing or os.path.lexists(link_path):
                continue

            try:
                link_path.symlink_to(os.path.relpath(target, link_path.parent))
            except OSError as e:
                raise OperationError("link", link_path, e) from e

            logger.debug(f"Linked {link_path} -> {target}")
            linked.append(name)

        logger.info(f"Linked {len(linked)} images to placeholder")
        return linked

    def unlink(self) -> list[Path]:
        """Remove every image-named symlink from the working tree.

        Only the links themselves are removed; real files are never touched.

        Returns:
            Paths of the removed links
        """
        removed = []
        for entry in self._scan_working_tree():
            if not entry.is_symlink or not is_image(entry.path):
                continue

            try:
                entry.path.unlink()
            except OSError as e:
                raise OperationError("unlink", entry.path, e) from e

            logger.debug(f"Removed link {entry.path}")
            removed.append(entry.path)

        self._log_skipped("unlink")
        logger.info(f"Removed {len(removed)} placeholder links")
        return removed

    def restore(self) -> list[str]:
        """Move every archived image back to the root of the working tree.

        Unlink must run first: an entry already at the destination is replaced or
        makes the move fail, depending on the platform.

        Returns:
            Names of the restored images
        """
        restored = []
        for name, source in sorted(self.store.get_images().items()):
            self.store.restore_image(source, self.root / name)
            logger.debug(f"Restored {name}")
            restored.append(name)

        logger.info(f"Restored {len(restored)} images")
        return restored

    def working_tree_index(self) -> dict[str, list[ScanEntry]]:
        """Index working tree image entries by file name.

        A name mapping to more than one entry breaks the one-file-per-name rule
        and is reported as a warning.
        """
        index: dict[str, list[ScanEntry]] = defaultdict(list)
        for entry in self._scan_working_tree():
            if (entry.is_file or entry.is_symlink) and is_image(entry.path):
                index[entry.name].append(entry)

        for name, entries in index.items():
            if len(entries) > 1:
                paths = ", ".join(str(e.path) for e in entries)
                logger.warning(f"Image name {name} is used more than once: {paths}")

        return dict(index)

    def _scan_working_tree(self) -> Iterator[ScanEntry]:
        return self.scanner.scan(self.root, exclude=[self.store.path])

    def _log_skipped(self, operation: str) -> None:
        skipped = self.scanner.report.skipped
        if skipped:
            logger.info(f"{operation}: skipped {len(skipped)} unreadable entries")
