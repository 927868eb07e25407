"""Command flows composed from the archive and link operations."""

from pathlib import Path

from loguru import logger

from latexoptimizer.image_store import ImageStore, LocalImageStore
from latexoptimizer.scanning import DirectoryScanner
from latexoptimizer.swapping import ArchiveLinkManager


class CommandDispatcher:
    """Runs the init, update and switch flows against one working tree."""

    def __init__(self, *, store: ImageStore, manager: ArchiveLinkManager):
        self.store = store
        self.manager = manager

    @classmethod
    def for_root(cls, root: str | Path) -> "CommandDispatcher":
        """Create a dispatcher for the working tree rooted at root."""
        scanner = DirectoryScanner()
        store = LocalImageStore(root, scanner=DirectoryScanner())
        return cls(store=store, manager=ArchiveLinkManager(store=store, scanner=scanner))

    def init(self) -> str:
        """Create the hidden store and placeholder, then archive and link all images."""
        self.store.create()
        self.store.ensure_placeholder()
        self.manager.archive()
        self.manager.link()
        return "Initialization complete."

    def update(self) -> str:
        """Archive and link images added since the last run."""
        self.manager.archive()
        self.manager.link()
        return "Update complete."

    def switch(self) -> str:
        """Toggle between original images and placeholder links.

        The state is taken from the existence of the hidden store, which is never
        removed. After the first init every switch therefore restores originals.
        """
        if not self.manager.is_archived():
            self.manager.link()
            return "Switched to placeholder images."

        removed = self.manager.unlink()
        restored = self.manager.restore()
        if not removed and not restored:
            logger.warning(
                f"Hidden store {self.store.path} exists but no placeholder links were active; "
                "nothing was switched"
            )
        return "Switched to original images."
