import os
from pathlib import Path
from typing import Dict

from loguru import logger
from PIL import Image

from latexoptimizer.config import HIDDEN_FOLDER, PLACEHOLDER_IMAGE, settings
from latexoptimizer.domain.errors import OperationError
from latexoptimizer.domain.image import is_image
from latexoptimizer.image_store.base import ImageStore
from latexoptimizer.scanning import DirectoryScanner


class LocalImageStore(ImageStore):
    """Hidden store kept as a directory at the root of the working tree."""

    def __init__(
        self,
        root: str | Path,
        *,
        scanner: DirectoryScanner | None = None,
        placeholder_size: int | None = None,
        placeholder_color: tuple[int, int, int] | None = None,
    ) -> None:
        """Initialize LocalImageStore.

        Args:
            root: Root of the working tree. Resolved once; must be an existing directory.
            scanner: Scanner used to list the store. A fresh one is created if not provided.
            placeholder_size: Edge length of the square placeholder in pixels.
                              Defaults to the configured size.
            placeholder_color: RGB colour of the placeholder. Defaults to the configured colour.
        """
        root = Path(root)
        if not root.is_dir():
            raise NotADirectoryError(f"Working tree root {root} is not a directory")

        self._root = root.resolve()
        self._path = self._root / HIDDEN_FOLDER
        self._scanner = scanner or DirectoryScanner()
        self._placeholder_size = placeholder_size or settings.placeholder_size
        self._placeholder_color = placeholder_color or settings.placeholder_color

    @property
    def root(self) -> Path:
        return self._root

    @property
    def path(self) -> Path:
        return self._path

    @property
    def placeholder_path(self) -> Path:
        return self._path / PLACEHOLDER_IMAGE

    def exists(self) -> bool:
        """Check whether the hidden store has been created."""
        return self._path.is_dir()

    def create(self) -> None:
        """Create the hidden store if it does not exist."""
        try:
            self._path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OperationError("create hidden store", self._path, e) from e

    def ensure_placeholder(self) -> bool:
        """Create the placeholder image unless an entry with its name already exists.

        An existing placeholder is never overwritten.

        Returns:
            True if the placeholder was written by this call.
        """
        if os.path.lexists(self.placeholder_path):
            return False

        size = (self._placeholder_size, self._placeholder_size)
        try:
            Image.new("RGB", size, color=tuple(self._placeholder_color)).save(
                self.placeholder_path, format="PNG"
            )
        except (OSError, ValueError) as e:
            raise OperationError("create placeholder image", self.placeholder_path, e) from e

        logger.info(f"Created placeholder image {self.placeholder_path}")
        return True

    def contains(self, name: str) -> bool:
        """Check whether the store holds any entry with this file name."""
        return os.path.lexists(self._path / name)

    def get_images(self) -> Dict[str, Path]:
        """Get archived images keyed by file name.

        Only regular files recognised as images are returned. The placeholder is
        never part of the result.
        """
        images: Dict[str, Path] = {}
        for entry in self._scanner.scan(self._path):
            if not entry.is_file or not is_image(entry.path) or entry.name == PLACEHOLDER_IMAGE:
                continue
            if entry.name in images:
                logger.warning(
                    f"Duplicate image name {entry.name} in hidden store: "
                    f"{images[entry.name]} and {entry.path}"
                )
                continue
            images[entry.name] = entry.path
        return images

    def add_image(self, path: Path) -> Path:
        """Move an image from the working tree into the store, keeping only its file name."""
        destination = self._path / path.name
        try:
            path.rename(destination)
        except OSError as e:
            raise OperationError("archive", path, e) from e
        return destination

    def restore_image(self, source: Path, destination: Path) -> Path:
        """Move an archived image out of the store.

        No check is made for an existing entry at destination; the platform's
        rename semantics decide whether it is replaced or the move fails.
        """
        try:
            source.rename(destination)
        except OSError as e:
            raise OperationError("restore", source, e) from e
        return destination
