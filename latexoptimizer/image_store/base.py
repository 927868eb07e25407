from pathlib import Path
from typing import Dict, Protocol


class ImageStore(Protocol):
    """Protocol for the hidden store holding archived images and the placeholder."""

    @property
    def root(self) -> Path:
        """Root of the working tree the store belongs to."""
        ...

    @property
    def path(self) -> Path:
        """Directory of the hidden store."""
        ...

    @property
    def placeholder_path(self) -> Path:
        """Path of the shared placeholder image."""
        ...

    def exists(self) -> bool:
        """Check whether the hidden store has been created."""
        ...

    def create(self) -> None:
        """Create the hidden store if it does not exist."""
        ...

    def ensure_placeholder(self) -> bool:
        """Create the placeholder image if absent. Returns True if it was created."""
        ...

    def contains(self, name: str) -> bool:
        """Check whether the store holds any entry with this file name."""
        ...

    def get_images(self) -> Dict[str, Path]:
        """Get archived images keyed by file name, placeholder excluded."""
        ...

    def add_image(self, path: Path) -> Path:
        """Move an image from the working tree into the store."""
        ...

    def restore_image(self, source: Path, destination: Path) -> Path:
        """Move an archived image out of the store to destination."""
        ...
