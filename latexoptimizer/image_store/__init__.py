"""Hidden store for archived images."""

from latexoptimizer.image_store.base import ImageStore
from latexoptimizer.image_store.local import LocalImageStore

__all__ = [
    "ImageStore",
    "LocalImageStore",
]
