"""Swapping real images for placeholder symlinks and back."""

from latexoptimizer.swapping.manager import ArchiveLinkManager

__all__ = [
    "ArchiveLinkManager",
]
