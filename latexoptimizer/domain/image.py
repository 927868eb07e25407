"""Image domain helpers."""

from pathlib import Path

IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "gif", "bmp"})


def is_image(path: str | Path) -> bool:
    """Check whether a path names an image file.

    Only the extension of the file name is considered, compared case sensitively
    against lowercase extensions. The file content is never inspected.

    Args:
        path: Path or file name to classify.

    Returns:
        True if the extension is one of IMAGE_EXTENSIONS.
    """
    suffix = Path(path).suffix
    return suffix[1:] in IMAGE_EXTENSIONS if suffix else False
