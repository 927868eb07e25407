"""Tests for image file classification."""

from pathlib import Path

import pytest

from latexoptimizer.domain.image import IMAGE_EXTENSIONS, is_image


@pytest.mark.parametrize(
    "description,path,expected",
    [
        ("PNG image", "photo.png", True),
        ("JPG image", "photo.jpg", True),
        ("JPEG image", "photo.jpeg", True),
        ("GIF image", "anim.gif", True),
        ("BMP image", "scan.bmp", True),
        ("Nested path", "figures/sub/plot.png", True),
        ("Multiple dots", "plot.v2.final.jpg", True),
        ("Uppercase extension", "photo.PNG", False),
        ("Mixed case extension", "photo.Jpg", False),
        ("Unsupported image format", "vector.svg", False),
        ("Unsupported raster format", "photo.webp", False),
        ("LaTeX source", "main.tex", False),
        ("No extension", "Makefile", False),
        ("Dotfile named like an extension", ".png", False),
        ("Extension only in directory name", "images.png/readme", False),
    ],
)
def test_is_image(description: str, path: str, expected: bool) -> None:
    assert is_image(path) is expected, f"Failed test case: {description}"


def test_is_image_accepts_path_objects() -> None:
    assert is_image(Path("/tmp/project/photo.gif"))
    assert not is_image(Path("/tmp/project/notes.txt"))


def test_recognised_extensions() -> None:
    assert IMAGE_EXTENSIONS == {"png", "jpg", "jpeg", "gif", "bmp"}
