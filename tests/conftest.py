import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest
from loguru import logger
from PIL import Image

from latexoptimizer.commands import CommandDispatcher
from latexoptimizer.image_store.local import LocalImageStore
from latexoptimizer.scanning import DirectoryScanner
from latexoptimizer.swapping import ArchiveLinkManager


@pytest.fixture(autouse=True)
def mock_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Override settings for testing."""
    monkeypatch.setattr("latexoptimizer.config.settings.log_level", "DEBUG")
    monkeypatch.setattr("latexoptimizer.config.settings.placeholder_size", 100)
    monkeypatch.setattr("latexoptimizer.config.settings.placeholder_color", (200, 200, 200))


@pytest.fixture(autouse=True)
def reset_logger() -> Generator[None, None, None]:
    """Drop handlers the CLI installs on captured streams."""
    yield
    logger.remove()


@pytest.fixture
def working_tree() -> Generator[Path, None, None]:
    """Create an empty temporary working tree."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir).resolve()


@pytest.fixture
def store(working_tree: Path) -> LocalImageStore:
    return LocalImageStore(working_tree)


@pytest.fixture
def initialized_store(store: LocalImageStore) -> LocalImageStore:
    """Hidden store created with its placeholder."""
    store.create()
    store.ensure_placeholder()
    return store


@pytest.fixture
def manager(initialized_store: LocalImageStore) -> ArchiveLinkManager:
    return ArchiveLinkManager(store=initialized_store, scanner=DirectoryScanner())


@pytest.fixture
def dispatcher(working_tree: Path) -> CommandDispatcher:
    return CommandDispatcher.for_root(working_tree)


@pytest.fixture
def make_image() -> Callable[..., bytes]:
    """Return a helper writing a small real image and returning its bytes."""

    def write_image(path: Path, color: tuple[int, int, int] = (255, 0, 0)) -> bytes:
        path.parent.mkdir(parents=True, exist_ok=True)
        image_format = {".jpg": "JPEG", ".jpeg": "JPEG"}.get(path.suffix, path.suffix[1:].upper())
        Image.new("RGB", (4, 4), color=color).save(path, format=image_format)
        return path.read_bytes()

    return write_image
