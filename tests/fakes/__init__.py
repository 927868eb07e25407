from .fake_image_store import FailingImageStore

__all__ = ["FailingImageStore"]
