"""Image storage for Quill."""

from .base import SecurityException, StorageException
from .images import LocalImageStore, clear_image, get_image_store

__all__ = [
    "LocalImageStore",
    "SecurityException",
    "StorageException",
    "clear_image",
    "get_image_store",
]
