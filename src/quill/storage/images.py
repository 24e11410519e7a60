"""Local filesystem store for post images."""

from pathlib import Path

import aiofiles.os

from ..config import settings
from ..logging import get_logger
from .base import SecurityException, StorageException

logger = get_logger(__name__)


class LocalImageStore:
    """Images kept under a base directory and addressed by relative path."""

    def __init__(self, base_path: Path | str):
        self.base_path = Path(base_path).resolve()

    def _get_safe_file_path(self, key: str) -> Path:
        """Get file path with security validation."""
        file_path = (self.base_path / key.lstrip("/")).resolve()

        try:
            file_path.relative_to(self.base_path)
        except ValueError as e:
            raise SecurityException(f"Path traversal detected: {key}") from e

        return file_path

    async def delete(self, key: str) -> bool:
        """Delete an image by relative path. Returns False if it does not exist."""
        file_path = self._get_safe_file_path(key)

        try:
            await aiofiles.os.remove(file_path)
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageException(f"Failed to delete file: {e}") from e

        logger.debug("Deleted image", key=key)
        return True


def get_image_store() -> LocalImageStore:
    return LocalImageStore(settings.image_base_path)


async def clear_image(file_path: str | None, store: LocalImageStore | None = None) -> None:
    """Remove a stored image. Failures are logged, never raised."""
    if not file_path:
        return

    store = store or get_image_store()
    try:
        removed = await store.delete(file_path)
    except StorageException as e:
        logger.warning("Failed to remove image", image_path=file_path, error=str(e))
        return

    if not removed:
        logger.warning("Image to remove was not found", image_path=file_path)
