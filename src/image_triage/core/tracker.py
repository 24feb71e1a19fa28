"""Image set tracking: the pending-image queue and the current index."""

from pathlib import Path
from typing import Iterable, List, Optional

from image_triage.utils.logger import setup_logger

logger = setup_logger(__name__)

# Matched case-insensitively against the file suffix
IMAGE_EXTENSIONS = {
    ".png",
    ".jpg",
    ".jpeg",
    ".webp",
    ".bmp",
    ".tiff",
    ".gif",
}


def is_image_file(file_path: Path) -> bool:
    """
    Check if a file has a supported image extension.

    Args:
        file_path: File path to check

    Returns:
        True if the suffix is one of IMAGE_EXTENSIONS, ignoring case
    """
    return file_path.suffix.lower() in IMAGE_EXTENSIONS


def scan(folder: Optional[Path]) -> List[Path]:
    """
    List the images directly inside a folder.

    Only immediate children are considered. Results keep the filesystem
    enumeration order; no sorting is applied.

    Args:
        folder: Folder to scan (None means "not configured")

    Returns:
        List of image file paths, empty if the folder does not exist
    """
    if folder is None or not folder.is_dir():
        logger.info(f"Input folder not found, nothing to triage: {folder}")
        return []

    images: List[Path] = []
    try:
        for item in folder.iterdir():
            if item.is_file() and is_image_file(item):
                images.append(item)
    except OSError as e:
        logger.warning(f"Could not list {folder}: {e}")
        return []

    logger.info(f"Found {len(images)} images in {folder}")
    return images


class ImageTracker:
    """
    Ordered queue of pending images plus the index of the current one.

    Whenever the queue is non-empty exactly one element is current
    (``0 <= index < len(queue)``); when it is empty ``index`` is None.
    """

    def __init__(self, paths: Optional[Iterable[Path]] = None):
        self._queue: List[Path] = []
        self._index: Optional[int] = None
        if paths is not None:
            self.reset(paths)

    def __len__(self) -> int:
        return len(self._queue)

    @property
    def queue(self) -> List[Path]:
        """Copy of the pending queue, in order."""
        return list(self._queue)

    @property
    def index(self) -> Optional[int]:
        return self._index

    @property
    def is_empty(self) -> bool:
        return not self._queue

    @property
    def current_path(self) -> Optional[Path]:
        """Path of the current image, or None when the queue is empty."""
        if self._index is None:
            return None
        return self._queue[self._index]

    def reset(self, paths: Iterable[Path]) -> None:
        """Replace the queue; the first image becomes current."""
        self._queue = list(paths)
        self._index = 0 if self._queue else None

    def select(self, index: int) -> None:
        """
        Make the image at ``index`` current.

        Raises:
            IndexError: If index is outside the queue
        """
        if not 0 <= index < len(self._queue):
            raise IndexError(f"No image at position {index}")
        self._index = index

    def advance(self) -> Optional[int]:
        """
        Skip to the next image, leaving the current one in the queue.

        Wraps to the first image after the last one.

        Returns:
            The new index, or None if the queue is empty
        """
        if self._index is None:
            return None
        self._index = (self._index + 1) % len(self._queue)
        return self._index

    def remove_current(self) -> Optional[int]:
        """
        Remove the current image from the queue.

        The new index is clamped to the last element rather than wrapping to
        the first, so triaging the tail of the queue keeps moving backwards
        through it.

        Returns:
            The new index, or None if the queue is now empty (or already was)
        """
        if self._index is None:
            return None

        del self._queue[self._index]
        if self._queue:
            self._index = min(self._index, len(self._queue) - 1)
        else:
            self._index = None
        return self._index

    def discard(self, path: Path) -> Optional[int]:
        """
        Remove ``path`` from the queue if it is queued.

        The current image stays current when another entry is removed;
        removing the current image follows the same clamp as remove_current.

        Returns:
            The new index, or None if the queue is empty
        """
        if path not in self._queue:
            return self._index

        position = self._queue.index(path)
        if position == self._index:
            return self.remove_current()

        del self._queue[position]
        if position < self._index:
            self._index -= 1
        return self._index

    def reinsert(self, path: Path) -> int:
        """
        Append a path to the end of the queue and make it current.

        Undone images reappear at the end, not at their original position.

        Args:
            path: Image path to put back

        Returns:
            The new index (always the last position)
        """
        self._queue.append(path)
        self._index = len(self._queue) - 1
        return self._index
