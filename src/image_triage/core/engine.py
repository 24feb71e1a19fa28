"""Triage actions: move, delete to trash, and undo."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from image_triage.core.decoder import DecodedImage, DecodeError, decode_image
from image_triage.core.tracker import ImageTracker
from image_triage.utils.config import Config
from image_triage.utils.logger import setup_logger

logger = setup_logger(__name__)

Decoder = Callable[[Path], DecodedImage]


@dataclass(frozen=True)
class UndoRecord:
    """Where a file ended up (``after``) and where it came from (``before``)."""

    after: Path
    before: Path


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a triage action."""

    success: bool
    changed: bool = False
    message: str = ""

    @classmethod
    def noop(cls, message: str) -> "ActionResult":
        return cls(success=True, changed=False, message=message)

    @classmethod
    def failed(cls, message: str) -> "ActionResult":
        return cls(success=False, changed=False, message=message)


class TriageEngine:
    """
    Performs triage actions on the filesystem and keeps the tracker in step.

    This is the only component that touches the filesystem. Every operation
    runs synchronously and is attempted exactly once. Failures are resolved
    here and reported as an ActionResult; in-memory state is left untouched
    when an action fails.
    """

    def __init__(
        self,
        config: Config,
        tracker: ImageTracker,
        undo_stack: Optional[List[UndoRecord]] = None,
        decoder: Decoder = decode_image,
    ):
        """
        Initialize the triage engine.

        Args:
            config: Configuration instance (trash folder is read at action time)
            tracker: Tracker holding the pending queue
            undo_stack: Existing undo stack to continue (default: new, empty)
            decoder: Callable decoding a path into a DecodedImage
        """
        self.config = config
        self.tracker = tracker
        self.decoder = decoder
        self._undo_stack: List[UndoRecord] = undo_stack if undo_stack is not None else []
        self.current_image: Optional[DecodedImage] = None
        self.decode_error: Optional[str] = None

    @property
    def current_path(self) -> Optional[Path]:
        return self.tracker.current_path

    @property
    def undo_depth(self) -> int:
        return len(self._undo_stack)

    @property
    def undo_history(self) -> List[UndoRecord]:
        """Copy of the undo stack, oldest first."""
        return list(self._undo_stack)

    def clear_selection(self) -> None:
        """Drop the decoded bitmap so the next display reloads it."""
        self.current_image = None
        self.decode_error = None

    def load_current(self) -> Optional[DecodedImage]:
        """
        Decode the current image if it is not loaded yet.

        A decode failure only clears the bitmap: the path and index stay, so
        the image can still be moved or deleted.

        Returns:
            The decoded image, or None if there is nothing to show
        """
        path = self.tracker.current_path
        if path is None:
            self.clear_selection()
            return None

        if self.current_image is not None and self.current_image.path == path:
            return self.current_image

        try:
            self.current_image = self.decoder(path)
            self.decode_error = None
            logger.debug(f"Decoded {path} ({self.current_image.resolution})")
        except DecodeError as e:
            logger.error(str(e))
            self.current_image = None
            self.decode_error = e.reason
        return self.current_image

    def skip(self) -> ActionResult:
        """Leave the current image in place and show the next one."""
        if self.tracker.advance() is None:
            return ActionResult.noop("No image selected")
        self.clear_selection()
        return ActionResult.noop(f"Showing {self.tracker.current_path.name}")

    def move_to(self, folder: Optional[Path]) -> ActionResult:
        """
        Move the current image into ``folder``, keeping its file name.

        Args:
            folder: Destination folder

        Returns:
            ActionResult; on failure nothing was moved and no state changed
        """
        current = self.tracker.current_path
        if current is None:
            return ActionResult.noop("No image selected")

        if folder is None:
            return ActionResult.failed("Destination folder is not configured")

        destination = folder / current.name
        if destination.exists():
            logger.error(f"Destination already exists: {destination}")
            return ActionResult.failed(f"Destination already exists: {destination}")

        try:
            current.rename(destination)
        except OSError as e:
            logger.error(f"Failed to move {current} -> {destination}: {e}")
            return ActionResult.failed(f"Failed to move {current.name}: {e}")

        self._undo_stack.append(UndoRecord(after=destination, before=current))
        self.tracker.remove_current()
        self.clear_selection()

        logger.info(f"Moved: {current} -> {destination}")
        return ActionResult(success=True, changed=True, message=f"Moved {current.name} to {folder}")

    def delete_current(self) -> ActionResult:
        """
        Move the current image to the trash folder.

        The trash folder is created if missing (one level only; its parent
        must already exist).

        Returns:
            ActionResult; on failure nothing was moved and no state changed
        """
        if self.tracker.current_path is None:
            return ActionResult.noop("No image selected")

        trash = self.config.trash_folder
        if trash is None:
            return ActionResult.failed("Trash folder is not configured")

        created = False
        if not trash.exists():
            try:
                trash.mkdir()
            except OSError as e:
                logger.error(f"Failed to create trash folder {trash}: {e}")
                return ActionResult.failed(f"Failed to create trash folder {trash}: {e}")
            created = True
            logger.info(f"Created trash folder: {trash}")

        result = self.move_to(trash)
        if not result.success and created:
            try:
                trash.rmdir()
                logger.debug(f"Removed unused trash folder: {trash}")
            except OSError as e:
                logger.warning(f"Could not remove trash folder {trash}: {e}")
        return result

    def undo(self) -> ActionResult:
        """
        Reverse the most recent move or delete.

        The restored image is appended to the end of the queue and becomes
        current. A record whose moved file has disappeared is discarded.

        Returns:
            ActionResult; an empty undo stack is a no-op
        """
        if not self._undo_stack:
            return ActionResult.noop("Nothing to undo")

        record = self._undo_stack.pop()

        if not record.after.exists():
            logger.warning(
                f"Cannot undo, file no longer exists: {record.after} (discarding undo entry)"
            )
            return ActionResult.failed(f"Cannot undo, {record.after} no longer exists")

        if record.before.exists():
            self._undo_stack.append(record)
            logger.error(f"Original location occupied, cannot restore: {record.before}")
            return ActionResult.failed(f"Original location occupied: {record.before}")

        try:
            record.after.rename(record.before)
        except OSError as e:
            self._undo_stack.append(record)
            logger.error(f"Failed to undo {record.after} -> {record.before}: {e}")
            return ActionResult.failed(f"Failed to undo: {e}")

        # A later scan may have queued the file at its moved-to location
        self.tracker.discard(record.after)
        self.tracker.reinsert(record.before)
        self.clear_selection()

        logger.info(f"Restored: {record.after} -> {record.before}")
        return ActionResult(success=True, changed=True, message=f"Restored {record.before.name}")
