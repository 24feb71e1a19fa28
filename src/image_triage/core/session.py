"""Application state: configuring folders vs. triaging images."""

from dataclasses import dataclass
from typing import List, Union

from image_triage.core.decoder import decode_image
from image_triage.core.engine import Decoder, TriageEngine, UndoRecord
from image_triage.core.tracker import ImageTracker, scan
from image_triage.utils.config import Config
from image_triage.utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass
class Configuring:
    """Folders are being edited; no queue is loaded."""


@dataclass
class Triaging:
    """Images are being triaged through ``engine``."""

    engine: TriageEngine


AppState = Union[Configuring, Triaging]


class TriageApp:
    """
    Explicit session context handed to whatever handles user input.

    Owns the Config and the state machine. The undo stack lives as long as
    the app, so leaving and re-entering triage keeps earlier actions undoable.
    """

    def __init__(self, config: Config, decoder: Decoder = decode_image):
        self.config = config
        self.decoder = decoder
        self.state: AppState = Configuring()
        self._undo_stack: List[UndoRecord] = []

    @property
    def is_triaging(self) -> bool:
        return isinstance(self.state, Triaging)

    @property
    def engine(self) -> TriageEngine:
        """The active engine; only available while triaging."""
        if not isinstance(self.state, Triaging):
            raise RuntimeError("Not triaging; call start_triage() first")
        return self.state.engine

    def start_triage(self) -> TriageEngine:
        """
        Scan the input folder and switch to triage mode.

        Returns:
            Engine for the new triage pass
        """
        images = scan(self.config.input_folder)
        engine = TriageEngine(
            self.config,
            ImageTracker(images),
            undo_stack=self._undo_stack,
            decoder=self.decoder,
        )
        self.state = Triaging(engine)
        logger.info(f"Started triage with {len(images)} images")
        return engine

    def back_to_config(self) -> None:
        """Discard the in-flight selection and return to configuration."""
        if isinstance(self.state, Triaging):
            self.state.engine.clear_selection()
        self.state = Configuring()
        logger.debug("Returned to configuration")
