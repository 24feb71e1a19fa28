"""Core triage state machine: image queue, filesystem actions, app state."""

from image_triage.core.decoder import DecodedImage, DecodeError, decode_image
from image_triage.core.engine import ActionResult, TriageEngine, UndoRecord
from image_triage.core.session import Configuring, TriageApp, Triaging
from image_triage.core.tracker import IMAGE_EXTENSIONS, ImageTracker, scan

__all__ = [
    "ActionResult",
    "Configuring",
    "DecodedImage",
    "DecodeError",
    "IMAGE_EXTENSIONS",
    "ImageTracker",
    "TriageApp",
    "TriageEngine",
    "Triaging",
    "UndoRecord",
    "decode_image",
    "scan",
]
