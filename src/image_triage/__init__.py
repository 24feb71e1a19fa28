"""
Image Triage - sort a folder of images one at a time.

Each image is moved into one of several destination folders or to a trash
folder, with undo of the most recent actions.
"""

__version__ = "0.1.0"
__author__ = "Image Triage Contributors"

from image_triage.core.engine import TriageEngine
from image_triage.core.session import TriageApp
from image_triage.core.tracker import ImageTracker

__all__ = ["ImageTracker", "TriageApp", "TriageEngine", "__version__"]
