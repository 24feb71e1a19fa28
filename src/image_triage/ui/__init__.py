"""User interface components (terminal screens and prompts)."""

from image_triage.ui.triage import TriageUI, pick_folder

__all__ = ["TriageUI", "pick_folder"]
