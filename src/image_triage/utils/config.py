"""Configuration management for image-triage."""

import copy
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from image_triage.utils.logger import setup_logger

logger = setup_logger(__name__)


class Config:
    """Persisted folder configuration: input, destinations and trash."""

    DEFAULT_CONFIG_FILE = Path("config.json")

    DEFAULT_SETTINGS: Dict[str, Any] = {
        "input_folder": "",
        "destination_folders": [],
        "trash_folder": "",
    }

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to config file (default: ./config.json)
        """
        self.config_file = config_file or self.DEFAULT_CONFIG_FILE
        self.settings: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        """Load configuration from file, falling back to empty folders."""
        self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)

        if not self.config_file.exists():
            logger.info(f"No config file at {self.config_file}. Using defaults.")
            return

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Invalid config file: {e}. Using defaults.")
            return

        if not self._is_valid(loaded):
            logger.warning(
                f"Config file {self.config_file} has an unexpected shape. Using defaults."
            )
            return

        self.settings = {
            "input_folder": loaded["input_folder"],
            "destination_folders": list(loaded["destination_folders"]),
            "trash_folder": loaded["trash_folder"],
        }
        logger.debug(f"Loaded configuration from {self.config_file}")

    @staticmethod
    def _is_valid(loaded: Any) -> bool:
        if not isinstance(loaded, dict):
            return False
        if not isinstance(loaded.get("input_folder"), str):
            return False
        if not isinstance(loaded.get("trash_folder"), str):
            return False
        folders = loaded.get("destination_folders")
        return isinstance(folders, list) and all(isinstance(f, str) for f in folders)

    def save(self) -> None:
        """Save the full configuration to file."""
        self._write(self.settings)

    def _write(self, settings: Dict[str, Any]) -> None:
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w", encoding="utf-8") as f:
                json.dump(settings, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to save config to {self.config_file}: {e}")
            raise
        logger.debug(f"Saved configuration to {self.config_file}")

    def _update(self, key: str, value: Any) -> None:
        """Persist ``key = value``; in-memory settings change only once saved."""
        updated = copy.deepcopy(self.settings)
        updated[key] = value
        self._write(updated)
        self.settings = updated

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a raw configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self.settings.get(key, default)

    @staticmethod
    def _as_path(value: str) -> Optional[Path]:
        return Path(value) if value else None

    @property
    def input_folder(self) -> Optional[Path]:
        """Folder scanned for images, or None if not configured."""
        return self._as_path(self.settings["input_folder"])

    @property
    def trash_folder(self) -> Optional[Path]:
        """Folder deleted images are moved to, or None if not configured."""
        return self._as_path(self.settings["trash_folder"])

    @property
    def destination_folders(self) -> List[Path]:
        """Destination folders in display order."""
        return [Path(folder) for folder in self.settings["destination_folders"]]

    def set_input_folder(self, folder: Path) -> None:
        """
        Set the input folder and persist.

        Raises:
            OSError: If the config file cannot be written (nothing changes)
        """
        self._update("input_folder", str(folder))
        logger.info(f"Input folder set to: {folder}")

    def set_trash_folder(self, folder: Path) -> None:
        """
        Set the trash folder and persist.

        Raises:
            OSError: If the config file cannot be written (nothing changes)
        """
        self._update("trash_folder", str(folder))
        logger.info(f"Trash folder set to: {folder}")

    def add_destination_folder(self, folder: Path) -> None:
        """
        Append a destination folder and persist.

        Duplicates are kept; order is the order folders were added.

        Args:
            folder: Destination folder path

        Raises:
            OSError: If the config file cannot be written (nothing changes)
        """
        folders = self.settings["destination_folders"] + [str(folder)]
        self._update("destination_folders", folders)
        logger.info(f"Added destination folder: {folder}")

    def remove_destination_folder(self, index: int) -> Path:
        """
        Remove the destination folder at ``index`` and persist.

        Args:
            index: Zero-based position in the destination list

        Returns:
            The removed folder

        Raises:
            IndexError: If index is out of range
            OSError: If the config file cannot be written (nothing changes)
        """
        folders = list(self.settings["destination_folders"])
        if not 0 <= index < len(folders):
            raise IndexError(f"No destination folder at position {index}")
        removed = Path(folders.pop(index))
        self._update("destination_folders", folders)
        logger.info(f"Removed destination folder: {removed}")
        return removed
