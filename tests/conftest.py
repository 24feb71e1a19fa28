"""Shared fixtures for image-triage tests."""

from pathlib import Path
from typing import List

import pytest

from image_triage.utils.config import Config


@pytest.fixture
def workspace(tmp_path):
    """Create input/destination folders and a config pointing at them."""
    input_dir = tmp_path / "input"
    input_dir.mkdir()
    keep_dir = tmp_path / "keep"
    keep_dir.mkdir()
    later_dir = tmp_path / "later"
    later_dir.mkdir()

    config = Config(tmp_path / "config.json")
    config.set_input_folder(input_dir)
    config.set_trash_folder(tmp_path / "trash")
    config.add_destination_folder(keep_dir)
    config.add_destination_folder(later_dir)

    return config


@pytest.fixture
def make_files():
    """Return a helper creating empty files, in the given order."""

    def _make(folder: Path, *names: str) -> List[Path]:
        paths = []
        for name in names:
            path = folder / name
            path.touch()
            paths.append(path)
        return paths

    return _make
