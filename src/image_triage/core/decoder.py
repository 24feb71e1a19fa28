"""Image decoding into displayable RGBA buffers."""

from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageOps


class DecodeError(Exception):
    """Raised when an image file cannot be decoded."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to decode {path}: {reason}")


@dataclass
class DecodedImage:
    """A decoded bitmap: dimensions plus raw RGBA bytes."""

    path: Path
    width: int
    height: int
    rgba: bytes

    @property
    def resolution(self) -> str:
        """Resolution as 'WIDTHxHEIGHT'."""
        return f"{self.width}x{self.height}"


def decode_image(path: Path) -> DecodedImage:
    """
    Decode an image file into an RGBA buffer.

    EXIF orientation is applied so the bitmap is displayed upright.

    Args:
        path: Image file to decode

    Returns:
        DecodedImage with width, height and unpremultiplied RGBA bytes

    Raises:
        DecodeError: If the file is missing, unreadable or not an image
    """
    try:
        with Image.open(path) as img:
            img = ImageOps.exif_transpose(img)
            rgba = img.convert("RGBA")
            width, height = rgba.size
            return DecodedImage(path=path, width=width, height=height, rgba=rgba.tobytes())
    except Exception as e:
        raise DecodeError(path, str(e)) from e
