"""Screen capture helpers built on Pillow."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from PIL import Image, ImageGrab

from .errors import CaptureError
from .logging import get_logger

_LOGGER = get_logger(__name__)

CaptureFunc = Callable[[], Image.Image]


def grab_screen() -> Image.Image:
    """Capture the whole screen as an RGB image."""

    try:
        image = ImageGrab.grab()
    except OSError as exc:
        raise CaptureError(f"Unable to capture the screen: {exc}") from exc
    _LOGGER.debug("Captured screen %dx%d", image.width, image.height)
    return image.convert("RGB")


def capture_path(output_dir: Path, test_name: str) -> Path:
    return Path(output_dir) / f"{test_name}.png"


def save_capture(image: Image.Image, output_dir: Path, test_name: str) -> Path:
    path = capture_path(output_dir, test_name)
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path, format="PNG")
    return path


def thumbnail(image: Image.Image, max_size: tuple[int, int]) -> Image.Image:
    """Return a copy of ``image`` scaled down to fit ``max_size``."""

    preview = image.copy()
    width, height = max(max_size[0], 1), max(max_size[1], 1)
    preview.thumbnail((width, height), Image.LANCZOS)
    return preview
