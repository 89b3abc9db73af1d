from __future__ import annotations

import tkinter as tk

import pytest
from PIL import Image

from manual_harness.config import HarnessConfig


@pytest.fixture
def config(tmp_path) -> HarnessConfig:
    return HarnessConfig(timeout_minutes=0.05, output_dir=tmp_path / "captures")


@pytest.fixture
def capture_image() -> Image.Image:
    return Image.new("RGB", (64, 48), color=(200, 30, 30))


@pytest.fixture
def tk_available() -> None:
    """Skip widget tests on machines without a display."""

    try:
        root = tk.Tk()
    except tk.TclError as exc:
        pytest.skip(f"Tk display unavailable: {exc}")
    root.destroy()
