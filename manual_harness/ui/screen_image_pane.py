"""Preview of the screen capture attached to a failure."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from PIL import Image, ImageTk

from ..capture import CaptureFunc, grab_screen, thumbnail
from ..errors import CaptureError
from ..logging import get_logger
from .base_pane import BasePane

_LOGGER = get_logger(__name__)


class ScreenImagePane(BasePane):
    PREVIEW_SIZE = (360, 240)
    # Time the window manager gets to unmap the window before the grab.
    HIDE_DELAY_MS = 200

    def __init__(
        self,
        parent,
        on_error: Callable[[BaseException], None],
        *,
        capture_func: Optional[CaptureFunc] = None,
        **kwargs,
    ):
        self._on_error = on_error
        self._capture_func = capture_func or grab_screen
        self._image: Optional[Image.Image] = None
        self._photo: Optional[ImageTk.PhotoImage] = None
        super().__init__(parent, **kwargs)

    def _build_widgets(self) -> None:
        header = ttk.Frame(self)
        header.pack(fill="x", pady=(0, 4))
        ttk.Label(header, text="Screen Capture").pack(side="left")
        self.retake_button = ttk.Button(header, text="Re-take", command=self.capture)
        self.retake_button.pack(side="right")

        self._image_label = tk.Label(self, background="#1f1f1f", foreground="white")
        self._image_label.pack(fill="both", expand=True)
        self._image_label.configure(text="No capture yet", font=("Segoe UI", 10))

    @property
    def image(self) -> Optional[Image.Image]:
        return self._image

    def capture(self) -> Optional[Image.Image]:
        top = self.winfo_toplevel()
        # Keep the harness window out of the screenshot.
        top.withdraw()
        top.update()
        top.after(self.HIDE_DELAY_MS)
        try:
            image = self._capture_func()
        except (CaptureError, OSError) as exc:
            _LOGGER.error("Screen capture failed: %s", exc)
            top.deiconify()
            self._on_error(exc)
            return None
        top.deiconify()
        self._image = image
        self._show(image)
        return image

    def _show(self, image: Image.Image) -> None:
        width = self._image_label.winfo_width()
        height = self._image_label.winfo_height()
        available = (width, height) if width > 1 and height > 1 else self.PREVIEW_SIZE
        photo = ImageTk.PhotoImage(image=thumbnail(image, available), master=self)
        self._image_label.configure(image=photo, text="")
        self._photo = photo
