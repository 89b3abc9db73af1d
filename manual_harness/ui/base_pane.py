"""Base UI components shared by the frame panes."""

from __future__ import annotations

from tkinter import ttk


class BasePane(ttk.Frame):
    def __init__(self, parent, **kwargs):
        super().__init__(parent, **kwargs)
        self._build_widgets()

    def _build_widgets(self) -> None:
        raise NotImplementedError
