"""Read-only pane showing the test instructions."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from tkinter.scrolledtext import ScrolledText
from typing import Callable, Union

from .base_pane import BasePane

InstructionsRenderer = Callable[[tk.Text], None]
Instructions = Union[str, InstructionsRenderer]


class DescriptionPane(BasePane):
    def __init__(self, parent, instructions: Instructions, **kwargs):
        self._instructions = instructions
        super().__init__(parent, **kwargs)

    def _build_widgets(self) -> None:
        ttk.Label(self, text="Test Instructions", font=("Segoe UI", 11, "bold")).pack(
            anchor="w", pady=(0, 4)
        )
        self.text = ScrolledText(self, wrap="word", height=16)
        self.text.pack(fill="both", expand=True)

        if callable(self._instructions):
            self._instructions(self.text)
        else:
            self.text.insert("1.0", str(self._instructions))
        self.text.configure(state="disabled", takefocus=0)

    @property
    def content(self) -> str:
        return self.text.get("1.0", "end-1c")
