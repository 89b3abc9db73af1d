"""Free-text entry for the operator's failure reason."""

from __future__ import annotations

from tkinter import ttk
from tkinter.scrolledtext import ScrolledText
from typing import Callable

from .base_pane import BasePane


class FailureReasonPane(BasePane):
    def __init__(self, parent, on_change: Callable[[str], None], **kwargs):
        self._on_change = on_change
        super().__init__(parent, **kwargs)

    def _build_widgets(self) -> None:
        ttk.Label(self, text="Failure Reason").pack(anchor="w", pady=(0, 4))
        self.text = ScrolledText(self, wrap="word", height=8)
        self.text.pack(fill="both", expand=True)
        self.text.bind("<<Modified>>", self._handle_modified)

    @property
    def reason(self) -> str:
        return self.text.get("1.0", "end-1c")

    def set_reason(self, reason: str) -> None:
        self.text.delete("1.0", "end")
        self.text.insert("1.0", reason)

    def focus(self) -> None:
        self.text.focus_set()

    def _handle_modified(self, _event=None) -> None:
        # Tk only fires <<Modified>> again after the flag is reset.
        self.text.edit_modified(False)
        self._on_change(self.reason)
