"""Pass and Fail buttons."""

from __future__ import annotations

from tkinter import ttk
from typing import Callable

from .base_pane import BasePane


class PassFailPane(BasePane):
    def __init__(self, parent, on_decision: Callable[[bool], None], **kwargs):
        self._on_decision = on_decision
        super().__init__(parent, **kwargs)

    def _build_widgets(self) -> None:
        self.columnconfigure((0, 1), weight=1)
        self.pass_button = ttk.Button(self, text="Pass", command=lambda: self._on_decision(True))
        self.pass_button.grid(row=0, column=0, sticky="ew", padx=(0, 6))
        self.fail_button = ttk.Button(self, text="Fail", command=lambda: self._on_decision(False))
        self.fail_button.grid(row=0, column=1, sticky="ew", padx=(6, 0))

    def set_fail_enabled(self, enabled: bool) -> None:
        self.fail_button.configure(state="normal" if enabled else "disabled")

    @property
    def fail_enabled(self) -> bool:
        return not self.fail_button.instate(["disabled"])
