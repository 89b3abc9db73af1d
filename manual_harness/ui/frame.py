"""Top-level window that walks the operator through a manual test."""

from __future__ import annotations

import threading
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ..capture import CaptureFunc
from ..config import HarnessConfig
from ..logging import get_logger
from ..result import TestResult
from ..state import InteractionState, InteractionStateMachine
from .description_pane import DescriptionPane, Instructions
from .failure_reason_pane import FailureReasonPane
from .pass_fail_pane import PassFailPane
from .screen_image_pane import ScreenImagePane

_LOGGER = get_logger(__name__)

INITIAL_STATUS = 'Follow test description, select "Pass" or "Fail"'
FAILURE_STATUS = 'Enter failure reason, re-take screenshot, push "Fail"'
CLOSE_REFUSED_STATUS = 'Close is disabled, select "Pass" or "Fail"'


class ManualTestFrame(tk.Tk):
    """Shows instructions and reports exactly one result to ``listener``.

    The window destroys itself once a result has been published. Closing it
    through the window manager is refused; setting ``cancel_event`` from any
    thread closes it without a result.
    """

    CANCEL_POLL_MS = 100

    def __init__(
        self,
        test_name: str,
        header_text: Optional[str],
        instructions: Instructions,
        listener: Callable[[TestResult], None],
        *,
        config: Optional[HarnessConfig] = None,
        capture_func: Optional[CaptureFunc] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        super().__init__()
        self.harness_config = config or HarnessConfig()
        self._listener = listener
        self._machine = InteractionStateMachine()
        self._cancel_event = cancel_event
        self._capture_func = capture_func
        self._status_var = tk.StringVar(self, value=INITIAL_STATUS)

        self.title(test_name)
        width, height = self.harness_config.window_size
        self.geometry(f"{width}x{height}")
        try:
            self._build_ui(header_text, instructions)
        except BaseException:
            self.destroy()
            raise
        self.protocol("WM_DELETE_WINDOW", self._on_close_request)
        if cancel_event is not None:
            self.after(self.CANCEL_POLL_MS, self._poll_cancel)

    @property
    def state_machine(self) -> InteractionStateMachine:
        return self._machine

    @property
    def status_text(self) -> str:
        return self._status_var.get()

    def _build_ui(self, header_text: Optional[str], instructions: Instructions) -> None:
        if header_text is not None:
            header = tk.Text(self, height=max(header_text.count("\n") + 1, 1), wrap="word",
                             relief="sunken", borderwidth=2, takefocus=0)
            header.insert("1.0", header_text)
            header.configure(state="disabled")
            header.pack(side="top", fill="x", padx=6, pady=(6, 0))
            self.header = header

        status = ttk.Label(self, textvariable=self._status_var, padding=5)
        status.pack(side="bottom", fill="x")

        self._split = ttk.PanedWindow(self, orient="vertical")
        self._split.pack(fill="both", expand=True, padx=6, pady=6)

        main = ttk.Frame(self._split)
        self.description = DescriptionPane(main, instructions)
        self.description.pack(fill="both", expand=True)
        self.pass_fail = PassFailPane(main, self._on_decision)
        self.pass_fail.pack(fill="x", pady=(10, 0))
        self._split.add(main, weight=1)

        # Attached to the split on the first Fail click.
        self._failure_info = ttk.Frame(self._split)
        self._failure_info.columnconfigure((0, 1), weight=1, uniform="failure")
        self._failure_info.rowconfigure(0, weight=1)
        self.failure_reason = FailureReasonPane(self._failure_info, self._on_reason_changed)
        self.failure_reason.grid(row=0, column=0, sticky="nsew", padx=(0, 5))
        self.screen_image = ScreenImagePane(
            self._failure_info, self._on_capture_error, capture_func=self._capture_func
        )
        self.screen_image.grid(row=0, column=1, sticky="nsew", padx=(5, 0))

    @property
    def failure_info_visible(self) -> bool:
        return str(self._failure_info) in [str(pane) for pane in self._split.panes()]

    def _on_decision(self, passed: bool) -> None:
        if self._machine.done:
            return
        if passed:
            self._publish(self._machine.press_pass())
            return

        result = self._machine.press_fail(self.failure_reason.reason, self.screen_image.image)
        if result is not None:
            self._publish(result)
            return
        if self._machine.state is InteractionState.AWAITING_FAILURE_DETAILS and not self.failure_info_visible:
            self._reveal_failure_details()

    def _reveal_failure_details(self) -> None:
        _LOGGER.info("Operator selected Fail, collecting failure details")
        self._split.add(self._failure_info, weight=1)
        self.update_idletasks()
        self.screen_image.capture()
        if self._machine.done:
            return
        self.pass_fail.set_fail_enabled(self._machine.fail_enabled(self.failure_reason.reason))
        self._status_var.set(FAILURE_STATUS)
        self.failure_reason.focus()

    def _on_reason_changed(self, reason: str) -> None:
        if not self._machine.done:
            self.pass_fail.set_fail_enabled(self._machine.fail_enabled(reason))

    def _on_capture_error(self, exc: BaseException) -> None:
        self._publish(self._machine.abort(exc))

    def _publish(self, result: Optional[TestResult]) -> None:
        if result is None:
            return
        _LOGGER.debug("Publishing %s result", result.verdict.name)
        self._listener(result)
        self.destroy()

    def report_callback_exception(self, exc, val, tb) -> None:
        _LOGGER.error("Unhandled error in manual test window", exc_info=(exc, val, tb))
        if not self._machine.done:
            self._publish(self._machine.abort(val))

    def _on_close_request(self) -> None:
        _LOGGER.warning("Window close ignored; the test needs a Pass or Fail decision")
        self._status_var.set(CLOSE_REFUSED_STATUS)

    def _poll_cancel(self) -> None:
        if self._machine.done:
            return
        if self._cancel_event is not None and self._cancel_event.is_set():
            _LOGGER.info("Closing manual test window without a decision")
            self.destroy()
            return
        self.after(self.CANCEL_POLL_MS, self._poll_cancel)
