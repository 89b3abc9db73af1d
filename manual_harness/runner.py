"""Entry points that show the manual test window and wait for the verdict."""

from __future__ import annotations

import gc
import threading
from typing import Callable, Optional

from .capture import CaptureFunc
from .config import HarnessConfig, load_config
from .errors import ManualTestTimeout
from .handler import handle_result
from .handoff import ResultHandoff
from .logging import configure_logging, get_logger
from .result import TestResult
from .ui.description_pane import Instructions
from .ui.frame import ManualTestFrame

_LOGGER = get_logger(__name__)

ResultAccessor = Callable[[], TestResult]


def start(
    test_name: str,
    header_text: Optional[str],
    instructions: Instructions,
    *,
    config: Optional[HarnessConfig] = None,
    capture_func: Optional[CaptureFunc] = None,
    frame_factory: Callable[..., ManualTestFrame] = ManualTestFrame,
) -> ResultAccessor:
    """Show the manual test window on its own UI thread.

    Returns once the window is built; a window that is not built within the
    timeout raises :class:`ManualTestTimeout`. Calling the returned accessor blocks
    until the operator decides or the configured timeout elapses, in which
    case :class:`ManualTestTimeout` is raised and the window is closed.
    A window that could not be built yields an errored result instead of
    raising here.
    """

    config = config or load_config()
    configure_logging(config.log_level)

    handoff = ResultHandoff()
    cancel_event = threading.Event()
    built = threading.Event()

    def _run_ui() -> None:
        try:
            frame = frame_factory(
                test_name,
                header_text,
                instructions,
                handoff.fulfill,
                config=config,
                capture_func=capture_func,
                cancel_event=cancel_event,
            )
        except Exception as exc:  # noqa: BLE001
            _LOGGER.exception("Unable to build the manual test window for %s", test_name)
            # Half-built widgets held by the traceback must be freed on this thread.
            handoff.fulfill(TestResult.errored(exc.with_traceback(None)))
            gc.collect()
            return
        finally:
            built.set()

        frame.mainloop()
        # Tk objects must be released on the thread that created them.
        del frame
        gc.collect()
        if not handoff.done and not cancel_event.is_set():
            handoff.fulfill(
                TestResult.errored(RuntimeError("Manual test window closed without a decision."))
            )

    thread = threading.Thread(target=_run_ui, name=f"manual-test-ui-{test_name}", daemon=True)
    thread.start()
    if not built.wait(config.timeout_seconds):
        _LOGGER.error("Manual test window for %s was not built in time", test_name)
        cancel_event.set()
        raise ManualTestTimeout(config.timeout_minutes)
    _LOGGER.info("Manual test %s is waiting for the operator", test_name)

    def _get_result() -> TestResult:
        _LOGGER.info("timeout value : %s", config.timeout_minutes)
        try:
            return handoff.wait(config.timeout_seconds)
        finally:
            # Once the wait is over nobody reads a later decision.
            cancel_event.set()

    return _get_result


def run_manual_test(
    test_name: str,
    header_text: Optional[str],
    instructions: Instructions,
    *,
    config: Optional[HarnessConfig] = None,
    capture_func: Optional[CaptureFunc] = None,
    frame_factory: Callable[..., ManualTestFrame] = ManualTestFrame,
) -> TestResult:
    """Show the window, wait for the verdict and raise if the test did not pass."""

    config = config or load_config()
    get_result = start(
        test_name,
        header_text,
        instructions,
        config=config,
        capture_func=capture_func,
        frame_factory=frame_factory,
    )
    return handle_result(get_result(), test_name, config=config)
