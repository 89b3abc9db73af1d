"""One-shot hand-over of the result from the UI thread to the test thread."""

from __future__ import annotations

import threading
from concurrent.futures import Future, TimeoutError as FutureTimeout

from .errors import ManualTestTimeout
from .logging import get_logger
from .result import TestResult

_LOGGER = get_logger(__name__)


class ResultHandoff:
    def __init__(self) -> None:
        self._future: Future[TestResult] = Future()
        self._lock = threading.Lock()

    @property
    def done(self) -> bool:
        return self._future.done()

    def fulfill(self, result: TestResult) -> bool:
        """Publish ``result``; only the first call has an effect."""

        with self._lock:
            if self._future.done():
                return False
            self._future.set_result(result)
            return True

    def wait(self, timeout_seconds: float) -> TestResult:
        try:
            return self._future.result(timeout=timeout_seconds)
        except FutureTimeout:
            raise ManualTestTimeout(timeout_seconds / 60.0) from None
        except KeyboardInterrupt as exc:
            _LOGGER.warning("Interrupted while waiting for the operator")
            self.fulfill(TestResult.errored(exc))
            return self._future.result(timeout=0)
