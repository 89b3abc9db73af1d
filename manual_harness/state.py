"""Pass/Fail interaction state owned by the UI thread."""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional

from PIL import Image

from .logging import get_logger
from .result import TestResult

_LOGGER = get_logger(__name__)


class InteractionState(Enum):
    AWAITING_DECISION = auto()
    AWAITING_FAILURE_DETAILS = auto()
    DONE = auto()


class InteractionStateMachine:
    """Tracks the operator's progress towards a terminal result.

    ``press_fail`` returns ``None`` on the first click, which only reveals the
    failure details. Every method returns the terminal result at most once;
    events arriving after ``DONE`` are ignored.
    """

    def __init__(self) -> None:
        self.state = InteractionState.AWAITING_DECISION
        self.result: Optional[TestResult] = None

    @property
    def done(self) -> bool:
        return self.state is InteractionState.DONE

    def fail_enabled(self, reason: str) -> bool:
        if self.state is InteractionState.AWAITING_DECISION:
            return True
        if self.state is InteractionState.AWAITING_FAILURE_DETAILS:
            return bool(reason.strip())
        return False

    def press_pass(self) -> Optional[TestResult]:
        if self.done:
            return None
        return self._finish(TestResult.passed())

    def press_fail(self, reason: str = "", capture: Optional[Image.Image] = None) -> Optional[TestResult]:
        if self.state is InteractionState.AWAITING_DECISION:
            self.state = InteractionState.AWAITING_FAILURE_DETAILS
            _LOGGER.debug("First Fail click, waiting for failure details")
            return None
        if self.state is InteractionState.AWAITING_FAILURE_DETAILS:
            if not self.fail_enabled(reason):
                _LOGGER.debug("Ignoring Fail click without a reason")
                return None
            return self._finish(TestResult.failed(reason, capture))
        return None

    def abort(self, exception: BaseException) -> Optional[TestResult]:
        if self.done:
            return None
        return self._finish(TestResult.errored(exception))

    def _finish(self, result: TestResult) -> TestResult:
        self.state = InteractionState.DONE
        self.result = result
        return result
