"""Exceptions raised by the manual test harness.

Every outcome that should abort a test derives from :class:`ManualTestError`
so drivers can catch a single type.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ManualTestError(RuntimeError):
    """Base class for fatal manual test outcomes."""


class ConfigError(ManualTestError):
    """Raised when an environment setting cannot be parsed."""


class CaptureError(ManualTestError):
    """Raised when the screen could not be captured."""


class NoResultError(ManualTestError):
    def __init__(self, message: str = "No result returned!") -> None:
        super().__init__(message)


class ManualTestTimeout(ManualTestError):
    def __init__(self, timeout_minutes: float) -> None:
        super().__init__("Timeout : User failed to take decision on the test result.")
        self.timeout_minutes = timeout_minutes


class ManualTestAborted(ManualTestError):
    """The UI could not be built or the wait was interrupted."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Manual test aborted: {cause!r}")
        self.cause = cause


class ManualTestFailed(ManualTestError):
    """The operator failed the test."""

    def __init__(self, reason: str, capture_path: Optional[Path] = None) -> None:
        super().__init__(f"Test failed! {reason}".rstrip())
        self.reason = reason
        self.capture_path = capture_path
