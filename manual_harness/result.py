"""Result produced by one manual test interaction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from PIL import Image


class Verdict(Enum):
    PASSED = auto()
    FAILED = auto()
    ERROR = auto()


@dataclass(frozen=True)
class TestResult:
    """Outcome of a manual test.

    Build instances through :meth:`passed`, :meth:`failed` or :meth:`errored`;
    each one describes exactly one outcome.
    """

    # Keeps pytest from collecting this class as a test case.
    __test__ = False

    status: bool
    failure_description: str = ""
    screen_capture: Optional[Image.Image] = None
    exception: Optional[BaseException] = None

    def __post_init__(self) -> None:
        if self.exception is not None:
            if self.status:
                raise ValueError("A result carrying an exception cannot pass.")
            if self.failure_description or self.screen_capture is not None:
                raise ValueError("A result carrying an exception has no failure details.")
        elif self.status:
            if self.failure_description or self.screen_capture is not None:
                raise ValueError("A passing result has no failure details.")
        elif not self.failure_description.strip():
            raise ValueError("A failing result needs a non-empty reason.")

    @classmethod
    def passed(cls) -> "TestResult":
        return cls(status=True)

    @classmethod
    def failed(cls, reason: str, capture: Optional[Image.Image] = None) -> "TestResult":
        return cls(status=False, failure_description=reason, screen_capture=capture)

    @classmethod
    def errored(cls, exception: BaseException) -> "TestResult":
        return cls(status=False, exception=exception)

    @property
    def verdict(self) -> Verdict:
        if self.exception is not None:
            return Verdict.ERROR
        return Verdict.PASSED if self.status else Verdict.FAILED
