"""Manual test harness: ask a human to pass or fail a test."""

from .config import HarnessConfig, load_config
from .errors import (
    CaptureError,
    ConfigError,
    ManualTestAborted,
    ManualTestError,
    ManualTestFailed,
    ManualTestTimeout,
    NoResultError,
)
from .handler import handle_result
from .result import TestResult, Verdict
from .runner import run_manual_test, start

__all__ = [
    "CaptureError",
    "ConfigError",
    "HarnessConfig",
    "ManualTestAborted",
    "ManualTestError",
    "ManualTestFailed",
    "ManualTestTimeout",
    "NoResultError",
    "TestResult",
    "Verdict",
    "handle_result",
    "load_config",
    "run_manual_test",
    "start",
]
