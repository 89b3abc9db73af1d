from __future__ import annotations

import pytest

from manual_harness.result import TestResult, Verdict


def test_passed_result_has_no_reason_capture_or_exception() -> None:
    result = TestResult.passed()
    assert result.status is True
    assert result.failure_description == ""
    assert result.screen_capture is None
    assert result.exception is None
    assert result.verdict is Verdict.PASSED


def test_failed_result_keeps_reason_and_capture(capture_image) -> None:
    result = TestResult.failed("Button did not repaint", capture_image)
    assert result.status is False
    assert result.failure_description == "Button did not repaint"
    assert result.screen_capture is capture_image
    assert result.verdict is Verdict.FAILED


@pytest.mark.parametrize("reason", ["", "   ", "\n\t"])
def test_failed_result_requires_reason(reason: str) -> None:
    with pytest.raises(ValueError):
        TestResult.failed(reason)


def test_errored_result_is_never_a_pass() -> None:
    error = OSError("no display")
    result = TestResult.errored(error)
    assert result.status is False
    assert result.exception is error
    assert result.verdict is Verdict.ERROR


@pytest.mark.parametrize(
    "kwargs",
    [
        {"status": False},
        {"status": False, "failure_description": "  "},
        {"status": True, "exception": RuntimeError("boom")},
        {"status": True, "failure_description": "looks wrong"},
        {"status": False, "failure_description": "R", "exception": OSError("no display")},
    ],
)
def test_constructor_rejects_mixed_outcomes(kwargs) -> None:
    with pytest.raises(ValueError):
        TestResult(**kwargs)


def test_constructor_accepts_each_single_outcome(capture_image) -> None:
    assert TestResult(status=True).verdict is Verdict.PASSED
    assert TestResult(status=False, failure_description="R",
                      screen_capture=capture_image).verdict is Verdict.FAILED
    assert TestResult(status=False, exception=OSError("x")).verdict is Verdict.ERROR
