"""Turn a :class:`TestResult` into a pass or a test-aborting exception."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .capture import capture_path, save_capture
from .config import HarnessConfig, load_config
from .errors import ManualTestAborted, ManualTestFailed, NoResultError
from .logging import get_logger
from .result import TestResult

_LOGGER = get_logger(__name__)


def handle_result(
    result: Optional[TestResult],
    test_name: str,
    *,
    output_dir: Optional[Path] = None,
    config: Optional[HarnessConfig] = None,
) -> TestResult:
    """Check the outcome of a manual test.

    Raises :class:`NoResultError` when ``result`` is missing,
    :class:`ManualTestAborted` when the interaction itself broke and
    :class:`ManualTestFailed` when the operator failed the test. A failing
    result's capture is written to ``<output_dir>/<test_name>.png`` first.
    """

    if result is None:
        raise NoResultError()

    if result.exception is not None:
        _LOGGER.error("Manual test %s aborted: %r", test_name, result.exception)
        raise ManualTestAborted(result.exception) from result.exception

    if result.status:
        _LOGGER.info("Manual test %s passed", test_name)
        return result

    _LOGGER.error("Failure reason: \n%s", result.failure_description)
    saved: Optional[Path] = None
    if result.screen_capture is not None:
        if output_dir is None:
            output_dir = (config or load_config()).output_dir
        _LOGGER.info(
            "Saving screen image to %s", capture_path(Path(output_dir), test_name).resolve()
        )
        try:
            saved = save_capture(result.screen_capture, Path(output_dir), test_name)
        except OSError as exc:
            _LOGGER.error("Unable to save screen image for %s: %s", test_name, exc)
            raise ManualTestFailed(result.failure_description) from exc
    raise ManualTestFailed(result.failure_description, saved)
