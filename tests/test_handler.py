from __future__ import annotations

import logging
from unittest import mock

import pytest
from PIL import Image

from manual_harness.errors import (
    ManualTestAborted,
    ManualTestError,
    ManualTestFailed,
    NoResultError,
)
from manual_harness.handler import handle_result
from manual_harness.result import TestResult


def test_passing_result_is_returned(tmp_path) -> None:
    result = TestResult.passed()
    assert handle_result(result, "T", output_dir=tmp_path) is result
    assert list(tmp_path.iterdir()) == []


def test_failure_writes_one_png_then_raises(tmp_path, capture_image, caplog) -> None:
    caplog.set_level(logging.INFO, logger="manual_harness")
    result = TestResult.failed("Focus ring missing", capture_image)

    with pytest.raises(ManualTestFailed) as excinfo:
        handle_result(result, "T", output_dir=tmp_path)

    files = list(tmp_path.iterdir())
    assert [path.name for path in files] == ["T.png"]
    assert excinfo.value.reason == "Focus ring missing"
    assert excinfo.value.capture_path == tmp_path / "T.png"
    with Image.open(files[0]) as saved:
        assert saved.format == "PNG"
        assert saved.size == capture_image.size
    assert "Focus ring missing" in caplog.text
    assert "Saving screen image to" in caplog.text


def test_failure_creates_missing_output_dir(tmp_path, capture_image) -> None:
    target = tmp_path / "nested" / "out"
    with pytest.raises(ManualTestFailed):
        handle_result(TestResult.failed("R", capture_image), "Nested", output_dir=target)
    assert (target / "Nested.png").is_file()


def test_failure_uses_configured_output_dir(config, capture_image) -> None:
    with pytest.raises(ManualTestFailed):
        handle_result(TestResult.failed("R", capture_image), "FromConfig", config=config)
    assert (config.output_dir / "FromConfig.png").is_file()


def test_failure_without_capture_writes_nothing(tmp_path) -> None:
    with pytest.raises(ManualTestFailed) as excinfo:
        handle_result(TestResult.failed("R"), "T", output_dir=tmp_path)
    assert excinfo.value.capture_path is None
    assert list(tmp_path.iterdir()) == []


def test_exception_in_result_aborts(tmp_path) -> None:
    cause = OSError("cannot open display")
    with pytest.raises(ManualTestAborted) as excinfo:
        handle_result(TestResult.errored(cause), "T", output_dir=tmp_path)
    assert excinfo.value.cause is cause
    assert excinfo.value.__cause__ is cause
    assert list(tmp_path.iterdir()) == []


def test_missing_result_raises_without_file_io(tmp_path) -> None:
    with mock.patch("manual_harness.handler.save_capture") as save:
        with pytest.raises(NoResultError, match="No result returned!"):
            handle_result(None, "T", output_dir=tmp_path)
    save.assert_not_called()
    assert list(tmp_path.iterdir()) == []


def test_all_fatal_outcomes_share_a_base_class() -> None:
    for error_type in (ManualTestAborted, ManualTestFailed, NoResultError):
        assert issubclass(error_type, ManualTestError)


def test_unwritable_output_dir_still_reports_reason(tmp_path, capture_image, caplog) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("occupied", encoding="utf-8")

    with pytest.raises(ManualTestFailed) as excinfo:
        handle_result(TestResult.failed("Caret not visible", capture_image), "T", output_dir=blocker)

    assert excinfo.value.reason == "Caret not visible"
    assert excinfo.value.capture_path is None
    assert isinstance(excinfo.value.__cause__, OSError)
    assert "Unable to save screen image" in caplog.text
