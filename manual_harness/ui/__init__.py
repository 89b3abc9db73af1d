"""Tkinter window and panes used to run a manual test."""

from .description_pane import DescriptionPane
from .failure_reason_pane import FailureReasonPane
from .frame import ManualTestFrame
from .pass_fail_pane import PassFailPane
from .screen_image_pane import ScreenImagePane

__all__ = [
    "DescriptionPane",
    "FailureReasonPane",
    "ManualTestFrame",
    "PassFailPane",
    "ScreenImagePane",
]
