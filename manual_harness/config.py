"""Configuration defaults for the manual test harness."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

from .errors import ConfigError

TIMEOUT_ENV = "MANUAL_TEST_TIMEOUT"
OUTPUT_DIR_ENV = "MANUAL_TEST_OUTPUT_DIR"
# Directory jtreg-style drivers already export for compiled test classes.
LEGACY_OUTPUT_DIR_ENV = "TEST_CLASSES"
WINDOW_SIZE_ENV = "MANUAL_TEST_WINDOW_SIZE"
LOG_LEVEL_ENV = "MANUAL_TEST_LOG_LEVEL"

DEFAULT_TIMEOUT_MINUTES = 10.0
DEFAULT_WINDOW_SIZE = (800, 600)


@dataclass(slots=True)
class HarnessConfig:
    """Top-level configuration container."""

    timeout_minutes: float = DEFAULT_TIMEOUT_MINUTES
    output_dir: Path = field(default_factory=Path.cwd)
    window_size: Tuple[int, int] = DEFAULT_WINDOW_SIZE
    log_level: str = "INFO"

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_minutes * 60.0

    def with_overrides(self, **changes) -> "HarnessConfig":
        updates = {key: value for key, value in changes.items() if value is not None}
        if "output_dir" in updates:
            updates["output_dir"] = Path(updates["output_dir"])
        return replace(self, **updates)


def _parse_timeout(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{TIMEOUT_ENV} must be a number of minutes, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{TIMEOUT_ENV} must be positive, got {raw!r}")
    return value


def _parse_window_size(raw: str) -> Tuple[int, int]:
    width, sep, height = raw.lower().partition("x")
    try:
        size = (int(width), int(height))
    except ValueError as exc:
        raise ConfigError(f"{WINDOW_SIZE_ENV} must look like 800x600, got {raw!r}") from exc
    if not sep or size[0] <= 0 or size[1] <= 0:
        raise ConfigError(f"{WINDOW_SIZE_ENV} must look like 800x600, got {raw!r}")
    return size


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    *,
    dotenv_path: Optional[Path] = None,
) -> HarnessConfig:
    """Build a config from the process environment, reading ``.env`` first.

    Values already present in the environment win over the ``.env`` file.
    Passing ``environ`` skips the ``.env`` lookup entirely.
    """

    if environ is None:
        load_dotenv(dotenv_path or Path.cwd() / ".env", override=False)
        environ = os.environ

    config = HarnessConfig()

    raw_timeout = environ.get(TIMEOUT_ENV, "").strip()
    if raw_timeout:
        config.timeout_minutes = _parse_timeout(raw_timeout)

    raw_dir = (environ.get(OUTPUT_DIR_ENV) or environ.get(LEGACY_OUTPUT_DIR_ENV) or "").strip()
    if raw_dir:
        config.output_dir = Path(raw_dir).expanduser()

    raw_size = environ.get(WINDOW_SIZE_ENV, "").strip()
    if raw_size:
        config.window_size = _parse_window_size(raw_size)

    raw_level = environ.get(LOG_LEVEL_ENV, "").strip()
    if raw_level:
        config.log_level = raw_level.upper()

    return config
