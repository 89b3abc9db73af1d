"""Command-line launcher for a single manual test."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import ManualTestError, load_config, run_manual_test


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="manual_harness",
        description="Show manual test instructions and record the operator's verdict",
    )
    parser.add_argument("--name", required=True, help="Test name; also names the failure screenshot.")
    parser.add_argument("--header", default=None, help="Banner shown above the instructions.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--instructions", type=Path, help="Text file with the test instructions.")
    source.add_argument("--text", help="Instructions given inline.")
    parser.add_argument("--timeout", type=float, default=None, help="Minutes to wait for a decision.")
    parser.add_argument("--output-dir", type=Path, default=None, help="Where failure screenshots go.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        config = load_config().with_overrides(
            timeout_minutes=args.timeout,
            output_dir=args.output_dir,
        )
        if args.instructions is not None:
            instructions = args.instructions.read_text(encoding="utf-8")
        else:
            instructions = args.text
        run_manual_test(args.name, args.header, instructions, config=config)
    except ManualTestError as exc:
        print(f"{args.name}: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"{args.name}: {exc}", file=sys.stderr)
        return 2
    print(f"{args.name}: passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
