#!/usr/bin/env python3
# Copyright 2026 minilex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the local CI pipeline for minilex: format, lint, types, tests, smoke scan, build."""

import argparse
import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

SMOKE_SOURCE = "float r = sqrt(x ^ 2 + y ^ 2); /* radius */ return r;\n"

STEPS: dict[str, list[str]] = {
    "format": ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"],
    "lint": ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"],
    "types": ["uv", "run", "ty", "check", "src/"],
    "tests": ["uv", "run", "pytest", "--cov=minilex", "--cov-report=term-missing"],
    "smoke": ["uv", "run", "minilex", "scan", "-", "--format", "table", "--strict"],
    "build": ["uv", "build"],
}


def main() -> int:
    """Run the selected CI steps and print a coloured summary."""
    parser = argparse.ArgumentParser(description="Run minilex CI checks locally.")
    parser.add_argument(
        "--only",
        nargs="+",
        choices=list(STEPS),
        default=list(STEPS),
        help="Run only the named steps (default: all)",
    )
    args = parser.parse_args()

    outcomes: list[tuple[str, int, float]] = []
    for name in args.only:
        _banner(name)
        outcomes.append(_run_step(name, STEPS[name]))

    _banner("summary")
    for name, returncode, elapsed in outcomes:
        label = chalk.green("PASS") if returncode == 0 else chalk.red(f"FAIL ({returncode})")
        print(f"  {label}  {name} ({elapsed:.1f}s)")
    print()
    return 0 if all(returncode == 0 for _, returncode, _ in outcomes) else 1


# ################
# Implementation
# ################


def _banner(title: str) -> None:
    rule = chalk.blue("=" * 60)
    print(f"\n{rule}\n{chalk.blue(title.capitalize())}\n{rule}")


def _run_step(name: str, cmd: list[str]) -> tuple[str, int, float]:
    stdin = SMOKE_SOURCE if name == "smoke" else None
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=_repo_root(), input=stdin, text=True)
    return name, proc.returncode, time.monotonic() - start


def _repo_root() -> str:
    return str(pathlib.Path(__file__).parent.parent)


if __name__ == "__main__":
    sys.exit(main())
