#!/usr/bin/env python3
# Copyright 2026 SharpName Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the SharpName checks locally: format, lint, type check, doctests, tests with coverage, and build.

Pass ``--quick`` to skip the packaging step.
"""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Doctests", ["uv", "run", "pytest", "--doctest-modules", "src/sharpname"]),
    ("Tests", ["uv", "run", "pytest", "--cov=sharpname", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]

QUICK_SKIPPED = frozenset({"Build"})


def main(argv: list[str]) -> int:
    """Run the selected CI steps and print a coloured summary."""
    quick = "--quick" in argv
    results: list[tuple[str, bool, float]] = []

    for name, cmd in STEPS:
        if quick and name in QUICK_SKIPPED:
            continue
        _banner(name)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_REPO_ROOT)
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _banner("Summary")
    for name, passed, elapsed in results:
        paint = chalk.green if passed else chalk.red
        print(paint(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()

    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_REPO_ROOT = pathlib.Path(__file__).parent.parent


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(f"  {title}"))
    print(sep)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
