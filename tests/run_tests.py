#!/usr/bin/env python3
"""Test runner script for Splurge Base58."""

import sys
import subprocess
from pathlib import Path
from typing import List

TEST_SUITES = ("unit", "functional")


def run_pytest(test_paths: List[str], additional_args: List[str] = None) -> int:
    """Run pytest with coverage for the given test paths."""
    if additional_args is None:
        additional_args = []

    project_root = Path(__file__).parent.parent

    base_args = [
        "pytest",
        "-v",
        "--cov=splurge_base58",
        "--cov-report=term-missing",
    ]

    cmd = base_args + test_paths + additional_args

    print(f"Running: {' '.join(cmd)}")
    print("-" * 80)

    try:
        result = subprocess.run(cmd, check=False, cwd=project_root)
        return result.returncode
    except FileNotFoundError:
        print("Error: pytest not found. Install the test extra:")
        print("  pip install -e .[test]")
        return 1


def print_help() -> None:
    print("Splurge Base58 Test Runner")
    print("=" * 40)
    print()
    print("Usage:")
    print("  python tests/run_tests.py [command] [additional_pytest_args...]")
    print()
    print("Commands:")
    print("  all          Run unit then functional tests (default)")
    print("  unit         Run unit tests only")
    print("  functional   Run functional tests only")
    print("  help         Show this help message")
    print()
    print("Examples:")
    print("  python tests/run_tests.py unit -k 'max_encoded_length'")
    print("  python tests/run_tests.py functional --tb=short")


def main() -> int:
    """Run the test suite named on the command line."""
    command = sys.argv[1].lower() if len(sys.argv) > 1 else "all"
    additional_args = sys.argv[2:]

    test_dir = Path(__file__).parent

    if command in ("help", "-h", "--help"):
        print_help()
        return 0

    if command == "all":
        total_exit_code = 0
        for suite in TEST_SUITES:
            print(f"\n{'='*20} Running {suite.upper()} tests {'='*20}")
            exit_code = run_pytest([str(test_dir / suite)], additional_args)
            if exit_code != 0:
                total_exit_code = exit_code
                print(f"\n{suite.upper()} tests failed with exit code {exit_code}")
        return total_exit_code

    if command in TEST_SUITES:
        return run_pytest([str(test_dir / command)], additional_args)

    print(f"Error: Unknown command '{command}'")
    print("Use 'python tests/run_tests.py help' for usage information")
    return 1


if __name__ == "__main__":
    sys.exit(main())
