"""
Code quality and linting script.
"""

import sys
import subprocess
import argparse

SOURCE_DIRS = ["hms_laf/", "tests/", "scripts/", "main.py"]


def run_tool(module, args, description):
    """Run a tool as ``python -m <module>`` and report whether it passed."""
    cmd = [sys.executable, "-m", module, *args]
    print(f"{description}: {' '.join(cmd)}")
    return subprocess.run(cmd).returncode == 0


def run_black(check_only=False):
    """Run Black code formatter."""
    args = (["--check"] if check_only else []) + SOURCE_DIRS
    return run_tool("black", args, "🔧 Running Black formatter")


def run_isort(check_only=False):
    """Run isort import sorter."""
    args = (["--check-only"] if check_only else []) + SOURCE_DIRS
    return run_tool("isort", args, "📦 Running isort")


def run_flake8():
    """Run flake8 linter."""
    return run_tool("flake8", ["hms_laf/", "tests/"], "🔍 Running flake8")


def run_mypy():
    """Run mypy type checker."""
    return run_tool("mypy", ["hms_laf/"], "🔬 Running mypy")


def main():
    parser = argparse.ArgumentParser(description="Run code quality checks")
    parser.add_argument("--check", action="store_true", help="Check only (don't fix)")
    parser.add_argument("--skip-format", action="store_true", help="Skip formatting")
    parser.add_argument("--skip-lint", action="store_true", help="Skip linting")
    parser.add_argument("--skip-types", action="store_true", help="Skip type checking")

    args = parser.parse_args()

    results = []
    if not args.skip_format:
        results.append(run_black(args.check))
        results.append(run_isort(args.check))
    if not args.skip_lint:
        results.append(run_flake8())
    if not args.skip_types:
        results.append(run_mypy())

    if all(results):
        print("✅ All code quality checks passed!")
        return 0
    print("❌ Some code quality checks failed!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
