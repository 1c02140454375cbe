"""Development script to run checks (formatting, linting, tests) and a smoke run."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks and optionally a smoke run of the CLI."""
    parser = argparse.ArgumentParser(
        description="Run development checks and a smoke run of the CLI."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, no fixes"
    )
    args = parser.parse_args()

    if not args.ci:
        run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
        run_command(
            ["uv", "run", "ruff", "check", "--fix"],
            "Ruff Linting & Fixes",
        )

    run_command(["uv", "run", "ruff", "check"], "Ruff Lint Gate")
    run_command(
        ["uv", "run", "pytest", "--cov=kubehello", "--cov-report=term-missing"],
        "Tests",
    )

    if args.ci:
        print("\n✅ CI checks passed successfully.")
        return

    run_command(
        ["uv", "run", "python", "main.py", "hello-world"],
        "CLI Smoke Run",
    )

    print("\n✅ All development checks passed successfully.")


if __name__ == "__main__":
    main()
