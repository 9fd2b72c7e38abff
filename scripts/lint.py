"""
Lint script runner.

Runs flake8 and pylint over the scripting core and the CLI runner. Pass
``--tests`` to include the test suite in the flake8 pass.
"""
import subprocess
import sys

TARGETS = ["./sabajs", "./saba.py"]


def lint_commands(include_tests: bool) -> list[tuple[str, list[str]]]:
    """
    Build the lint commands to run, in order.
    """
    flake8 = ["flake8", *TARGETS, "--max-line-length=100"]
    if not include_tests:
        flake8.append("--exclude=sabajs/tests")
    pylint = ["pylint", *TARGETS, "--ignore=tests", "--max-line-length=100"]
    return [("flake8", flake8), ("pylint", pylint)]


def main(argv: list[str] | None = None) -> None:
    """
    Lint the saba scripting core using flake8 and pylint.
    """
    args = sys.argv[1:] if argv is None else argv
    for name, command in lint_commands("--tests" in args):
        print(f"Running {name}...")
        subprocess.run(command, check=True)


if __name__ == "__main__":
    main()
