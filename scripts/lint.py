"""
Lint script runner.
"""
import subprocess
import sys

TARGETS = ["./typecalc", "./tcalc.py"]


def main():
    """
    Lint the TypeCalc project using flake8 and pylint.
    """
    print("Running flake8...")
    subprocess.run([
        "flake8",
        *TARGETS,
        "--max-line-length=100",
        "--exclude=typecalc/tests",
    ], check=True)

    print("Running pylint...")
    subprocess.run([
        "pylint",
        *TARGETS,
        "--ignore=tests",
    ], check=True)


if __name__ == "__main__":
    try:
        main()
    except subprocess.CalledProcessError as e:
        sys.exit(e.returncode)
