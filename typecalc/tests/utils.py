"""
Utility functions shared across TypeCalc tests.
"""
import io
from pathlib import Path
import sys

from typecalc.config import Settings
from typecalc.diagnostics import Diagnostics
from typecalc.runner import run_source

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def run_quiet(source: str, **settings):
    """
    Run source with tracing off and return the result and the printed output.
    """
    settings.setdefault("trace", False)
    out = io.StringIO()
    result = run_source(source, Settings(**settings), out=out)
    return result, out.getvalue()


def quiet_diagnostics() -> Diagnostics:
    """
    Diagnostics that write into a buffer instead of stdout.
    """
    return Diagnostics(out=io.StringIO())


def messages(result) -> list[str]:
    """
    Messages of every recorded error, in order.
    """
    return [entry.message for entry in result.diagnostics]
