"""
Pytest configuration and shared fixtures.
"""

import io
import sys
from pathlib import Path
import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from mpags_cipher.cli import main


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Driver Fixtures
# ============================================================================


@pytest.fixture
def run_cli():
    """
    Run the CLI driver against in-memory streams.

    Returns a callable taking (argv, stdin_text) and returning
    (exit_code, stdout_text, stderr_text).
    """
    def _run(argv, stdin_text=""):
        stdin = io.StringIO(stdin_text)
        stdout = io.StringIO()
        stderr = io.StringIO()
        code = main(argv, stdin=stdin, stdout=stdout, stderr=stderr)
        return code, stdout.getvalue(), stderr.getvalue()

    return _run


# ============================================================================
# Content Fixtures
# ============================================================================


@pytest.fixture
def sample_text():
    """Mixed-content input with letters, digits, spaces and punctuation."""
    return "Hello, World! 2 be or not 2 be.\n"
