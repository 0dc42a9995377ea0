# tests/conftest.py
# This file is part of Proplogic - A Propositional Logic Simplifier
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Proplogic test suite.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common fixtures for expressions in every dialect
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability before any test runs.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import expression
        import logic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def dialect_examples():
    """Provide the same function written in each of the four dialects.

    Returns:
        Dict[str, str]: Dialect name to expression text
    """
    return {
        "pseudo": "not a and (b or c)",
        "logic": "~a ^ (b v c)",
        "code": "!a && (b || c)",
        "boolean": "-a * (b + c)",
    }


@pytest.fixture
def sample_variables():
    """Provide a standard variable list.

    Returns:
        List[str]: Variable names in truth-table order
    """
    return ["a", "b", "c"]
