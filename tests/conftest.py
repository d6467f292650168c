"""
Pytest configuration and shared fixtures for all asciimath tests.

Tables are immutable and parsers hold no per-parse state, so one instance of
each is shared across the whole session.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from asciimath.frontend.parser import Parser
from asciimath.frontend.symbols import DEFAULT_PARSER_SYMBOL_TABLE
from asciimath.backends.display_symbols import DEFAULT_DISPLAY_SYMBOL_TABLE
from asciimath.shared.color_table import DEFAULT_COLOR_TABLE


# =============================================================================
# Session-scoped fixtures (shared across all tests)
# =============================================================================

@pytest.fixture(scope="session")
def session_parser():
    """Session-scoped parser over the default tables (stateless, safe to share)."""
    return Parser()


@pytest.fixture(scope="session")
def parser_symbols():
    return DEFAULT_PARSER_SYMBOL_TABLE


@pytest.fixture(scope="session")
def display_symbols():
    return DEFAULT_DISPLAY_SYMBOL_TABLE


@pytest.fixture(scope="session")
def color_table():
    return DEFAULT_COLOR_TABLE


# =============================================================================
# Class-scoped fixtures (shared within a test class)
# =============================================================================

@pytest.fixture(scope="class")
def parser(session_parser):
    """Class-scoped parser - returns the session parser."""
    return session_parser
