"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # Tests that go through rdflib's global plugin table
"""

import pytest

from ontformat.plugins import InMemoryParserRegistry, unregister_csv_parser


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Tests touching rdflib's global plugin table")


@pytest.fixture
def memory_registry():
    """Fresh parser registry isolated from rdflib."""
    return InMemoryParserRegistry()


@pytest.fixture
def rdflib_csv_cleanup():
    """Make sure the CSV parser is not left registered with rdflib."""
    unregister_csv_parser()
    yield
    unregister_csv_parser()


@pytest.fixture
def sample_csv_content():
    """Small CSV document with a header row."""
    return (
        "name,age,height\n"
        "Alice,34,1.68\n"
        "Bob,,1.80\n"
    )


@pytest.fixture
def temp_csv_file(tmp_path, sample_csv_content):
    """Create a temporary CSV file for testing."""
    csv_file = tmp_path / "people.csv"
    csv_file.write_text(sample_csv_content)
    return csv_file
