"""
Global pytest configuration and fixtures.
"""
import json
import os
from typing import Any, Dict

import pytest

from timeledger.config import TimeLedgerConfig, reload_config
from timeledger.config.logging_config import reset_logging


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'ENVIRONMENT': 'testing',
        'DEBUG': 'true',
        'LOG_LEVEL': 'DEBUG',
        'CURRENCY': 'EUR',
        'CURRENCY_LOCALE': 'de-DE',
        'SNAPSHOT_FILE': 'test-snapshot.json',
        'EXPORT_DIR': 'test-exports',
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)

    # Clear the global config to force reload with test values
    import timeledger.config.settings
    timeledger.config.settings._config = None

    yield test_env_vars

    # Clean up
    timeledger.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> TimeLedgerConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def sample_snapshot_data() -> Dict[str, Any]:
    """Sample snapshot document with two clients and one internal project."""
    return {
        'clients': [
            {'id': 'c1', 'name': 'Acme'},
            {'id': 'c2', 'name': 'Globex'},
        ],
        'projects': [
            {'id': 'p1', 'name': 'Website', 'client': 'Acme', 'color': '#3b82f6', 'rate': 50},
            {'id': 'p2', 'name': 'App', 'client': 'Acme', 'color': '#ef4444', 'rate': 80},
            {'id': 'p3', 'name': 'Portal', 'client': 'Globex', 'color': '#10b981', 'rate': 100},
            {'id': 'p4', 'name': 'Internal Tools', 'color': '#9ca3af'},
        ],
        'entries': [
            {'id': 'e1', 'description': 'Landing page', 'project': 'p1', 'date': '2024-03-04',
             'startTime': '09:00', 'endTime': '11:00', 'billable': True, 'invoiced': False},
            {'id': 'e2', 'description': 'Login flow', 'project': 'p2', 'date': '2024-03-05',
             'startTime': '13:00', 'endTime': '14:30', 'billable': True, 'invoiced': True},
            {'id': 'e3', 'description': 'Kickoff', 'project': 'p3', 'date': '2024-04-10',
             'startTime': '10:00', 'endTime': '11:00', 'billable': True, 'invoiced': False},
            {'id': 'e4', 'description': 'Build scripts', 'project': 'p4', 'date': '2024-04-11',
             'startTime': '15:00', 'endTime': '16:00', 'billable': False, 'invoiced': False},
            {'id': 'e5', 'description': 'Old work', 'project': 'p1', 'date': '2023-12-29',
             'startTime': '09:00', 'endTime': '10:00', 'billable': True, 'invoiced': True},
        ],
        'licenses': [
            {'id': 'l1', 'name': 'Design tool', 'price': 120, 'project': 'p1',
             'client': 'Acme', 'date': '2024-06-05', 'invoiced': True},
        ],
        'servers': [
            {'id': 's1', 'name': 'VPS', 'price': '20.50', 'project': 'p3',
             'client': 'Globex', 'date': '2024-04-01', 'invoiced': False},
        ],
        'domains': [
            {'id': 'd1', 'name': 'acme.test', 'price': 12, 'project': 'p1',
             'client': 'Acme', 'date': '2024-03-15', 'invoiced': False},
        ],
    }


@pytest.fixture
def snapshot_file(tmp_path, sample_snapshot_data):
    """Sample snapshot written to a temporary JSON file."""
    path = tmp_path / 'snapshot.json'
    path.write_text(json.dumps(sample_snapshot_data), encoding='utf-8')
    return path


@pytest.fixture
def sample_snapshot(sample_snapshot_data):
    """Sample snapshot parsed into models."""
    from timeledger.readers import SnapshotReader

    return SnapshotReader().parse(sample_snapshot_data)


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Remove handlers installed by CLI runs so they do not outlive the test."""
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def cleanup_test_files():
    """Clean up any test files created during testing."""
    yield

    # Remove test coverage files in case they're created
    test_files = ['coverage.xml', '.coverage']
    for file in test_files:
        if os.path.exists(file):
            os.remove(file)


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        # Add unit marker for tests in tests/unit/
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        # Add integration marker for tests in tests/integration/
        elif "tests/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
