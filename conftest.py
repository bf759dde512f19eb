"""
Global pytest configuration and fixtures.
"""
import os
from typing import Dict

import pytest

from callcharge.config import CallChargeConfig, reload_config, reset_logging

CONFIG_ENV_VARS = (
    "ENVIRONMENT",
    "DEBUG",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FILE",
    "TARIFF_THRESHOLD_MINUTES",
    "TARIFF_BASE_RATE",
    "TARIFF_OVERFLOW_RATE",
    "AMOUNT_TOLERANCE",
)


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'ENVIRONMENT': 'testing',
        'DEBUG': 'true',
        'LOG_LEVEL': 'DEBUG',
    }


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove configuration variables and run away from any local .env file."""
    for key in CONFIG_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)

    import callcharge.config.settings
    callcharge.config.settings._config = None

    yield

    callcharge.config.settings._config = None


@pytest.fixture
def mock_env(test_env_vars, clean_env, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)

    yield test_env_vars


@pytest.fixture
def test_config(mock_env) -> CallChargeConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def vector_csv(tmp_path):
    """Write a vector table and return its path."""

    def _write(rows, header="num,startTime,endTime,isTransform,pay"):
        path = tmp_path / "vectors.csv"
        lines = [header] + [",".join(str(cell) for cell in row) for row in rows]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_vectors():
    """Vector rows covering every pricing branch."""
    return [
        [1, '2023-01-01 00:00:00', '2023-01-01 00:10:00', 'false', '0.5'],
        [2, '2023-01-01 00:00:00', '2023-01-01 00:25:00', 'false', '1.5'],
        [3, '2023-04-02 01:59:59', '2023-04-02 03:00:01', 'false', '0.05'],
        [4, '2023-10-29 02:30:00', '2023-10-29 02:10:00', 'true', '3.0'],
        [5, '2023-13-01 00:00:00', '2023-13-01 00:10:00', 'false', 'error'],
        [6, '2023-01-02 00:00:00', '2023-01-01 00:00:00', 'false', 'error'],
    ]


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Drop handlers installed by a test so they do not leak into the next one."""
    yield
    reset_logging()


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "cli: mark test as exercising the command line interface"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        path = str(item.fspath).replace(os.sep, "/")
        if "tests/unit/" in path:
            item.add_marker(pytest.mark.unit)
        if "tests/unit/cli/" in path:
            item.add_marker(pytest.mark.cli)
