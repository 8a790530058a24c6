"""
Pytest configuration and fixtures
"""
import pytest
import os
import sys
import tempfile
import shutil

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    temp_path = tempfile.mkdtemp(prefix="tokenforge_test_")
    yield temp_path
    # Cleanup after test
    if os.path.exists(temp_path):
        shutil.rmtree(temp_path)


@pytest.fixture
def temp_config(temp_dir):
    """Path for a temporary config file"""
    return os.path.join(temp_dir, "config.json")


@pytest.fixture
def app_home(temp_dir, monkeypatch):
    """Point the app data folder (logs, default config) at a temp directory"""
    home = os.path.join(temp_dir, "home")
    monkeypatch.setenv("TOKENFORGE_HOME", home)
    return home


@pytest.fixture
def default_settings():
    """Default typography settings (16px, Perfect Fourth)"""
    from tokenforge.defaults import default_typography
    return default_typography()


@pytest.fixture
def state():
    """Fresh default design system state"""
    from tokenforge.defaults import default_state
    return default_state()


@pytest.fixture
def drained_logger():
    """App logger with an empty message queue"""
    from tokenforge.logger import app_logger
    app_logger.get_messages()
    yield app_logger
    app_logger.set_error_callback(None)
    app_logger.get_messages()


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "cli: tests that run the command-line entry point"
    )
