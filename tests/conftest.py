# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
# ==============================================

import pytest

from map_sandbox import config as config_module
from map_sandbox.config import SandboxConfig
from map_sandbox.sandbox import StringMapSandbox


@pytest.fixture
def config():
    """Configuration with mutation logging enabled."""
    return SandboxConfig(log_level="DEBUG", log_mutations=True)


@pytest.fixture
def sandbox(config):
    """An empty sandbox."""
    return StringMapSandbox(config=config)


@pytest.fixture
def filled_sandbox(sandbox):
    """Sandbox holding hola, ab and ba."""
    for value in ["hola", "ab", "ba"]:
        sandbox.add(value)
    return sandbox


@pytest.fixture
def fresh_config(monkeypatch):
    """Drop the cached config singleton so get_config() re-reads the environment."""
    monkeypatch.setattr(config_module, "_config_instance", None)
    monkeypatch.delenv("MAP_SANDBOX_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MAP_SANDBOX_LOG_MUTATIONS", raising=False)
    monkeypatch.setattr(config_module, "load_dotenv", lambda **kwargs: False)
    return config_module
