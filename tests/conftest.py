# tests/conftest.py
import pytest

import phq.config as config
import phq.units.registry as regmod
from phq.units.registry import DEFAULT_REGISTRY as _ureg


@pytest.fixture(scope="session")
def ureg():
    return _ureg


@pytest.fixture
def reg():
    """A fresh registry loaded with the full catalog, isolated from DEFAULT_REGISTRY."""
    return regmod._bootstrap_default_registry()


@pytest.fixture(autouse=True)
def _default_settings():
    config.reset()
    yield
    config.reset()
