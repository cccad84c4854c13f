"""Root conftest: shared test configuration."""

import pytest

from zeta_fn import FnConfig, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the built-in defaults."""
    previous = set_config(FnConfig())
    yield
    set_config(previous)
