from importlib import reload

import pytest

import qparams.constants as const_mod


@pytest.fixture
def reload_constants():
    """
    Hand the constants module to the test and reload it afterwards, so
    values recomputed under override_settings don't leak into other tests.
    """
    yield const_mod
    reload(const_mod)
