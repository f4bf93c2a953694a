"""Shared fixtures and markers for numerlo tests."""

import pytest

from numerlo.engine.registry import CODECS, System


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: exhaustive range sweeps")


@pytest.fixture
def codec():
    """Look up a registered codec by system name."""
    def _get(name):
        return CODECS[System(name)]
    return _get
