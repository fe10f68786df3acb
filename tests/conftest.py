"""Shared fixtures: a small synthetic FLV file."""
import pytest

import flvbuild


@pytest.fixture
def sample_flv():
    return flvbuild.sample_file()
