"""Pytest configuration and fixtures for hexbot-client tests."""

import os
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep HEXBOT_* variables and any local .env out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith('HEXBOT_'):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv('XDG_CONFIG_HOME', str(tmp_path / 'config'))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def colors_payload():
    """Three colors without coordinates, as returned by the API."""
    return {
        'colors': [
            {'value': '#B7410E'},
            {'value': '#b22222'},
            {'value': '#FFFFFF'},
        ]
    }


@pytest.fixture
def coordinates_payload():
    """Two colors with coordinates."""
    return {
        'colors': [
            {'value': '#FF0000', 'coordinates': {'x': 1, 'y': 2}},
            {'value': '#00FF00', 'coordinates': {'x': 30, 'y': 40}},
        ]
    }
