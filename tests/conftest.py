"""
conftest.py
-----------
Shared pytest configuration and fixtures for the Space Invaders tests.

Contains:
- Headless SDL drivers so pygame never opens a window or an audio device
- A sprite atlas built from in-memory metadata
- A GameLoop context with mocked audio and recording callbacks
- Marker registration
"""

import os

# Must be set before pygame initialises any subsystem
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
from unittest.mock import MagicMock

from invaders.core.runtime.game_loop import GameCallbacks, GameLoop
from invaders.graphics.sprite_atlas import SpriteAtlas


SPRITE_METADATA = {
    "_notes": "Matches invaders/config/sprites.json",
    "alien1": {"sx": 0, "sy": 0, "w": 23, "h": 18, "frames": 2, "entity": "alien"},
    "alien2": {"sx": 0, "sy": 18, "w": 23, "h": 18, "frames": 2, "entity": "alien"},
    "player": {"sx": 0, "sy": 36, "w": 26, "h": 17, "entity": "player"},
    "shield1": {"sx": 0, "sy": 56, "w": 30, "h": 24, "entity": "shield"},
    "shield2": {"sx": 30, "sy": 56, "w": 30, "h": 24, "entity": "shield"},
    "shield3": {"sx": 60, "sy": 56, "w": 30, "h": 24, "entity": "shield"},
    "missile": {"sx": 0, "sy": 86, "w": 3, "h": 14, "entity": "missile"},
}


# ===========================================================
# Fixtures
# ===========================================================


@pytest.fixture
def sprite_metadata():
    return dict(SPRITE_METADATA)


@pytest.fixture
def atlas(sprite_metadata):
    """Atlas with metadata and a stand-in sheet image."""
    sprite_atlas = SpriteAtlas(sprite_metadata)
    sprite_atlas.image = MagicMock(name="sprite_sheet")
    return sprite_atlas


@pytest.fixture
def callbacks():
    return GameCallbacks(start=MagicMock(), die=MagicMock(), win=MagicMock())


@pytest.fixture
def make_game(atlas, callbacks):
    """Factory for a 500x500 GameLoop context over the given level data."""
    def _make(level_data=None, surface=None):
        if level_data is None:
            level_data = {1: [[1]]}
        return GameLoop(
            500,
            500,
            atlas,
            MagicMock(name="audio"),
            level_data,
            callbacks=callbacks,
            surface=surface,
        )
    return _make


@pytest.fixture
def game(make_game):
    return make_game()


@pytest.fixture
def surface():
    """Recording drawing surface."""
    return MagicMock(name="surface")


# ===========================================================
# Test Helpers
# ===========================================================


def entities_of(board, kind):
    return [entity for entity in board.objects if entity.kind is kind]


# ===========================================================
# Pytest Configuration
# ===========================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: full board scenarios across several steps")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Tag everything that is not an integration test as a unit test."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
