from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from shelf_hopper.layout import ShelfLayout, ShelfPosition


@pytest.fixture
def two_level_layout() -> ShelfLayout:
    """The bottom two levels of the default layout."""
    return ShelfLayout(
        level_count=2,
        width=32,
        shelves=[
            ShelfPosition(0, -8, 8),
            ShelfPosition(1, -12, 1),
            ShelfPosition(1, 3, 7),
        ],
    )


@pytest.fixture
def env():
    from shelf_hopper.game import GameEnv

    game = GameEnv()
    yield game
    game.close()
