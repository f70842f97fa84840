"""
test_player.py
--------------
Player movement, edge clamping, reload timer, missile cap and death.
"""

import pytest

from invaders.core.services.input_manager import InputState
from invaders.entities.entity_types import EntityKind
from invaders.systems.board import Board
from tests.conftest import entities_of


@pytest.fixture
def board(game):
    return Board(game, 1)


class TestPlayerMovement:

    def test_moves_left_and_right(self, board):
        player = board.player
        start = player.x

        player.step(0.1, InputState(left=True))
        assert player.x == pytest.approx(start - 10)

        player.step(0.1, InputState(right=True))
        assert player.x == pytest.approx(start)

    def test_clamped_to_left_edge(self, board):
        player = board.player
        player.x = 2
        player.step(0.1, InputState(left=True))
        assert player.x == 0

    def test_clamped_to_right_edge(self, board):
        player = board.player
        player.x = 500 - player.w - 1
        player.step(0.1, InputState(right=True))
        assert player.x == 500 - player.w


class TestPlayerFiring:

    def test_initial_reload_blocks_fire(self, board):
        board.player.step(0.016, InputState(fire=True))
        assert board.missiles == 0

    def test_fires_once_reloaded(self, board, game):
        player = board.player
        player.reloading = 1

        player.step(0.016, InputState(fire=True))

        missiles = entities_of(board, EntityKind.MISSILE)
        assert len(missiles) == 1
        missile = missiles[0]
        assert missile.player and missile.dy == -100
        assert missile.x == pytest.approx(player.x + 13 - 1.5)
        assert missile.y == pytest.approx(player.y - player.h)
        assert board.missiles == 1
        assert player.reloading == 10
        game.audio.play.assert_called_once_with("fire")

    def test_reload_counts_steps(self, board):
        player = board.player
        player.reloading = 0
        player.step(0.016, InputState(fire=True))

        for _ in range(9):
            player.step(0.016, InputState(fire=True))
        assert board.missiles == 1

        player.step(0.016, InputState(fire=True))
        assert board.missiles == 2

    def test_cap_of_three_missiles(self, board, game):
        player = board.player
        board.missiles = 3
        player.reloading = 0

        assert not player.can_fire()
        player.step(0.016, InputState(fire=True))
        assert board.missiles == 3
        game.audio.play.assert_not_called()


class TestPlayerDeath:

    def test_die_plays_sound_and_notifies_host(self, board, game, callbacks):
        board.player.die()

        game.audio.play.assert_called_once_with("die")
        callbacks.die.assert_called_once()
