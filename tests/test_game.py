import random

import pytest

from tictactoe.ai import AIOpponent, Difficulty, create_ai_opponent
from tictactoe.board import IllegalMoveError, Mark
from tictactoe.game import Game, GameMode

X, O = Mark.X, Mark.O


def _play(game, *indices):
    for index in indices:
        game.place_mark(index)


def test_new_game_starts_with_x_in_the_centre():
    game = Game.new()
    assert game.current_player is X
    assert game.cursor == 4
    assert game.status_message() == "Turn: X"
    assert game.mode_label() == "Player vs Player"


def test_turns_alternate_in_pvp():
    game = Game.new()
    result = game.place_mark(0)
    assert result.player is X
    assert game.current_player is O
    game.place_mark(4)
    assert game.current_player is X
    assert game.last_move.index == 4


def test_win_is_recorded_and_scored():
    game = Game.new()
    _play(game, 0, 3, 1, 4, 2)
    assert game.is_finished
    assert game.winner is X
    assert game.winning_line == (0, 1, 2)
    assert game.last_move.produced_win
    assert game.status_message() == "Winner: X"
    assert game.score.wins[X] == 1
    assert game.score.summary() == "X : 1   O : 0   Draw : 0"


def test_draw_is_recorded_and_scored():
    game = Game.new()
    # X O X / X O O / O X X
    _play(game, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert game.draw
    assert game.winner is None
    assert game.last_move.produced_draw
    assert game.status_message() == "Draw!"
    assert game.score.draws == 1


def test_no_moves_after_the_game_is_over():
    game = Game.new()
    _play(game, 0, 3, 1, 4, 2)
    with pytest.raises(IllegalMoveError):
        game.place_mark(8)


def test_occupied_cell_keeps_the_turn():
    game = Game.new()
    game.place_mark(0)
    with pytest.raises(IllegalMoveError):
        game.place_mark(0)
    assert game.current_player is O


def test_reset_keeps_the_score():
    game = Game.new()
    _play(game, 0, 3, 1, 4, 2)
    game.reset()
    assert not game.is_finished
    assert game.winning_line is None
    assert game.board.empty_cells() == list(range(9))
    assert game.current_player is X
    assert game.score.wins[X] == 1


def test_select_mode_resets_and_sets_difficulty():
    game = Game.new()
    game.place_mark(4)
    game.select_mode(GameMode.PVC, Difficulty.MEDIUM)
    assert game.vs_computer
    assert game.difficulty is Difficulty.MEDIUM
    assert game.board.empty_cells() == list(range(9))
    assert game.mode_label() == "Player vs Computer (MEDIUM)"
    assert game.action_log[-1] == "Mode: Player vs Computer (MEDIUM)"


def test_ai_mark_follows_human_choice():
    assert Game.new().ai_mark is None
    assert Game.new(GameMode.PVC).ai_mark is O
    assert Game.new(GameMode.PVC, human_mark=O).ai_mark is X


def test_is_ai_turn_only_in_pvc():
    game = Game.new(GameMode.PVC)
    assert not game.is_ai_turn
    game.place_mark(0)
    assert game.is_ai_turn
    pvp = Game.new()
    pvp.place_mark(0)
    assert not pvp.is_ai_turn


def test_cursor_wraps_around_the_grid():
    game = Game.new()
    game.set_cursor(0)
    assert game.move_cursor(-1, 0) == 6
    assert game.move_cursor(0, -1) == 8
    assert game.move_cursor(1, 1) == 0


def test_set_cursor_rejects_cells_outside_the_board():
    game = Game.new()
    with pytest.raises(ValueError):
        game.set_cursor(9)


def test_action_log_is_bounded():
    game = Game.new()
    for _ in range(5):
        game.reset()
        _play(game, 0, 3, 1, 4, 2)
    assert len(game.action_log) <= game._log_capacity


def test_cell_labels():
    assert Game.cell_label(0) == "A1"
    assert Game.cell_label(5) == "C2"
    assert Game.cell_label(7) == "B3"


def test_opponent_plays_only_on_its_turn():
    game = Game.new(GameMode.PVC, Difficulty.HARD)
    opponent = create_ai_opponent(Difficulty.HARD, O, rng=random.Random(0))
    assert isinstance(opponent, AIOpponent)
    assert not opponent.take_turn(game)
    game.place_mark(0)
    assert opponent.take_turn(game)
    assert game.current_player is X
    assert len(game.board.empty_cells()) == 7


def test_opponent_blocks_in_a_live_game():
    game = Game.new(GameMode.PVC, Difficulty.HARD)
    opponent = create_ai_opponent(Difficulty.HARD, O)
    game.place_mark(0)
    game.board.cells[4] = O  # centre for O without going through the turn
    game.board.cells[1] = X
    # X threatens the top row; O must block at 2.
    assert opponent.take_turn(game)
    assert game.board.cells[2] is O


def test_opponent_does_nothing_once_finished():
    game = Game.new(GameMode.PVC)
    opponent = create_ai_opponent(Difficulty.EASY, O)
    _play(game, 0, 3, 1, 4, 2)
    assert not opponent.take_turn(game)


def test_hard_opponent_never_loses_to_scripted_human():
    rng = random.Random(11)
    for _ in range(20):
        game = Game.new(GameMode.PVC, Difficulty.HARD, rng=rng)
        opponent = create_ai_opponent(game.difficulty, game.ai_mark, rng=rng)
        while not game.is_finished:
            if game.is_ai_turn:
                opponent.take_turn(game)
            else:
                game.place_mark(rng.choice(game.board.empty_cells()))
        assert game.winner is not X
