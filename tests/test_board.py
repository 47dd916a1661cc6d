"""Tests for snake_tui.board — tick rules, scoring and frame diffs"""
import random

import pytest

from snake_tui.board import FOOD_REWARD, Board
from snake_tui.config import EMOJI_GLYPHS, GameOptions
from snake_tui.snake import Snake
from snake_tui.types import CellChange, Position


def P(row, col):
    return Position(row, col)


def make_board(snake=None, food=P(3, 4), **kwargs):
    """8x8 grid = 6x6 interior."""
    snake = snake or Snake([P(3, 3), P(3, 2), P(3, 1)], "right")
    return Board(8, 8, snake=snake, food=food, rng=random.Random(0), **kwargs)


class TestBoardConstruction:
    def test_defaults(self):
        board = Board(rng=random.Random(1))
        assert (board.rows, board.cols) == (22, 42)
        assert board.length == 3
        assert board.snake.head == P(11, 21)
        assert board.score == 0
        assert board.high_score == 0
        assert board.state == "playing"
        assert board.food.position is not None
        assert not board.snake.occupies(board.food.position)

    def test_from_options(self):
        opts = GameOptions(rows=6, cols=10, wall_mode="wrap", glyph_set="emoji")
        board = Board.from_options(opts, rng=random.Random(0), high_score=40)
        assert (board.rows, board.cols) == (8, 12)
        assert board.wall_mode == "wrap"
        assert board.glyphs is EMOJI_GLYPHS
        assert board.high_score == 40

    def test_is_interior(self):
        board = make_board()
        assert board.is_interior(P(1, 1))
        assert board.is_interior(P(6, 6))
        assert not board.is_interior(P(0, 3))
        assert not board.is_interior(P(7, 3))
        assert not board.is_interior(P(3, 0))
        assert not board.is_interior(P(3, 7))


class TestEating:
    def test_eat_scenario(self):
        board = make_board()
        assert board.update() == "ate"
        assert board.snake.head == P(3, 4)
        assert board.length == 4
        assert board.score == 10
        assert board.snake.body == (P(3, 4), P(3, 3), P(3, 2), P(3, 1))
        assert board.food.position is not None
        assert board.food.position not in {P(3, 4), P(3, 3), P(3, 2), P(3, 1)}
        assert board.is_interior(board.food.position)

    def test_eat_grows_by_one_and_scores(self):
        board = make_board()
        before_len, before_score = board.length, board.score
        board.update()
        assert board.length == before_len + 1
        assert board.score == before_score + FOOD_REWARD

    def test_growth_does_not_leak_into_next_tick(self):
        board = make_board()
        board.update()
        board.food.position = P(6, 6)
        board.snake.set_direction("down")
        assert board.update() == "moved"
        assert board.length == 4

    def test_plain_moves_keep_length(self):
        board = make_board(food=P(6, 1))
        for _ in range(3):
            before = board.length
            assert board.update() == "moved"
            assert board.length == before
        assert board.score == 0


class TestWallCollision:
    @pytest.mark.parametrize(
        "head, direction, wall",
        [
            (P(1, 3), "up", P(0, 3)),
            (P(6, 3), "down", P(7, 3)),
            (P(3, 1), "left", P(3, 0)),
            (P(3, 6), "right", P(3, 7)),
        ],
    )
    def test_hitting_each_wall_ends_game(self, head, direction, wall):
        board = make_board(snake=Snake([head], direction), food=P(5, 5))
        assert board.update() == "collided"
        assert board.snake.head == wall
        assert board.game_over
        assert board.state == "game_over"

    def test_moving_left_until_wall(self):
        snake = Snake([P(3, 3), P(3, 4), P(3, 5)], "left")
        board = make_board(snake=snake, food=P(3, 2))
        for _ in range(10):
            if board.game_over:
                break
            board.update()
        assert board.game_over
        assert board.snake.head.col == 0
        assert board.score >= 10
        assert board.high_score == board.score

    def test_wall_checked_before_self(self):
        # Head leaves the grid; self-collision is irrelevant once the wall is hit.
        board = make_board(snake=Snake([P(1, 1), P(1, 2)], "up"), food=P(5, 5))
        assert board.update() == "collided"


class TestSelfCollision:
    def test_turning_into_body_ends_game(self):
        snake = Snake([P(3, 2), P(3, 3), P(2, 3), P(2, 2), P(2, 1)], "up")
        board = make_board(snake=snake, food=P(6, 6))
        assert board.update() == "collided"
        assert board.game_over


class TestGameOverState:
    def test_update_after_game_over_is_noop(self):
        board = make_board(snake=Snake([P(1, 3)], "up"), food=P(5, 5))
        board.update()
        head = board.snake.head
        assert board.update() == "idle"
        assert board.snake.head == head
        assert board.game_over

    def test_high_score_never_decreases(self):
        board = make_board(snake=Snake([P(1, 3)], "up"), food=P(5, 5), high_score=50)
        board.update()
        assert board.score == 0
        assert board.high_score == 50

    def test_high_score_takes_final_score(self):
        board = make_board(snake=Snake([P(1, 3)], "up"), food=P(5, 5), high_score=5)
        board.score = 30
        board.update()
        assert board.high_score == 30


class TestWrapMode:
    def test_passes_through_wall(self):
        board = make_board(snake=Snake([P(3, 6), P(3, 5)], "right"), food=P(1, 1), wall_mode="wrap")
        assert board.update() == "moved"
        assert board.snake.head == P(3, 1)
        assert not board.game_over

    def test_eats_across_the_edge(self):
        board = make_board(snake=Snake([P(3, 6), P(3, 5)], "right"), food=P(3, 1), wall_mode="wrap")
        assert board.update() == "ate"
        assert board.length == 3

    def test_self_collision_still_lethal(self):
        snake = Snake([P(3, 2), P(3, 3), P(2, 3), P(2, 2), P(2, 1)], "up")
        board = make_board(snake=snake, food=P(6, 6), wall_mode="wrap")
        assert board.update() == "collided"


class TestFullBoard:
    def test_no_free_cell_does_not_crash(self):
        snake = Snake([P(1, 1), P(1, 2), P(2, 2), P(2, 1)], "down")
        board = Board(4, 4, snake=snake, rng=random.Random(0))
        assert board.food.position is None
        assert board.update() == "moved"
        assert board.food.position is None
        assert not board.game_over

    def test_missing_food_retried_each_tick(self):
        board = make_board(food=P(6, 6))
        board.food.position = None
        board.update()
        assert board.food.position is not None


class TestFrames:
    def test_boundary_cells(self):
        board = make_board()
        cells = board.boundary_cells()
        assert len(cells) == 28
        symbols = {c.position: c.symbol for c in cells}
        assert symbols[P(0, 0)] == "+"
        assert symbols[P(7, 7)] == "+"
        assert symbols[P(0, 3)] == "="
        assert symbols[P(3, 0)] == "|"
        assert all(not board.is_interior(c.position) for c in cells)

    def test_snapshot_contents(self):
        frame = make_board().snapshot()
        assert frame[3][3] == "#"
        assert frame[3][2] == "o"
        assert frame[3][1] == "o"
        assert frame[3][4] == "O"
        assert frame[5][5] == " "
        assert frame[0][0] == "+"

    def test_first_diff_reports_snake_and_food(self):
        board = make_board()
        changes = board.diff()
        assert changes == [
            CellChange(P(3, 1), "o"),
            CellChange(P(3, 2), "o"),
            CellChange(P(3, 3), "#"),
            CellChange(P(3, 4), "O"),
        ]

    def test_identical_snapshots_report_nothing(self):
        board = make_board()
        board.diff()
        assert board.diff() == []

    def test_move_reports_only_changed_cells(self):
        board = make_board(food=P(6, 6))
        board.diff()
        board.update()
        changes = {c.position: c.symbol for c in board.diff()}
        assert changes == {P(3, 4): "#", P(3, 3): "o", P(3, 1): " "}

    def test_eat_reports_head_neck_and_new_food(self):
        board = make_board()
        board.diff()
        board.update()
        changes = {c.position: c.symbol for c in board.diff()}
        assert changes[P(3, 4)] == "#"
        assert changes[P(3, 3)] == "o"
        assert changes[board.food.position] == "O"
        assert P(3, 1) not in changes
        assert len(changes) == 3

    def test_diff_never_reports_boundary(self):
        board = make_board(snake=Snake([P(1, 3)], "up"), food=P(5, 5))
        board.diff()
        board.update()
        assert all(board.is_interior(c.position) for c in board.diff())
