import pytest

from simple_tictactoe.game_basics import (
    WIN_PATTERNS,
    GameState,
    Mark,
    classify,
    count_wins,
    deserialize_grid,
    find_winning_lines,
    get_piece_counts,
    serialize_grid,
)


def test_win_patterns_cover_rows_cols_diagonals():
    assert len(WIN_PATTERNS) == 8
    assert len(set(WIN_PATTERNS)) == 8
    assert ((0, 0), (1, 1), (2, 2)) in WIN_PATTERNS
    assert ((0, 2), (1, 1), (2, 0)) in WIN_PATTERNS


def test_serialize_roundtrip_and_counts():
    g = deserialize_grid("XO_OX___X")
    assert serialize_grid(g) == "XO_OX___X"
    assert get_piece_counts(g) == (3, 2)
    assert g[0, 0] == Mark.X and g[0, 1] == Mark.O and g[0, 2] == 0


@pytest.mark.parametrize("bad", ["", "XO", "XXXXXXXXXX"])
def test_deserialize_rejects_wrong_length(bad):
    with pytest.raises(ValueError):
        deserialize_grid(bad)


def test_find_winning_lines_reports_mark_and_cells():
    lines = find_winning_lines(deserialize_grid("OXXXO___O"))
    assert len(lines) == 1
    assert lines[0].mark is Mark.O
    assert lines[0].cells == ((0, 0), (1, 1), (2, 2))


def test_no_winning_line_on_empty_board():
    assert find_winning_lines(deserialize_grid("_" * 9)) == []


def test_both_diagonals_of_one_mark_count_once():
    # X completed both diagonals with the final centre move
    lines = find_winning_lines(deserialize_grid("XOXOXOXOX"))
    assert len(lines) == 2
    assert count_wins(lines) == 1


def test_row_and_column_of_one_mark_count_twice():
    lines = find_winning_lines(deserialize_grid("XXXXOOXOO"))
    assert {line.mark for line in lines} == {Mark.X}
    assert count_wins(lines) == 2


def test_row_and_diagonal_of_one_mark_count_twice():
    lines = find_winning_lines(deserialize_grid("XXXOXOOOX"))
    assert len(lines) == 2
    assert count_wins(lines) == 2


def test_disjoint_lines_count_separately():
    lines = find_winning_lines(deserialize_grid("XXX___OOO"))
    assert count_wins(lines) == 2


@pytest.mark.parametrize(
    "cells,expected",
    [
        ("_________", GameState.ONGOING),
        ("XO_OX____", GameState.ONGOING),
        ("XXXOO____", GameState.X_WINS),
        ("XX_OOOX__", GameState.O_WINS),
        ("XOXXOOOXX", GameState.DRAW),
        ("XXXOOO___", GameState.IMPOSSIBLE),  # two winners
        ("XX_XX_O__", GameState.IMPOSSIBLE),  # count gap > 1
        ("XXXXXXOOO", GameState.IMPOSSIBLE),
        ("XOXOXOXOX", GameState.X_WINS),  # both diagonals count once
        ("XXXXOOXOO", GameState.IMPOSSIBLE),  # row 1 and column 1
        ("XXXOXOOOX", GameState.IMPOSSIBLE),  # row 1 and main diagonal
        ("XOOXXOXXO", GameState.IMPOSSIBLE),  # X col 1 and O col 3
    ],
)
def test_classify_table(cells, expected):
    assert classify(deserialize_grid(cells)) is expected


def test_state_meanings():
    assert GameState.ONGOING.meaning == "Game not finished"
    assert GameState.DRAW.meaning == "Draw"
    assert GameState.X_WINS.meaning == "X wins"
    assert GameState.O_WINS.meaning == "O wins"
    assert GameState.IMPOSSIBLE.meaning == "Impossible"
    assert not GameState.ONGOING.is_terminal
    assert all(s.is_terminal for s in GameState if s is not GameState.ONGOING)


def test_mark_other():
    assert Mark.X.other is Mark.O
    assert Mark.O.other is Mark.X
    assert str(Mark.X) == "X"
