import numpy as np
import pytest

import moves
from errors import InvalidMove
from moves import B, D, F, L, R, U, col, row


def labelled():
    return np.arange(54).reshape(6, 3, 3)


def test_rotate_clockwise_moves_corners_and_keeps_center():
    face = np.arange(9).reshape(3, 3)
    turned = moves.rotate_clockwise(face)
    assert turned.tolist() == [[6, 3, 0], [7, 4, 1], [8, 5, 2]]
    assert turned[1, 1] == face[1, 1]
    # top-left -> top-right -> bottom-right -> bottom-left -> top-left
    corner = face[0, 0]
    path = []
    for _ in range(4):
        face = moves.rotate_clockwise(face)
        path.append(tuple(np.argwhere(face == corner)[0].tolist()))
    assert path == [(0, 2), (2, 2), (2, 0), (0, 0)]


def test_rotate_clockwise_returns_new_grid():
    face = np.arange(9).reshape(3, 3)
    moves.rotate_clockwise(face)
    assert face.tolist() == [[0, 1, 2], [3, 4, 5], [6, 7, 8]]


def test_counterclockwise_undoes_clockwise():
    face = np.arange(9).reshape(3, 3)
    assert np.array_equal(moves.rotate_counterclockwise(moves.rotate_clockwise(face)), face)
    assert moves.rotate_counterclockwise(face).tolist() == [[2, 5, 8], [1, 4, 7], [0, 3, 6]]


def test_cycle_strips_forward_takes_next_strip():
    faces = labelled()
    before = faces.copy()
    specs = ((L, 0), (F, 0), (R, 0), (B, 0))
    moves.cycle_strips(faces, specs)
    assert faces[L, 0].tolist() == before[F, 0].tolist()
    assert faces[F, 0].tolist() == before[R, 0].tolist()
    assert faces[R, 0].tolist() == before[B, 0].tolist()
    assert faces[B, 0].tolist() == before[L, 0].tolist()


def test_cycle_strips_reverse_takes_previous_strip():
    faces = labelled()
    before = faces.copy()
    specs = ((L, 0), (F, 0), (R, 0), (B, 0))
    moves.cycle_strips(faces, specs, reverse=True)
    assert faces[F, 0].tolist() == before[L, 0].tolist()
    assert faces[L, 0].tolist() == before[B, 0].tolist()


def test_cycle_strips_vertical_uses_columns():
    faces = labelled()
    before = faces.copy()
    moves.cycle_strips(faces, ((U, 0), (F, 0), (D, 0), (B, 2)), vertical=True)
    assert faces[U, :, 0].tolist() == before[F, :, 0].tolist()
    assert faces[B, :, 2].tolist() == before[U, :, 0].tolist()
    # rows untouched outside the strips
    assert np.array_equal(faces[U, :, 1:], before[U, :, 1:])


def test_transfer_strips_reads_snapshots_and_reverses():
    faces = labelled()
    before = faces.copy()
    transfers = (
        (row(U, 0), col(R, 2), moves.STRAIGHT),
        (col(R, 2), row(U, 0), moves.REVERSED),
    )
    moves.transfer_strips(faces, transfers)
    assert faces[R, :, 2].tolist() == before[U, 0].tolist()
    assert faces[U, 0].tolist() == before[R, :, 2][::-1].tolist()


@pytest.mark.parametrize("token", moves.QUARTER_TURNS)
def test_permutation_is_a_bijection(token):
    perm = moves.PERMUTATIONS[token]
    assert sorted(perm.tolist()) == list(range(54))


@pytest.mark.parametrize("token", moves.QUARTER_TURNS)
def test_permutation_matches_reference_turn(token):
    rng = np.random.default_rng(7)
    faces = rng.integers(0, 6, size=(6, 3, 3))
    expected = faces.copy()
    moves.apply_quarter_turn(expected, token)
    assert np.array_equal(moves.permute(faces, token), expected)


@pytest.mark.parametrize("token", moves.QUARTER_TURNS)
def test_turn_leaves_opposite_face_alone(token):
    opposite = {"U": D, "D": U, "R": L, "L": R, "F": B, "B": F}[token[0]]
    faces = labelled()
    turned = moves.permute(faces, token)
    assert np.array_equal(turned[opposite], faces[opposite])


def test_r_moves_front_column_to_up():
    faces = labelled()
    turned = moves.permute(faces, "R")
    assert turned[U, :, 2].tolist() == faces[F, :, 2].tolist()
    assert turned[F, :, 2].tolist() == faces[D, :, 2].tolist()
    assert turned[B, :, 0].tolist() == faces[U, :, 2][::-1].tolist()
    assert turned[D, :, 2].tolist() == faces[B, :, 0][::-1].tolist()


def test_f_moves_left_column_to_up_row_reversed():
    faces = labelled()
    turned = moves.permute(faces, "F")
    assert turned[U, 2].tolist() == faces[L, :, 2][::-1].tolist()
    assert turned[R, :, 0].tolist() == faces[U, 2].tolist()
    assert turned[D, 0].tolist() == faces[R, :, 0][::-1].tolist()
    assert turned[L, :, 2].tolist() == faces[D, 0].tolist()


def test_u_moves_front_row_to_left():
    faces = labelled()
    turned = moves.permute(faces, "U")
    assert turned[L, 0].tolist() == faces[F, 0].tolist()
    assert turned[B, 0].tolist() == faces[L, 0].tolist()


def test_permutations_are_read_only():
    with pytest.raises(ValueError):
        moves.PERMUTATIONS["R"][0] = 1


@pytest.mark.parametrize("token", ["X", "r", "R3", "U'2", " R", "", "R2"])
def test_unknown_quarter_turn_rejected(token):
    with pytest.raises(InvalidMove):
        moves.apply_quarter_turn(labelled(), token)
    with pytest.raises(InvalidMove):
        moves.permute(labelled(), token)


def test_expand_and_inverse():
    assert moves.expand("F2") == ("F", "F")
    assert moves.expand("L'") == ("L'",)
    assert moves.inverse("B") == "B'"
    assert moves.inverse("B'") == "B"
    assert moves.inverse("D2") == "D2"
    with pytest.raises(InvalidMove):
        moves.expand("M")
    with pytest.raises(InvalidMove):
        moves.inverse("x")


def test_vocabulary():
    assert len(moves.QUARTER_TURNS) == 12
    assert len(moves.MOVES) == 18
    assert len(set(moves.MOVES)) == 18
