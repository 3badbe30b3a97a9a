# moves.py
"""
Face turns of the 3x3x3 cube as operations on a (6, 3, 3) sticker array.

Faces are indexed U=0, R=1, F=2, D=3, L=4, B=5. Every quarter turn is built
from two steps: rotate the turning face's own 3x3 grid, then move the border
strips of the four neighbouring faces. U and D use a plain 4-strip cyclic
shift of rows; the side faces use an explicit transfer table, because their
neighbouring strips mix rows and columns with different reading directions.

The reference path (`apply_quarter_turn`) is run once per token over a cube
of slot labels to produce `PERMUTATIONS`, so a move on a real cube is a
single numpy gather.
"""
from collections import namedtuple

import numpy as np

from errors import InvalidMove


SIZE = 3
STICKERS = 6 * SIZE * SIZE

U, R, F, D, L, B = range(6)
FACES = "URFDLB"

QUARTER_TURNS = ("U", "U'", "R", "R'", "F", "F'", "D", "D'", "L", "L'", "B", "B'")
DOUBLE_TURNS = ("U2", "R2", "F2", "D2", "L2", "B2")
MOVES = QUARTER_TURNS + DOUBLE_TURNS

# One border strip: a full row or column of one face.
Strip = namedtuple("Strip", ["face", "vertical", "index"])


def row(face, index):
    return Strip(face, False, index)


def col(face, index):
    return Strip(face, True, index)


def rotate_clockwise(face):
    """
    Return a new 3x3 grid: source [i][j] lands on [j][2 - i].
    Corners go top-left -> top-right -> bottom-right -> bottom-left; [1][1] stays.
    """
    face = np.asarray(face)
    out = np.empty_like(face)
    for i in range(SIZE):
        for j in range(SIZE):
            out[j, SIZE - 1 - i] = face[i, j]
    return out


def rotate_counterclockwise(face):
    # three clockwise turns, so the pair are exact inverses
    for _ in range(3):
        face = rotate_clockwise(face)
    return face


def read_strip(faces, strip):
    if strip.vertical:
        return faces[strip.face, :, strip.index].copy()
    return faces[strip.face, strip.index, :].copy()


def write_strip(faces, strip, values):
    if strip.vertical:
        faces[strip.face, :, strip.index] = values
    else:
        faces[strip.face, strip.index, :] = values


def cycle_strips(faces, specs, vertical=False, reverse=False):
    """
    Cyclic shift over four (face, index) strips, in place.

    Forward: strip k takes the values of strip k+1, the last takes the first's.
    Reverse: strip k takes the values of strip k-1, the first takes the last's.
    All strips are read before any is written.
    """
    strips = [Strip(face, vertical, index) for face, index in specs]
    buffered = [read_strip(faces, s) for s in strips]
    n = len(strips)
    for k, strip in enumerate(strips):
        source = (k - 1) % n if reverse else (k + 1) % n
        write_strip(faces, strip, buffered[source])


def transfer_strips(faces, transfers):
    """
    Apply (source, destination, reversed) strip copies, in place.

    Sources are snapshotted before the first write. A reversed transfer puts
    source element i at destination element 2 - i.
    """
    snapshots = [read_strip(faces, source) for source, _, _ in transfers]
    for values, (_, destination, reversed_) in zip(snapshots, transfers):
        write_strip(faces, destination, values[::-1] if reversed_ else values)


# (strips, reverse) for the generic shift; strips are rows of the side faces.
ROW_CYCLES = {
    "U": (((L, 0), (F, 0), (R, 0), (B, 0)), False),
    "U'": (((L, 0), (F, 0), (R, 0), (B, 0)), True),
    "D": (((F, 2), (L, 2), (B, 2), (R, 2)), False),
    "D'": (((F, 2), (L, 2), (B, 2), (R, 2)), True),
}

STRAIGHT, REVERSED = False, True

SIDE_TRANSFERS = {
    "R": (
        (col(D, 2), col(F, 2), STRAIGHT),
        (col(F, 2), col(U, 2), STRAIGHT),
        (col(U, 2), col(B, 0), REVERSED),
        (col(B, 0), col(D, 2), REVERSED),
    ),
    "R'": (
        (col(B, 0), col(U, 2), REVERSED),
        (col(U, 2), col(F, 2), STRAIGHT),
        (col(F, 2), col(D, 2), STRAIGHT),
        (col(D, 2), col(B, 0), REVERSED),
    ),
    "F": (
        (col(L, 2), row(U, 2), REVERSED),
        (row(U, 2), col(R, 0), STRAIGHT),
        (col(R, 0), row(D, 0), REVERSED),
        (row(D, 0), col(L, 2), STRAIGHT),
    ),
    "F'": (
        (row(U, 2), col(L, 2), REVERSED),
        (col(L, 2), row(D, 0), STRAIGHT),
        (row(D, 0), col(R, 0), REVERSED),
        (col(R, 0), row(U, 2), STRAIGHT),
    ),
    "L": (
        (col(U, 0), col(F, 0), STRAIGHT),
        (col(F, 0), col(D, 0), STRAIGHT),
        (col(D, 0), col(B, 2), REVERSED),
        (col(B, 2), col(U, 0), REVERSED),
    ),
    "L'": (
        (col(F, 0), col(U, 0), STRAIGHT),
        (col(D, 0), col(F, 0), STRAIGHT),
        (col(B, 2), col(D, 0), REVERSED),
        (col(U, 0), col(B, 2), REVERSED),
    ),
    "B": (
        (col(R, 2), row(U, 0), STRAIGHT),
        (row(D, 2), col(R, 2), REVERSED),
        (col(L, 0), row(D, 2), STRAIGHT),
        (row(U, 0), col(L, 0), REVERSED),
    ),
    "B'": (
        (row(U, 0), col(R, 2), STRAIGHT),
        (col(R, 2), row(D, 2), REVERSED),
        (row(D, 2), col(L, 0), STRAIGHT),
        (col(L, 0), row(U, 0), REVERSED),
    ),
}


def apply_quarter_turn(faces, token):
    """Turn one face and its border strips in place. `faces` is a (6, 3, 3) array."""
    if token not in QUARTER_TURNS:
        raise InvalidMove(token)

    face = FACES.index(token[0])
    if token.endswith("'"):
        faces[face] = rotate_counterclockwise(faces[face])
    else:
        faces[face] = rotate_clockwise(faces[face])

    if token in ROW_CYCLES:
        specs, reverse = ROW_CYCLES[token]
        cycle_strips(faces, specs, vertical=False, reverse=reverse)
    else:
        transfer_strips(faces, SIDE_TRANSFERS[token])


def build_permutation(token):
    """Gather index over the 54 slots: after the move, slot p holds old slot perm[p]."""
    slots = np.arange(STICKERS).reshape(6, SIZE, SIZE)
    apply_quarter_turn(slots, token)
    perm = slots.ravel()
    perm.flags.writeable = False
    return perm


PERMUTATIONS = {token: build_permutation(token) for token in QUARTER_TURNS}


def permute(faces, token):
    """Return a new (6, 3, 3) array with the quarter turn `token` applied."""
    try:
        perm = PERMUTATIONS[token]
    except (KeyError, TypeError):
        raise InvalidMove(token) from None
    return np.asarray(faces).ravel()[perm].reshape(6, SIZE, SIZE)


def expand(token):
    """Quarter turns that make up `token`; a double turn is its quarter turn twice."""
    if token in QUARTER_TURNS:
        return (token,)
    if token in DOUBLE_TURNS:
        return (token[0], token[0])
    raise InvalidMove(token)


def inverse(token):
    """Inverse of a move token: R <-> R', X2 is its own inverse."""
    if token in DOUBLE_TURNS:
        return token
    if token not in QUARTER_TURNS:
        raise InvalidMove(token)
    return token[0] if token.endswith("'") else token + "'"
