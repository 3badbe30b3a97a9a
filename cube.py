# cube.py
import logging
import random

import numpy as np

import facelets
from errors import InvalidMove, InvalidRange, InvalidShape
from moves import MOVES, QUARTER_TURNS, SIZE, expand, permute

logger = logging.getLogger(__name__)


def solved_faces():
    """(6, 3, 3) array where every sticker on face f equals f."""
    return np.repeat(np.arange(6), SIZE * SIZE).reshape(6, SIZE, SIZE)


def validate_faces(new_faces):
    """
    Return `new_faces` as an owned (6, 3, 3) int array.
    Raises InvalidShape for the wrong face count or a face that is not 3x3,
    InvalidRange for a sticker outside 0-5.
    """
    try:
        count = len(new_faces)
    except TypeError:
        raise InvalidShape("Faces must be a sequence of 6 grids.") from None
    if count != 6:
        raise InvalidShape(f"Must provide exactly 6 faces, got {count}.")
    for f, face in enumerate(new_faces):
        try:
            square = len(face) == SIZE and all(len(r) == SIZE for r in face)
        except TypeError:
            square = False
        if not square:
            raise InvalidShape(f"Face {f} must be {SIZE}x{SIZE}.")
    raw = np.asarray(new_faces)
    if raw.dtype.kind not in "iuf":
        raise InvalidRange("Sticker values must be integers.")
    arr = raw.astype(int)
    # 2.7 would otherwise be stored as 2
    if np.any(raw != arr):
        raise InvalidRange("Sticker values must be whole numbers.")
    if arr.min() < 0 or arr.max() > 5:
        raise InvalidRange("Sticker values must be between 0 and 5.")
    return arr


class Cube:
    """
    Sticker model of a 3x3x3 cube.

    State is a (6, 3, 3) numpy array in U, R, F, D, L, B face order. The cube
    is not thread-safe: callers must serialize reset, moves and set_faces.
    """

    def __init__(self, rng=None):
        self._faces = solved_faces()
        self.rng = rng if rng is not None else random.Random()
        self.move_sequence = None

    def reset(self):
        self._faces = solved_faces()

    def get_faces(self):
        """Owned copy of the sticker grid."""
        return self._faces.copy()

    def set_faces(self, new_faces):
        self._faces = validate_faces(new_faces)

    def is_solved(self):
        # each face uniform; which colour sits where is not checked
        return bool(np.all(self._faces == self._faces[:, :1, :1]))

    def apply_move(self, token):
        try:
            turns = expand(token)
        except InvalidMove:
            logger.warning("Rejected move %r", token)
            raise
        for turn in turns:
            self._faces = permute(self._faces, turn)
        logger.debug("Applied %s", token)

    move = apply_move

    def apply_moves(self, sequence):
        """Apply a space-separated string or iterable of tokens, left to right."""
        if isinstance(sequence, str):
            sequence = sequence.split()
        for token in sequence:
            self.apply_move(token)

    def scramble(self, n, rng=None):
        """
        Apply `n` quarter turns drawn uniformly at random and record them.
        `rng` needs a `randrange(stop)` method; defaults to the cube's own source.
        """
        rng = rng if rng is not None else self.rng
        sequence = []
        for _ in range(n):
            token = QUARTER_TURNS[rng.randrange(len(QUARTER_TURNS))]
            self.apply_move(token)
            sequence.append(token)
        self.move_sequence = " ".join(sequence)
        logger.info("Scrambled with %d moves: %s", n, self.move_sequence)
        return self.move_sequence

    def copy(self):
        other = Cube(rng=self.rng)
        other._faces = self._faces.copy()
        other.move_sequence = self.move_sequence
        return other

    def to_facelet_string(self):
        return facelets.to_facelet_string(self._faces)

    @classmethod
    def from_facelet_string(cls, text, rng=None):
        cube = cls(rng=rng)
        cube.set_faces(facelets.from_facelet_string(text))
        return cube

    @classmethod
    def from_flattened_net(cls, grid, rng=None):
        cube = cls(rng=rng)
        cube.set_faces(facelets.from_flattened_net(grid))
        return cube

    def __eq__(self, other):
        if not isinstance(other, Cube):
            return NotImplemented
        return bool(np.array_equal(self._faces, other._faces))

    __hash__ = None

    def __repr__(self):
        return f"Cube({self.to_facelet_string()!r})"


__all__ = ["Cube", "MOVES", "QUARTER_TURNS", "solved_faces", "validate_faces"]
