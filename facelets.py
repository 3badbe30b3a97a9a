# facelets.py
"""
Conversions between the (6, 3, 3) sticker array and its external forms:

- facelet string: 54 letters from URFDLB, faces in U,R,F,D,L,B order, each
  face row-major. Sticker value v is written as FACES[v], i.e. the letter
  names the face the sticker came from, not a colour.
- flattened net: the unfolded cross, 9 rows x 12 columns

        . U . .
        L F R B
        . D . .

- state text: 54 comma-separated integers 0-5 in the same order as the
  facelet string (manual entry).
"""
import numpy as np

from errors import InvalidRange, InvalidShape
from moves import B, D, F, FACES, L, R, SIZE, STICKERS, U

# (row offset, column offset) of each face block inside the net
NET_OFFSETS = {
    U: (0, 3),
    R: (3, 6),
    F: (3, 3),
    D: (6, 3),
    L: (3, 0),
    B: (3, 9),
}
NET_ROWS = 3 * SIZE
NET_COLS = 4 * SIZE


def to_facelet_string(faces):
    values = np.asarray(faces).ravel()
    if values.size != STICKERS:
        raise InvalidShape(f"Expected {STICKERS} stickers, got {values.size}.")
    stickers = values.tolist()
    if any(not isinstance(v, int) or v < 0 or v >= len(FACES) for v in stickers):
        raise InvalidRange("Sticker values must be between 0 and 5.")
    return "".join(FACES[v] for v in stickers)


def from_facelet_string(text):
    """Parse a 54-letter URFDLB string back into a (6, 3, 3) array."""
    if len(text) != STICKERS:
        raise InvalidShape(f"Facelet string must be {STICKERS} characters, got {len(text)}.")
    bad = sorted(set(text) - set(FACES))
    if bad:
        raise InvalidRange(f"Unknown facelet letters {bad}. Allowed: {', '.join(FACES)}.")
    return np.array([FACES.index(c) for c in text]).reshape(6, SIZE, SIZE)


def from_flattened_net(grid):
    """
    Slice the six 3x3 faces out of an unfolded-cross grid, in U,R,F,D,L,B order.
    Values are copied as-is; the cube validates the range when they are set.
    """
    faces = [None] * 6
    for face, (r0, c0) in NET_OFFSETS.items():
        block = []
        for i in range(SIZE):
            try:
                line = grid[r0 + i]
            except IndexError:
                raise InvalidShape(f"Net needs at least {NET_ROWS} rows.") from None
            cells = list(line[c0:c0 + SIZE])
            if len(cells) != SIZE:
                raise InvalidShape(
                    f"Net row {r0 + i} is too short for the {FACES[face]} face "
                    f"(needs columns {c0}-{c0 + SIZE - 1})."
                )
            block.append(cells)
        faces[face] = block
    return np.array(faces)


def to_flattened_net(faces, blank=-1):
    """Inverse of from_flattened_net: a 9x12 array with `blank` outside the cross."""
    faces = np.asarray(faces)
    if faces.shape != (6, SIZE, SIZE):
        raise InvalidShape(f"Expected faces of shape (6, {SIZE}, {SIZE}), got {faces.shape}.")
    net = np.full((NET_ROWS, NET_COLS), blank, dtype=faces.dtype)
    for face, (r0, c0) in NET_OFFSETS.items():
        net[r0:r0 + SIZE, c0:c0 + SIZE] = faces[face]
    return net


def parse_state_text(text):
    """Parse 54 comma-separated integers 0-5 (manual entry) into a (6, 3, 3) array."""
    values = text.split(",")
    if len(values) != STICKERS:
        raise InvalidShape(f"Exactly {STICKERS} values required (9 per face), got {len(values)}.")
    stickers = []
    for i, v in enumerate(values):
        try:
            n = int(v.strip())
        except ValueError:
            raise InvalidRange(f"Value {i + 1} ({v.strip()!r}) is not an integer.") from None
        if n < 0 or n > 5:
            raise InvalidRange(f"Value {i + 1} is {n}; values must be between 0-5.")
        stickers.append(n)
    return np.array(stickers).reshape(6, SIZE, SIZE)


def format_state_text(faces):
    return ",".join(str(v) for v in np.asarray(faces).ravel().tolist())
