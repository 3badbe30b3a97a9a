# solver.py
import logging
import os

import httpx
import kociemba

from errors import SolverError
from moves import MOVES

logger = logging.getLogger(__name__)

SOLVER_BACKEND = os.environ.get("CUBE_SOLVER_BACKEND", "kociemba")
SOLVER_URL = os.environ.get("CUBE_SOLVER_URL", "https://cuby-solve-api.onrender.com/solve/")
SOLVER_TIMEOUT = float(os.environ.get("CUBE_SOLVER_TIMEOUT", "30"))

FACE_NAMES = {"F": "Front", "B": "Back", "U": "Up", "D": "Down", "L": "Left", "R": "Right"}


def normalize_moves(m):
    """
    Ensure we always have a list[str] of moves.
    """
    if m is None:
        return []
    if isinstance(m, str):
        m = m.strip()
        return m.split() if m else []
    if isinstance(m, (list, tuple)):
        return list(m)
    return str(m).split()


def human_read_move(move):
    base = move.rstrip("2'")
    suffix = move[len(base):]
    face_name = FACE_NAMES.get(base, base)
    if suffix == "":
        return f"{face_name} — 90° clockwise ({move})"
    if suffix == "'":
        return f"{face_name} — 90° counterclockwise ({move})"
    if suffix == "2":
        return f"{face_name} — 180° ({move})"
    return move


def solve_kociemba(cube_54_str):
    """
    Input: 54-char cube string where each char is one of 'U','R','F','D','L','B'
           order: faces in URFDLB, each face 9 chars top-left → bottom-right
    Output: list of moves (e.g. ['R','U','R\'','U\''])
    """
    try:
        sol = kociemba.solve(cube_54_str)  # returns string like "R U R' U'"
    except Exception as e:
        logger.warning("kociemba rejected %s: %s", cube_54_str, e)
        raise SolverError(f"Solver error: {e}") from e
    return normalize_moves(sol)


def solve_remote(cube_54_str, url=None, timeout=None, client=None):
    """
    GET <url><cube_54_str> and return the response body as a move list.
    The body is treated as opaque solver text; only whitespace splitting is applied.
    """
    url = (url or SOLVER_URL) + cube_54_str
    timeout = SOLVER_TIMEOUT if timeout is None else timeout
    logger.info("Requesting solution from %s", url)
    try:
        if client is None:
            with httpx.Client(timeout=timeout) as c:
                response = c.get(url)
        else:
            response = client.get(url, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning("Solver API returned %s", e.response.status_code)
        raise SolverError(f"Solver API returned HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        logger.warning("Failed to connect to solver API: %s", e)
        raise SolverError(f"Failed to connect to API: {e}") from e
    return normalize_moves(response.text)


BACKENDS = {
    "kociemba": solve_kociemba,
    "remote": solve_remote,
}


def solve(cube_54_str, backend=None):
    name = backend or SOLVER_BACKEND
    try:
        fn = BACKENDS[name]
    except KeyError:
        raise SolverError(f"Unknown solver backend {name!r}. Choose from {sorted(BACKENDS)}.") from None
    moves = fn(cube_54_str)
    unknown = [m for m in moves if m not in MOVES]
    if unknown:
        logger.warning("Solver %s returned non-move text: %s", name, " ".join(moves))
        raise SolverError(f"Solver returned something other than moves: {' '.join(moves)}")
    return moves
