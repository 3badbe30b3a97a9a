# errors.py


class CubeError(ValueError):
    """Base class for every local, recoverable cube-model error."""


class InvalidMove(CubeError):
    def __init__(self, token):
        self.token = token
        super().__init__(f"Invalid move: {token!r}")


class InvalidShape(CubeError):
    """Wrong face count or face dimensions (bulk replace, net or text parsing)."""


class InvalidRange(CubeError):
    """Sticker value outside 0-5, or a facelet letter outside URFDLB."""


class SolverError(RuntimeError):
    """The external solver could not produce a solution."""
