class MatrixError(ValueError):
    """Base for precondition violations raised by matrix operations."""


class DimensionMismatch(MatrixError):
    pass


class InvalidBlockLayout(MatrixError):
    pass


class NonSquare(MatrixError):
    pass


class OddDimension(MatrixError):
    pass
