from intmatrix.errors import (
    MatrixError, DimensionMismatch, InvalidBlockLayout, NonSquare, OddDimension,
)
from intmatrix.matrix import Matrix
from intmatrix.strassen_module import fast_path_eligible, multiply_naive, strassen, multiply

__all__ = [
    "Matrix",
    "MatrixError", "DimensionMismatch", "InvalidBlockLayout", "NonSquare", "OddDimension",
    "fast_path_eligible", "multiply_naive", "strassen", "multiply",
]
