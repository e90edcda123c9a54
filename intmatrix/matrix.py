import numpy as np

from intmatrix.blocks import split_quadrants, combine_quadrants
from intmatrix.errors import DimensionMismatch, InvalidBlockLayout, NonSquare, OddDimension
from intmatrix.settings import DEFAULT_DTYPE, RANDOM_LOW, RANDOM_HIGH


class Matrix:
    """Dense rows x cols grid of fixed-width signed integers.

    Storage is a row-major numpy array owned by this instance. Arithmetic and
    multiplication never mutate their operands and never return storage shared
    with them; only ``fill_zero`` and ``fill_random`` write in place.
    """

    __hash__ = None

    def __init__(self, rows: int = 0, cols: int = 0, dtype=None):
        if rows < 0 or cols < 0:
            raise ValueError(f"rows and cols must be non-negative; got {rows}x{cols}")
        self._values = np.zeros((rows, cols), dtype=dtype or DEFAULT_DTYPE)

    @classmethod
    def create(cls, rows: int, cols: int, dtype=None) -> "Matrix":
        return cls(rows, cols, dtype=dtype)

    @classmethod
    def _wrap(cls, arr: np.ndarray) -> "Matrix":
        m = cls.__new__(cls)
        m._values = arr
        return m

    @classmethod
    def from_list(cls, values, dtype=None) -> "Matrix":
        """Build from a list of rows (or any 2-D integer array-like); always copies.

        Elements outside the range of the storage dtype raise ``ValueError``.
        """
        arr = np.asarray(values)
        if arr.size == 0:
            arr = arr.reshape(arr.shape[0] if arr.ndim == 2 else 0, 0)
        elif not np.issubdtype(arr.dtype, np.integer):
            raise TypeError(f"Matrix elements must be integers; got {arr.dtype}")
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2-D grid of rows; got ndim={arr.ndim}")
        target = np.dtype(dtype or DEFAULT_DTYPE)
        if arr.size:
            info = np.iinfo(target)
            lo, hi = int(arr.min()), int(arr.max())
            if lo < info.min or hi > info.max:
                raise ValueError(
                    f"Elements must fit in {target} [{info.min}, {info.max}]; got range [{lo}, {hi}]")
        return cls._wrap(np.array(arr, dtype=target, copy=True))

    @classmethod
    def from_quadrants(cls, quadrants) -> "Matrix":
        """Assemble ``[[Q11, Q12], [Q21, Q22]]`` of equal s x s blocks into a 2s x 2s matrix."""
        if quadrants is None:
            raise InvalidBlockLayout("Quadrants may not be None")
        try:
            grid = [list(row) for row in quadrants]
        except TypeError:
            raise InvalidBlockLayout("Quadrants have to be in a 2x2 order") from None
        if len(grid) != 2 or any(len(row) != 2 for row in grid):
            raise InvalidBlockLayout("Quadrants have to be in a 2x2 order")

        blocks = [b for row in grid for b in row]
        if not all(isinstance(b, Matrix) for b in blocks):
            raise InvalidBlockLayout("Every quadrant has to be a Matrix")
        s = blocks[0].rows
        shapes = [b.shape for b in blocks]
        if any(shape != (s, s) for shape in shapes):
            raise InvalidBlockLayout(f"Quadrants have to be square and equally sized; got {shapes}")

        return cls._wrap(combine_quadrants([[b._values for b in row] for row in grid]))

    # ---- accessors ----
    @property
    def rows(self) -> int:
        return self._values.shape[0]

    @property
    def cols(self) -> int:
        return self._values.shape[1]

    @property
    def shape(self):
        return self._values.shape

    @property
    def dtype(self):
        return self._values.dtype

    @property
    def values(self) -> np.ndarray:
        """Raw storage. Writes through it mutate this matrix."""
        return self._values

    def tolist(self):
        return self._values.tolist()

    # ---- in-place fills ----
    def fill_zero(self):
        self._values.fill(0)

    def fill_random(self, source=None, low: int = None, high: int = None):
        """Fill with integers in [low, high) drawn from ``source`` (a numpy Generator)."""
        rng = source if source is not None else np.random.default_rng()
        low = RANDOM_LOW if low is None else low
        high = RANDOM_HIGH if high is None else high
        self._values[...] = rng.integers(low, high, size=self.shape, dtype=self.dtype)

    # ---- block decomposition ----
    def split(self):
        """Return ``[[A11, A12], [A21, A22]]``, each an owned n/2 x n/2 copy."""
        if self.rows != self.cols:
            raise NonSquare(f"Only square matrices can be split; got {self.rows}x{self.cols}")
        if self.rows % 2:
            raise OddDimension(f"Only even-sized matrices can be split; got n={self.rows}")
        return [[Matrix._wrap(b) for b in row] for row in split_quadrants(self._values)]

    # ---- elementwise arithmetic ----
    def _require_same_shape(self, other, op: str):
        if not isinstance(other, Matrix):
            raise TypeError(f"Cannot {op} Matrix and {type(other).__name__}")
        if self.shape != other.shape:
            raise DimensionMismatch(
                f"Cannot {op} {self.rows}x{self.cols} and {other.rows}x{other.cols}: "
                "matrices have to be the same size")

    def add(self, other: "Matrix") -> "Matrix":
        self._require_same_shape(other, "add")
        return Matrix._wrap(np.add(self._values, other._values))

    def sub(self, other: "Matrix") -> "Matrix":
        self._require_same_shape(other, "subtract")
        return Matrix._wrap(np.subtract(self._values, other._values))

    # ---- multiplication ----
    def multiply_naive(self, other: "Matrix") -> "Matrix":
        from intmatrix.strassen_module import multiply_naive
        return multiply_naive(self, other)

    def multiply(self, other: "Matrix", **kw) -> "Matrix":
        from intmatrix.strassen_module import multiply
        return multiply(self, other, **kw)

    def copy(self) -> "Matrix":
        return Matrix._wrap(self._values.copy())

    def astype(self, dtype) -> "Matrix":
        """Copy with storage converted to ``dtype`` (values wrap when narrowing)."""
        return Matrix._wrap(self._values.astype(dtype, copy=True))

    __add__ = add
    __sub__ = sub

    def __matmul__(self, other):
        return self.multiply(other)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._values, other._values))

    def __repr__(self):
        return f"Matrix({self.rows}x{self.cols}, dtype={self.dtype})"

    def __str__(self):
        return "".join(
            "|" + "".join(f" {v}" for v in row) + " |\n" for row in self._values.tolist()
        )
