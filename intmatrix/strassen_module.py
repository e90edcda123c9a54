from concurrent.futures import ThreadPoolExecutor

import numpy as np

from intmatrix.errors import DimensionMismatch
from intmatrix.matrix import Matrix
from intmatrix.settings import STRASSEN_THRESHOLD, STRASSEN_WORKERS, get_logger

logger = get_logger("intmatrix.strassen")


def fast_path_eligible(A: Matrix, B: Matrix) -> bool:
    """Square, same size and even: the only inputs Strassen can split."""
    n = A.rows
    return A.cols == n and B.rows == n and B.cols == n and n % 2 == 0


def multiply_naive(A: Matrix, B: Matrix) -> Matrix:
    """Schoolbook product C[i][k] = sum_j A[i][j] * B[j][k]."""
    if A.cols != B.rows:
        raise DimensionMismatch(
            f"Cannot multiply {A.rows}x{A.cols} by {B.rows}x{B.cols}: "
            "A.cols has to equal B.rows")
    a, b = A.values, B.values
    C = np.zeros((A.rows, B.cols), dtype=np.result_type(a, b))
    # integer dot accumulates with native wraparound, same as the add/sub on the fast path
    for i in range(A.rows):
        C[i, :] = a[i, :].dot(b)
    return Matrix._wrap(C)


def strassen(A: Matrix, B: Matrix, threshold: int = None, workers: int = 1, depth: int = 0) -> Matrix:
    threshold = STRASSEN_THRESHOLD if threshold is None else threshold
    n = A.rows
    if not fast_path_eligible(A, B) or n < max(threshold, 2):
        logger.debug(f"[depth={depth}] base n={n}")
        return multiply_naive(A, B)

    # quadrant sums must wrap at the same width the naive product accumulates in
    if A.dtype != B.dtype:
        common = np.result_type(A.dtype, B.dtype)
        A, B = A.astype(common), B.astype(common)

    (A11, A12), (A21, A22) = A.split()
    (B11, B12), (B21, B22) = B.split()

    logger.debug(f"[depth={depth}] split n={n} -> {n // 2}")

    operands = [
        (A11.add(A22), B11.add(B22)),   # H0
        (A21.add(A22), B11),            # H1
        (A11,          B12.sub(B22)),   # H2
        (A22,          B21.sub(B11)),   # H3
        (A11.add(A12), B22),            # H4
        (A21.sub(A11), B11.add(B12)),   # H5
        (A12.sub(A22), B21.add(B22)),   # H6
    ]

    def product(pair):
        return strassen(pair[0], pair[1], threshold, 1, depth + 1)

    if workers > 1:
        # operands are independent copies
        with ThreadPoolExecutor(max_workers=min(workers, len(operands))) as pool:
            H = list(pool.map(product, operands))
    else:
        H = [product(p) for p in operands]

    C11 = H[0].add(H[3]).sub(H[4]).add(H[6])
    C12 = H[2].add(H[4])
    C21 = H[1].add(H[3])
    C22 = H[0].sub(H[1]).add(H[2]).add(H[5])
    return Matrix.from_quadrants([[C11, C12], [C21, C22]])


def multiply(A: Matrix, B: Matrix, threshold: int = None, workers: int = None) -> Matrix:
    """Route to Strassen for square, equal, even inputs and to the naive product otherwise."""
    if fast_path_eligible(A, B):
        workers = STRASSEN_WORKERS if workers is None else workers
        logger.debug(f"multiply: strassen n={A.rows} workers={workers}")
        return strassen(A, B, threshold=threshold, workers=workers)
    logger.debug(f"multiply: naive {A.rows}x{A.cols} @ {B.rows}x{B.cols}")
    return multiply_naive(A, B)
