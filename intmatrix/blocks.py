import numpy as np


def split_quadrants(arr: np.ndarray):
    """Cut a square even-sized array into a 2x2 grid of owned copies."""
    n2 = arr.shape[0] // 2
    return [
        [arr[:n2, :n2].copy(), arr[:n2, n2:].copy()],
        [arr[n2:, :n2].copy(), arr[n2:, n2:].copy()],
    ]


def combine_quadrants(grid):
    """Inverse of ``split_quadrants``: write four s x s arrays into a fresh 2s x 2s array.

    Callers validate the layout; the result takes the widest dtype among the blocks.
    """
    (top_left, top_right), (bottom_left, bottom_right) = grid
    s = top_left.shape[0]
    out = np.empty((2 * s, 2 * s), dtype=np.result_type(top_left, top_right, bottom_left, bottom_right))
    for (r, c), block in (((0, 0), top_left), ((0, s), top_right),
                          ((s, 0), bottom_left), ((s, s), bottom_right)):
        out[r:r + s, c:c + s] = block
    return out
