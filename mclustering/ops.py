"""Elementary matrix transformations used by Markov Clustering.

All functions take dense, 2-D ``numpy`` arrays. Floating dtypes are kept as
given; anything else is converted to ``float64``. Only `add_self_loop` works
in place -- every other function returns a new array and leaves its argument
untouched.
"""

import numpy as np

from mclustering.errors import ShapeError


def _as_float(matrix):
    matrix = np.asarray(matrix)
    if not np.issubdtype(matrix.dtype, np.floating):
        matrix = matrix.astype(np.float64)
    if matrix.ndim != 2:
        raise ShapeError("Expected a 2-D matrix, got shape %s" % (matrix.shape,), shape = matrix.shape)
    return matrix


def _check_square(matrix):
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ShapeError("Expected a square matrix, got shape %s" % (matrix.shape,), shape = matrix.shape)


def square_matrix(values, n = None, dtype = None):
    """Build a dense square matrix.

    :param values: Nested sequence (or array) of rows, or -- if ``n`` is given --
        a flat buffer of ``n * n`` values in row-major order.
    :param int n: Side length to reshape a flat buffer to.
    :param dtype: Floating dtype of the result. Defaults to ``values``' own
        floating dtype, or ``float64``.
    :raises ShapeError: if the result would not be square.
    """
    try:
        out = np.array(values, dtype = dtype)
        if n is not None:
            out = out.reshape((n, n))
    except ValueError as e:
        raise ShapeError("Can't build a square matrix: %s" % e) from e
    out = _as_float(out)
    _check_square(out)
    return out


def normalize(matrix):
    """Column-wise L1 normalization.

    Each column is divided by the sum of the absolute values of its entries.
    Columns that are entirely zero are left as zeros instead of turning into NaNs.
    """
    matrix = _as_float(matrix)
    scale = np.sum(np.abs(matrix), axis = 0)
    # All-zero columns: divide by one instead
    scale[scale == 0] = 1
    return matrix / scale


def add_self_loop(matrix, loop_value):
    """Set every diagonal entry of ``matrix`` to ``loop_value``, in place.

    ``matrix`` must already have a floating dtype.

    :raises ShapeError: if ``matrix`` is not square.
    :raises TypeError: if ``matrix`` is not a floating point array.
    """
    _check_square(matrix)
    if not np.issubdtype(matrix.dtype, np.floating):
        raise TypeError("Can't set self loops in place on a %s matrix; convert it to float first" % matrix.dtype)
    np.fill_diagonal(matrix, loop_value)


def expand(matrix, power):
    """Raise ``matrix`` to the integer ``power`` (>= 1) by matrix multiplication."""
    matrix = _as_float(matrix)
    _check_square(matrix)
    if power < 1:
        raise ValueError("Expansion power must be at least 1, got %s" % power)
    if power == 1:
        return matrix.copy()
    return np.linalg.matrix_power(matrix, power)


def inflate(matrix, power):
    """Raise every entry to the (real) ``power``, then `normalize`."""
    matrix = _as_float(matrix)
    return normalize(np.power(matrix, power))


def prune(matrix, threshold):
    """Zero entries below ``threshold``, keeping the largest entry of every column.

    Keeping the column maximum means no column can be pruned to all zeros.
    When a column has several equal maxima, the one with the lowest row index
    is the one kept (``numpy.argmax`` order).
    """
    matrix = _as_float(matrix)
    pruned = matrix.copy()
    to_prune = pruned < threshold
    if matrix.size > 0:
        # Exclude the max of every column
        to_prune[np.argmax(matrix, axis = 0), np.arange(matrix.shape[1])] = False
    pruned[to_prune] = 0.0
    return pruned
