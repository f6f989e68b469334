import numpy as np

from mclustering.ops import normalize, add_self_loop, expand, inflate, prune, _as_float, _check_square
from mclustering.util.progress import tqdm

import logging
logger = logging.getLogger(__name__)

# Absolute, entrywise
CONVERGENCE_TOLERANCE = 1e-8

def mcl(matrix,
        expansion = 2,
        inflation = 2,
        loop_value = 1,
        iterations = 100,
        pruning_threshold = 0.001,
        pruning_frequency = 1,
        convergence_check_frequency = 1,
        return_info = False,
        verbose = False):
    """Run Markov Clustering iterations until the matrix stops changing.

    See https://micans.org/mcl/.

    The input is copied, given self loops of weight ``loop_value`` (if > 0), and
    column normalized. Each iteration then expands and inflates it; every
    ``pruning_frequency``-th iteration it is pruned, and every
    ``convergence_check_frequency``-th iteration it is compared to the matrix
    from the iteration before. Iteration stops when no entry moved by more
    than `CONVERGENCE_TOLERANCE`, or after ``iterations`` iterations, in which
    case the current matrix is returned as is.

    :param ndarray matrix: Square (weighted) adjacency matrix.
    :param int expansion: Matrix power for the expansion step.
    :param float inflation: Elementwise power for the inflation step.
    :param float loop_value: Weight of the self loops added before the first
        normalization. ``0`` keeps the input's diagonal.
    :param int iterations: Maximum number of iterations. May be zero.
    :param float pruning_threshold: Entries below this are pruned.
    :param int pruning_frequency: Prune every this many iterations.
    :param int convergence_check_frequency: Check convergence every this many
        iterations.
    :param bool return_info: If True, also return a dict with keys
        ``"converged"`` and ``"n_iterations"``.
    :param bool verbose: Show a progress bar.

    :returns: The final matrix, or ``(matrix, info)`` if ``return_info``.
    """
    if expansion < 1:
        raise ValueError("expansion must be >= 1; got %s" % expansion)
    if inflation <= 0:
        raise ValueError("inflation must be > 0; got %s" % inflation)
    if loop_value < 0:
        raise ValueError("loop_value must be >= 0; got %s" % loop_value)
    if iterations < 0:
        raise ValueError("iterations must be >= 0; got %s" % iterations)
    if pruning_threshold < 0:
        raise ValueError("pruning_threshold must be >= 0; got %s" % pruning_threshold)
    if pruning_frequency < 1:
        raise ValueError("pruning_frequency must be >= 1; got %s" % pruning_frequency)
    if convergence_check_frequency < 1:
        raise ValueError("convergence_check_frequency must be >= 1; got %s" % convergence_check_frequency)

    m = _as_float(matrix).copy()
    _check_square(m)

    if loop_value > 0:
        add_self_loop(m, loop_value)

    m = normalize(m)

    converged = False
    n_iterations = 0
    for i in tqdm(range(iterations), verbose = verbose, desc = "MCL"):
        n_iterations += 1
        previous = m
        # -- Expansion & inflation
        m = inflate(expand(m, expansion), inflation)
        # -- Prune
        if i % pruning_frequency == pruning_frequency - 1:
            m = prune(m, pruning_threshold)
        # -- Check converged
        if i % convergence_check_frequency == convergence_check_frequency - 1:
            if logger.isEnabledFor(logging.DEBUG) and m.size:
                logger.debug("MCL iteration %i: max change %g" % (i, np.max(np.abs(m - previous))))
            if np.allclose(m, previous, rtol = 0, atol = CONVERGENCE_TOLERANCE):
                converged = True
                break

    if converged:
        logger.info("MCL converged after %i iterations" % n_iterations)
    elif iterations > 0:
        logger.info("MCL did not converge in %i iterations; using last matrix" % iterations)

    if return_info:
        return m, {'converged' : converged, 'n_iterations' : n_iterations}
    return m
