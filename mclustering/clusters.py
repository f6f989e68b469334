import numpy as np

from mclustering.ops import _as_float, _check_square
from mclustering.mcl import mcl

import logging
logger = logging.getLogger(__name__)


def get_clusters(matrix):
    """Read the clusters off a (converged) Markov Clustering matrix.

    Every index with a nonzero diagonal entry is an attractor; its cluster is
    the set of columns that are nonzero in its row. Attractors that induce the
    same set give one cluster.

    :returns: list of clusters, each a sorted list of indexes; the list itself
        is sorted. Indexes in no attractor's row appear in no cluster.
    """
    matrix = _as_float(matrix)
    _check_square(matrix)

    attractors = matrix.diagonal().nonzero()[0]

    clusters = set()
    for a in attractors:
        cluster = tuple(int(i) for i in matrix[a].nonzero()[0])
        clusters.add(cluster)

    logger.debug("%i attractors gave %i clusters" % (len(attractors), len(clusters)))

    return [list(c) for c in sorted(clusters)]


def cluster_labels(clusters, n):
    """Convert a list of clusters into one label per index.

    An index's label is the position of its cluster in ``clusters``; indexes
    in no cluster are labeled -1. If clusters overlap, the first one wins.
    """
    labels = np.full(n, -1, dtype = np.int64)
    for label, cluster in reversed(list(enumerate(clusters))):
        labels[cluster] = label
    return labels


def markov_clustering(matrix, **kwargs):
    """Cluster ``matrix`` with `mclustering.mcl.mcl` and return `get_clusters`.

    All keyword arguments except ``return_info`` are passed along to `mcl`.
    """
    if 'return_info' in kwargs:
        raise TypeError("markov_clustering() returns clusters only; use mcl() for return_info")
    return get_clusters(mcl(matrix, **kwargs))
