from mclustering.mcl import mcl
from mclustering.clusters import get_clusters, cluster_labels
from mclustering.errors import ConvergenceError

import logging
logger = logging.getLogger(__name__)


class MarkovClustering(object):
    """Cluster the nodes of a weighted graph using Markov Clustering.

    Holds the clustering parameters and, after `run`, its results. All
    parameters default to `MarkovClustering.DEFAULT_PARAMS`; see
    `mclustering.mcl.mcl` for their meaning.

    :param bool require_convergence: If True, `run` raises a `ConvergenceError`
        instead of using the last matrix when ``iterations`` is exhausted.

    Attributes (set by `run`):
        matrix (ndarray): The final MCL matrix.
        clusters (list): Sorted list of sorted index lists.
        converged (bool): Whether a fixed point was reached.
        n_iterations (int): Number of MCL iterations run.
    """

    DEFAULT_PARAMS = {
        'expansion' : 2,
        'inflation' : 2,
        'loop_value' : 1,
        'iterations' : 100,
        'pruning_threshold' : 0.001,
        'pruning_frequency' : 1,
        'convergence_check_frequency' : 1,
    }

    def __init__(self, require_convergence = False, **params):
        unknown = set(params) - set(MarkovClustering.DEFAULT_PARAMS)
        if unknown:
            raise TypeError("Unknown Markov Clustering parameter(s) %s" % ", ".join(sorted(unknown)))
        self.params = MarkovClustering.DEFAULT_PARAMS.copy()
        self.params.update(params)
        self.require_convergence = require_convergence

        self.matrix = None
        self.clusters = None
        self.converged = None
        self.n_iterations = None
        self._n = None

    def run(self, matrix, verbose = False):
        """Cluster the graph with (weighted) adjacency matrix ``matrix``.

        :returns: the clusters, as `get_clusters`.
        """
        m, info = mcl(matrix, return_info = True, verbose = verbose, **self.params)

        if self.require_convergence and not info['converged']:
            raise ConvergenceError(self.params['iterations'])

        self.matrix = m
        self.converged = info['converged']
        self.n_iterations = info['n_iterations']
        self.clusters = get_clusters(m)
        self._n = len(m)

        n_clustered = len(set(i for c in self.clusters for i in c))
        logger.info("Found %i clusters covering %i/%i nodes" % (len(self.clusters), n_clustered, self._n))

        return self.clusters

    @property
    def labels(self):
        """Cluster label of every node; -1 for nodes in no cluster."""
        if self.clusters is None:
            raise ValueError("This MarkovClustering hasn't been run yet.")
        return cluster_labels(self.clusters, self._n)

    @property
    def n_clusters(self):
        if self.clusters is None:
            raise ValueError("This MarkovClustering hasn't been run yet.")
        return len(self.clusters)
