from .errors import MarkovClusteringError, ShapeError, ConvergenceError
from .ops import square_matrix, normalize, add_self_loop, expand, inflate, prune
from .mcl import mcl
from .clusters import get_clusters, cluster_labels, markov_clustering
from .MarkovClustering import MarkovClustering
