
class MarkovClusteringError(Exception):
    """An error occuring as part of Markov Clustering."""
    pass

class ShapeError(MarkovClusteringError, ValueError):
    """Error raised when a matrix is not (or cannot be made) square.

    Attributes:
        shape (tuple, optional): The offending shape.
    """
    def __init__(self, message, shape = None):
        super().__init__(message)
        self.shape = shape

class ConvergenceError(MarkovClusteringError):
    """Markov Clustering did not reach a fixed point within its iteration limit."""
    def __init__(self, iterations):
        super().__init__("Markov Clustering couldn't converge in %i iterations" % iterations)
        self.iterations = iterations
