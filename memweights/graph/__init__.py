from .mst import mst_edge_distances, mst_threshold
from .connectivity import connectivity_matrix, to_csr

__all__ = [
    "mst_edge_distances",
    "mst_threshold",
    "connectivity_matrix",
    "to_csr",
]
