from .edge_weights import (
    concave_down_weights,
    concave_up_weights,
    dbmem_weights,
    edge_weight_matrix,
    linear_weights,
)

__all__ = [
    "edge_weight_matrix",
    "dbmem_weights",
    "linear_weights",
    "concave_down_weights",
    "concave_up_weights",
]
