"""memweights: weighted neighborhood matrices for Moran's Eigenvector Maps."""

from .errors import (
    InvalidInputError,
    InvalidMethodError,
    MissingParameterError,
    WeightMatrixError,
)
from .types import WeightMethod
from .weightmatrix import (
    NeighborhoodResult,
    NeighborhoodWeighter,
    validate_distance_matrix,
    weightmatrix,
)

__all__ = [
    "weightmatrix",
    "NeighborhoodWeighter",
    "NeighborhoodResult",
    "WeightMethod",
    "validate_distance_matrix",
    "WeightMatrixError",
    "InvalidInputError",
    "InvalidMethodError",
    "MissingParameterError",
]
