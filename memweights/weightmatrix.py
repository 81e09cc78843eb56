from typing import Optional, Union
from dataclasses import dataclass
import numbers
import warnings

import numpy as np
from numpy.typing import ArrayLike

from .errors import InvalidInputError, MissingParameterError
from .types import FloatMatrix, MstStrategy, WeightMethod
from .graph.mst import mst_edge_distances, mst_threshold
from .graph.connectivity import connectivity_matrix
from .core.edge_weights import edge_weight_matrix


@dataclass(frozen=True)
class NeighborhoodResult:
    """Weighted neighborhood matrix together with its intermediates."""

    method: WeightMethod
    threshold: float
    connectivity: FloatMatrix  # B, 0/1
    edge_weights: FloatMatrix  # A
    weights: FloatMatrix  # W = A * B


def validate_distance_matrix(D: ArrayLike, stacklevel: int = 2) -> FloatMatrix:
    """
    Coerces D to a float matrix and checks it can be used as a distance matrix.

    D must be a 2-D square array of finite, non-negative numbers. An asymmetric
    matrix is accepted with a warning. The returned array is a copy.
    ``stacklevel`` is passed to ``warnings.warn``.
    """
    try:
        D = np.array(D, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(
            f"Distance matrix could not be converted to a numeric array: {exc}"
        ) from exc

    if D.ndim != 2 or D.shape[0] != D.shape[1]:
        raise InvalidInputError(
            f"Distance matrix must be square (n x n), got shape {D.shape}."
        )
    if not np.all(np.isfinite(D)):
        raise InvalidInputError("Distance matrix must contain only finite values.")
    if np.any(D < 0):
        raise InvalidInputError("Distance matrix must be non-negative.")

    if not np.allclose(D, D.T):
        warnings.warn(
            "Distance matrix is not symmetric; the neighborhood matrix will not be either.",
            UserWarning,
            stacklevel=stacklevel,
        )
    return D


def _check_positive(
    name: str, value: Optional[float], allow_zero: bool = False
) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(f"`{name}` must be a real number, got {value!r}.")
    value = float(value)
    if not np.isfinite(value) or value < 0 or (value == 0 and not allow_zero):
        kind = "non-negative" if allow_zero else "positive"
        raise InvalidInputError(f"`{name}` must be a {kind} finite number, got {value}.")
    return value


def _check_parameters(
    method: Union[WeightMethod, str],
    threshold: Optional[float],
    alpha: Optional[float],
    beta: Optional[float],
):
    method = WeightMethod.parse(method)
    threshold = _check_positive("threshold", threshold, allow_zero=True)
    alpha = _check_positive("alpha", alpha)
    beta = _check_positive("beta", beta)
    if method is WeightMethod.CONCAVE_DOWN and alpha is None:
        raise MissingParameterError("alpha", method.value)
    if method is WeightMethod.CONCAVE_UP and beta is None:
        raise MissingParameterError("beta", method.value)
    return method, threshold, alpha, beta


def _warn_degenerate(
    W: FloatMatrix, B: FloatMatrix, threshold: float, stacklevel: int
) -> None:
    if np.isinf(W).any():
        warnings.warn(
            "Neighborhood matrix contains infinite weights (zero distances under concave-up).",
            UserWarning,
            stacklevel=stacklevel,
        )
    off_diagonal = ~np.eye(B.shape[0], dtype=bool)
    if B.shape[0] > 1 and not np.any(B[off_diagonal]):
        warnings.warn(
            f"No pair of entities is connected at threshold {threshold}; "
            "the neighborhood matrix has no off-diagonal neighbors.",
            UserWarning,
            stacklevel=stacklevel,
        )


def _compute(
    D: FloatMatrix,
    method: WeightMethod,
    threshold: Optional[float],
    alpha: Optional[float],
    beta: Optional[float],
    zero_diagonal: bool,
    mst: MstStrategy,
    stacklevel: int,
) -> NeighborhoodResult:
    t = threshold if threshold is not None else mst_threshold(D, mst)

    B = connectivity_matrix(D, t)
    A = edge_weight_matrix(D, method, t, alpha=alpha, beta=beta)
    W = A * B
    if zero_diagonal:
        np.fill_diagonal(W, 0.0)

    _warn_degenerate(W, B, t, stacklevel + 1)
    return NeighborhoodResult(
        method=method,
        threshold=float(t),
        connectivity=B,
        edge_weights=A,
        weights=W,
    )


def weightmatrix(
    D: ArrayLike,
    method: Union[WeightMethod, str] = WeightMethod.DBMEM,
    threshold: Optional[float] = None,
    alpha: Optional[float] = None,
    beta: Optional[float] = None,
    zero_diagonal: bool = True,
    mst: MstStrategy = mst_edge_distances,
) -> FloatMatrix:
    """
    Converts a distance matrix into a weighted neighborhood matrix W = A * B.

    B connects every pair whose distance is at most the threshold, A weights
    the pairs with the chosen function of distance.

    Parameters:
        D (array-like): Square, symmetric, non-negative distance matrix with zero diagonal.
        method (WeightMethod or str): One of "dbmem" (default), "linear",
            "concave-down", "concave-up" or "connectivity".
        threshold (float, optional): Connectivity threshold. Defaults to the longest
            edge of a minimum spanning tree of D.
        alpha (float, optional): Exponent for "concave-down" (required there).
        beta (float, optional): Exponent for "concave-up" (required there).
        zero_diagonal (bool): Set W[i, i] = 0 after combining A and B.
        mst (callable): Returns the minimum spanning tree edge distances of D.

    Returns:
        W (np.ndarray): Weighted neighborhood matrix of shape (n, n).

    Raises:
        InvalidInputError: D is not a square, numeric, finite, non-negative matrix,
            or threshold is negative, or alpha/beta is not a positive number.
        InvalidMethodError: method is not recognized.
        MissingParameterError: alpha or beta is missing for the concave methods.
    """
    D = validate_distance_matrix(D, stacklevel=3)
    method, threshold, alpha, beta = _check_parameters(method, threshold, alpha, beta)
    return _compute(D, method, threshold, alpha, beta, zero_diagonal, mst, 3).weights


class NeighborhoodWeighter:
    """
    Builds weighted neighborhood matrices for Moran's Eigenvector Maps.

    Parameters are validated on construction; ``fit`` stores the threshold and
    the B, A and W matrices of the last distance matrix it was given.

    Example:
        >>> weighter = NeighborhoodWeighter(method="linear", threshold=1.0)
        >>> W = weighter.fit_transform([[0, 1, 2], [1, 0, 1], [2, 1, 0]])
    """

    def __init__(
        self,
        method: Union[WeightMethod, str] = WeightMethod.DBMEM,
        threshold: Optional[float] = None,
        alpha: Optional[float] = None,
        beta: Optional[float] = None,
        zero_diagonal: bool = True,
        mst: MstStrategy = mst_edge_distances,
    ):
        self.method, self.threshold, self.alpha, self.beta = _check_parameters(
            method, threshold, alpha, beta
        )
        self.zero_diagonal = zero_diagonal
        self.mst = mst
        self._result: Optional[NeighborhoodResult] = None

    def _run(self, D: ArrayLike) -> NeighborhoodResult:
        # Called directly from the public methods; warnings point at their caller.
        D = validate_distance_matrix(D, stacklevel=4)
        return _compute(
            D,
            self.method,
            self.threshold,
            self.alpha,
            self.beta,
            self.zero_diagonal,
            self.mst,
            4,
        )

    def compute(self, D: ArrayLike) -> NeighborhoodResult:
        """Returns W with its intermediates without changing the fitted state."""
        return self._run(D)

    def fit(self, D: ArrayLike) -> "NeighborhoodWeighter":
        self._result = self._run(D)
        return self

    def fit_transform(self, D: ArrayLike) -> FloatMatrix:
        self._result = self._run(D)
        return self._result.weights

    def _fitted(self) -> NeighborhoodResult:
        if self._result is None:
            raise RuntimeError(
                "NeighborhoodWeighter is not fitted yet. Call fit() before accessing results."
            )
        return self._result

    @property
    def threshold_(self) -> float:
        return self._fitted().threshold

    @property
    def connectivity_(self) -> FloatMatrix:
        return self._fitted().connectivity

    @property
    def edge_weights_(self) -> FloatMatrix:
        return self._fitted().edge_weights

    @property
    def weights_(self) -> FloatMatrix:
        return self._fitted().weights

    @property
    def n_entities_(self) -> int:
        return self._fitted().weights.shape[0]
