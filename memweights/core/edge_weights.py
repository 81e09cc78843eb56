"""辺重み行列計算モジュール"""

from typing import Optional

import numpy as np

from memweights.errors import MissingParameterError
from memweights.graph.connectivity import connectivity_matrix
from memweights.types import FloatMatrix, WeightMethod


def _safe_ratio(D: FloatMatrix, denom: float) -> FloatMatrix:
    """D / denom を計算（denom == 0 のときは 0）"""
    return np.divide(
        D,
        denom,
        out=np.zeros_like(D, dtype=np.float64),
        where=denom != 0,
    )


def dbmem_weights(D: FloatMatrix, threshold: float) -> FloatMatrix:
    """dbMEM重み A = 1 - (D / 4t)^2"""
    return 1.0 - _safe_ratio(D, 4.0 * threshold) ** 2


def linear_weights(D: FloatMatrix) -> FloatMatrix:
    """線形重み A = 1 - D / max(D)"""
    return 1.0 - _safe_ratio(D, float(D.max(initial=0.0)))


def concave_down_weights(D: FloatMatrix, alpha: float) -> FloatMatrix:
    """上に凸の重み A = 1 - (D / max(D))^alpha"""
    return 1.0 - _safe_ratio(D, float(D.max(initial=0.0))) ** alpha


def concave_up_weights(D: FloatMatrix, beta: float) -> FloatMatrix:
    """下に凸の重み A = 1 / D^beta

    距離 0 の要素（対角など）は inf になる。
    """
    with np.errstate(divide="ignore"):
        return 1.0 / np.power(D, beta)


def edge_weight_matrix(
    D: FloatMatrix,
    method: WeightMethod,
    threshold: float,
    alpha: Optional[float] = None,
    beta: Optional[float] = None,
) -> FloatMatrix:
    """重み関数に応じた辺重み行列 A を計算

    Args:
        D: 距離行列 (n, n)
        method: 重み関数
        threshold: 連結閾値 t（dbmem, connectivity で使用）
        alpha: concave-down の指数
        beta: concave-up の指数

    Returns:
        FloatMatrix: 辺重み行列 (n, n)
    """
    if method is WeightMethod.DBMEM:
        return dbmem_weights(D, threshold)
    if method is WeightMethod.LINEAR:
        return linear_weights(D)
    if method is WeightMethod.CONCAVE_DOWN:
        if alpha is None:
            raise MissingParameterError("alpha", method.value)
        return concave_down_weights(D, alpha)
    if method is WeightMethod.CONCAVE_UP:
        if beta is None:
            raise MissingParameterError("beta", method.value)
        return concave_up_weights(D, beta)
    return connectivity_matrix(D, threshold)
