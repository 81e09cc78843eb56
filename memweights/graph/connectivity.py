"""連結行列生成モジュール"""

import numpy as np
import scipy.sparse as sp

from memweights.types import BoolMatrix, FloatMatrix


def connectivity_matrix(D: FloatMatrix, threshold: float) -> FloatMatrix:
    """閾値以下の距離を近傍とする連結行列 B を構築

    Args:
        D: 距離行列 (n, n)
        threshold: 連結閾値 t（D == t は連結として残す）

    Returns:
        FloatMatrix: 0/1 連結行列 (n, n)
    """
    disconnected: BoolMatrix = D > threshold
    B = np.ones(D.shape, dtype=np.float64)
    B[disconnected] = 0.0
    return B


def to_csr(W: FloatMatrix) -> sp.csr_matrix:
    """近傍行列を疎行列に変換（固有値分解用）

    Args:
        W: 近傍行列 (n, n)

    Returns:
        csr_matrix: ゼロ要素を除いた疎行列
    """
    adj = sp.csr_matrix(W, dtype=np.float64)
    adj.eliminate_zeros()
    return adj
