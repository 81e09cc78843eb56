"""最小全域木による閾値計算モジュール"""

import numpy as np
import scipy.sparse as sp
import scipy.sparse.csgraph as csgraph

from memweights.types import EdgeDistances, FloatMatrix, MstStrategy

# csgraph treats explicit zeros as missing edges.
_ZERO_EDGE = np.finfo(np.float64).tiny


def mst_edge_distances(D: FloatMatrix) -> EdgeDistances:
    """距離行列の最小全域木の辺長を返す

    Args:
        D: 距離行列 (n, n)

    Returns:
        EdgeDistances: 木の辺長 (n - 1,)。n <= 1 の場合は空配列
    """
    n = D.shape[0]
    if n <= 1:
        return np.empty((0,), dtype=np.float64)
    graph = np.array(D, dtype=np.float64)
    off_diagonal = ~np.eye(n, dtype=bool)
    graph[(graph == 0) & off_diagonal] = _ZERO_EDGE
    np.fill_diagonal(graph, 0.0)
    tree = csgraph.minimum_spanning_tree(sp.csr_matrix(graph)).tocoo()
    # Report duplicates with their true distance.
    return np.asarray(D, dtype=np.float64)[tree.row, tree.col]


def mst_threshold(
    D: FloatMatrix,
    mst: MstStrategy = mst_edge_distances,
) -> float:
    """最小全域木の最大辺長を連結閾値として計算

    Args:
        D: 距離行列 (n, n)
        mst: 辺長を返す最小全域木ルーチン

    Returns:
        float: 閾値。辺が無い場合は 0.0
    """
    edges = np.asarray(mst(D), dtype=np.float64)
    if edges.size == 0:
        return 0.0
    return float(edges.max())
