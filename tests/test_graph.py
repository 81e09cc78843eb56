"""graph層の単体テスト"""

import numpy as np
import scipy.sparse as sp
from sklearn.metrics import pairwise_distances

from memweights.graph import (
    connectivity_matrix,
    mst_edge_distances,
    mst_threshold,
    to_csr,
)

D3 = np.array([[0.0, 1.0, 2.0], [1.0, 0.0, 1.0], [2.0, 1.0, 0.0]])


class TestMst:
    def test_mst_edge_distances_chain(self):
        X = np.array([[0.0], [1.0], [3.0], [6.0]])
        D = pairwise_distances(X)
        edges = mst_edge_distances(D)
        assert edges.shape == (3,)
        np.testing.assert_allclose(np.sort(edges), [1.0, 2.0, 3.0])

    def test_mst_edge_distances_random_count(self):
        rng = np.random.default_rng(0)
        D = pairwise_distances(rng.random((40, 2)))
        edges = mst_edge_distances(D)
        assert edges.shape == (39,)
        assert np.all(edges > 0)

    def test_mst_edge_distances_duplicates_kept(self):
        X = np.array([[0.0, 0.0], [0.0, 0.0], [3.0, 4.0]])
        D = pairwise_distances(X)
        edges = mst_edge_distances(D)
        assert edges.shape == (2,)
        np.testing.assert_allclose(np.sort(edges), [0.0, 5.0])

    def test_mst_edge_distances_single_entity(self):
        edges = mst_edge_distances(np.zeros((1, 1)))
        assert edges.shape == (0,)

    def test_mst_threshold(self):
        assert mst_threshold(D3) == 1.0

    def test_mst_threshold_injected_strategy(self):
        calls = []

        def stub(D):
            calls.append(D.shape)
            return np.array([0.5, 1.5])

        assert mst_threshold(D3, mst=stub) == 1.5
        assert calls == [(3, 3)]

    def test_mst_threshold_no_edges(self):
        assert mst_threshold(np.zeros((1, 1))) == 0.0


class TestConnectivity:
    def test_connectivity_matrix_threshold_inclusive(self):
        B = connectivity_matrix(D3, 1.0)
        expected = np.array([[1, 1, 0], [1, 1, 1], [0, 1, 1]], dtype=np.float64)
        np.testing.assert_array_equal(B, expected)

    def test_connectivity_matrix_does_not_alias(self):
        D = D3.copy()
        B = connectivity_matrix(D, 2.0)
        B[0, 0] = 5.0
        np.testing.assert_array_equal(D, D3)

    def test_connectivity_matrix_zero_threshold(self):
        B = connectivity_matrix(D3, 0.0)
        np.testing.assert_array_equal(B, np.eye(3))

    def test_to_csr(self):
        W = np.array([[0.0, 0.5, 0.0], [0.5, 0.0, 0.5], [0.0, 0.5, 0.0]])
        adj = to_csr(W)
        assert sp.issparse(adj)
        assert adj.shape == (3, 3)
        assert adj.nnz == 4
        np.testing.assert_allclose(adj.toarray(), W)

    def test_connectivity_matrix_zero_threshold_duplicates(self):
        D = np.array([[0.0, 0.0, 1.0], [0.0, 0.0, 1.0], [1.0, 1.0, 0.0]])
        B = connectivity_matrix(D, 0.0)
        expected = np.array([[1, 1, 0], [1, 1, 0], [0, 0, 1]], dtype=np.float64)
        np.testing.assert_array_equal(B, expected)
