#!/usr/bin/env python
"""Simple demo of weightmatrix with random 2-D sampling sites."""

import argparse
import numpy as np
from sklearn.metrics import pairwise_distances
from memweights import NeighborhoodWeighter, WeightMethod


def generate_sites(n_points=50, random_state=42):
    """Sample sites uniformly in the unit square."""
    np.random.seed(random_state)
    return np.random.rand(n_points, 2)


def main():
    parser = argparse.ArgumentParser(description="memweights simple demo")
    parser.add_argument("--n-points", type=int, default=50, help="Number of sites")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Connectivity threshold (default: longest minimum spanning tree edge)",
    )
    parser.add_argument("--alpha", type=float, default=2.0, help="Exponent for concave-down")
    parser.add_argument("--beta", type=float, default=1.0, help="Exponent for concave-up")
    args = parser.parse_args()

    X = generate_sites(n_points=args.n_points, random_state=args.seed)
    D = pairwise_distances(X)
    D = (D + D.T) / 2

    print(f"Data: {len(X)} sites, 2 dimensions")
    for method in WeightMethod:
        weighter = NeighborhoodWeighter(
            method=method,
            threshold=args.threshold,
            alpha=args.alpha,
            beta=args.beta,
        )
        W = weighter.fit_transform(D)
        off_diagonal = ~np.eye(len(W), dtype=bool)
        connected = W[off_diagonal][weighter.connectivity_[off_diagonal] > 0]
        lo, hi = (connected.min(), connected.max()) if connected.size else (0.0, 0.0)
        print(
            f"{method.value:>13}: threshold={weighter.threshold_:.4f} "
            f"pairs={len(connected) // 2} "
            f"weights=[{lo:.4f}, {hi:.4f}]"
        )


if __name__ == "__main__":
    main()
