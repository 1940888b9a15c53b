# io/synthetic.py
"""Seeded random campus layouts for property tests and benchmarks."""

import numpy as np

from campus_nav.config.models import CampusModel, LocationModel


def random_campus(
    n_locations: int,
    *,
    seed: int,
    extent_m: float = 1000.0,
    edge_prob: float = 0.2,
) -> CampusModel:
    """Uniform points in [0, extent_m]^2 joined by independent random paths."""
    if n_locations < 0:
        raise ValueError("n_locations must be >= 0")
    if not 0.0 <= edge_prob <= 1.0:
        raise ValueError(f"edge_prob must be in [0, 1], got {edge_prob}")

    rng = np.random.default_rng(seed)
    coords = rng.uniform(0.0, extent_m, size=(n_locations, 2))
    names = [f"L{i}" for i in range(n_locations)]

    # upper triangle => each unordered pair is drawn once
    draws = np.triu(rng.random((n_locations, n_locations)) < edge_prob, k=1)
    u_list, v_list = np.nonzero(draws)

    return CampusModel(
        locations=[
            LocationModel(name=name, category="Synthetic", x=float(x), y=float(y))
            for name, (x, y) in zip(names, coords)
        ],
        paths=[(names[u], names[v]) for u, v in zip(u_list, v_list)],
    )
