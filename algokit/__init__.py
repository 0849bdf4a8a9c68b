"""Classic algorithmic problems: graphs, grids, Fenwick and segment trees, number theory,
collection-based problems and two-pointer techniques."""

__version__ = "0.1.0"

__all__ = [
    "collections_problems",
    "fenwick",
    "graphs",
    "grids",
    "number_theory",
    "pair_sums",
    "segment_trees",
    "two_pointers",
]