"""
Datasets package public API.

    from ranksort.datasets import make_dataset, make_tagged, SUPPORTED_DISTS
"""

from .generators import SUPPORTED_DISTS, Tagged, make_dataset, make_tagged

__all__ = ["SUPPORTED_DISTS", "Tagged", "make_dataset", "make_tagged"]
