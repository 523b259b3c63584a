"""
Datasets package public API.

    from combsort.datasets import make_dataset, SUPPORTED_DISTS
"""

from .generators import SUPPORTED_DISTS, make_dataset

__all__ = ["make_dataset", "SUPPORTED_DISTS"]
