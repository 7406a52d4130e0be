"""Stats API module."""

from .compute_stats import compute_stats
from .KeyGroup import KeyGroup
from .StatsReport import StatsReport

__all__ = [
    "KeyGroup",
    "StatsReport",
    "compute_stats",
]
