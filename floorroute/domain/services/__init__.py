"""Domain services package."""
from .heuristics import (
    HeuristicFunction, EuclideanHeuristic, ManhattanHeuristic, ZeroHeuristic,
    LegacyXorHeuristic, get_heuristic
)

__all__ = [
    'HeuristicFunction', 'EuclideanHeuristic', 'ManhattanHeuristic', 'ZeroHeuristic',
    'LegacyXorHeuristic', 'get_heuristic'
]
