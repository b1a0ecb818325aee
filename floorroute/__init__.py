"""
floorroute - obstacle-aware shortest routes for mobile agents on a grid floor
"""
from .algorithms.astar import FloorPathfinder, SearchStatistics
from .domain.models import Floor, GridFloor, Location, Route
from .domain.services import (
    EuclideanHeuristic, LegacyXorHeuristic, ManhattanHeuristic, ZeroHeuristic
)
from .shared.exceptions import EmptyRouteError, FloorRouteException

__version__ = "1.0.0"

__all__ = [
    'FloorPathfinder', 'SearchStatistics',
    'Floor', 'GridFloor', 'Location', 'Route',
    'EuclideanHeuristic', 'LegacyXorHeuristic', 'ManhattanHeuristic', 'ZeroHeuristic',
    'EmptyRouteError', 'FloorRouteException'
]
