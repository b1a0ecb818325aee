"""A* floor pathfinding."""
from .pathfinder import FloorPathfinder, SearchStatistics, build_route, DIRECTIONS

__all__ = ['FloorPathfinder', 'SearchStatistics', 'build_route', 'DIRECTIONS']
