"""Shared exceptions for floorroute."""
from .base_exceptions import (
    FloorRouteException, ConfigurationError, ValidationError, RoutingError
)
from .domain_exceptions import (
    GridError, OutOfBoundsError, EmptyRouteError, OccupancyError
)

__all__ = [
    'FloorRouteException', 'ConfigurationError', 'ValidationError', 'RoutingError',
    'GridError', 'OutOfBoundsError', 'EmptyRouteError', 'OccupancyError'
]
