"""Domain-specific exceptions."""
from .base_exceptions import FloorRouteException, RoutingError, ValidationError


class GridError(FloorRouteException):
    """Exception raised for invalid grid or floor definitions."""

    def __init__(self, message: str, grid_bounds: tuple = None, **kwargs):
        """Initialize grid error.

        Args:
            message: Error message
            grid_bounds: Grid bounds (columns, rows) that caused error
        """
        super().__init__(message, **kwargs)
        self.grid_bounds = grid_bounds


class OutOfBoundsError(ValidationError):
    """Exception raised when a location falls outside the floor."""

    def __init__(self, message: str, location=None, **kwargs):
        super().__init__(message, field="location", value=location, **kwargs)
        self.location = location


class EmptyRouteError(RoutingError):
    """Exception raised when a step is requested from an exhausted route."""

    def __init__(self, message: str = "Route has no remaining steps", **kwargs):
        kwargs.setdefault("error_code", "EMPTY_ROUTE")
        super().__init__(message, **kwargs)


class OccupancyError(FloorRouteException):
    """Exception raised for invalid agent placement on a floor."""

    def __init__(self, message: str, agent_id: str = None, location=None, **kwargs):
        """Initialize occupancy error.

        Args:
            message: Error message
            agent_id: Agent whose placement failed
            location: Location involved in the failure
        """
        super().__init__(message, **kwargs)
        self.agent_id = agent_id
        self.location = location
