"""Domain models package."""
from .floor import Location, Floor, GridFloor
from .route import Route

__all__ = ['Location', 'Floor', 'GridFloor', 'Route']
