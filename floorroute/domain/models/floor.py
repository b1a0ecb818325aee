"""Domain models for the warehouse floor."""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence

import numpy as np

from ...shared.exceptions import GridError, OccupancyError
from ...shared.utils.validation_utils import validate_grid_dimensions, validate_location

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Location:
    """Value object identifying a cell by (column, row)."""
    column: int
    row: int

    def offset(self, column_change: int, row_change: int) -> 'Location':
        """Return the location shifted by the given deltas."""
        return Location(self.column + column_change, self.row + row_change)

    def manhattan_distance(self, other: 'Location') -> int:
        return abs(self.column - other.column) + abs(self.row - other.row)

    def is_adjacent(self, other: 'Location') -> bool:
        """Check if other is one orthogonal step away."""
        return self.manhattan_distance(other) == 1

    def __iter__(self):
        yield self.column
        yield self.row


class Floor(ABC):
    """Abstract floor consulted by the pathfinder for extents and occupancy."""

    @abstractmethod
    def column_count(self) -> int:
        """Number of columns in the floor."""
        pass

    @abstractmethod
    def row_count(self) -> int:
        """Number of rows in the floor."""
        pass

    @abstractmethod
    def is_valid_location(self, location: Location) -> bool:
        """Check if a location is navigable (inside bounds, not a wall)."""
        pass

    @abstractmethod
    def is_occupied(self, location: Location) -> bool:
        """Check if another agent currently sits on a location."""
        pass


class GridFloor(Floor):
    """In-memory rectangular floor with walls and agent occupancy.

    Walls make a cell invalid. Agents and anonymous blocks make a cell
    occupied but leave it valid, so a pathfinder that ignores collisions
    may still route through them.
    """

    FREE_CHAR = "."
    WALL_CHAR = "#"
    OCCUPIED_CHAR = "R"

    def __init__(self, columns: int, rows: int):
        """Initialize an empty floor."""
        validate_grid_dimensions(columns, rows)
        self.columns = columns
        self.rows = rows

        # Indexed [row, column]
        self.walls = np.zeros((rows, columns), dtype=bool)
        self.occupancy = np.zeros((rows, columns), dtype=bool)
        self._agents: Dict[str, Location] = {}

        logger.debug(f"Initialized floor: {columns}x{rows}")

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'GridFloor':
        """Build a floor from a text map.

        Each string is one row, top row first. '.' is free, '#' is a wall
        and 'R' is a cell occupied by an anonymous agent.
        """
        if not rows:
            raise GridError("Floor map has no rows")

        widths = {len(line) for line in rows}
        if len(widths) != 1:
            raise GridError(f"Floor map rows have differing widths: {sorted(widths)}")

        floor = cls(widths.pop(), len(rows))
        for row, line in enumerate(rows):
            for column, char in enumerate(line):
                if char == cls.WALL_CHAR:
                    floor.walls[row, column] = True
                elif char == cls.OCCUPIED_CHAR:
                    floor.occupancy[row, column] = True
                elif char != cls.FREE_CHAR:
                    raise GridError(f"Unknown floor map character {char!r} at ({column}, {row})")
        return floor

    def column_count(self) -> int:
        return self.columns

    def row_count(self) -> int:
        return self.rows

    def in_bounds(self, location: Location) -> bool:
        return 0 <= location.column < self.columns and 0 <= location.row < self.rows

    def is_valid_location(self, location: Location) -> bool:
        if not self.in_bounds(location):
            return False
        return not self.walls[location.row, location.column]

    def is_occupied(self, location: Location) -> bool:
        if not self.in_bounds(location):
            return False
        return bool(self.occupancy[location.row, location.column])

    def add_wall(self, location: Location):
        """Mark a cell as a wall."""
        validate_location(location.column, location.row, self.columns, self.rows)
        self.walls[location.row, location.column] = True

    def add_walls(self, locations: Iterable[Location]):
        for location in locations:
            self.add_wall(location)

    def remove_wall(self, location: Location):
        if self.in_bounds(location):
            self.walls[location.row, location.column] = False

    def block(self, location: Location):
        """Mark a cell as occupied without tracking an agent."""
        validate_location(location.column, location.row, self.columns, self.rows)
        self.occupancy[location.row, location.column] = True

    def clear(self, location: Location):
        """Remove occupancy from a cell."""
        if self.in_bounds(location):
            self.occupancy[location.row, location.column] = False

    def place_agent(self, agent_id: str, location: Location):
        """Place an agent on a free, valid cell."""
        if agent_id in self._agents:
            raise OccupancyError(f"Agent {agent_id} is already on the floor",
                                 agent_id=agent_id, location=self._agents[agent_id])
        self._check_placeable(agent_id, location)
        self._agents[agent_id] = location
        self.occupancy[location.row, location.column] = True

    def move_agent(self, agent_id: str, location: Location):
        """Move an agent to a free, valid cell."""
        current = self.agent_location(agent_id)
        if current is None:
            raise OccupancyError(f"Unknown agent {agent_id}", agent_id=agent_id)
        if current == location:
            return
        self._check_placeable(agent_id, location)
        self.occupancy[current.row, current.column] = False
        self.occupancy[location.row, location.column] = True
        self._agents[agent_id] = location

    def remove_agent(self, agent_id: str) -> Location:
        """Remove an agent and return the cell it vacated."""
        location = self._agents.pop(agent_id, None)
        if location is None:
            raise OccupancyError(f"Unknown agent {agent_id}", agent_id=agent_id)
        self.occupancy[location.row, location.column] = False
        return location

    def agent_location(self, agent_id: str) -> Optional[Location]:
        return self._agents.get(agent_id)

    def _check_placeable(self, agent_id: str, location: Location):
        if not self.is_valid_location(location):
            raise OccupancyError(f"Cannot place {agent_id} on invalid cell {location}",
                                 agent_id=agent_id, location=location)
        if self.is_occupied(location):
            raise OccupancyError(f"Cannot place {agent_id} on occupied cell {location}",
                                 agent_id=agent_id, location=location)
