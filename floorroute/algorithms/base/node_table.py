"""Dense table of per-cell search nodes."""
import logging
import math
from enum import Enum
from typing import List, Optional

import numpy as np

from ...domain.models.floor import Location
from ...shared.utils.validation_utils import validate_grid_dimensions

logger = logging.getLogger(__name__)

UNREACHED = math.inf


class NodeState(Enum):
    """Search states of a node. A node is in exactly one at a time."""
    UNVISITED = 0
    FRONTIER = 1
    SETTLED = 2


class SearchNode:
    """Mutable search state for a single floor cell."""

    __slots__ = ("location", "index", "cost", "heuristic", "parent", "state", "entry")

    def __init__(self, location: Location, index: int):
        """Initialize search node."""
        self.location = location
        self.index = index
        self.reset()

    def reset(self):
        """Clear cost, heuristic, parent and state."""
        self.cost = UNREACHED
        self.heuristic = 0.0
        self.parent: Optional['SearchNode'] = None
        self.state = NodeState.UNVISITED
        self.entry = None  # live frontier heap entry

    @property
    def rank(self) -> float:
        """Rank key used to order the frontier."""
        return self.cost + self.heuristic

    @property
    def column(self) -> int:
        return self.location.column

    @property
    def row(self) -> int:
        return self.location.row

    def __repr__(self) -> str:
        return (f"SearchNode({self.location.column}, {self.location.row}, "
                f"cost={self.cost}, h={self.heuristic:.3f}, state={self.state.name})")


class NodeTable:
    """One search node per cell, allocated once and reset per search."""

    def __init__(self, columns: int, rows: int):
        """Initialize node table.

        Args:
            columns: Number of floor columns
            rows: Number of floor rows
        """
        validate_grid_dimensions(columns, rows)
        self.columns = columns
        self.rows = rows

        # Flat, column-major: index = column * rows + row
        self._nodes: List[SearchNode] = [
            SearchNode(Location(column, row), column * rows + row)
            for column in range(columns)
            for row in range(rows)
        ]

        logger.debug(f"Allocated node table: {columns}x{rows} ({len(self._nodes)} nodes)")

    def node_at(self, column: int, row: int) -> Optional[SearchNode]:
        """Return the node at (column, row), or None if outside the table."""
        if 0 <= column < self.columns and 0 <= row < self.rows:
            return self._nodes[column * self.rows + row]
        return None

    def node_at_location(self, location: Location) -> Optional[SearchNode]:
        return self.node_at(location.column, location.row)

    def reset(self):
        """Reset the mutable state of every node."""
        for node in self._nodes:
            node.reset()

    def cost_grid(self) -> np.ndarray:
        """Costs indexed [row, column]; -1 marks cells never reached."""
        grid = np.full((self.rows, self.columns), -1, dtype=np.int64)
        for node in self._nodes:
            if node.cost != UNREACHED:
                grid[node.location.row, node.location.column] = node.cost
        return grid

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self):
        return iter(self._nodes)
