"""Test configuration and fixtures for floorroute."""
import logging
import random
from collections import deque
from typing import Optional

import pytest

from floorroute.algorithms.astar import FloorPathfinder
from floorroute.domain.models import GridFloor, Location


@pytest.fixture
def open_floor():
    """Empty 5x5 floor."""
    return GridFloor(5, 5)


@pytest.fixture
def column_blocked_floor():
    """5x5 floor with column 2 occupied on rows 0-3, row 4 open."""
    floor = GridFloor(5, 5)
    for row in range(4):
        floor.block(Location(2, row))
    return floor


@pytest.fixture
def make_pathfinder():
    """Factory building a pathfinder over a floor."""
    def _make(floor, **kwargs):
        return FloorPathfinder(floor, **kwargs)
    return _make


@pytest.fixture
def restore_root_logger():
    """Drop handlers a test installs on the root logger and restore its level."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def shortest_distance(floor, source, target, avoid_collisions=True) -> Optional[int]:
    """Breadth-first step count between two cells, or None if unreachable."""
    distances = {source: 0}
    queue = deque([source])
    while queue:
        current = queue.popleft()
        if current == target:
            return distances[current]
        for dc, dr in ((0, -1), (1, 0), (0, 1), (-1, 0)):
            nxt = current.offset(dc, dr)
            if nxt in distances or not floor.is_valid_location(nxt):
                continue
            if avoid_collisions and floor.is_occupied(nxt):
                continue
            distances[nxt] = distances[current] + 1
            queue.append(nxt)
    return None


def create_random_floor(columns, rows, wall_ratio=0.25, occupied_ratio=0.1, seed=42):
    """Create a reproducible floor with random walls and occupied cells."""
    rng = random.Random(seed)
    floor = GridFloor(columns, rows)
    for column in range(columns):
        for row in range(rows):
            roll = rng.random()
            if roll < wall_ratio:
                floor.add_wall(Location(column, row))
            elif roll < wall_ratio + occupied_ratio:
                floor.block(Location(column, row))
    return floor
