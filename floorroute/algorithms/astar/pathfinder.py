"""Best-first (A*) route search over a floor."""
import logging
import time
from dataclasses import dataclass
from typing import Optional, Tuple

from ..base.frontier import Frontier
from ..base.node_table import NodeState, NodeTable, SearchNode
from ...domain.models.floor import Floor, Location
from ...domain.models.route import Route
from ...domain.services.heuristics import EuclideanHeuristic, HeuristicFunction, get_heuristic
from ...shared.configuration.config_manager import ConfigManager, get_config
from ...shared.configuration.settings import PathfindingSettings
from ...shared.exceptions import RoutingError
from ...shared.utils.logging_utils import get_context_logger, setup_logging

logger = logging.getLogger(__name__)

# Expansion order: up, right, down, left
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


@dataclass
class SearchStatistics:
    """Counters collected during a single find_route call."""
    found: bool = False
    expanded: int = 0
    reopened: int = 0
    frontier_peak: int = 0
    route_length: int = 0
    elapsed_s: float = 0.0


def build_route(source: SearchNode, target: SearchNode) -> Route:
    """Walk parent links from target back to source.

    The source location is excluded; the target is the last step.
    """
    route = Route()
    current = target
    while current is not source:
        route.prepend(current.location)
        current = current.parent
        if current is None:
            raise RoutingError(f"Parent chain from {target.location} never reaches {source.location}",
                               error_code="BROKEN_PARENT_CHAIN")
    return route


class FloorPathfinder:
    """Finds shortest obstacle-aware routes between two floor cells.

    Node state is allocated once per instance and reset on every search, so
    one instance must not run concurrent searches.
    """

    def __init__(self, floor: Floor, avoid_collisions: bool = True,
                 heuristic: Optional[HeuristicFunction] = None,
                 log_statistics: bool = True):
        """Initialize pathfinder.

        Args:
            floor: Floor providing extents, validity and occupancy
            avoid_collisions: Treat occupied cells as impassable
            heuristic: Remaining-distance estimate, Euclidean by default
            log_statistics: Log per-search counters at DEBUG
        """
        self.floor = floor
        self.avoid_collisions = avoid_collisions
        self.heuristic = heuristic or EuclideanHeuristic()
        self.log_statistics = log_statistics

        self.nodes = NodeTable(floor.column_count(), floor.row_count())
        self.frontier = Frontier()
        self.route = Route()
        self.last_search = SearchStatistics()

    @classmethod
    def from_settings(cls, floor: Floor, settings: PathfindingSettings) -> 'FloorPathfinder':
        """Create a pathfinder configured from pathfinding settings."""
        return cls(floor,
                   avoid_collisions=settings.avoid_collisions,
                   heuristic=get_heuristic(settings.heuristic),
                   log_statistics=settings.log_statistics)

    @classmethod
    def from_config(cls, floor: Floor, manager: Optional[ConfigManager] = None,
                    configure_logging: bool = False) -> 'FloorPathfinder':
        """Create a pathfinder from a loaded configuration file.

        Args:
            floor: Floor to search
            manager: Configuration source, the global manager if None
            configure_logging: Also apply the file's logging settings
        """
        settings = (manager or get_config()).get_settings()
        if configure_logging:
            setup_logging(settings.logging)
        return cls.from_settings(floor, settings.pathfinding)

    def find_route(self, source: Location, target: Location) -> bool:
        """Search for a route from source to target.

        Returns:
            True if a route was found and stored, False otherwise. A False
            result always leaves the stored route empty.
        """
        self.route = Route()
        self.last_search = SearchStatistics()

        if source == target:
            logger.debug(f"No route: source and target are both {source}")
            return False

        start_time = time.perf_counter()
        self.frontier.clear()
        self.nodes.reset()

        source_node = self.nodes.node_at_location(source)
        target_node = self.nodes.node_at_location(target)
        if source_node is None or target_node is None:
            logger.info(f"No route: {source} -> {target} is outside the "
                        f"{self.nodes.columns}x{self.nodes.rows} floor")
            return False

        source_node.cost = 0
        source_node.heuristic = self.heuristic.calculate(source, target)
        self.frontier.push(source_node)

        self._search(target_node)

        stats = self.last_search
        stats.frontier_peak = self.frontier.peak_size
        stats.elapsed_s = time.perf_counter() - start_time

        if target_node.parent is None:
            logger.debug(f"No route: frontier exhausted searching {source} -> {target} "
                         f"after {stats.expanded} expansions")
            self._log_statistics(source, target)
            return False

        self.route = build_route(source_node, target_node)
        stats.found = True
        stats.route_length = len(self.route)
        self._log_statistics(source, target)
        return True

    def _search(self, target: SearchNode):
        """Expand frontier nodes until the target is selected or the frontier is empty."""
        while self.frontier:
            current = self.frontier.pop()

            if current is target:
                break

            self.last_search.expanded += 1
            next_step_cost = current.cost + 1

            for column_change, row_change in DIRECTIONS:
                neighbour = self.nodes.node_at(current.column + column_change,
                                               current.row + row_change)
                if neighbour is not None:
                    self._relax(neighbour, next_step_cost, current, target)

            current.state = NodeState.SETTLED

    def _relax(self, node: SearchNode, next_step_cost: int,
               previous: SearchNode, target: SearchNode):
        """Offer node a path through previous costing next_step_cost."""
        location = node.location
        if not self.floor.is_valid_location(location):
            return
        if self.avoid_collisions and self.floor.is_occupied(location):
            return

        # Strictly cheaper path: drop the stale entry so the node is re-admitted
        if next_step_cost < node.cost:
            if node.state is NodeState.SETTLED:
                node.state = NodeState.UNVISITED
                self.last_search.reopened += 1
            else:
                self.frontier.remove(node)

        if node.state is not NodeState.UNVISITED:
            return

        node.cost = next_step_cost
        node.heuristic = self.heuristic.calculate(location, target.location)
        node.parent = previous
        self.frontier.push(node)

    def _log_statistics(self, source: Location, target: Location):
        if not self.log_statistics or not logger.isEnabledFor(logging.DEBUG):
            return
        stats = self.last_search
        search_log = get_context_logger(__name__, source=tuple(source), target=tuple(target))
        search_log.debug(
            f"found={stats.found} length={stats.route_length} "
            f"expanded={stats.expanded} reopened={stats.reopened} "
            f"frontier_peak={stats.frontier_peak} in {stats.elapsed_s * 1000:.2f}ms"
        )

    def remaining_route(self) -> Tuple[Location, ...]:
        """Read-only snapshot of the steps still to travel."""
        return self.route.steps

    def pop_next_step(self) -> Location:
        """Remove and return the next step of the stored route.

        Raises:
            EmptyRouteError: If the route has no remaining steps
        """
        return self.route.pop_next_step()

    def remaining_step_count(self) -> int:
        return self.route.peek_remaining_steps()
