"""Heuristic functions estimating the remaining distance to a target."""
import math
from abc import ABC, abstractmethod

from ..models.floor import Location
from ...shared.exceptions import ConfigurationError


class HeuristicFunction(ABC):
    """Abstract base class for heuristic functions."""

    name = ""

    @abstractmethod
    def calculate(self, start: Location, end: Location) -> float:
        """Calculate heuristic cost between two locations."""
        pass


class EuclideanHeuristic(HeuristicFunction):
    """Straight-line distance; admissible and consistent on a unit-cost 4-connected grid."""

    name = "euclidean"

    def calculate(self, start: Location, end: Location) -> float:
        dx = abs(start.column - end.column)
        dy = abs(start.row - end.row)
        return math.sqrt(dx * dx + dy * dy)


class ManhattanHeuristic(HeuristicFunction):
    """Manhattan distance; exact lower bound on an open 4-connected grid."""

    name = "manhattan"

    def calculate(self, start: Location, end: Location) -> float:
        return float(start.manhattan_distance(end))


class ZeroHeuristic(HeuristicFunction):
    """Zero heuristic, turning the search into Dijkstra's algorithm."""

    name = "zero"

    def calculate(self, start: Location, end: Location) -> float:
        return 0.0


class LegacyXorHeuristic(HeuristicFunction):
    """Reproduces the historical distance formula written as ``dy ^ 2 + dx ^ 2``.

    ``^`` is XOR and binds looser than ``+``, so the value under the root is
    ``dy XOR (2 + dx) XOR 2`` rather than a sum of squares. It is neither
    admissible nor consistent, so routes found with it are valid but not
    guaranteed shortest. Only useful to replay routes recorded with the old
    formula.
    """

    name = "legacy_xor"

    def calculate(self, start: Location, end: Location) -> float:
        dx = abs(start.column - end.column)
        dy = abs(start.row - end.row)
        return math.sqrt(dy ^ (2 + dx) ^ 2)


_HEURISTICS = {
    cls.name: cls
    for cls in (EuclideanHeuristic, ManhattanHeuristic, ZeroHeuristic, LegacyXorHeuristic)
}


def get_heuristic(name: str) -> HeuristicFunction:
    """Create a heuristic by its settings name."""
    try:
        return _HEURISTICS[name]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown heuristic: {name}", error_code="UNKNOWN_HEURISTIC",
            details={"available": sorted(_HEURISTICS)}
        ) from None
