"""Frontier set for best-first search."""
import heapq
import itertools
from typing import List, Optional

from .node_table import NodeState, SearchNode

_REMOVED = None


class Frontier:
    """Priority queue of frontier nodes keyed by rank.

    Equal ranks are popped in arrival order. Removal by identity marks the
    heap entry dead instead of re-heapifying; dead entries are skipped on pop.
    """

    def __init__(self):
        self._heap: List[list] = []
        self._counter = itertools.count()
        self._size = 0
        self.peak_size = 0

    def clear(self):
        self._heap.clear()
        self._counter = itertools.count()
        self._size = 0
        self.peak_size = 0

    def push(self, node: SearchNode):
        """Insert a node that is not already in the frontier."""
        if node.state is NodeState.FRONTIER:
            raise ValueError(f"{node} is already in the frontier")
        entry = [node.rank, next(self._counter), node]
        node.entry = entry
        node.state = NodeState.FRONTIER
        heapq.heappush(self._heap, entry)
        self._size += 1
        self.peak_size = max(self.peak_size, self._size)

    def pop(self) -> Optional[SearchNode]:
        """Remove and return the lowest-ranked node, or None when empty.

        The popped node stays in FRONTIER state until the caller settles it.
        """
        while self._heap:
            _, _, node = heapq.heappop(self._heap)
            if node is not _REMOVED:
                node.entry = None
                self._size -= 1
                return node
        return None

    def remove(self, node: SearchNode) -> bool:
        """Remove a node by identity. Returns False if it was not present."""
        if node.state is not NodeState.FRONTIER:
            return False
        if node.entry is not None:
            node.entry[-1] = _REMOVED
            node.entry = None
            self._size -= 1
        node.state = NodeState.UNVISITED
        return True

    def __contains__(self, node: SearchNode) -> bool:
        return node.state is NodeState.FRONTIER

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0
