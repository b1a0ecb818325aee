"""Base search structures: node table and frontier."""
from .node_table import NodeTable, SearchNode, NodeState, UNREACHED
from .frontier import Frontier

__all__ = ['NodeTable', 'SearchNode', 'NodeState', 'UNREACHED', 'Frontier']
