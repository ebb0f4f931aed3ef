"""spfgraph: Shortest paths over mutable dense-index directed multigraphs.

spfgraph provides a small graph container with integer vertex handles, a
vertex-selection Dijkstra solver and path reconstruction from the resulting
predecessor table.

Primary API:
    Graph - Mutable directed multigraph (add_vertex, add_edge, del_edge, ...)
    dijkstra() - Single-source shortest paths, returns a PathResult
    PathResult - Distance/predecessor snapshot (path_cost, build_path)
    from_networkx() - Convert NetworkX graph to a Graph
    to_networkx() - Convert a Graph back to NetworkX

Example:
    from spfgraph import Graph

    graph = Graph()
    a, b, c = graph.add_vertex(), graph.add_vertex(), graph.add_vertex()
    graph.add_edge(a, b, 3)
    graph.add_edge(a, c, 2)
    graph.add_edge(b, c, -2)

    result = graph.dijkstra(a)
    result.path_cost(c)   # 1
    result.build_path(c)  # [0, 1, 2]
"""

from __future__ import annotations

from spfgraph import logging
from spfgraph._version import __version__
from spfgraph.base import INF, UNDEF, Cost, Edge, VertexID
from spfgraph.config import SOLVER_CONFIG, SolverConfig
from spfgraph.graph import Graph
from spfgraph.nx import NodeMap, from_networkx, to_networkx
from spfgraph.path import PathResult
from spfgraph.path_utils import build_path
from spfgraph.spf import dijkstra

__all__ = [
    # Version
    "__version__",
    # Types
    "VertexID",
    "Cost",
    "Edge",
    "INF",
    "UNDEF",
    # Graph and solver
    "Graph",
    "dijkstra",
    "PathResult",
    "build_path",
    # Configuration
    "SolverConfig",
    "SOLVER_CONFIG",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
