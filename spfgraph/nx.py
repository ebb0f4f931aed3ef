"""NetworkX graph conversion utilities.

This module converts between NetworkX graphs and the dense-index ``Graph``
used by the spfgraph solver.

Example:
    >>> import networkx as nx
    >>> from spfgraph.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", cost=10)
    >>> G.add_edge("B", "C", cost=5)
    >>>
    >>> graph, node_map = from_networkx(G)
    >>> result = graph.dijkstra(node_map.to_index["A"])
    >>> result.path_cost(node_map.to_index["C"])
    15
    >>>
    >>> G_out = to_networkx(graph, node_map)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple, Union

import networkx as nx

from spfgraph.graph import Graph

NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and vertex handles.

    Node names (any hashable) are mapped to contiguous integer handles
    starting from 0.

    Attributes:
        to_index: Maps original node names to vertex handles
        to_name: Maps vertex handles back to original node names

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in handle order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)

    def names(self, vertices: List[int]) -> List[Hashable]:
        """Translate a sequence of handles (e.g. a built path) into node names."""
        return [self.to_name.get(v, v) for v in vertices]


def from_networkx(
    G: NxGraph,
    *,
    cost_attr: str = "cost",
    default_cost: int = 1,
    bidirectional: bool = False,
) -> Tuple[Graph, NodeMap]:
    """Convert a NetworkX graph to a spfgraph ``Graph``.

    Node names are sorted by their string form so handles are deterministic.
    Edges of undirected graphs are added in both directions. Parallel edges of
    multigraphs are kept as parallel edges.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph)
        cost_attr: Edge attribute name for cost (default: "cost")
        default_cost: Cost value when attribute is missing (default: 1)
        bidirectional: If True, add reverse edge for each directed edge.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph
        ValueError: If graph has no nodes
    """
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    if G.number_of_nodes() == 0:
        raise ValueError("Graph has no nodes")

    node_names = sorted(G.nodes(), key=str)
    node_map = NodeMap.from_names(node_names)

    graph = Graph()
    graph.add_vertexes(len(node_names))

    reverse = bidirectional or not G.is_directed()
    for u, v, data in G.edges(data=True):
        cost = int(data.get(cost_attr, default_cost))
        graph.add_edge(
            node_map.to_index[u],
            node_map.to_index[v],
            cost,
            bidirectional=reverse and u != v,
        )

    return graph, node_map


def to_networkx(
    graph: Graph,
    node_map: Optional[NodeMap] = None,
    *,
    cost_attr: str = "cost",
) -> nx.MultiDiGraph:
    """Convert a spfgraph ``Graph`` back to a NetworkX MultiDiGraph.

    Args:
        graph: Graph to convert
        node_map: Optional NodeMap to restore original node names.
            If None, nodes are labeled 0, 1, 2, ...
        cost_attr: Edge attribute name for cost (default: "cost")

    Returns:
        nx.MultiDiGraph with one edge per stored edge, parallel edges included
    """
    G = nx.MultiDiGraph()

    def name(idx: int) -> Any:
        if node_map is None:
            return idx
        return node_map.to_name.get(idx, idx)

    G.add_nodes_from(name(idx) for idx in graph.vertices())
    for src in graph.vertices():
        for dst, cost in graph.edges(src):
            G.add_edge(name(src), name(dst), **{cost_attr: cost})

    return G
