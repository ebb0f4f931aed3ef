from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from spfgraph.base import Edge, VertexID, check_vertex
from spfgraph.spf import dijkstra

if TYPE_CHECKING:
    from spfgraph.path import PathResult


class Graph:
    """
    A mutable directed multigraph over dense integer vertex handles.

    Vertices are numbered 0..N-1 in creation order and are never removed.
    Each vertex owns an adjacency list of outgoing ``Edge(target, cost)``
    entries kept in insertion order. This class enforces:
      - Both endpoints of an edge must already exist.
      - Parallel edges and self-loops are allowed; nothing is de-duplicated.
      - Edge removal drops every edge between the given ordered pair.
    """

    def __init__(self) -> None:
        """
        Initialize an empty graph.

        Attributes:
            _adj (List[List[Edge]]): Adjacency lists indexed by vertex handle.
        """
        self._adj: List[List[Edge]] = []

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, vertex: object) -> bool:
        if isinstance(vertex, bool) or not isinstance(vertex, int):
            return False
        return 0 <= vertex < len(self._adj)

    def __repr__(self) -> str:
        return f"Graph(vertices={self.num_vertices()}, edges={self.num_edges()})"

    def copy(self) -> Graph:
        """
        Create an independent copy of this graph.

        Edges are immutable tuples, so copying the per-vertex lists is enough
        to make later mutations of either graph invisible to the other.

        Returns:
            Graph: A new graph with the same vertices and edges.
        """
        clone = Graph()
        clone._adj = [list(edges) for edges in self._adj]
        return clone

    #
    # Vertex management
    #
    def add_vertex(self) -> VertexID:
        """
        Append a vertex with an empty adjacency list.

        Returns:
            VertexID: The new handle, equal to the vertex count before insertion.
        """
        self._adj.append([])
        return len(self._adj) - 1

    def add_vertexes(self, count: int) -> None:
        """
        Append ``count`` vertices, as if ``add_vertex`` were called ``count`` times.

        Args:
            count: Number of vertices to add. Zero is a no-op.

        Raises:
            ValueError: If count is negative.
        """
        if count < 0:
            raise ValueError(f"Cannot add a negative number of vertices ({count}).")
        self._adj.extend([] for _ in range(count))

    def num_vertices(self) -> int:
        return len(self._adj)

    def vertices(self) -> range:
        """Return the range of all valid vertex handles."""
        return range(len(self._adj))

    #
    # Edge management
    #
    def add_edge(
        self,
        src: VertexID,
        dst: VertexID,
        cost: int,
        bidirectional: bool = False,
    ) -> None:
        """
        Add a directed edge from src to dst.

        Both handles are validated before anything is appended, so a failed
        call leaves the graph unchanged.

        Args:
            src: The source vertex. Must exist in the graph.
            dst: The target vertex. Must exist in the graph.
            cost: Integer edge cost; negative and zero costs are accepted.
            bidirectional: If True, also add the reverse edge dst->src with
                the same cost.

        Raises:
            IndexError: If either vertex does not exist.
        """
        check_vertex(src, len(self._adj), "Source")
        check_vertex(dst, len(self._adj), "Target")

        self._adj[src].append(Edge(dst, cost))
        if bidirectional:
            self._adj[dst].append(Edge(src, cost))

    def del_edge(self, src: VertexID, dst: VertexID) -> int:
        """
        Remove every edge from src whose target is dst.

        All parallel src->dst edges are removed, not just the first one.
        Nothing happens if there are no such edges.

        Args:
            src: The source vertex. Must exist in the graph.
            dst: The target vertex to match.

        Returns:
            int: Number of edges removed.

        Raises:
            IndexError: If src does not exist.
        """
        check_vertex(src, len(self._adj), "Source")

        edges = self._adj[src]
        kept = [edge for edge in edges if edge.target != dst]
        removed = len(edges) - len(kept)
        if removed:
            self._adj[src] = kept
        return removed

    def edges(self, vertex: VertexID) -> Tuple[Edge, ...]:
        """
        Return the outgoing edges of a vertex in insertion order.

        Raises:
            IndexError: If the vertex does not exist.
        """
        check_vertex(vertex, len(self._adj))
        return tuple(self._adj[vertex])

    def edges_between(self, src: VertexID, dst: VertexID) -> List[int]:
        """
        List the costs of all parallel edges from src to dst.

        Args:
            src: The source vertex.
            dst: The target vertex.

        Returns:
            List[int]: Edge costs in insertion order, or an empty list if none exist.
        """
        check_vertex(src, len(self._adj), "Source")
        return [edge.cost for edge in self._adj[src] if edge.target == dst]

    def num_edges(self) -> int:
        return sum(len(edges) for edges in self._adj)

    def negative_edges(self) -> Iterator[Tuple[VertexID, Edge]]:
        """
        Iterate over edges with a negative cost.

        Yields:
            (src, edge) pairs in ascending src order, then insertion order.
        """
        for src, edges in enumerate(self._adj):
            for edge in edges:
                if edge.cost < 0:
                    yield src, edge

    def has_negative_costs(self) -> bool:
        return next(self.negative_edges(), None) is not None

    #
    # Shortest paths
    #
    def dijkstra(
        self, source: VertexID, validate_costs: Optional[bool] = None
    ) -> PathResult:
        """
        Solve single-source shortest paths from ``source``.

        See ``spfgraph.spf.dijkstra`` for details.
        """
        return dijkstra(self, source, validate_costs=validate_costs)
