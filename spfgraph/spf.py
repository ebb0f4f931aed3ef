from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from spfgraph.base import INF, UNDEF, Cost, VertexID, check_vertex
from spfgraph.config import SOLVER_CONFIG
from spfgraph.logging import get_logger
from spfgraph.path import PathResult

if TYPE_CHECKING:
    from spfgraph.graph import Graph

logger = get_logger(__name__)


def _select_min_unvisited(dist: List[Cost], visited: List[bool]) -> VertexID:
    """
    Return the unvisited vertex with the smallest tentative distance.

    Scans handles in ascending order and only replaces the candidate on a
    strictly smaller distance, so ties go to the lowest handle.
    """
    selected: Optional[VertexID] = None
    for vertex, vertex_dist in enumerate(dist):
        if visited[vertex]:
            continue
        if selected is None or vertex_dist < dist[selected]:
            selected = vertex
    return selected


def dijkstra(
    graph: Graph,
    source: VertexID,
    validate_costs: Optional[bool] = None,
) -> PathResult:
    """
    Compute shortest paths from a source vertex with vertex-selection Dijkstra.

    Runs exactly N rounds. Each round selects the unvisited vertex with the
    smallest tentative distance (lowest handle on ties), marks it visited and
    relaxes all of its outgoing edges in adjacency order. No priority queue
    is used, giving O(N^2 + E) time.

    Edge costs are not checked by default. With negative costs a visited
    vertex may still be improved by a later relaxation, and the result may
    or may not be optimal. Pass ``validate_costs=True`` (or set
    ``SOLVER_CONFIG.validate_costs``) to reject such graphs instead.

    Args:
        graph: The graph to solve over. It must not be mutated during the call.
        source: The source vertex.
        validate_costs: If True, raise on negative edge costs. If None, use
            ``SOLVER_CONFIG.validate_costs``.

    Returns:
        PathResult: Distance and predecessor tables for every vertex.
        Unreached vertices have distance ``INF`` and predecessor ``UNDEF``.

    Raises:
        IndexError: If source is not a valid vertex handle.
        ValueError: If validation is enabled and a negative edge cost exists.
    """
    outgoing_adjacencies = graph._adj
    n = len(outgoing_adjacencies)
    check_vertex(source, n, "Source")

    negative = next(graph.negative_edges(), None)
    if negative is not None and SOLVER_CONFIG.resolve_validate(validate_costs):
        src, edge = negative
        raise ValueError(
            f"Edge {src}->{edge.target} has negative cost {edge.cost}; "
            f"shortest paths are not guaranteed to be optimal."
        )
    if negative is not None and SOLVER_CONFIG.warn_negative_costs:
        logger.warning(
            "Graph has negative edge costs; results from source %d may be non-optimal.",
            source,
        )

    logger.debug(
        "Solving from source %d over %d vertices and %d edges",
        source,
        n,
        graph.num_edges(),
    )
    trace = SOLVER_CONFIG.trace_relaxations

    dist: List[Cost] = [INF] * n
    prev: List[Optional[VertexID]] = [UNDEF] * n
    visited: List[bool] = [False] * n
    dist[source] = 0

    for _ in range(n):
        node_id = _select_min_unvisited(dist, visited)
        visited[node_id] = True

        current_cost = dist[node_id]
        for neighbor_id, edge_cost in outgoing_adjacencies[node_id]:
            new_cost = current_cost + edge_cost
            if new_cost < dist[neighbor_id]:
                dist[neighbor_id] = new_cost
                prev[neighbor_id] = node_id
                if trace:
                    logger.debug(
                        "Relaxed %d via %d to cost %s", neighbor_id, node_id, new_cost
                    )

    logger.debug(
        "Reached %d of %d vertices from source %d",
        sum(1 for d in dist if d != INF),
        n,
        source,
    )
    return PathResult(source=source, dist=tuple(dist), prev=tuple(prev))
