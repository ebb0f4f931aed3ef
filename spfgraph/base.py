from __future__ import annotations

from typing import NamedTuple, Optional, Union

#: Dense zero-based integer handle identifying a vertex.
VertexID = int

#: Represents numeric cost of an edge or a path. Edge costs are integers;
#: path costs may also be ``INF`` for unreached vertices.
Cost = Union[int, float]

#: Distance of a vertex that was never reached from the source.
#: Compares greater than any integer and absorbs addition (INF + c == INF).
INF: float = float("inf")

#: Predecessor of a vertex with no known predecessor (the source itself,
#: or any unreached vertex).
UNDEF: Optional[VertexID] = None


class Edge(NamedTuple):
    """
    A directed arc stored in the adjacency list of its source vertex.

    Attributes:
        target: Handle of the vertex this edge points to.
        cost: Integer edge cost. Zero and negative costs are accepted.
    """

    target: VertexID
    cost: int


def check_vertex(vertex: VertexID, num_vertices: int, role: str = "Vertex") -> None:
    """
    Validate a vertex handle against a vertex count.

    Negative handles are rejected rather than wrapped around as Python list
    indexing would do.

    Args:
        vertex: The handle to validate.
        num_vertices: Number of vertices currently known.
        role: Label used in the error message (e.g. "Source", "Target").

    Raises:
        IndexError: If the handle is not an int, or lies outside [0, num_vertices).
    """
    if isinstance(vertex, bool) or not isinstance(vertex, int):
        raise IndexError(f"{role} {vertex!r} is not a valid vertex handle.")
    if vertex < 0 or vertex >= num_vertices:
        raise IndexError(
            f"{role} {vertex} is out of range for a graph with {num_vertices} vertices."
        )
