from __future__ import annotations

from typing import List, Optional, Sequence

from spfgraph.base import UNDEF, VertexID, check_vertex


def build_path(
    prev: Sequence[Optional[VertexID]],
    target: VertexID,
) -> List[VertexID]:
    """
    Reconstruct the vertex sequence ending at ``target`` from a predecessor table.

    Follows ``prev`` backward from target, pushing each handle onto a stack,
    until a vertex with no predecessor is reached. The stack is then popped to
    produce the path in traversal order (source first, target last).

    A vertex with no predecessor terminates the walk, so an unreached target
    yields ``[target]``. Check reachability before relying on the result.

    Args:
        prev: Predecessor table indexed by vertex handle, ``UNDEF`` for none.
        target: Vertex to build the path to.

    Returns:
        List of vertex handles from the first vertex of the chain to target.

    Raises:
        IndexError: If target is out of range for the table.
        ValueError: If the predecessor chain loops back on itself.
    """
    check_vertex(target, len(prev), "Target")

    stack: List[VertexID] = []
    seen = set()
    node: Optional[VertexID] = target
    while node is not UNDEF:
        if node in seen:
            raise ValueError(f"Predecessor chain from {target} loops at {node}.")
        seen.add(node)
        stack.append(node)
        node = prev[node]

    path: List[VertexID] = []
    while stack:
        path.append(stack.pop())
    return path
