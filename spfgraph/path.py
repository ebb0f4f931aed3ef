"""Snapshot of a single-source shortest-path computation.

``PathResult`` stores the distance and predecessor tables produced by one
solver run. It is frozen and holds tuples, so later mutations of the graph it
was computed from are never observed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from spfgraph.base import INF, Cost, VertexID, check_vertex
from spfgraph.path_utils import build_path


@dataclass(frozen=True)
class PathResult:
    """Distances and predecessors from one source to every vertex.

    Attributes:
        source: Vertex the computation started from.
        dist: Shortest known distance per vertex; ``INF`` if unreached.
        prev: Predecessor per vertex on its best known path; ``UNDEF`` for
            the source and for unreached vertices.
    """

    source: VertexID
    dist: Tuple[Cost, ...]
    prev: Tuple[Optional[VertexID], ...]

    def __len__(self) -> int:
        return len(self.dist)

    @property
    def num_vertices(self) -> int:
        """Number of vertices the tables cover."""
        return len(self.dist)

    def path_cost(self, target: VertexID) -> Cost:
        """Return the distance from the source to target.

        Args:
            target: Vertex handle.

        Returns:
            The path cost, or ``INF`` if target was never reached.

        Raises:
            IndexError: If target is not a valid handle.
        """
        check_vertex(target, len(self.dist), "Target")
        return self.dist[target]

    def is_reachable(self, target: VertexID) -> bool:
        """Return True if target was reached from the source."""
        return self.path_cost(target) != INF

    def reachable(self) -> List[VertexID]:
        """Return all reached vertex handles in ascending order."""
        return [v for v, d in enumerate(self.dist) if d != INF]

    def build_path(self, target: VertexID) -> List[VertexID]:
        """Return the vertex sequence from the source to target.

        An unreached target yields ``[target]`` rather than an error, so
        callers should check ``is_reachable(target)`` first.

        Raises:
            IndexError: If target is not a valid handle.
        """
        return build_path(self.prev, target)
