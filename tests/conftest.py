"""Global pytest configuration and shared sample graphs.

Vertex letters in the diagrams map to handles in alphabetical order
(A=0, B=1, ...).
"""

from __future__ import annotations

import pytest

from spfgraph.config import SOLVER_CONFIG
from spfgraph.graph import Graph


@pytest.fixture(autouse=True)
def _restore_solver_config():
    """Undo per-test changes to the global solver configuration."""
    saved = (
        SOLVER_CONFIG.validate_costs,
        SOLVER_CONFIG.warn_negative_costs,
        SOLVER_CONFIG.trace_relaxations,
    )
    yield
    (
        SOLVER_CONFIG.validate_costs,
        SOLVER_CONFIG.warn_negative_costs,
        SOLVER_CONFIG.trace_relaxations,
    ) = saved


@pytest.fixture
def triangle_neg():
    # Metric:
    #       [3]
    #   A────────►B
    #   │         │
    #   │[2]      │[-2]
    #   │         │
    #   └───►C◄───┘
    #
    g = Graph()
    a = g.add_vertex()
    b = g.add_vertex()
    c = g.add_vertex()
    g.add_edge(a, b, 3)
    g.add_edge(a, c, 2)
    g.add_edge(b, c, -2)
    return g


@pytest.fixture
def line1():
    # Metric:
    #      [1]      [1,1,2]
    #  A◄───────►B◄───────►C
    #
    g = Graph()
    g.add_vertexes(3)
    g.add_edge(0, 1, 1, bidirectional=True)
    g.add_edge(1, 2, 1, bidirectional=True)
    g.add_edge(1, 2, 1, bidirectional=True)
    g.add_edge(1, 2, 2, bidirectional=True)
    return g


@pytest.fixture
def square_tie():
    # Metric:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   D
    #   │                   ▲
    #   │   [1]        [1]  │
    #   └────────►C─────────┘
    #
    # A->C and C->D are inserted before A->B and B->D.
    g = Graph()
    g.add_vertexes(4)
    g.add_edge(0, 2, 1)
    g.add_edge(2, 3, 1)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 3, 1)
    return g


@pytest.fixture
def graph3():
    # Metric:
    #  ┌────────►E─────────┐
    #  │ [1]        [1]    │
    #  │                   │
    #  │                   ▼   [1]
    #  A────────►B────────►C──────┐
    #  │ [1,1,1]   [1,1,1] │      │
    #  │                   │      ▼
    #  │                   │[2]   F
    #  │                   │      │
    #  │                   │      │
    #  │   [4]             ▼      │[1]
    #  └──────────────────►D◄─────┘
    #
    g = Graph()
    g.add_vertexes(6)
    a, b, c, d, e, f = range(6)
    for _ in range(3):
        g.add_edge(a, b, 1)
    for _ in range(3):
        g.add_edge(b, c, 1)
    g.add_edge(c, d, 2)
    g.add_edge(a, e, 1)
    g.add_edge(e, c, 1)
    g.add_edge(a, d, 4)
    g.add_edge(c, f, 1)
    g.add_edge(f, d, 1)
    return g


@pytest.fixture
def disconnected(triangle_neg):
    # Same as triangle_neg plus an isolated vertex D.
    triangle_neg.add_vertex()
    return triangle_neg
