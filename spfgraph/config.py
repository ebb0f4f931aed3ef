"""Configuration classes for spfgraph components."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SolverConfig:
    """Configuration for the shortest-path solver."""

    # Reject graphs containing negative edge costs before solving
    validate_costs: bool = False

    # Log a warning when solving a graph with negative costs unvalidated
    warn_negative_costs: bool = True

    # Emit a DEBUG record for every successful relaxation
    trace_relaxations: bool = False

    def resolve_validate(self, override: Optional[bool]) -> bool:
        """Return the per-call override if given, else the configured default."""
        if override is None:
            return self.validate_costs
        return override


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
