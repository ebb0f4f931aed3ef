"""Test the configuration module functionality."""

from spfgraph.config import SOLVER_CONFIG, SolverConfig


def test_solver_config_defaults():
    config = SolverConfig()
    assert config.validate_costs is False
    assert config.warn_negative_costs is True
    assert config.trace_relaxations is False


def test_resolve_validate_uses_default_when_no_override():
    assert SolverConfig().resolve_validate(None) is False
    assert SolverConfig(validate_costs=True).resolve_validate(None) is True


def test_resolve_validate_override_wins():
    assert SolverConfig(validate_costs=True).resolve_validate(False) is False
    assert SolverConfig(validate_costs=False).resolve_validate(True) is True


def test_global_config_instance():
    assert isinstance(SOLVER_CONFIG, SolverConfig)
