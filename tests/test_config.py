"""
Tests for solver settings.
"""

import pytest
from pydantic import ValidationError

from calendar_csp.config import Backend, Propagation, SolverSettings


class TestSolverSettings:

    def test_defaults(self, monkeypatch):
        for name in ("BACKEND", "PROPAGATION", "CPSAT_MAX_TIME_IN_SECONDS", "LOG_LEVEL"):
            monkeypatch.delenv(f"CALENDAR_CSP_{name}", raising=False)

        config = SolverSettings(_env_file=None)

        assert config.backend == Backend.BACKTRACKING
        assert config.propagation == Propagation.SINGLE_PASS
        assert config.cpsat_max_time_in_seconds == 10.0
        assert config.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CALENDAR_CSP_BACKEND", "cp-sat")
        monkeypatch.setenv("CALENDAR_CSP_PROPAGATION", "fixed-point")
        monkeypatch.setenv("CALENDAR_CSP_CPSAT_MAX_TIME_IN_SECONDS", "2.5")

        config = SolverSettings(_env_file=None)

        assert config.backend == Backend.CP_SAT
        assert config.propagation == Propagation.FIXED_POINT
        assert config.cpsat_max_time_in_seconds == 2.5

    @pytest.mark.parametrize("field, value", [
        ("backend", "genetic"),
        ("propagation", "eventually"),
        ("cpsat_max_time_in_seconds", 0),
        ("log_level", "LOUD"),
    ])
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            SolverSettings(_env_file=None, **{field: value})
