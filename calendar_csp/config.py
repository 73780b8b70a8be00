from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Backend(str, Enum):
    BACKTRACKING = "backtracking"
    CP_SAT = "cp-sat"


class Propagation(str, Enum):
    SINGLE_PASS = "single-pass"
    FIXED_POINT = "fixed-point"


class SolverSettings(BaseSettings):
    """Solver settings"""

    backend: Backend = Field(
        default=Backend.BACKTRACKING, description="Solver used by solve_calendar"
    )
    propagation: Propagation = Field(
        default=Propagation.SINGLE_PASS,
        description="Apply each binary constraint once, or repeat until no domain changes",
    )
    cpsat_max_time_in_seconds: float = Field(
        default=10.0, gt=0, description="Time limit for the CP-SAT backend"
    )
    log_level: str = Field(
        default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$"
    )

    model_config = SettingsConfigDict(
        env_prefix="CALENDAR_CSP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = SolverSettings()
