"""Pydantic schema definitions for job fair records and configuration."""

from __future__ import annotations

from .config import AppConfig, load_config
from .entities import (
    VALID_GRADES,
    Application,
    Candidate,
    CandidateStatus,
    Company,
    Job,
    JobType,
    Role,
    Session,
)

__all__ = [
    "AppConfig",
    "Application",
    "Candidate",
    "CandidateStatus",
    "Company",
    "Job",
    "JobType",
    "Role",
    "Session",
    "VALID_GRADES",
    "load_config",
]
