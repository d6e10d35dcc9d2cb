"""Pydantic models for the job fair records."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict

Role = Literal["student", "admin"]

VALID_GRADES: frozenset[str] = frozenset({"", "A", "B", "C", "D", "F"})


class JobType(str, Enum):
    REGULAR = "REGULAR"
    COOP = "COOP"


class CandidateStatus(str, Enum):
    STUDYING = "STUDYING"
    GRADUATED = "GRADUATED"


class Company(BaseModel):
    """Company hosting jobs at the fair."""

    id: str
    name: str
    email: str
    location: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class Job(BaseModel):
    """Job posting; ``deadline`` of None never expires."""

    id: str
    title: str
    description: str
    company_id: str
    deadline: date | None = None
    open: bool = True
    type: JobType

    model_config = ConfigDict(extra="forbid", frozen=True)


class Candidate(BaseModel):
    """Candidate registered for the fair."""

    id: str
    first_name: str
    last_name: str
    email: str
    status: CandidateStatus

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Application(BaseModel):
    """Application row. Only ``grade`` changes after load."""

    job_id: str
    candidate_id: str
    applied_at: datetime | None = None
    grade: str = ""

    model_config = ConfigDict(extra="forbid")


class Session(BaseModel):
    """Currently authenticated actor."""

    email: str
    role: Role

    model_config = ConfigDict(frozen=True)
