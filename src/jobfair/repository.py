"""Repository facade over the job fair backing files."""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Mapping

import structlog

from .core import DEFAULT_POLICIES, EligibilityPolicy, can_apply, policy_for
from .schemas import Application, Candidate, Company, Job, JobType, Role, Session
from .storage import (
    AdminLoader,
    ApplicationStore,
    CandidateLoader,
    CompanyLoader,
    JobLoader,
)

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")

COMPANIES_FILE = "companies.csv"
JOBS_FILE = "jobs.csv"
CANDIDATES_FILE = "candidates.csv"
ADMINS_FILE = "admins.csv"
APPLICATIONS_FILE = "applications.csv"


class Repository:
    """Loads every backing file once and serves queries and mutations.

    Construction reads companies, jobs and candidates (required), admins
    (optional) and applications (created with the current header when
    missing). Any missing or malformed required file raises a
    :class:`~jobfair.errors.RepositoryError` and no repository is built.
    """

    def __init__(
        self,
        data_dir: str | Path,
        *,
        policies: Mapping[JobType, EligibilityPolicy] | None = None,
    ) -> None:
        base = Path(data_dir)
        self._data_dir = base
        self._policies = DEFAULT_POLICIES if policies is None else policies
        self._logger = structlog.get_logger(__name__)

        self._companies: dict[str, Company] = CompanyLoader().load(base / COMPANIES_FILE)
        self._jobs: dict[str, Job] = JobLoader().load(base / JOBS_FILE)
        candidate_index = CandidateLoader().load(base / CANDIDATES_FILE)
        self._candidates = candidate_index.by_id
        self._candidate_emails = candidate_index.emails
        self._candidate_by_email = candidate_index.by_email
        self._admin_emails: set[str] = AdminLoader().load(base / ADMINS_FILE)

        self._applications = ApplicationStore(base / APPLICATIONS_FILE)
        self._applications.ensure_file()
        self._applications.load()

        self._session: Session | None = None

        self._logger.info(
            "repository.loaded",
            data_dir=str(base),
            companies=len(self._companies),
            jobs=len(self._jobs),
            candidates=len(self._candidates),
            admins=len(self._admin_emails),
            applications=len(self._applications),
        )

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    # Session

    def set_current_user(self, email: str, role: Role) -> Session:
        self._session = Session(email=email, role=role)
        return self._session

    def get_current_session(self) -> Session | None:
        return self._session

    def clear_session(self) -> None:
        self._session = None

    # Authentication

    @staticmethod
    def is_valid_email(email: str | None) -> bool:
        return email is not None and EMAIL_PATTERN.match(email) is not None

    def is_candidate_email(self, email: str | None) -> bool:
        return email is not None and email.lower() in self._candidate_emails

    def is_admin_email(self, email: str | None) -> bool:
        return email is not None and email.lower() in self._admin_emails

    # Queries

    def find_company(self, company_id: str) -> Company | None:
        return self._companies.get(company_id)

    def find_job(self, job_id: str) -> Job | None:
        return self._jobs.get(job_id)

    def find_candidate(self, candidate_id: str) -> Candidate | None:
        return self._candidates.get(candidate_id)

    def find_candidate_by_email(self, email: str) -> Candidate | None:
        return self._candidate_by_email.get(email.lower())

    def get_all_open_jobs(self) -> list[Job]:
        """Open jobs; deadlines are left to the caller."""
        return [job for job in self._jobs.values() if job.open]

    def get_all_candidates(self) -> list[Candidate]:
        return list(self._candidates.values())

    def get_all_applications(self) -> list[Application]:
        return self._applications.all()

    def policy_for(self, job: Job) -> EligibilityPolicy | None:
        """Policy this repository applies to the job's type, or None."""
        return policy_for(job, self._policies)

    def can_apply(self, candidate: Candidate, job: Job) -> bool:
        return can_apply(candidate, job, self._policies)

    # Mutations

    def append_application(
        self, job: Job, candidate: Candidate, when: datetime | None
    ) -> Application:
        return self._applications.append(job, candidate, when)

    def set_grade(self, job_id: str, candidate_id: str, grade: str | None) -> bool:
        return self._applications.set_grade(job_id, candidate_id, grade)


__all__ = [
    "ADMINS_FILE",
    "APPLICATIONS_FILE",
    "CANDIDATES_FILE",
    "COMPANIES_FILE",
    "EMAIL_PATTERN",
    "JOBS_FILE",
    "Repository",
]
