"""Interaction rules layered on top of the repository."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable

import pendulum
import structlog

from .errors import (
    AuthenticationError,
    IneligibleError,
    InvalidGradeError,
    PermissionDenied,
    UnknownRecordError,
)
from .repository import Repository
from .schemas import Application, Candidate, Job, Session
from .schemas.config import SortKey

UNKNOWN = "(Unknown)"
UNKNOWN_COMPANY = "(Unknown Company)"

GRADE_PATTERN = re.compile(r"^$|^[ABCDF]$")


@dataclass(slots=True)
class ApplicationRow:
    """Display view of one application with references resolved."""

    job_id: str
    candidate_id: str
    candidate: str
    job: str
    company: str
    applied_at: datetime | None
    grade: str


class JobFairService:
    """Login, job listing, applying and grading on behalf of one user."""

    def __init__(
        self,
        *,
        repository: Repository,
        now_provider: Callable[[], datetime] | None = None,
        default_sort: SortKey = "title",
    ) -> None:
        self._repo = repository
        self._now_provider = now_provider or pendulum.now
        self._default_sort = default_sort
        self._logger = structlog.get_logger(__name__)

    @property
    def repository(self) -> Repository:
        return self._repo

    def login(self, email: str, role: str) -> Session:
        if not self._repo.is_valid_email(email):
            raise AuthenticationError("Invalid email format.")
        email_lower = email.lower()
        role_lower = (role or "").lower()
        if role_lower == "student":
            if not self._repo.is_candidate_email(email_lower):
                raise AuthenticationError("This email is not found in candidates.")
        elif role_lower == "admin":
            if not self._repo.is_admin_email(email_lower):
                raise AuthenticationError("This email is not authorized as admin.")
        else:
            raise AuthenticationError("Unknown role.")

        session = self._repo.set_current_user(email_lower, role_lower)
        self._logger.info("session.login", email=email_lower, role=role_lower)
        return session

    def logout(self) -> None:
        self._repo.clear_session()

    def current_candidate(self) -> Candidate:
        session = self._repo.get_current_session()
        if session is None:
            raise PermissionDenied("Log in as a student to apply.")
        if session.role != "student":
            raise PermissionDenied("Admins cannot apply.")
        candidate = self._repo.find_candidate_by_email(session.email)
        if candidate is None:
            raise UnknownRecordError("Your email is not mapped to any candidate.")
        return candidate

    def visible_jobs(self, sort_key: SortKey | None = None) -> list[Job]:
        """Open jobs not past their deadline, sorted for display."""
        today = self._today()
        jobs = [
            job
            for job in self._repo.get_all_open_jobs()
            if job.deadline is None or job.deadline >= today
        ]
        key = sort_key or self._default_sort
        if key == "company":
            jobs.sort(key=lambda job: self._company_sort_name(job))
        elif key == "deadline":
            jobs.sort(key=lambda job: (job.deadline is None, job.deadline or date.max))
        else:
            jobs.sort(key=lambda job: job.title)
        return jobs

    def company_name(self, job: Job) -> str:
        company = self._repo.find_company(job.company_id)
        return company.name if company else UNKNOWN_COMPANY

    def apply(self, job_id: str) -> Application:
        candidate = self.current_candidate()
        job = self._repo.find_job(job_id)
        if job is None:
            raise UnknownRecordError("Job not found.")
        if not self._repo.can_apply(candidate, job):
            policy = self._repo.policy_for(job)
            message = policy.message if policy else f"{job.type.value} positions are closed."
            raise IneligibleError(message)

        application = self._repo.append_application(job, candidate, self._now())
        self._logger.info("application.submitted", job_id=job.id, candidate_id=candidate.id)
        return application

    def grade(self, job_id: str, candidate_id: str, grade: str) -> None:
        session = self._repo.get_current_session()
        if session is None or session.role != "admin":
            raise PermissionDenied("Only admins can grade applications.")
        grade = grade or ""
        if not GRADE_PATTERN.match(grade):
            raise InvalidGradeError("Grade must be A, B, C, D, F or empty.")
        if not self._repo.set_grade(job_id, candidate_id, grade):
            raise UnknownRecordError(
                f"No application for job {job_id} and candidate {candidate_id}."
            )

    def application_rows(self) -> list[ApplicationRow]:
        rows: list[ApplicationRow] = []
        for application in self._repo.get_all_applications():
            candidate = self._repo.find_candidate(application.candidate_id)
            job = self._repo.find_job(application.job_id)
            company = self._repo.find_company(job.company_id) if job else None
            rows.append(
                ApplicationRow(
                    job_id=application.job_id,
                    candidate_id=application.candidate_id,
                    candidate=(
                        f"{candidate.full_name} ({application.candidate_id})"
                        if candidate
                        else UNKNOWN
                    ),
                    job=f"{job.title} ({application.job_id})" if job else UNKNOWN,
                    company=company.name if company else UNKNOWN,
                    applied_at=application.applied_at,
                    grade=application.grade,
                )
            )
        return rows

    def _company_sort_name(self, job: Job) -> str:
        company = self._repo.find_company(job.company_id)
        return company.name if company else ""

    def _now(self) -> datetime:
        now = self._now_provider()
        return datetime(
            now.year, now.month, now.day, now.hour, now.minute, now.second, now.microsecond
        )

    def _today(self) -> date:
        now = self._now_provider()
        return date(now.year, now.month, now.day)


__all__ = ["ApplicationRow", "JobFairService", "UNKNOWN", "UNKNOWN_COMPANY"]
