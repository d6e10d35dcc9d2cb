"""Loaders mapping delimited rows to typed entities."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Callable, TypeVar

import pendulum
from pydantic import ValidationError

from ..errors import MalformedRecordError
from ..schemas import Candidate, CandidateStatus, Company, Job, JobType
from .reader import Record, read_records

EnumT = TypeVar("EnumT", JobType, CandidateStatus)

LOCAL_DATETIME_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2}(\.\d{1,6})?)?")


def parse_deadline(value: str) -> date | None:
    """Parse an ISO calendar date; blank means no deadline."""
    if not value.strip():
        return None
    try:
        parsed = pendulum.parse(value, exact=True)
    except (ValueError, pendulum.parsing.exceptions.ParserError) as exc:
        raise MalformedRecordError(f"invalid deadline {value!r}") from exc
    if isinstance(parsed, datetime) or not isinstance(parsed, date):
        raise MalformedRecordError(f"invalid deadline {value!r}")
    return date(parsed.year, parsed.month, parsed.day)


def parse_timestamp(value: str) -> datetime | None:
    """Parse an extended ISO-8601 local date-time; blank means unknown.

    Only ``YYYY-MM-DDTHH:MM[:SS[.ffffff]]`` is accepted. Bare dates, UTC
    offsets and the basic format are rejected so a rewrite reproduces the
    stored text.
    """
    if not value.strip():
        return None
    if not LOCAL_DATETIME_PATTERN.fullmatch(value):
        raise MalformedRecordError(f"invalid timestamp {value!r}")
    try:
        parsed = pendulum.parse(value, exact=True)
    except (ValueError, pendulum.parsing.exceptions.ParserError) as exc:
        raise MalformedRecordError(f"invalid timestamp {value!r}") from exc
    if not isinstance(parsed, datetime):
        raise MalformedRecordError(f"invalid timestamp {value!r}")
    return datetime(
        parsed.year,
        parsed.month,
        parsed.day,
        parsed.hour,
        parsed.minute,
        parsed.second,
        parsed.microsecond,
    )


def parse_enum(enum_cls: type[EnumT], value: str) -> EnumT:
    try:
        return enum_cls(value.upper())
    except ValueError as exc:
        allowed = "|".join(member.value for member in enum_cls)
        raise MalformedRecordError(f"expected {allowed}, got {value!r}") from exc


class RecordLoader:
    """Base loader enforcing a minimum column count per row."""

    columns: int = 0

    def _records(self, path: Path) -> list[Record]:
        return read_records(path, skip_header=True)

    def _build(self, path: Path, record: Record, factory: Callable[[list[str]], object]):
        if len(record.fields) < self.columns:
            raise MalformedRecordError(
                f"expected {self.columns} columns, got {len(record.fields)}",
                path=path,
                line=record.line,
            )
        try:
            return factory(record.fields)
        except MalformedRecordError as exc:
            raise MalformedRecordError(exc.message, path=path, line=record.line) from exc
        except ValidationError as exc:
            raise MalformedRecordError(str(exc), path=path, line=record.line) from exc


class CompanyLoader(RecordLoader):
    """companies.csv: company_id,name,email,location"""

    columns = 4

    def load(self, path: Path) -> dict[str, Company]:
        companies: dict[str, Company] = {}
        for record in self._records(path):
            company = self._build(path, record, self._company)
            companies[company.id] = company
        return companies

    @staticmethod
    def _company(fields: list[str]) -> Company:
        return Company(id=fields[0], name=fields[1], email=fields[2], location=fields[3])


class JobLoader(RecordLoader):
    """jobs.csv: job_id,title,description,company_id,deadline,open,type"""

    columns = 7

    def load(self, path: Path) -> dict[str, Job]:
        jobs: dict[str, Job] = {}
        for record in self._records(path):
            job = self._build(path, record, self._job)
            jobs[job.id] = job
        return jobs

    @staticmethod
    def _job(fields: list[str]) -> Job:
        return Job(
            id=fields[0],
            title=fields[1],
            description=fields[2],
            company_id=fields[3],
            deadline=parse_deadline(fields[4]),
            open=fields[5].lower() == "true",
            type=parse_enum(JobType, fields[6]),
        )


@dataclass
class CandidateIndex:
    """Candidates by id plus the lowercase email lookups used for login."""

    by_id: dict[str, Candidate] = field(default_factory=dict)
    emails: set[str] = field(default_factory=set)
    by_email: dict[str, Candidate] = field(default_factory=dict)

    def add(self, candidate: Candidate) -> None:
        self.by_id[candidate.id] = candidate
        lowered = candidate.email.lower()
        self.emails.add(lowered)
        self.by_email[lowered] = candidate


class CandidateLoader(RecordLoader):
    """candidates.csv: candidate_id,first_name,last_name,email,status"""

    columns = 5

    def load(self, path: Path) -> CandidateIndex:
        index = CandidateIndex()
        for record in self._records(path):
            index.add(self._build(path, record, self._candidate))
        return index

    @staticmethod
    def _candidate(fields: list[str]) -> Candidate:
        return Candidate(
            id=fields[0],
            first_name=fields[1],
            last_name=fields[2],
            email=fields[3],
            status=parse_enum(CandidateStatus, fields[4]),
        )


class AdminLoader(RecordLoader):
    """admins.csv: email. The file is optional."""

    columns = 1

    def load(self, path: Path) -> set[str]:
        if not Path(path).exists():
            return set()
        emails: set[str] = set()
        for record in self._records(path):
            email = record.fields[0].strip()
            if email:
                emails.add(email.lower())
        return emails


__all__ = [
    "AdminLoader",
    "CandidateIndex",
    "CandidateLoader",
    "CompanyLoader",
    "JobLoader",
    "RecordLoader",
    "parse_deadline",
    "parse_enum",
    "parse_timestamp",
]
