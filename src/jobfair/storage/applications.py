"""Application records: load, append-only writes and full rewrites."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import structlog

from ..errors import InvalidGradeValue, MalformedRecordError, NotFoundError, WriteFailure
from ..schemas import VALID_GRADES, Application, Candidate, Job
from .atomic_write import atomic_write_text
from .loaders import parse_timestamp
from .reader import DELIMITER, read_header, read_records

HEADER = DELIMITER.join(["job_id", "candidate_id", "applied_at", "grade"])


def header_has_grade(header: str | None) -> bool:
    return header is not None and "grade" in header.lower()


class ApplicationStore:
    """Owns applications.csv and the in-memory application list.

    The file may use the legacy layout ``job_id,candidate_id,applied_at``
    or the current one with a trailing ``grade`` column. Appends follow
    whatever layout the file header advertises at call time; every grade
    change rewrites the file in the current layout.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._applications: list[Application] = []
        self._logger = structlog.get_logger(__name__)

    @property
    def path(self) -> Path:
        return self._path

    def ensure_file(self) -> None:
        """Create the file with the 4-column header if it does not exist."""
        if self._path.exists():
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(HEADER + "\n", encoding="utf-8")
        except OSError as exc:
            raise WriteFailure(self._path, str(exc)) from exc
        self._logger.info("applications.created", path=str(self._path))

    def load(self) -> list[Application]:
        has_grade = header_has_grade(read_header(self._path))
        applications: list[Application] = []
        for record in read_records(self._path, skip_header=True):
            parts = record.fields
            if len(parts) < 2:
                raise MalformedRecordError(
                    f"expected at least 2 columns, got {len(parts)}",
                    path=self._path,
                    line=record.line,
                )
            try:
                applied_at = parse_timestamp(parts[2]) if len(parts) > 2 else None
            except MalformedRecordError as exc:
                raise MalformedRecordError(exc.message, path=self._path, line=record.line) from exc
            grade = parts[3] if has_grade and len(parts) > 3 else ""
            applications.append(
                Application(
                    job_id=parts[0],
                    candidate_id=parts[1],
                    applied_at=applied_at,
                    grade=grade,
                )
            )
        self._applications = applications
        return list(applications)

    def all(self) -> list[Application]:
        return list(self._applications)

    def __len__(self) -> int:
        return len(self._applications)

    def has_grade_column(self) -> bool:
        """Inspect the on-disk header now; external edits are observed."""
        return header_has_grade(read_header(self._path))

    def append(self, job: Job, candidate: Candidate, timestamp: datetime | None) -> Application:
        """Append exactly one line to the file and one record in memory."""
        applied_at = _wall_clock(timestamp)
        try:
            has_grade = self.has_grade_column()
        except NotFoundError as exc:
            raise WriteFailure(self._path, "file disappeared") from exc

        fields = [job.id, candidate.id, _format_timestamp(applied_at)]
        if has_grade:
            fields.append("")
        line = DELIMITER.join(fields) + "\n"

        try:
            prefix = "\n" if self._missing_trailing_newline() else ""
            with self._path.open("a", encoding="utf-8", newline="") as handle:
                handle.write(prefix + line)
        except OSError as exc:
            raise WriteFailure(self._path, str(exc)) from exc

        application = Application(
            job_id=job.id,
            candidate_id=candidate.id,
            applied_at=applied_at,
            grade="",
        )
        self._applications.append(application)
        self._logger.info(
            "applications.appended",
            job_id=job.id,
            candidate_id=candidate.id,
            grade_column=has_grade,
        )
        return application

    def set_grade(self, job_id: str, candidate_id: str, grade: str | None) -> bool:
        """Grade the first matching application and rewrite the whole file.

        Returns False when no application matches; the file is rewritten
        either way so a legacy file is always upgraded.
        """
        grade = grade or ""
        if grade not in VALID_GRADES:
            raise InvalidGradeValue(f"grade must be A, B, C, D, F or empty, got {grade!r}")

        matched = False
        for application in self._applications:
            if application.job_id == job_id and application.candidate_id == candidate_id:
                application.grade = grade
                matched = True
                break
        if not matched:
            self._logger.warning(
                "applications.grade_miss", job_id=job_id, candidate_id=candidate_id
            )

        self.rewrite()
        return matched

    def rewrite(self) -> None:
        lines = [HEADER]
        for application in self._applications:
            lines.append(
                DELIMITER.join(
                    [
                        application.job_id,
                        application.candidate_id,
                        _format_timestamp(application.applied_at),
                        application.grade or "",
                    ]
                )
            )
        try:
            atomic_write_text(self._path, "\n".join(lines) + "\n")
        except OSError as exc:
            raise WriteFailure(self._path, str(exc)) from exc
        self._logger.info("applications.rewritten", rows=len(self._applications))

    def _missing_trailing_newline(self) -> bool:
        with self._path.open("rb") as handle:
            handle.seek(0, 2)
            if handle.tell() == 0:
                return False
            handle.seek(-1, 2)
            return handle.read(1) != b"\n"


def _wall_clock(value: datetime | None) -> datetime | None:
    """Drop any zone information, keeping the local wall-clock reading."""
    if value is None:
        return None
    return datetime(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond,
    )


def _format_timestamp(value: datetime | None) -> str:
    return "" if value is None else value.isoformat()


__all__ = ["ApplicationStore", "HEADER", "header_has_grade"]
