"""Exception hierarchy for the job fair repository and service."""

from __future__ import annotations

from pathlib import Path


class RepositoryError(Exception):
    """Base class for failures raised by the data repository."""


class NotFoundError(RepositoryError, FileNotFoundError):
    """Raised when a required backing file is missing."""

    def __init__(self, path: Path):
        super().__init__(f"Missing file: {Path(path).absolute()}")
        self.path = Path(path)


class MalformedRecordError(RepositoryError, ValueError):
    """Raised when a record cannot be mapped to its entity."""

    def __init__(self, message: str, *, path: Path | None = None, line: int | None = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.line = line

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        location = f"{self.path.name}:{self.line}" if self.line is not None else self.path.name
        return f"{location}: {self.message}"


class ReadFailure(RepositoryError, OSError):
    """Raised when a backing file exists but cannot be read."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path


class WriteFailure(RepositoryError, OSError):
    """Raised when appending to or rewriting a backing file fails."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = path


class InvalidGradeValue(RepositoryError, ValueError):
    """Raised when a stored grade would not be empty or one of A, B, C, D, F."""


class JobFairError(Exception):
    """Base class for interaction-level failures reported to the user."""


class AuthenticationError(JobFairError):
    """Login rejected."""


class PermissionDenied(JobFairError):
    """The current session is not allowed to perform the operation."""


class IneligibleError(JobFairError):
    """The candidate does not satisfy the job's eligibility policy."""


class InvalidGradeError(JobFairError, ValueError):
    """Grade is not empty or one of A, B, C, D, F."""


class UnknownRecordError(JobFairError, LookupError):
    """Referenced job, candidate or application does not exist."""


__all__ = [
    "RepositoryError",
    "NotFoundError",
    "MalformedRecordError",
    "ReadFailure",
    "WriteFailure",
    "InvalidGradeValue",
    "JobFairError",
    "AuthenticationError",
    "PermissionDenied",
    "IneligibleError",
    "InvalidGradeError",
    "UnknownRecordError",
]
