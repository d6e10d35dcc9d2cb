"""Flat-file storage for the job fair dataset."""

from .applications import HEADER, ApplicationStore
from .loaders import AdminLoader, CandidateIndex, CandidateLoader, CompanyLoader, JobLoader
from .reader import read_header, read_records, read_rows

__all__ = [
    "HEADER",
    "AdminLoader",
    "ApplicationStore",
    "CandidateIndex",
    "CandidateLoader",
    "CompanyLoader",
    "JobLoader",
    "read_header",
    "read_records",
    "read_rows",
]
