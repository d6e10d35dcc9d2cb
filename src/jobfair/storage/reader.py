"""Delimited text reader for the backing files."""

from __future__ import annotations

from pathlib import Path
from typing import NamedTuple

from ..errors import MalformedRecordError, NotFoundError, ReadFailure

DELIMITER = ","


class Record(NamedTuple):
    """Split line with its 1-based position in the file."""

    line: int
    fields: list[str]


def _read_text(path: Path) -> str:
    if not path.exists():
        raise NotFoundError(path)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedRecordError(f"not valid UTF-8 ({exc.reason})", path=path) from exc
    except OSError as exc:
        raise ReadFailure(path, str(exc)) from exc


def read_records(path: Path, skip_header: bool = True) -> list[Record]:
    """Split every non-blank line of ``path`` on the delimiter.

    Lines end at ``\\n``, ``\\r\\n`` or ``\\r`` only. They are stripped
    before the blank check but fields are not trimmed, and empty fields
    are preserved. There is no quoting or escaping.
    """
    path = Path(path)
    # read_text translates \r\n and \r to \n
    lines = _read_text(path).split("\n")
    start = 1 if skip_header else 0
    records: list[Record] = []
    for idx in range(start, len(lines)):
        line = lines[idx].strip()
        if not line:
            continue
        records.append(Record(idx + 1, line.split(DELIMITER)))
    return records


def read_rows(path: Path, skip_header: bool = True) -> list[list[str]]:
    return [record.fields for record in read_records(path, skip_header)]


def read_header(path: Path) -> str | None:
    """Return the first line of ``path`` or None when the file is empty."""
    path = Path(path)
    if not path.exists():
        raise NotFoundError(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            first = handle.readline()
    except UnicodeDecodeError as exc:
        raise MalformedRecordError(f"not valid UTF-8 ({exc.reason})", path=path) from exc
    except OSError as exc:
        raise ReadFailure(path, str(exc)) from exc
    if not first:
        return None
    return first.rstrip("\r\n")


__all__ = ["DELIMITER", "Record", "read_header", "read_records", "read_rows"]
