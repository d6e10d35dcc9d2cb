from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

COMPANIES = """company_id,name,email,location
10000001,Acme,hr@acme.com,Bangkok
10000002,Globex,jobs@globex.com,Chiang Mai
"""

JOBS = """job_id,title,description,company_id,deadline,open,type
20000001,Engineer,Build things,10000001,2030-01-01,true,REGULAR
20000002,Intern,Learn things,10000002,,true,coop
20000003,Analyst,Expired post,10000001,2020-01-01,true,REGULAR
20000004,Archivist,Not open,10000001,,false,COOP
20000005,Designer,Orphan company,99999999,2031-06-30,TRUE,REGULAR
"""

CANDIDATES = """candidate_id,first_name,last_name,email,status
30000001,Jane,Doe,jane@x.com,GRADUATED
30000002,John,Roe,John.Roe@Uni.edu,studying
"""

ADMINS = """email
Admin@Fair.org
"""


@pytest.fixture
def write_dataset(tmp_path: Path) -> Callable[..., Path]:
    def _write(
        *,
        companies: str | None = COMPANIES,
        jobs: str | None = JOBS,
        candidates: str | None = CANDIDATES,
        admins: str | None = ADMINS,
        applications: str | None = None,
    ) -> Path:
        root = tmp_path / "database"
        root.mkdir(exist_ok=True)
        files = {
            "companies.csv": companies,
            "jobs.csv": jobs,
            "candidates.csv": candidates,
            "admins.csv": admins,
            "applications.csv": applications,
        }
        for name, content in files.items():
            if content is not None:
                (root / name).write_text(content, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def data_dir(write_dataset: Callable[..., Path]) -> Path:
    return write_dataset()
