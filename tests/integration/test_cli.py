from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from typer.testing import CliRunner

from jobfair.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_check_reports_counts(data_dir: Path, runner: CliRunner) -> None:
    result = runner.invoke(app, ["check", "--data-dir", str(data_dir)])

    assert result.exit_code == 0, result.output
    assert "2 candidates" in result.output
    assert "4 open jobs" in result.output
    assert (data_dir / "applications.csv").exists()


def test_missing_file_aborts_with_message(
    write_dataset: Callable[..., Path], runner: CliRunner
) -> None:
    data_dir = write_dataset(jobs=None)

    result = runner.invoke(app, ["check", "--data-dir", str(data_dir)])

    assert result.exit_code == 1
    assert "Cannot load database" in result.output
    assert "jobs.csv" in result.output


def test_undecodable_file_aborts_with_message(
    write_dataset: Callable[..., Path], runner: CliRunner
) -> None:
    data_dir = write_dataset()
    (data_dir / "companies.csv").write_bytes(b"\xff\xfe")

    result = runner.invoke(app, ["check", "--data-dir", str(data_dir)])

    assert result.exit_code == 1
    assert "Cannot load database" in result.output
    assert "companies.csv" in result.output


def test_jobs_lists_visible_jobs_sorted(data_dir: Path, runner: CliRunner) -> None:
    result = runner.invoke(app, ["jobs", "--data-dir", str(data_dir), "--sort", "title"])

    assert result.exit_code == 0, result.output
    lines = [line for line in result.output.splitlines() if line.startswith("2000")]
    assert [line.split("\t")[1] for line in lines] == ["Designer", "Engineer", "Intern"]
    assert "(Unknown Company)" in lines[0]
    assert "Analyst" not in result.output


def test_apply_then_grade_round_trip(data_dir: Path, runner: CliRunner) -> None:
    applied = runner.invoke(
        app,
        ["apply", "--data-dir", str(data_dir), "--email", "Jane@X.com", "--job", "20000001"],
    )
    assert applied.exit_code == 0, applied.output
    assert "Applied successfully. Candidate: Jane Doe Job: Engineer" in applied.output

    graded = runner.invoke(
        app,
        [
            "grade",
            "--data-dir",
            str(data_dir),
            "--email",
            "admin@fair.org",
            "--job",
            "20000001",
            "--candidate",
            "30000001",
            "--grade",
            "A",
        ],
    )
    assert graded.exit_code == 0, graded.output
    assert "Saved grade successfully." in graded.output

    rows = (data_dir / "applications.csv").read_text(encoding="utf-8").splitlines()
    assert rows[0] == "job_id,candidate_id,applied_at,grade"
    assert len(rows) == 2
    assert rows[1].startswith("20000001,30000001,")
    assert rows[1].endswith(",A")

    listed = runner.invoke(
        app, ["applications", "--data-dir", str(data_dir), "--email", "admin@fair.org"]
    )
    assert listed.exit_code == 0, listed.output
    assert "Jane Doe (30000001)\tEngineer (20000001)\tAcme" in listed.output


def test_apply_ineligible_exits_with_reason(data_dir: Path, runner: CliRunner) -> None:
    result = runner.invoke(
        app,
        ["apply", "--data-dir", str(data_dir), "--email", "jane@x.com", "--job", "20000002"],
    )

    assert result.exit_code == 1
    assert "CO-OP positions are only for STUDYING candidates." in result.output


def test_grade_rejects_invalid_value(data_dir: Path, runner: CliRunner) -> None:
    result = runner.invoke(
        app,
        [
            "grade",
            "--data-dir",
            str(data_dir),
            "--email",
            "admin@fair.org",
            "--job",
            "20000001",
            "--candidate",
            "30000001",
            "--grade",
            "E",
        ],
    )

    assert result.exit_code == 1
    assert "Grade must be A, B, C, D, F or empty." in result.output


def test_config_file_supplies_data_dir(data_dir: Path, tmp_path: Path, runner: CliRunner) -> None:
    config_path = tmp_path / "jobfair.yaml"
    config_path.write_text(f"data_dir: {data_dir}\nlog_level: WARNING\n", encoding="utf-8")

    result = runner.invoke(app, ["check", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    assert str(data_dir) in result.output
