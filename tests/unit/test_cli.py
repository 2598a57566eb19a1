from __future__ import annotations

import json

import pytest

HISTORY_YAML = """
- employer: Acme
  title: Backend Engineer
  start_date: 2020-01-01
  end_date: 2022-06-30
  description: Built billing APIs.
  skills: Python, SQL, Docker
- employer: Globex
  title: Data Analyst
  start_date: 2018-03-01
  description: Reporting dashboards.
  skills: SQL, Excel
""".lstrip()

JOB_YAML = """
title: Platform Engineer
company: Initech
required_skills: Python, SQL, AWS, Docker
""".lstrip()


@pytest.fixture
def input_files(tmp_path):
    history = tmp_path / "history.yaml"
    history.write_text(HISTORY_YAML, encoding="utf-8")
    job = tmp_path / "job.yaml"
    job.write_text(JOB_YAML, encoding="utf-8")
    return job, history


def test_cli_match_prints_ranked_report(input_files, capsys) -> None:
    from resume_matcher.__main__ import main

    job, history = input_files

    exit_code = main(["match", "--job", str(job), "--history", str(history)])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["job"]["employer"] == "Initech"
    assert [row["match_percentage"] for row in payload["matches"]] == [75.0, 25.0]
    assert payload["matches"][0]["matched_skills"] == ["docker", "python", "sql"]


def test_cli_match_min_percentage_and_out_file(input_files, tmp_path) -> None:
    from resume_matcher.__main__ import main

    job, history = input_files
    out = tmp_path / "reports" / "match.json"

    exit_code = main(
        [
            "match",
            "--job",
            str(job),
            "--history",
            str(history),
            "--min-percentage",
            "50",
            "--out",
            str(out),
        ]
    )

    assert exit_code == 0
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert [row["employer"] for row in payload["matches"]] == ["Acme"]


def test_cli_relative_out_resolves_under_output_dir(
    input_files, tmp_path, monkeypatch
) -> None:
    from resume_matcher.__main__ import main

    job, history = input_files
    output_dir = tmp_path / "artifacts"
    monkeypatch.setenv("OUTPUT_DIR", str(output_dir))

    match_code = main(
        ["match", "--job", str(job), "--history", str(history), "--out", "report.json"]
    )
    resume_code = main(
        ["resume", "--job", str(job), "--history", str(history), "--out", "cv/resume.txt"]
    )

    assert match_code == 0
    assert resume_code == 0
    payload = json.loads((output_dir / "report.json").read_text(encoding="utf-8"))
    assert payload["matches"]
    assert (output_dir / "cv" / "resume.txt").read_text(encoding="utf-8").strip()


def test_cli_profile_and_skills(input_files, capsys) -> None:
    from resume_matcher.__main__ import main

    _job, history = input_files

    assert main(["profile", "--history", str(history)]) == 0
    profile = json.loads(capsys.readouterr().out)
    assert [group["employer"] for group in profile["groups"]] == ["Acme", "Globex"]

    assert main(["skills", "--history", str(history)]) == 0
    counts = json.loads(capsys.readouterr().out)
    assert counts["sql"] == 2
    assert counts["python"] == 1


def test_cli_resume_prints_text(input_files, capsys) -> None:
    from resume_matcher.__main__ import main

    job, history = input_files

    assert main(["resume", "--job", str(job), "--history", str(history)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Resume for Platform Engineer at Initech")
    assert "Data Analyst at Globex\n2018-03-01 - Present" in out


def test_cli_analyze_uses_llm(input_files, capsys, monkeypatch) -> None:
    from resume_matcher.__main__ import main

    job, history = input_files
    monkeypatch.setattr(
        "resume_matcher.matching.llm.MatchAnalysisLLM.complete",
        lambda self, *, prompt, system_prompt=None: "70% match",
    )

    assert main(["analyze", "--job", str(job), "--history", str(history)]) == 0
    assert capsys.readouterr().out.strip() == "70% match"


def test_cli_analyze_llm_failure_returns_error(input_files, capsys, monkeypatch) -> None:
    from resume_matcher.__main__ import main
    from resume_matcher.matching.llm import MatchAnalysisLLMError

    job, history = input_files

    def _fail(self, *, prompt, system_prompt=None):
        raise MatchAnalysisLLMError("provider unavailable")

    monkeypatch.setattr("resume_matcher.matching.llm.MatchAnalysisLLM.complete", _fail)

    assert main(["analyze", "--job", str(job), "--history", str(history)]) == 1
    assert "provider unavailable" in capsys.readouterr().err


def test_cli_missing_history_file_errors_cleanly(tmp_path, capsys) -> None:
    from resume_matcher.__main__ import main

    exit_code = main(["profile", "--history", str(tmp_path / "missing.yaml")])

    assert exit_code == 1
    assert "File not found" in capsys.readouterr().err


def test_cli_entry_without_skills_errors_cleanly(tmp_path, capsys) -> None:
    from resume_matcher.__main__ import main

    history = tmp_path / "history.yaml"
    history.write_text(
        "- {employer: Acme, title: Engineer, start_date: 2020-01-01, skills: ''}\n",
        encoding="utf-8",
    )

    assert main(["skills", "--history", str(history)]) == 1
    assert "at least one skill" in capsys.readouterr().err


def test_cli_without_mode_prints_help() -> None:
    from resume_matcher.__main__ import main

    assert main([]) == 1


def test_cli_parser_rejects_out_of_range_percentage() -> None:
    from resume_matcher.__main__ import create_parser

    parser = create_parser()

    with pytest.raises(SystemExit):
        parser.parse_args(
            ["match", "--job", "job.yaml", "--history", "h.yaml", "--min-percentage", "150"]
        )
