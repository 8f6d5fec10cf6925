"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from career_match import __version__
from career_match.cli import app


runner = CliRunner()

JOBS = [
    {
        "id": 1,
        "title": "Data Clerk",
        "location": "Berlin",
        "type": "Contract",
        "experience_level": "Entry",
        "description": "Spreadsheets",
    },
    {
        "id": 2,
        "title": "Frontend Dev",
        "location": "Remote",
        "type": "Full-time",
        "experience_level": "Senior",
        "salary": "$120k - $150k",
        "requirements": ["5+ years of React experience", "Strong TypeScript skills"],
        "description": "",
    },
]

PROFILE = {
    "skills": ["React", "TypeScript"],
    "experience": 6,
    "preferredLocations": ["remote"],
    "preferredJobTypes": ["Full-time"],
    "preferredSalaryRange": {"min": 100000, "max": 160000},
}


@pytest.fixture
def input_files(tmp_path):
    jobs_file = tmp_path / "jobs.json"
    profile_file = tmp_path / "profile.json"
    jobs_file.write_text(json.dumps(JOBS), encoding="utf-8")
    profile_file.write_text(json.dumps(PROFILE), encoding="utf-8")
    return jobs_file, profile_file


class TestCli:
    """Test cases for the career-match CLI."""

    def test_recommend_json(self, input_files):
        jobs_file, profile_file = input_files

        result = runner.invoke(
            app, ["--log-level", "WARNING", "recommend", str(jobs_file), str(profile_file), "--json"]
        )

        assert result.exit_code == 0
        recommendations = json.loads(result.stdout)
        assert [r["id"] for r in recommendations] == [2, 1]
        assert recommendations[0]["match_score"] == 76
        assert len(recommendations[0]["reasons_for_match"]) == 5

    def test_recommend_limit(self, input_files):
        jobs_file, profile_file = input_files

        result = runner.invoke(
            app,
            ["--log-level", "WARNING", "recommend", str(jobs_file), str(profile_file), "--limit", "1", "--json"]
        )

        assert result.exit_code == 0
        assert [r["id"] for r in json.loads(result.stdout)] == [2]

    def test_recommend_table(self, input_files):
        jobs_file, profile_file = input_files

        result = runner.invoke(app, ["--log-level", "WARNING", "recommend", str(jobs_file), str(profile_file)])

        assert result.exit_code == 0
        assert "Job Recommendations" in result.stdout
        assert "76" in result.stdout

    def test_recommend_accepts_wrapped_job_list(self, tmp_path, input_files):
        _, profile_file = input_files
        wrapped = tmp_path / "wrapped.json"
        wrapped.write_text(json.dumps({"jobs": JOBS}), encoding="utf-8")

        result = runner.invoke(
            app, ["--log-level", "WARNING", "recommend", str(wrapped), str(profile_file), "--json"]
        )

        assert result.exit_code == 0
        assert len(json.loads(result.stdout)) == 2

    def test_match(self, input_files):
        jobs_file, profile_file = input_files

        result = runner.invoke(
            app, ["--log-level", "WARNING", "match", str(jobs_file), str(profile_file), "--job-id", "2"]
        )

        assert result.exit_code == 0
        assert "76" in result.stdout
        assert "skill" in result.stdout

    def test_match_unknown_job(self, input_files):
        jobs_file, profile_file = input_files

        result = runner.invoke(
            app, ["--log-level", "WARNING", "match", str(jobs_file), str(profile_file), "--job-id", "99"]
        )

        assert result.exit_code == 1

    def test_skills(self, input_files):
        jobs_file, _ = input_files

        result = runner.invoke(app, ["--log-level", "WARNING", "skills", str(jobs_file)])

        assert result.exit_code == 0
        assert "React" in result.stdout

    def test_missing_file(self, tmp_path, input_files):
        _, profile_file = input_files

        result = runner.invoke(
            app, ["--log-level", "WARNING", "recommend", str(tmp_path / "missing.json"), str(profile_file)]
        )

        assert result.exit_code == 1

    def test_invalid_profile(self, tmp_path, input_files):
        jobs_file, _ = input_files
        bad_profile = tmp_path / "bad.json"
        bad_profile.write_text(json.dumps({"experience": -3}), encoding="utf-8")

        result = runner.invoke(
            app, ["--log-level", "WARNING", "recommend", str(jobs_file), str(bad_profile)]
        )

        assert result.exit_code == 1

    def test_jobs_file_must_be_a_list(self, tmp_path, input_files):
        _, profile_file = input_files
        not_a_list = tmp_path / "jobs.json"
        not_a_list.write_text(json.dumps({"id": 1}), encoding="utf-8")

        result = runner.invoke(
            app, ["--log-level", "WARNING", "recommend", str(not_a_list), str(profile_file)]
        )

        assert result.exit_code == 1

    def test_unknown_log_level_is_a_usage_error(self):
        result = runner.invoke(app, ["--log-level", "LOUD", "version"])

        assert result.exit_code == 2
        assert not isinstance(result.exception, ValueError)

    def test_log_level_is_case_insensitive(self):
        result = runner.invoke(app, ["--log-level", "warning", "version"])

        assert result.exit_code == 0

    def test_config(self):
        result = runner.invoke(app, ["--log-level", "WARNING", "config"])

        assert result.exit_code == 0
        assert "Salary Parse Mode" in result.stdout

    def test_version(self):
        result = runner.invoke(app, ["--log-level", "WARNING", "version"])

        assert result.exit_code == 0
        assert f"Career Match v{__version__}" in result.stdout
