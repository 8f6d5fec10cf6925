"""Tests for logging helpers."""

import pytest

from career_match.core.models import UserProfile
from career_match.utils.logging import configure_logging, log_function_call, log_profile_summary


class TestLogging:
    """Test cases for the logging utilities."""

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("verbose")

    def test_function_call_context_hides_private_parameters(self):
        context = log_function_call("recommend", limit=5, _token="x")

        assert context == {"function": "recommend", "parameters": {"limit": 5}}

    def test_profile_summary_has_counts_only(self):
        profile = UserProfile(skills=["Python", "SQL"], experience=4, preferred_locations=["Remote"])

        summary = log_profile_summary(profile)["profile"]

        assert summary["skills_count"] == 2
        assert summary["locations_count"] == 1
        assert summary["has_salary_range"] is False
        assert "skills" not in summary
