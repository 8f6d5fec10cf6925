"""
Career Match: job recommendation scoring for job seekers.

This package scores job listings against a job seeker's profile using a
weighted multi-factor model (skills, location, job type, experience level
and salary range) and ranks them into recommendation lists.
"""

__version__ = "0.1.0"

from career_match.core.models import Job, UserProfile, MatchResult, Recommendation
from career_match.matching.engine import JobMatcher
from career_match.matching.extractor import extract_skills
from career_match.matching.aggregator import calculate_job_match
from career_match.matching.ranker import get_job_recommendations

__all__ = [
    "Job",
    "UserProfile",
    "MatchResult",
    "Recommendation",
    "JobMatcher",
    "extract_skills",
    "calculate_job_match",
    "get_job_recommendations",
]
