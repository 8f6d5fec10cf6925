"""Job match scoring and recommendation ranking."""

from .config import (
    MatchingConfig,
    SkillMatchStrategy,
    SalaryParseMode,
    ExperienceBand,
    DEFAULT_EXPERIENCE_BANDS
)
from .extractor import extract_skills, is_likely_skill
from .salary import parse_salary_range
from .factors import (
    Factor,
    SkillFactor,
    LocationFactor,
    JobTypeFactor,
    ExperienceFactor,
    SalaryFactor,
    DEFAULT_FACTORS
)
from .aggregator import calculate_job_match
from .ranker import (
    get_job_recommendations,
    merge_live_recommendation,
    summarize_recommendations
)
from .engine import JobMatcher

__all__ = [
    "MatchingConfig",
    "SkillMatchStrategy",
    "SalaryParseMode",
    "ExperienceBand",
    "DEFAULT_EXPERIENCE_BANDS",
    "extract_skills",
    "is_likely_skill",
    "parse_salary_range",
    "Factor",
    "SkillFactor",
    "LocationFactor",
    "JobTypeFactor",
    "ExperienceFactor",
    "SalaryFactor",
    "DEFAULT_FACTORS",
    "calculate_job_match",
    "get_job_recommendations",
    "merge_live_recommendation",
    "summarize_recommendations",
    "JobMatcher"
]
