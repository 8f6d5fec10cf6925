"""Stateless matching service bound to one configuration."""

from typing import Any, Dict, Iterable, List, Optional

from career_match.config import settings
from career_match.core.models import MatchResult, Recommendation
from career_match.matching.aggregator import calculate_job_match
from career_match.matching.config import MatchingConfig
from career_match.matching.extractor import extract_skills
from career_match.matching.ranker import (
    JobLike,
    ProfileLike,
    coerce_job,
    coerce_profile,
    get_job_recommendations,
    merge_live_recommendation,
    summarize_recommendations
)
from career_match.utils.logging import get_logger, log_function_call

logger = get_logger(__name__)


class JobMatcher:
    """Matches user profiles against job listings.

    The matcher keeps no state between calls besides its immutable
    configuration, so one instance may serve concurrent callers.
    """

    def __init__(self, config: Optional[MatchingConfig] = None):
        self.config = config or MatchingConfig.from_settings()
        self.logger = logger.bind(component="job_matcher")

    def extract_skills(self, job: JobLike) -> List[str]:
        """Extract candidate skills from a job listing."""
        return extract_skills(coerce_job(job), self.config)

    def match_job(self, job: JobLike, profile: ProfileLike) -> MatchResult:
        """Score one job against a profile."""
        if profile is None:
            raise TypeError("profile must be a UserProfile or a mapping, got None")
        listing = coerce_job(job)
        result = calculate_job_match(listing, coerce_profile(profile), self.config)

        self.logger.info(
            "Job matched against profile",
            job_id=listing.id,
            job_title=listing.title,
            score=result.score,
            fit_level=result.fit_level
        )
        return result

    def recommend(
        self,
        jobs: Iterable[JobLike],
        profile: ProfileLike,
        limit: Optional[int] = None
    ) -> List[Recommendation]:
        """Rank jobs for a profile, returning at most ``limit`` recommendations."""
        limit = settings.default_limit if limit is None else limit
        self.logger.debug(
            "Recommendation request",
            **log_function_call(
                "recommend",
                limit=limit,
                salary_parse_mode=self.config.salary_parse_mode.value
            )
        )
        return get_job_recommendations(jobs, profile, limit=limit, config=self.config)

    def merge_live(
        self,
        current: List[Recommendation],
        new: Recommendation,
        cap: Optional[int] = None
    ) -> List[Recommendation]:
        """Merge a live-feed recommendation into the current list."""
        if any(existing.id == new.id for existing in current):
            self.logger.debug("Live recommendation already present", job_id=new.id)
        return merge_live_recommendation(current, new, cap)

    def summarize(self, recommendations: List[Recommendation]) -> Dict[str, Any]:
        """Summarize a recommendation list."""
        return summarize_recommendations(recommendations)
