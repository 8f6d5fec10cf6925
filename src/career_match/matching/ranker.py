"""Recommendation ranking over lists of job listings."""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from career_match.config import settings
from career_match.core.models import Job, MatchResult, Recommendation, UserProfile, fit_level_for
from career_match.matching.aggregator import calculate_job_match
from career_match.matching.config import MatchingConfig
from career_match.utils.logging import get_logger, log_profile_summary

logger = get_logger(__name__)

JobLike = Union[Job, Mapping[str, Any]]
ProfileLike = Union[UserProfile, Mapping[str, Any]]


def coerce_job(job: JobLike) -> Job:
    """Validate a mapping into a Job; Job instances pass through."""
    if isinstance(job, Job):
        return job
    if isinstance(job, Mapping):
        return Job.model_validate(job)
    raise TypeError(f"job must be a Job or a mapping, got {type(job).__name__}")


def coerce_profile(profile: ProfileLike) -> UserProfile:
    """Validate a mapping into a UserProfile; UserProfile instances pass through."""
    if isinstance(profile, UserProfile):
        return profile
    if isinstance(profile, Mapping):
        return UserProfile.model_validate(profile)
    raise TypeError(f"profile must be a UserProfile or a mapping, got {type(profile).__name__}")


def _annotate(job: Job, result: MatchResult) -> Recommendation:
    data = job.model_dump()
    data["match_score"] = result.score
    data["reasons_for_match"] = list(result.reasons)
    return Recommendation.model_validate(data)


def get_job_recommendations(
    jobs: Iterable[JobLike],
    profile: ProfileLike,
    limit: int = 10,
    config: Optional[MatchingConfig] = None
) -> List[Recommendation]:
    """
    Rank jobs by how well they match a profile.

    Jobs are scored independently and sorted by score, highest first. The
    sort is stable, so jobs with equal scores keep their input order. Each
    returned item is a new Recommendation; the input jobs are left as they were.

    Args:
        jobs: Job listings (Job instances or mappings)
        profile: Job seeker profile (UserProfile or mapping)
        limit: Maximum number of recommendations; zero or less returns nothing
        config: Matching configuration

    Returns:
        Top ``limit`` recommendations
    """
    if jobs is None:
        raise TypeError("jobs must be an iterable of jobs, got None")
    if profile is None:
        raise TypeError("profile must be a UserProfile or a mapping, got None")

    user_profile = coerce_profile(profile)
    listings = [coerce_job(job) for job in jobs]

    logger.info(
        "Ranking job recommendations",
        job_count=len(listings),
        limit=limit,
        **log_profile_summary(user_profile)
    )

    if limit <= 0 or not listings:
        return []

    scored = [
        (job, calculate_job_match(job, user_profile, config))
        for job in listings
    ]
    ranked = sorted(scored, key=lambda pair: pair[1].score, reverse=True)

    recommendations = [_annotate(job, result) for job, result in ranked[:limit]]

    logger.info(
        "Job recommendations ranked",
        total_jobs=len(listings),
        returned=len(recommendations),
        top_score=recommendations[0].match_score if recommendations else None
    )

    return recommendations


def merge_live_recommendation(
    current: List[Recommendation],
    new: Recommendation,
    cap: Optional[int] = None
) -> List[Recommendation]:
    """
    Merge a recommendation pushed by the live job feed into a list.

    A recommendation whose id is already present is ignored. Otherwise it
    goes to the front and the list is cut to ``cap`` entries. Returns a new
    list either way.
    """
    cap = settings.live_feed_cap if cap is None else cap

    if any(existing.id == new.id for existing in current):
        return list(current)
    return [new, *current][:max(cap, 0)]


def summarize_recommendations(recommendations: List[Recommendation]) -> Dict[str, Any]:
    """Generate summary statistics for a recommendation list."""
    fit_counts = {"excellent": 0, "good": 0, "fair": 0, "poor": 0}
    if not recommendations:
        return {
            "total_jobs": 0,
            "average_score": 0.0,
            "fit_distribution": fit_counts,
            "top_matches": []
        }

    for recommendation in recommendations:
        fit_counts[fit_level_for(recommendation.match_score)] += 1

    avg_score = sum(r.match_score for r in recommendations) / len(recommendations)

    top_matches = recommendations[:5]

    return {
        "total_jobs": len(recommendations),
        "average_score": avg_score,
        "fit_distribution": fit_counts,
        "top_matches": [
            {
                "id": r.id,
                "title": r.title,
                "company": r.company,
                "score": r.match_score
            }
            for r in top_matches
        ]
    }
