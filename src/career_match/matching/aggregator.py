"""Combine factor contributions into a single match score."""

from typing import Optional, Sequence

from career_match.core.models import Job, MatchResult, UserProfile
from career_match.matching.config import DEFAULT_CONFIG, MatchingConfig
from career_match.matching.factors import DEFAULT_FACTORS, Factor
from career_match.utils.logging import get_logger

logger = get_logger(__name__)

MAX_SCORE = 100


def calculate_job_match(
    job: Job,
    profile: UserProfile,
    config: Optional[MatchingConfig] = None,
    factors: Sequence[Factor] = DEFAULT_FACTORS
) -> MatchResult:
    """
    Score a job against a user profile.

    Every factor is evaluated in order; the points of the factors that fire
    are summed and the total saturates at 100. Reasons follow the factor
    order (skills, location, job type, experience, salary).

    Args:
        job: Job listing to score
        profile: Job seeker profile
        config: Matching configuration, defaults to the built-in vocabulary and bands
        factors: Factors to evaluate

    Returns:
        Match result with score, reasons and per-factor breakdown
    """
    if not isinstance(job, Job):
        raise TypeError(f"job must be a Job, got {type(job).__name__}")
    if not isinstance(profile, UserProfile):
        raise TypeError(f"profile must be a UserProfile, got {type(profile).__name__}")

    config = config or DEFAULT_CONFIG

    breakdown = []
    for factor in factors:
        reason = factor.evaluate(job, profile, config)
        if reason is not None:
            breakdown.append(reason)

    total = sum(reason.score for reason in breakdown)
    score = min(MAX_SCORE, round(total))

    logger.debug(
        "Job match calculated",
        job_id=job.id,
        score=score,
        factors_fired=[reason.type.value for reason in breakdown]
    )

    return MatchResult(
        score=score,
        reasons=[reason.description for reason in breakdown],
        breakdown=breakdown
    )
