"""Core data models for Career Match."""

from enum import Enum
from typing import List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class FactorType(str, Enum):
    """Dimensions a job is compared on, in evaluation order."""
    SKILL = "skill"
    LOCATION = "location"
    JOB_TYPE = "jobType"
    EXPERIENCE = "experience"
    SALARY = "salary"


class SalaryRange(BaseModel):
    """Preferred salary band in absolute currency units.

    The bounds are taken as given; an inverted band only narrows what overlaps.
    """
    min: float = Field(..., ge=0, description="Lower bound of the band")
    max: float = Field(..., ge=0, description="Upper bound of the band")


class Job(BaseModel):
    """Job listing as delivered by the job feed.

    Unknown fields are kept so that recommendations remain full copies of
    the listing they were built from.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Union[int, str] = Field(..., description="Job identifier")
    title: str = Field("", description="Job title")
    company: Optional[str] = Field(None, description="Hiring company")
    description: str = Field("", description="Free-text job description")
    location: str = Field("", description="Free-text location, may mention Remote")
    type: str = Field(
        "",
        validation_alias=AliasChoices("type", "job_type"),
        description="Job type tag (Full-time, Part-time, Contract, ...)"
    )
    requirements: List[str] = Field(default_factory=list, description="Requirement lines")
    experience_level: str = Field("", description="Entry, Mid-level, Senior, Lead or Executive")
    salary: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("salary", "salary_range"),
        description="Free-text salary, e.g. '$90k - $120k'"
    )
    posted_date: Optional[str] = Field(None, description="Posting date as sent by the feed")


class UserProfile(BaseModel):
    """Job seeker profile and preferences."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[Union[int, str]] = Field(None, description="User identifier")
    skills: List[str] = Field(default_factory=list, description="Skills, matched case-insensitively")
    experience: float = Field(0, ge=0, description="Years of experience")
    preferred_locations: List[str] = Field(
        default_factory=list, alias="preferredLocations", description="Preferred locations"
    )
    preferred_job_types: List[str] = Field(
        default_factory=list, alias="preferredJobTypes", description="Preferred job type tags"
    )
    preferred_salary_range: Optional[SalaryRange] = Field(
        None, alias="preferredSalaryRange", description="Preferred salary band"
    )
    industries: List[str] = Field(default_factory=list, description="Preferred industries")
    job_titles: List[str] = Field(default_factory=list, alias="jobTitles", description="Target job titles")


def fit_level_for(score: int) -> str:
    """Coarse fit band for a match score."""
    if score >= 80:
        return "excellent"
    elif score >= 60:
        return "good"
    elif score >= 40:
        return "fair"
    return "poor"


class MatchReason(BaseModel):
    """Contribution of one factor to a match score."""
    type: FactorType = Field(..., description="Factor that fired")
    score: int = Field(..., ge=0, description="Points contributed")
    description: str = Field(..., description="Human-readable explanation")


class MatchResult(BaseModel):
    """Score and explanation for one job/profile pair."""
    score: int = Field(..., ge=0, le=100, description="Match score (0-100)")
    reasons: List[str] = Field(default_factory=list, description="Reasons in factor order")
    breakdown: List[MatchReason] = Field(default_factory=list, description="Per-factor contributions")

    @property
    def fit_level(self) -> str:
        return fit_level_for(self.score)


class Recommendation(Job):
    """A job listing annotated with its match against a profile."""
    match_score: int = Field(..., ge=0, le=100, description="Match score (0-100)")
    reasons_for_match: List[str] = Field(default_factory=list, description="Why the job matched")
