"""Independent scoring factors comparing one job attribute with one preference."""

from typing import List, Optional, Tuple, Union

from career_match.core.models import FactorType, Job, MatchReason, UserProfile
from career_match.matching.config import MatchingConfig
from career_match.matching.extractor import extract_skills
from career_match.matching.salary import parse_salary_range, ranges_overlap


def _format_years(years: Union[int, float]) -> str:
    if isinstance(years, float) and years.is_integer():
        return str(int(years))
    return str(years)


class Factor:
    """
    Base class for a scoring factor.

    A factor returns a MatchReason when it fires and None otherwise. Factors
    never raise for missing or unparseable job data.
    """

    type: FactorType
    weight: int

    def evaluate(
        self,
        job: Job,
        profile: UserProfile,
        config: MatchingConfig
    ) -> Optional[MatchReason]:
        raise NotImplementedError

    def _reason(self, description: str, score: Optional[int] = None) -> MatchReason:
        return MatchReason(
            type=self.type,
            score=self.weight if score is None else score,
            description=description
        )


class SkillFactor(Factor):
    """8 points for every profile skill overlapping an extracted job skill."""

    type = FactorType.SKILL
    weight = 8

    def matching_skills(
        self,
        job: Job,
        profile: UserProfile,
        config: MatchingConfig
    ) -> List[str]:
        job_skills = [skill.lower() for skill in extract_skills(job, config)]
        matches = []
        for skill in profile.skills:
            skill_lower = skill.lower()
            if any(skill_lower in job_skill or job_skill in skill_lower for job_skill in job_skills):
                matches.append(skill)
        return matches

    def evaluate(
        self,
        job: Job,
        profile: UserProfile,
        config: MatchingConfig
    ) -> Optional[MatchReason]:
        matches = self.matching_skills(job, profile, config)
        if not matches:
            return None
        return self._reason(
            f"Matching skills: {', '.join(matches)}",
            score=len(matches) * self.weight
        )


class LocationFactor(Factor):
    """Fires when a preferred location appears in the job location."""

    type = FactorType.LOCATION
    weight = 20

    def evaluate(
        self,
        job: Job,
        profile: UserProfile,
        config: MatchingConfig
    ) -> Optional[MatchReason]:
        job_location = job.location.lower()
        for location in profile.preferred_locations:
            preferred = location.lower()
            if preferred in job_location or (preferred == "remote" and "remote" in job_location):
                return self._reason(f"Location matches your preference: {job.location}")
        return None


class JobTypeFactor(Factor):
    """Fires when the job type is exactly one of the preferred types."""

    type = FactorType.JOB_TYPE
    weight = 15

    def evaluate(
        self,
        job: Job,
        profile: UserProfile,
        config: MatchingConfig
    ) -> Optional[MatchReason]:
        if job.type in profile.preferred_job_types:
            return self._reason(f"Job type matches your preference: {job.type}")
        return None


class ExperienceFactor(Factor):
    """Fires when the profile's years fall inside the band of the job's level."""

    type = FactorType.EXPERIENCE
    weight = 15

    def evaluate(
        self,
        job: Job,
        profile: UserProfile,
        config: MatchingConfig
    ) -> Optional[MatchReason]:
        band = config.band_for(job.experience_level)
        if band is None or not band.contains(profile.experience):
            return None
        return self._reason(
            f"Your experience ({_format_years(profile.experience)} years) "
            f"matches the {job.experience_level} position requirements"
        )


class SalaryFactor(Factor):
    """Fires when the job's salary range overlaps the preferred range."""

    type = FactorType.SALARY
    weight = 10

    def evaluate(
        self,
        job: Job,
        profile: UserProfile,
        config: MatchingConfig
    ) -> Optional[MatchReason]:
        preferred = profile.preferred_salary_range
        if preferred is None or not job.salary:
            return None

        parsed = parse_salary_range(job.salary, config.salary_parse_mode)
        if parsed is None:
            return None

        job_min, job_max = parsed
        if not ranges_overlap(job_min, job_max, preferred.min, preferred.max):
            return None
        return self._reason(f"Salary range ({job.salary}) aligns with your preferences")


# Evaluation order determines the order of reasons.
DEFAULT_FACTORS: Tuple[Factor, ...] = (
    SkillFactor(),
    LocationFactor(),
    JobTypeFactor(),
    ExperienceFactor(),
    SalaryFactor(),
)
