"""Tunable inputs for the match scoring heuristics."""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from career_match.config import DEFAULT_SKILL_VOCABULARY, Settings, settings as default_settings


class SkillMatchStrategy(str, Enum):
    """How words are compared against the skill vocabulary.

    Only the substring heuristic is implemented: a word counts as a skill
    when it contains, or is contained by, a vocabulary entry.
    """
    SUBSTRING = "substring"


class SalaryParseMode(str, Enum):
    """How numbers found in a salary string are interpreted."""
    THOUSANDS = "thousands"  # every number is in k, "$90k - $120k"
    AUTO = "auto"            # "120,000" and 4+ digit numbers are absolute


class ExperienceBand(BaseModel):
    """Inclusive range of years expected for an experience level."""
    model_config = ConfigDict(frozen=True)

    level: str
    min_years: float
    max_years: float

    def contains(self, years: float) -> bool:
        return self.min_years <= years <= self.max_years


# Lead and Executive overlap at 10-12 years; both bands accept those values.
DEFAULT_EXPERIENCE_BANDS: Tuple[ExperienceBand, ...] = (
    ExperienceBand(level="Entry", min_years=0, max_years=2),
    ExperienceBand(level="Mid-level", min_years=2, max_years=5),
    ExperienceBand(level="Senior", min_years=5, max_years=8),
    ExperienceBand(level="Lead", min_years=8, max_years=12),
    ExperienceBand(level="Executive", min_years=10, max_years=99),
)


class MatchingConfig(BaseModel):
    """Immutable configuration shared by the extractor and the factors."""
    model_config = ConfigDict(frozen=True)

    skill_vocabulary: Tuple[str, ...] = Field(
        default=tuple(DEFAULT_SKILL_VOCABULARY),
        description="Reference vocabulary of technical skill tokens"
    )
    skill_strategy: SkillMatchStrategy = Field(
        SkillMatchStrategy.SUBSTRING, description="Skill spotting strategy"
    )
    min_partial_token_length: int = Field(
        1, ge=1, description="Shortest word that may match by being part of a vocabulary entry"
    )
    salary_parse_mode: SalaryParseMode = Field(
        SalaryParseMode.THOUSANDS, description="Salary number interpretation"
    )
    experience_bands: Tuple[ExperienceBand, ...] = Field(
        default=DEFAULT_EXPERIENCE_BANDS, description="Experience bands in declared order"
    )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "MatchingConfig":
        """Build a matching config from application settings."""
        settings = settings or default_settings
        return cls(
            skill_vocabulary=tuple(settings.skill_vocabulary),
            min_partial_token_length=settings.min_partial_token_length,
            salary_parse_mode=SalaryParseMode(settings.salary_parse_mode.lower()),
        )

    def band_for(self, level: str) -> Optional[ExperienceBand]:
        """Return the first declared band named ``level``, if any."""
        for band in self.experience_bands:
            if band.level == level:
                return band
        return None


DEFAULT_CONFIG = MatchingConfig()
