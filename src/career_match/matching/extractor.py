"""Skill extraction from job listing text."""

import re
from typing import Iterable, List, Optional

from career_match.core.models import Job
from career_match.matching.config import DEFAULT_CONFIG, MatchingConfig, SkillMatchStrategy
from career_match.utils.logging import get_logger

logger = get_logger(__name__)

WORD_SEPARATOR = re.compile(r"[\s,]+")


def _split_words(text: str) -> List[str]:
    return [word.strip() for word in WORD_SEPARATOR.split(text or "") if word.strip()]


def is_likely_skill(word: str, config: Optional[MatchingConfig] = None) -> bool:
    """
    Decide whether a word looks like a technical skill.

    This is a substring heuristic, not an exact lookup: "React.js" counts
    because it contains "react". A word that is part of a vocabulary entry
    counts too, so "Go" (in "mongodb") and "C" (in "c++") are skills. Raising
    ``min_partial_token_length`` drops such words below that length.
    """
    config = config or DEFAULT_CONFIG
    if config.skill_strategy != SkillMatchStrategy.SUBSTRING:
        raise ValueError(f"Unsupported skill match strategy: {config.skill_strategy}")

    word_lower = word.lower()
    if not word_lower:
        return False

    for entry in config.skill_vocabulary:
        entry_lower = entry.lower()
        if not entry_lower:
            continue
        if entry_lower in word_lower:
            return True
        if len(word_lower) >= config.min_partial_token_length and word_lower in entry_lower:
            return True
    return False


def _collect(texts: Iterable[str], config: MatchingConfig, seen: dict) -> None:
    for text in texts:
        for word in _split_words(text):
            if word not in seen and is_likely_skill(word, config):
                seen[word] = None


def extract_skills(job: Job, config: Optional[MatchingConfig] = None) -> List[str]:
    """
    Extract candidate skills from a job's requirements and description.

    Args:
        job: Job listing to scan
        config: Matching configuration carrying the skill vocabulary

    Returns:
        Distinct skill words in first-seen order, requirements before description
    """
    config = config or DEFAULT_CONFIG

    seen: dict = {}
    _collect(job.requirements, config, seen)
    _collect([job.description], config, seen)

    skills = list(seen)
    logger.debug("Extracted job skills", job_id=job.id, skills_count=len(skills))
    return skills
