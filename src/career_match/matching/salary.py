"""Salary string parsing."""

import re
from typing import List, Optional, Tuple

from career_match.matching.config import SalaryParseMode

DIGIT_RUN = re.compile(r"\d+")
# A number with optional comma grouping and an optional k/K suffix.
SALARY_NUMBER = re.compile(r"(\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?\s*([kK])?")


def _parse_thousands(salary: str) -> List[float]:
    return [int(run) * 1000 for run in DIGIT_RUN.findall(salary)]


def _parse_auto(salary: str) -> List[float]:
    values = []
    for number, suffix in SALARY_NUMBER.findall(salary):
        if suffix:
            values.append(int(number.replace(",", "")) * 1000)
        elif "," in number or len(number) >= 4:
            values.append(int(number.replace(",", "")))
        else:
            values.append(int(number) * 1000)
    return values


def parse_salary_range(
    salary: Optional[str],
    mode: SalaryParseMode = SalaryParseMode.THOUSANDS
) -> Optional[Tuple[float, float]]:
    """
    Parse a free-text salary into an absolute ``(low, high)`` range.

    In ``THOUSANDS`` mode every run of digits is read as thousands, so
    "$90k - $120k" gives (90000, 120000). Comma-grouped amounts are split
    into separate runs in this mode: "120,000" reads as 0 and 120 thousand.

    In ``AUTO`` mode comma-grouped amounts and numbers of four or more
    digits are taken as absolute, while "k"-suffixed and short numbers are
    read as thousands.

    Returns None when the string holds no number.
    """
    if not salary:
        return None

    if mode == SalaryParseMode.AUTO:
        values = _parse_auto(salary)
    else:
        values = _parse_thousands(salary)

    if not values:
        return None
    return min(values), max(values)


def ranges_overlap(low: float, high: float, other_low: float, other_high: float) -> bool:
    return not (high < other_low or low > other_high)
