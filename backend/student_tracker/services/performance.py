"""
Performance Service - derived metrics for a student's three assessments.

Each assessment is marked out of 20, so the maximum total is 60:
1. total = assessment1 + assessment2 + assessment3
2. average = total / 3
3. percentage = (total / 60) * 100   (no rounding)
4. performance_level = band of percentage:
   < 50 -> Needs Support, <= 55 -> Satisfactory, <= 75 -> Good, else Excellent
"""

from typing import NamedTuple

ASSESSMENT_COUNT = 3
MAX_ASSESSMENT_MARK = 20
MAX_TOTAL = ASSESSMENT_COUNT * MAX_ASSESSMENT_MARK

NEEDS_SUPPORT = "Needs Support"
SATISFACTORY = "Satisfactory"
GOOD = "Good"
EXCELLENT = "Excellent"


class PerformanceMetrics(NamedTuple):
    total: int
    average: float
    percentage: float
    performance_level: str


def compute_total(assessment1: int, assessment2: int, assessment3: int) -> int:
    return assessment1 + assessment2 + assessment3


def compute_average(total: int) -> float:
    return total / float(ASSESSMENT_COUNT)


def compute_percentage(total: int) -> float:
    return (total / float(MAX_TOTAL)) * 100


def performance_level(percentage: float) -> str:
    """Map a percentage onto its performance band."""
    if percentage < 50:
        return NEEDS_SUPPORT
    if percentage <= 55:
        return SATISFACTORY
    if percentage <= 75:
        return GOOD
    return EXCELLENT


def compute_metrics(assessment1: int, assessment2: int, assessment3: int) -> PerformanceMetrics:
    """
    Compute every derived field for an assessment triple.

    Assessments are expected to be validated into [0, 20] already;
    this function has no failure mode.
    """
    total = compute_total(assessment1, assessment2, assessment3)
    percentage = compute_percentage(total)
    return PerformanceMetrics(
        total=total,
        average=compute_average(total),
        percentage=percentage,
        performance_level=performance_level(percentage)
    )
