"""
Standing and audit engines.

This package contains the engines that perform the core business logic of
the standing system, plus the grading and period-ordering helpers they
share.
"""

from .grading import grade_of, grade_point, round_gpa, weighted_gpa
from .periods import (
    compare_periods,
    period_sort_key,
    order_periods,
    dedupe_records,
)
from .standing import AcademicStandingEngine
from .score_audit import ScoreAuditEngine

__all__ = [
    "grade_of",
    "grade_point",
    "round_gpa",
    "weighted_gpa",
    "compare_periods",
    "period_sort_key",
    "order_periods",
    "dedupe_records",
    "AcademicStandingEngine",
    "ScoreAuditEngine",
]
