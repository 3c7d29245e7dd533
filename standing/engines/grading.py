"""
Grade lookups and GPA arithmetic.

Small pure helpers shared by the standing engine, the score audit and the
grade-entry flow. Kept as plain functions so callers that only need a
grade for a score don't have to build an engine.
"""

from decimal import Decimal, ROUND_HALF_UP

from ..config import GRADE_CUTOFFS, GRADE_POINTS, FAILING_GRADE, GPA_DECIMALS


def grade_of(score) -> str:
    """
    Map a numeric score to its letter grade.

    CUTOFFS: A>=75, B>=65, C>=55, D>=45, E>=40, otherwise F.
    Lower bounds are inclusive, so 75 is an A and 74 is a B. Any number
    maps to a grade; out-of-range scores are the score audit's concern.
    """
    for lower_bound, grade in GRADE_CUTOFFS:
        if score >= lower_bound:
            return grade
    return FAILING_GRADE


def grade_point(grade: str) -> int:
    """Points for a letter grade on the 5-point scale (A=5 ... F=0)."""
    return GRADE_POINTS.get(grade, 0)


def round_gpa(value: float) -> float:
    """
    Round a GPA to two decimals, half-up.

    Python's round() is half-to-even, which would report 4.125 as 4.12.
    Transcripts show 4.13, so the quotient goes through Decimal using its
    shortest repr.
    """
    quantum = Decimal(1).scaleb(-GPA_DECIMALS)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def weighted_gpa(records) -> float:
    """
    Credit-weighted average of grade points over a set of records.

    sum(points * units) / sum(units), rounded half-up; 0.00 when the set
    carries no units.
    """
    total_units = sum(r.units for r in records)
    if total_units == 0:
        return 0.0
    total_points = sum(grade_point(r.grade) * r.units for r in records)
    return round_gpa(total_points / total_units)
