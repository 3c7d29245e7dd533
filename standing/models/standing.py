"""
Derived standing data models.

Contains the dataclasses returned by the engines: transcript rows,
registration-load validation results, standing reports and score
anomalies. None of these are stored; they are recomputed from the
student's result records on every call.
"""

from dataclasses import dataclass, field
from typing import Optional

from .result import ResultRecord


@dataclass
class TranscriptRow:
    """
    A result record tagged with its carry-over status as of its own period.

    is_carry_over is True when the course carried an unresolved failure
    from an EARLIER period into this one, not when it is failed today.
    """
    record: ResultRecord
    is_carry_over: bool


@dataclass
class RegistrationLoad:
    """
    Result of validating a student's course registration load.

    The registered set is every compulsory course, every carry-over course
    and the electives the student picked. Compulsory and carry-over courses
    are locked in; the student can only toggle electives.

    Example (24-unit cap):
        courses: [COM 121 (carry-over), COM 211, COM 212, ..., COM 215]
        total_units: 19
        carry_over_units: 3
        is_valid: True
    """
    courses: list                   # CourseCatalogEntry, in display order
    total_units: int
    carry_over_units: int
    is_valid: bool                  # total_units <= max_units
    carry_over_codes: set           # Codes of the carry-over courses included
    max_units: int
    ignored_selections: list = field(default_factory=list)  # Non-elective or unknown picks


@dataclass
class StandingReport:
    """
    Everything the results page shows for one session/semester selection.
    """
    session: str
    semester_filter: str            # Semester value or "all"
    rows: list                      # TranscriptRow objects for the selection
    period_gpa: float
    cumulative_gpa: float
    carry_overs: list               # Outstanding failing ResultRecords (whole history)


@dataclass
class ScoreAnomaly:
    """
    A result record whose score cannot be committed as-is.

    reason is "out_of_range" for scores outside 0-100 and "grade_mismatch"
    when the recorded grade disagrees with the cutoff table.
    """
    record: ResultRecord
    reason: str
    expected_grade: Optional[str] = None
