"""
Result record data models.

Contains the ResultRecord dataclass, the Semester enum and the Period
value that together describe a student's graded history.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Semester(Enum):
    """
    Semesters of an academic session, in chronological order.

    FIRST: runs first within a session
    SECOND: follows FIRST in the same session
    """
    FIRST = "First Semester"
    SECOND = "Second Semester"

    @property
    def order(self) -> int:
        """Position within a session (0 for First, 1 for Second)."""
        return list(Semester).index(self)

    @classmethod
    def from_value(cls, value) -> "Semester":
        """
        Resolve a semester from its display value, enum name or short form.

        "First Semester", "FIRST" and "first" all resolve to Semester.FIRST.
        Raises ValueError for anything else.
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for semester in cls:
            if text.lower() in (semester.value.lower(), semester.name.lower()):
                return semester
        raise ValueError(f"Unknown semester: {value!r}")


@dataclass(frozen=True)
class Period:
    """
    One academic period: a (session, semester) pair.

    Periods are the atomic unit of chronological ordering. Two records
    that share a session and semester belong to the same period.
    """
    session: str
    semester: Semester

    def __str__(self):
        return f"{self.session} {self.semester.value}"


@dataclass(frozen=True)
class ResultRecord:
    """
    One student's outcome in one course in one academic period.

    Records are produced upstream by the grading/results-submission system
    and are never mutated here; everything the engine reports is a pure
    projection of a list of these.

    Attributes:
        session: Academic session token, "YYYY/YYYY+1" (e.g., "2023/2024")
        semester: Semester enum value
        course_code: Course code (e.g., "COM 211")
        course_title: Display title, not used in computation
        units: Credit weight (positive integer)
        score: Raw score out of 100, or None when only a grade was supplied
        grade: Letter grade A-F
    """
    session: str
    semester: Semester
    course_code: str
    course_title: str
    units: int
    score: Optional[float]
    grade: str

    @property
    def period(self) -> Period:
        return Period(self.session, self.semester)

    @property
    def key(self) -> tuple:
        """Identity of the record within a student's history."""
        return (self.session, self.semester, self.course_code)
