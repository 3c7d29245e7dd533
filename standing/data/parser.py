"""
Result and catalogue parsing.

This module turns raw rows (as exported from the results store) into
ResultRecord and CourseCatalogEntry objects.
"""

import logging
import math
import re

from ..config import VALID_GRADES
from ..engines.grading import grade_of
from ..models import ResultRecord, Semester, CourseCatalogEntry, CourseType

logger = logging.getLogger(__name__)

SESSION_PATTERN = re.compile(r"^(\d{4})/(\d{4})$")


def _field(row: dict, *names, default=None):
    """First present key among camelCase/snake_case spellings."""
    for name in names:
        if name in row and row[name] is not None:
            return row[name]
    return default


def _parse_units(value) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Invalid units: {value!r}")
    try:
        units = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid units: {value!r}")
    if not math.isfinite(units):
        raise ValueError(f"Invalid units: {value!r}")
    if units <= 0 or units != int(units):
        raise ValueError(f"Units must be a positive whole number, got {value!r}")
    return int(units)


class ResultParser:
    """
    Parses a student's raw result rows into ResultRecords.

    KEY RESPONSIBILITY: Validate each row and normalize it into the shape
    the engines expect. The backend exports camelCase columns
    (courseCode, courseTitle); snake_case is accepted too.

    GRADE RESOLUTION:
    - A valid grade on the row is trusted as-is (it was derived upstream)
    - No grade but a score: grade comes from the cutoff table
    - Neither, or an unknown grade: the row is rejected

    REJECTED ROWS:
    A bad row does not abort the whole transcript. It is logged and
    returned under "rejected" with the reason, and the rest is parsed.
    Duplicates are NOT resolved here; the engines apply last-write-wins.
    """

    def parse(self, transcript_data: dict) -> dict:
        """
        Parse a transcript document.

        Args:
            transcript_data: {"student": {...}, "results": [row, ...]}

        Returns:
            {
                "student": {name, matricNumber, ...},
                "records": [ResultRecord, ...],   # input order kept
                "rejected": [{"row": row, "reason": str}, ...],
            }
        """
        student_info = transcript_data.get("student", {})
        rows = transcript_data.get("results", [])

        records = []
        rejected = []

        for row in rows:
            try:
                records.append(self.parse_record(row))
            except ValueError as e:
                logger.warning("Rejected result row %r: %s", row, e)
                rejected.append({"row": row, "reason": str(e)})

        return {
            "student": student_info,
            "records": records,
            "rejected": rejected,
        }

    def parse_record(self, row: dict) -> ResultRecord:
        """
        Parse and validate a single result row.

        Raises:
            ValueError: with a human-readable reason when the row is invalid
        """
        if not isinstance(row, dict):
            raise ValueError(f"Result row is not an object: {row!r}")

        session = str(_field(row, "session", default="")).strip()
        match = SESSION_PATTERN.match(session)
        if not match or int(match.group(2)) != int(match.group(1)) + 1:
            raise ValueError(f"Invalid session: {session!r}")

        semester = Semester.from_value(_field(row, "semester", default=""))

        course_code = str(_field(row, "courseCode", "course_code", default="")).strip()
        if not course_code:
            raise ValueError("Missing course code")

        units = _parse_units(_field(row, "units"))

        score = _field(row, "score")
        if score is not None:
            try:
                score = float(score)
            except (TypeError, ValueError):
                raise ValueError(f"Invalid score: {score!r}")
            if not math.isfinite(score):
                raise ValueError(f"Invalid score: {score!r}")

        grade = _field(row, "grade")
        if grade is not None:
            grade = str(grade).strip().upper()
            if grade not in VALID_GRADES:
                raise ValueError(f"Invalid grade: {grade!r}")
        elif score is not None:
            grade = grade_of(score)
        else:
            raise ValueError("Row has neither a grade nor a score")

        return ResultRecord(
            session=session,
            semester=semester,
            course_code=course_code,
            course_title=str(_field(row, "courseTitle", "course_title", default="")),
            units=units,
            score=score,
            grade=grade,
        )


class CatalogParser:
    """
    Parses the department's course catalogue.

    Accepts either {"courses": [...]} or a bare list of course rows.
    Invalid rows are rejected the same way ResultParser rejects them.
    """

    def parse(self, catalog_data) -> dict:
        """
        Returns:
            {"courses": [CourseCatalogEntry, ...], "rejected": [{"row", "reason"}, ...]}
        """
        rows = catalog_data.get("courses", []) if isinstance(catalog_data, dict) else catalog_data

        courses = []
        rejected = []
        seen = set()

        for row in rows:
            try:
                course = self.parse_course(row)
            except ValueError as e:
                logger.warning("Rejected catalogue row %r: %s", row, e)
                rejected.append({"row": row, "reason": str(e)})
                continue
            if course.code in seen:
                logger.warning("Duplicate catalogue entry for %s ignored", course.code)
                rejected.append({"row": row, "reason": f"Duplicate course code: {course.code}"})
                continue
            seen.add(course.code)
            courses.append(course)

        return {"courses": courses, "rejected": rejected}

    def parse_course(self, row: dict) -> CourseCatalogEntry:
        if not isinstance(row, dict):
            raise ValueError(f"Catalogue row is not an object: {row!r}")

        code = str(_field(row, "code", "courseCode", "course_code", default="")).strip()
        if not code:
            raise ValueError("Missing course code")

        prerequisites = _field(row, "prerequisites", default=[])
        if not isinstance(prerequisites, list):
            raise ValueError(f"Invalid prerequisites: {prerequisites!r}")

        return CourseCatalogEntry(
            code=code,
            title=str(_field(row, "title", "courseTitle", "course_title", default="")),
            units=_parse_units(_field(row, "units")),
            course_type=CourseType.from_value(_field(row, "type", "course_type", default="")),
            prerequisites=list(prerequisites),
        )
