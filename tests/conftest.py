import pytest

from standing.engines import AcademicStandingEngine
from standing.models import ResultRecord, Semester, CourseCatalogEntry, CourseType


FIRST = Semester.FIRST
SECOND = Semester.SECOND


def make_record(session, semester, code, grade, units=3, score=None, title=""):
    return ResultRecord(
        session=session,
        semester=semester,
        course_code=code,
        course_title=title,
        units=units,
        score=score,
        grade=grade,
    )


def make_course(code, units, course_type=CourseType.COMPULSORY, title=""):
    return CourseCatalogEntry(code=code, title=title or code, units=units, course_type=course_type)


@pytest.fixture
def engine():
    return AcademicStandingEngine()


@pytest.fixture
def sample_records():
    """Three periods of history: GNS 101 failed then cleared, COM 121 still failed."""
    return [
        make_record("2022/2023", FIRST, "COM 111", "A", 3, 75, "Intro to CS"),
        make_record("2022/2023", FIRST, "MTH 111", "B", 3, 68, "Algebra"),
        make_record("2022/2023", FIRST, "GNS 101", "F", 2, 35, "Use of English I"),
        make_record("2022/2023", SECOND, "COM 121", "F", 3, 38, "Intro to Programming"),
        make_record("2022/2023", SECOND, "GNS 101", "C", 2, 55, "Use of English I"),
        make_record("2023/2024", FIRST, "COM 211", "A", 3, 82, "Java I"),
        make_record("2023/2024", FIRST, "COM 212", "B", 3, 71, "Web Development"),
    ]


@pytest.fixture
def sample_catalog():
    return [
        make_course("COM 211", 3, title="Java I"),
        make_course("COM 212", 3, title="Web Development"),
        make_course("COM 213", 3, title="Database Management"),
        make_course("GNS 201", 2, title="Use of English II"),
        make_course("MTH 211", 3, title="Calculus II"),
        make_course("COM 215", 2, CourseType.ELECTIVE, title="Intro to AI"),
        make_course("COM 121", 3, title="Intro to Programming"),
    ]
