"""
Course catalogue data models.
"""

from dataclasses import dataclass, field
from enum import Enum


class CourseType(Enum):
    """
    Registration type of a catalogue course.

    COMPULSORY: always part of the registration load, cannot be deselected
    ELECTIVE: included only when the student opts in
    """
    COMPULSORY = "Compulsory"
    ELECTIVE = "Elective"

    @classmethod
    def from_value(cls, value) -> "CourseType":
        """Resolve "Compulsory"/"Elective" (any case). Raises ValueError otherwise."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for course_type in cls:
            if text in (course_type.value.lower(), course_type.name.lower()):
                return course_type
        raise ValueError(f"Unknown course type: {value!r}")


@dataclass
class CourseCatalogEntry:
    """
    A course offered to a department for a session.

    Catalogue entries are shared by every student in the department and
    are independent of any student's history.
    """
    code: str
    title: str
    units: int
    course_type: CourseType
    # Listed in the catalogue but not enforced at registration
    prerequisites: list = field(default_factory=list)

    @property
    def is_compulsory(self) -> bool:
        return self.course_type == CourseType.COMPULSORY
