"""
Data models for the standing system.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .result import ResultRecord, Semester, Period
from .catalog import CourseCatalogEntry, CourseType
from .standing import (
    TranscriptRow,
    RegistrationLoad,
    StandingReport,
    ScoreAnomaly,
)

__all__ = [
    # Result models
    "ResultRecord",
    "Semester",
    "Period",
    # Catalogue models
    "CourseCatalogEntry",
    "CourseType",
    # Derived results
    "TranscriptRow",
    "RegistrationLoad",
    "StandingReport",
    "ScoreAnomaly",
]
