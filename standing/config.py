"""
Configuration constants for the academic standing system.

This module contains all configuration values and constants used throughout
the standing engine. Centralizing these makes it easy to adjust behavior
when institutional policy changes (e.g., a new unit cap).
"""

import logging
import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = Path(os.environ.get("STANDING_DATA_DIR", BASE_DIR / "data"))

TRANSCRIPT_FILENAME = "sample_transcript.json"
CATALOG_FILENAME = "course_catalog.json"


# =============================================================================
# GRADE DEFINITIONS
# =============================================================================

# Score cutoffs, highest first. The first bracket whose lower bound the
# score reaches wins; lower bounds are inclusive.
GRADE_CUTOFFS = [
    (75, "A"),
    (65, "B"),
    (55, "C"),
    (45, "D"),
    (40, "E"),
]
FAILING_GRADE = "F"

# 5-point scale used for GPA and CGPA
GRADE_POINTS = {"A": 5, "B": 4, "C": 3, "D": 2, "E": 1, "F": 0}
VALID_GRADES = set(GRADE_POINTS)

GPA_DECIMALS = 2

# Semester filter value meaning "every semester of the session"
ALL_SEMESTERS = "all"


# =============================================================================
# SCORE BOUNDS
# =============================================================================

MIN_SCORE = 0
MAX_SCORE = 100

# Continuous assessment and examination components of a course total
MAX_CA_SCORE = 30
MAX_EXAM_SCORE = 70


# =============================================================================
# REGISTRATION POLICY
# =============================================================================

# Institutional cap on units per registration. Exceeding it blocks
# submission; there is no auto-trim.
MAX_REGISTRATION_UNITS = int(os.environ.get("STANDING_MAX_UNITS", 24))


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("STANDING_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = None):
    """Configure root logging once for CLI and script entry points."""
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
