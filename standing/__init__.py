"""
Polytechnic Academic Standing Package
=====================================

Academic standing computation for polytechnic students: carry-overs,
period GPA, cumulative GPA and course registration load.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐  │
│  │ DataLoader  │  │ ResultParser    │  │  AcademicStandingEngine     │  │
│  │  (I/O)      │  │ CatalogParser   │  │  (carry-overs, GPA, load)   │  │
│  └─────────────┘  └─────────────────┘  └─────────────────────────────┘  │
│                                                                         │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐  │
│  │  grading / periods      │  │       ScoreAuditEngine              │  │
│  │  (shared pure helpers)  │  │   (score integrity checks)          │  │
│  └─────────────────────────┘  └─────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│                        TerminalDisplay                                   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                     StandingAdvisor                                      │
│          (Orchestrator - connects algorithm to presentation)            │
└─────────────────────────────────────────────────────────────────────────┘

USAGE
-----

    from standing import AcademicStandingEngine, ResultParser

    state = ResultParser().parse(transcript_data)
    engine = AcademicStandingEngine()

    engine.compute_carry_overs(state["records"])          # {"COM 121"}
    engine.period_gpa(state["records"], "2023/2024")       # 4.5
    engine.cumulative_gpa(state["records"], "2023/2024")   # 3.16

Running from command line:

    python -m standing

"""

# Version
__version__ = "1.0.0"

# Main exports
from .advisor import StandingAdvisor
from .cli import main

# Model exports
from .models import (
    ResultRecord,
    Semester,
    Period,
    CourseCatalogEntry,
    CourseType,
    TranscriptRow,
    RegistrationLoad,
    StandingReport,
    ScoreAnomaly,
)

# Engine exports
from .engines import (
    AcademicStandingEngine,
    ScoreAuditEngine,
    grade_of,
    grade_point,
    compare_periods,
    order_periods,
)

# Data exports
from .data import DataLoader, ResultParser, CatalogParser

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import (
    DATA_DIR,
    GRADE_POINTS,
    MAX_REGISTRATION_UNITS,
    ALL_SEMESTERS,
)

__all__ = [
    "__version__",
    # Main entry points
    "StandingAdvisor",
    "main",
    # Models
    "ResultRecord",
    "Semester",
    "Period",
    "CourseCatalogEntry",
    "CourseType",
    "TranscriptRow",
    "RegistrationLoad",
    "StandingReport",
    "ScoreAnomaly",
    # Engines
    "AcademicStandingEngine",
    "ScoreAuditEngine",
    "grade_of",
    "grade_point",
    "compare_periods",
    "order_periods",
    # Data
    "DataLoader",
    "ResultParser",
    "CatalogParser",
    # UI
    "TerminalDisplay",
    # Config
    "DATA_DIR",
    "GRADE_POINTS",
    "MAX_REGISTRATION_UNITS",
    "ALL_SEMESTERS",
]
