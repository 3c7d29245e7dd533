"""
Standing Advisor - Main Orchestrator.

This module contains the StandingAdvisor class that connects the
algorithm layer to the presentation layer.

NOTE: Don't run this file directly. Run from the repository root:
    python3 -m standing
"""

import logging

from .config import ALL_SEMESTERS
from .data import DataLoader, ResultParser, CatalogParser
from .engines import AcademicStandingEngine, ScoreAuditEngine
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class StandingAdvisor:
    """
    Main interface for the academic standing system.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    This class connects the Algorithm layer to the Presentation layer:

    1. Loads a student's transcript and the course catalogue
    2. Calls the engines to get standing results (pure data)
    3. Passes that data to the display

    The engines never see files or the terminal; swap `self.display` to
    change the output, or ignore it and use the returned dataclasses.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        advisor = StandingAdvisor()

        report = advisor.run_results("sample_transcript.json", "2023/2024")
        load = advisor.run_registration("sample_transcript.json", ["COM 215"])
    """

    def __init__(self, data_dir=None):
        self.loader = DataLoader(data_dir)
        self.parser = ResultParser()
        self.catalog_parser = CatalogParser()
        self.engine = AcademicStandingEngine()
        self.score_audit = ScoreAuditEngine()
        self.display = TerminalDisplay()

    def load_student(self, transcript_path) -> dict:
        """Load and parse a transcript; returns the ResultParser state."""
        state = self.parser.parse(self.loader.load_transcript(transcript_path))
        if state["rejected"]:
            logger.warning(
                "%d result row(s) rejected from %s", len(state["rejected"]), transcript_path
            )
        return state

    def load_catalog(self) -> list:
        return self.catalog_parser.parse(self.loader.catalog)["courses"]

    def default_selection(self, student_state: dict) -> tuple:
        """
        Pick the session/semester the results page opens on.

        The student's current session if it has results, otherwise the
        newest session; the student's current semester if any results
        carry it, otherwise "all".
        """
        records = student_state["records"]
        student = student_state["student"]

        sessions = self.engine.list_sessions(records)
        session = student.get("session")
        if session not in sessions:
            session = sessions[0] if sessions else ""

        semesters = [s.value for s in self.engine.available_semesters(records)]
        semester = student.get("semester")
        if semester not in semesters:
            semester = ALL_SEMESTERS

        return session, semester

    def run_results(self, transcript_path, session: str = None, semester_filter: str = None):
        """
        Show a student's results, period GPA and CGPA.

        Args:
            transcript_path: Transcript file (absolute or relative to the data dir)
            session: Session to show; defaults per default_selection()
            semester_filter: Semester value or "all"; defaults per default_selection()

        Returns:
            StandingReport
        """
        state = self.load_student(transcript_path)
        default_session, default_semester = self.default_selection(state)
        session = session or default_session
        semester_filter = semester_filter or default_semester

        report = self.engine.build_report(
            state["records"], session, semester_filter, catalog=self.load_catalog()
        )

        self.display.print_student_info(state["student"])
        self.display.print_report(report)
        return report

    def run_registration(self, transcript_path, selected_electives=()):
        """
        Build and show a registration load for the student.

        Carry-overs come from the student's own history, so they are locked
        in without the caller having to pass them.

        Returns:
            RegistrationLoad
        """
        state = self.load_student(transcript_path)
        load = self.engine.registration_for(
            state["records"], self.load_catalog(), selected_electives
        )

        self.display.print_student_info(state["student"])
        self.display.print_registration(load)
        return load

    def run_score_audit(self, transcript_path) -> list:
        """Audit the scores in a results file and show the anomalies."""
        state = self.load_student(transcript_path)
        anomalies = self.score_audit.find_anomalies(state["records"])
        self.display.print_anomalies(anomalies, self.score_audit.can_commit(state["records"]))
        return anomalies

    def list_electives(self) -> list:
        """Elective courses in the catalogue, by code."""
        return sorted(
            (c for c in self.load_catalog() if not c.is_compulsory), key=lambda c: c.code
        )
