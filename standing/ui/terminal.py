"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing of results happens in the standing
package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..models import (
    RegistrationLoad,
    StandingReport,
    TranscriptRow,
)


class TerminalDisplay:
    """
    Pretty terminal output for standing results.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), return HTML or render templates.

    2. FOR API RESPONSE:
       Convert the dataclasses to JSON with dataclasses.asdict().

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_RED = "\033[41m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def status_badge(cls, valid: bool) -> str:
        """Return a colored status badge."""
        if valid:
            return f"{cls.BG_GREEN}{cls.WHITE} ✓ WITHIN LIMIT {cls.RESET}"
        return f"{cls.BG_RED}{cls.WHITE} ✗ OVER LIMIT {cls.RESET}"

    @classmethod
    def print_student_info(cls, student: dict):
        """Print student identification information."""
        cls.print_header("STUDENT INFORMATION")
        print(f"  {cls.BOLD}Name:{cls.RESET} {student.get('name', 'Unknown')}")
        print(f"  {cls.BOLD}Matric No:{cls.RESET} {student.get('matricNumber', 'Unknown')}")
        print(f"  {cls.BOLD}Department:{cls.RESET} {student.get('department', 'Unknown')}")
        print(f"  {cls.BOLD}Level:{cls.RESET} {student.get('level', 'Unknown')}")

    @classmethod
    def print_report(cls, report: StandingReport):
        """Print the results table and GPA summary for one selection."""
        selection = "All Semesters" if report.semester_filter == "all" else report.semester_filter
        cls.print_header(f"ACADEMIC RECORDS: {report.session} ({selection})")

        if report.carry_overs:
            cls.print_carry_overs(report.carry_overs)

        cls.print_subheader("Results")
        if not report.rows:
            print(f"  {cls.DIM}(no results recorded for this selection){cls.RESET}")
        else:
            print(f"\n  {cls.BOLD}{'CODE':<10} {'TITLE':<30} {'UNITS':>5} {'SCORE':>6} {'GRADE':>6}{cls.RESET}")
            print(f"  {cls.DIM}{'-' * 66}{cls.RESET}")
            for row in report.rows:
                cls._print_row(row)

        print(f"\n  {cls.BOLD}Period GPA:{cls.RESET} {report.period_gpa:.2f}")
        print(f"  {cls.BOLD}{cls.CYAN}Cumulative GPA (CGPA):{cls.RESET} {report.cumulative_gpa:.2f}")

    @classmethod
    def _print_row(cls, row: TranscriptRow):
        record = row.record
        grade_color = cls.RED if record.grade == "F" else cls.WHITE
        score = "-" if record.score is None else f"{record.score:g}"
        tag = f" {cls.YELLOW}[carry-over]{cls.RESET}" if row.is_carry_over else ""
        print(
            f"  {record.course_code:<10} {record.course_title[:30]:<30} {record.units:>5} "
            f"{score:>6} {grade_color}{record.grade:>6}{cls.RESET}{tag}"
        )

    @classmethod
    def print_carry_overs(cls, carry_overs: list):
        """Print outstanding carry-over courses."""
        cls.print_subheader("Outstanding Carry-Overs")
        for record in carry_overs:
            print(
                f"  {cls.YELLOW}⚠{cls.RESET} {record.course_code:<10} {record.course_title:<30} "
                f"{record.units}u  {cls.DIM}(last failed {record.period}){cls.RESET}"
            )
        print(f"  {cls.DIM}Carry-overs must be cleared before graduation is authorized.{cls.RESET}")

    @classmethod
    def print_registration(cls, load: RegistrationLoad):
        """Print a registration load with its unit total and validity."""
        cls.print_header("COURSE REGISTRATION")

        print(f"\n  {cls.BOLD}Status:{cls.RESET} {cls.status_badge(load.is_valid)}")
        units_color = cls.GREEN if load.is_valid else cls.RED
        print(f"  {cls.BOLD}Total Units:{cls.RESET} {units_color}{load.total_units}{cls.RESET} / {load.max_units} allowed")
        if load.carry_over_units > 0:
            print(f"  {cls.YELLOW}Includes {load.carry_over_units} units of carry-over{cls.RESET}")

        print(f"\n  {cls.BOLD}{'CODE':<10} {'TITLE':<30} {'UNITS':>5}  {'TYPE'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 66}{cls.RESET}")
        for course in load.courses:
            if course.code in load.carry_over_codes:
                label = f"{cls.YELLOW}Carry-Over{cls.RESET}"
            else:
                label = course.course_type.value
            print(f"  {course.code:<10} {course.title[:30]:<30} {course.units:>5}  {label}")

        if load.ignored_selections:
            print(f"\n  {cls.DIM}Ignored selections (locked or unknown): {', '.join(load.ignored_selections)}{cls.RESET}")

        if not load.is_valid:
            print(f"\n  {cls.RED}Registration cannot be submitted: deselect electives to get within {load.max_units} units.{cls.RESET}")

    @classmethod
    def print_anomalies(cls, anomalies: list, can_commit: bool):
        """Print score audit results."""
        cls.print_header("SCORE AUDIT")
        if not anomalies:
            print(f"\n  {cls.GREEN}✓ No anomalous scores found{cls.RESET}")
            return

        for anomaly in anomalies:
            record = anomaly.record
            if anomaly.reason == "out_of_range":
                detail = f"{cls.RED}score {record.score:g} outside 0-100{cls.RESET}"
            else:
                detail = f"{cls.YELLOW}grade {record.grade} but score {record.score:g} gives {anomaly.expected_grade}{cls.RESET}"
            print(f"  ✗ {record.course_code:<10} {record.period}  {detail}")

        if not can_commit:
            print(f"\n  {cls.RED}Commit denied: scores must be between 0 and 100.{cls.RESET}")
