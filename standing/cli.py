"""
Command-Line Interface for the Standing System.

This module provides the interactive CLI. It handles user input and
orchestrates the display of results.

MODES:
------
1. RESULTS: Results table, period GPA and CGPA for a session/semester
2. REGISTRATION: Build a course registration load and check the unit cap
3. SCORE AUDIT: Check uploaded scores before they are committed

NOTE: Don't run this file directly. Run from the repository root:
    python3 -m standing
"""

from .config import ALL_SEMESTERS, TRANSCRIPT_FILENAME, configure_logging
from .models import Semester
from .advisor import StandingAdvisor
from .ui import TerminalDisplay


def _ask(prompt: str, default: str = "") -> str:
    """input() with a default for empty answers and closed stdin."""
    try:
        answer = input(prompt).strip()
    except EOFError:
        return default
    return answer or default


def _select_transcript(advisor: StandingAdvisor) -> str:
    """Pick a transcript file from the data directory."""
    transcripts = advisor.loader.list_transcripts()
    if len(transcripts) <= 1:
        return transcripts[0] if transcripts else TRANSCRIPT_FILENAME

    print(f"\n{TerminalDisplay.BOLD}Select a transcript:{TerminalDisplay.RESET}")
    for i, name in enumerate(transcripts, 1):
        print(f"    {i}. {name}")

    choice = _ask(f"\n  Enter number (1-{len(transcripts)}): ")
    if choice.isdigit() and 1 <= int(choice) <= len(transcripts):
        return transcripts[int(choice) - 1]
    print(f"  → Using default: {transcripts[0]}")
    return transcripts[0]


def _run_results(advisor: StandingAdvisor, transcript: str):
    """
    Run the Results mode.

    Lists the sessions on record, asks for a session and a semester, and
    prints the results table with period GPA and CGPA.
    """
    state = advisor.load_student(transcript)
    default_session, default_semester = advisor.default_selection(state)
    sessions = advisor.engine.list_sessions(state["records"])

    print(f"\n{TerminalDisplay.BOLD}Sessions on record:{TerminalDisplay.RESET} {', '.join(sessions) or '(none)'}")
    session = _ask(f"  Session [{default_session}]: ", default_session)

    print(f"\n{TerminalDisplay.BOLD}Semester:{TerminalDisplay.RESET}")
    print(f"    1. {Semester.FIRST.value}")
    print(f"    2. {Semester.SECOND.value}")
    print(f"    3. All semesters")
    choice = _ask(f"  Enter number [{default_semester}]: ")
    semester_filter = {
        "1": Semester.FIRST.value,
        "2": Semester.SECOND.value,
        "3": ALL_SEMESTERS,
    }.get(choice, default_semester)

    return advisor.run_results(transcript, session, semester_filter)


def _run_registration(advisor: StandingAdvisor, transcript: str):
    """
    Run the Registration mode.

    Compulsory and carry-over courses are locked in; the student picks
    electives by number.
    """
    electives = advisor.list_electives()
    selected = []

    if electives:
        print(f"\n{TerminalDisplay.BOLD}Available electives:{TerminalDisplay.RESET}")
        for i, course in enumerate(electives, 1):
            print(f"    {i}. {course.code} - {course.title} ({course.units} units)")
        picks = _ask("\n  Enter numbers separated by commas (or press Enter for none): ")
        for part in picks.split(","):
            part = part.strip()
            if part.isdigit() and 1 <= int(part) <= len(electives):
                selected.append(electives[int(part) - 1].code)

    return advisor.run_registration(transcript, selected)


def main():
    """
    Command-line interface for the standing system.

    ═══════════════════════════════════════════════════════════════════════════
    AVAILABLE MODES
    ═══════════════════════════════════════════════════════════════════════════

    1. RESULTS MODE:
       Shows results for a session/semester with carry-over tags,
       period GPA and cumulative GPA.

    2. REGISTRATION MODE:
       Builds the registration load (compulsory + carry-over + chosen
       electives) and checks it against the unit cap.

    3. SCORE AUDIT MODE:
       Flags out-of-range scores and grade/score mismatches.

    ═══════════════════════════════════════════════════════════════════════════
    """
    configure_logging()
    advisor = StandingAdvisor()

    # Welcome banner with mode selection
    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         POLYTECHNIC ACADEMIC STANDING                            ║")
    print("╠══════════════════════════════════════════════════════════════════╣")
    print("║                                                                  ║")
    print("║  1. 📊 RESULTS       - Results, GPA and CGPA                     ║")
    print("║  2. 📋 REGISTRATION  - Course registration load                  ║")
    print("║  3. 🔎 SCORE AUDIT   - Check uploaded scores                     ║")
    print("║                                                                  ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")

    mode = _ask(f"{TerminalDisplay.BOLD}Select mode (1, 2 or 3): {TerminalDisplay.RESET}", "1")
    transcript = _select_transcript(advisor)

    if mode == "2":
        return _run_registration(advisor, transcript)
    if mode == "3":
        return advisor.run_score_audit(transcript)
    return _run_results(advisor, transcript)


if __name__ == "__main__":
    main()
