"""
Academic Standing Engine.

This module computes carry-over status, period GPA, cumulative GPA and
registration-load eligibility from a student's result records.
"""

import logging
from dataclasses import replace

from ..config import ALL_SEMESTERS, FAILING_GRADE, MAX_REGISTRATION_UNITS
from ..models import (
    Semester,
    TranscriptRow,
    RegistrationLoad,
    StandingReport,
)
from .grading import weighted_gpa
from .periods import order_periods, dedupe_records, chronological, group_by_period

logger = logging.getLogger(__name__)


class AcademicStandingEngine:
    """
    Computes a student's academic standing from their result records.

    ═══════════════════════════════════════════════════════════════════════════
    INPUTS
    ═══════════════════════════════════════════════════════════════════════════

    Every method takes the full slice of data it needs as arguments:
    - records: the student's ResultRecords, in any order
    - catalog: CourseCatalogEntry list for the department/session

    Nothing is cached between calls. The only state is max_units, fixed
    at construction, so one engine can serve any number of callers.

    ═══════════════════════════════════════════════════════════════════════════
    CARRY-OVER RULE
    ═══════════════════════════════════════════════════════════════════════════

    A course is a carry-over when its MOST RECENT outcome, in chronological
    period order, is an F:
    - F only                    -> carry-over
    - F, then a later C         -> cleared
    - C, then a later F         -> carry-over again

    compute_carry_overs() answers "as of now"; tag_carry_overs_by_period()
    answers "as of each period" for transcripts. Both walk the same
    chronological ordering, so the running failed set after the last
    period always equals the current carry-over set.

    ═══════════════════════════════════════════════════════════════════════════
    DUPLICATES
    ═══════════════════════════════════════════════════════════════════════════

    Two records for the same course in the same period are resolved
    last-write-wins by input order before any computation.
    """

    def __init__(self, max_units: int = MAX_REGISTRATION_UNITS):
        self.max_units = max_units

    # =========================================================================
    # CARRY-OVERS
    # =========================================================================

    def _scan_failures(self, records) -> dict:
        """
        Walk the history chronologically and keep each course's latest failure.

        A failing record (re)enters the map; any passing record removes its
        course. What is left are the courses whose latest outcome is F.

        Returns:
            {course_code: latest failing ResultRecord}
        """
        failed_map = {}
        for record in chronological(records):
            if record.grade == FAILING_GRADE:
                failed_map[record.course_code] = record
            else:
                failed_map.pop(record.course_code, None)
        return failed_map

    def compute_carry_overs(self, records) -> set:
        """
        Course codes the student currently carries over.

        Returns:
            Set of course codes whose most recent outcome is F
        """
        return set(self._scan_failures(records))

    def outstanding_carry_overs(self, records) -> list:
        """
        The failing record behind each current carry-over, sorted by code.

        The results page lists these with title, units and the period in
        which the course was last failed.
        """
        failed_map = self._scan_failures(records)
        return [failed_map[code] for code in sorted(failed_map)]

    def tag_carry_overs_by_period(self, records) -> dict:
        """
        Tag every (period, course) in history with its carry-over status AT THAT TIME.

        A row is tagged True when its course was already failed in an
        EARLIER period and not cleared by a pass in between. Outcomes in the
        period itself only affect later periods: passing a carried course
        in period P still shows the P row as a carry-over.

        Returns:
            {(session, Semester, course_code): bool}
        """
        failed_so_far = set()
        tags = {}

        for period, period_records in group_by_period(records):
            # Tag first, from strictly earlier periods only
            for record in period_records:
                tags[record.key] = record.course_code in failed_so_far

            # Then fold this period's outcomes in for the periods that follow
            for record in period_records:
                if record.grade == FAILING_GRADE:
                    failed_so_far.add(record.course_code)
                else:
                    failed_so_far.discard(record.course_code)

        return tags

    # =========================================================================
    # PERIOD SELECTION
    # =========================================================================

    def _resolve_semester_filter(self, semester_filter):
        """
        Normalize a semester filter.

        Returns ALL_SEMESTERS, a Semester, or None when the filter names no
        known semester (and so matches nothing).
        """
        if semester_filter is None:
            return ALL_SEMESTERS
        if isinstance(semester_filter, str) and semester_filter.strip().lower() == ALL_SEMESTERS:
            return ALL_SEMESTERS
        try:
            return Semester.from_value(semester_filter)
        except ValueError:
            logger.debug("Semester filter %r matches no semester", semester_filter)
            return None

    def filter_period(self, records, session: str, semester_filter=ALL_SEMESTERS) -> list:
        """Records of one session, optionally narrowed to one semester."""
        semester = self._resolve_semester_filter(semester_filter)
        if semester is None:
            return []
        return [
            r for r in dedupe_records(records)
            if r.session == session and (semester == ALL_SEMESTERS or r.semester == semester)
        ]

    def list_sessions(self, records) -> list:
        """Distinct sessions in the history, newest first."""
        return sorted({r.session for r in records}, reverse=True)

    def available_semesters(self, records) -> list:
        """Distinct semesters in the history, First before Second."""
        return sorted({r.semester for r in records}, key=lambda s: s.order)

    # =========================================================================
    # GPA
    # =========================================================================

    def period_gpa(self, records, session: str, semester_filter=ALL_SEMESTERS) -> float:
        """
        GPA for one session (or one semester of it).

        Args:
            records: The student's result records
            session: Session token, e.g. "2023/2024"
            semester_filter: Semester, its display value, or "all"

        Returns:
            Credit-weighted GPA rounded half-up to 2 decimals; 0.00 when
            nothing matches
        """
        return weighted_gpa(self.filter_period(records, session, semester_filter))

    def cumulative_gpa(self, records, upto_session: str,
                       upto_semester_filter=ALL_SEMESTERS) -> float:
        """
        Cumulative GPA over every period up to and including a reference point.

        REFERENCE POINT:
        - "all": the LAST recorded period of upto_session
        - a semester: exactly (upto_session, semester)

        All records in periods at or before that point are pooled and
        averaged as one set (total points over total units). This is not
        an average of period GPAs, and it is not carry-over aware: a
        failure that was later cleared still counts.

        Returns:
            CGPA rounded half-up to 2 decimals; 0.00 when the reference
            period is not in the history
        """
        semester = self._resolve_semester_filter(upto_semester_filter)
        if semester is None:
            return 0.0

        periods = order_periods(records)
        target_index = -1
        for index, period in enumerate(periods):
            if period.session != upto_session:
                continue
            if semester == ALL_SEMESTERS or period.semester == semester:
                target_index = index  # keep going: "all" wants the last one

        if target_index == -1:
            return 0.0

        included = set(periods[:target_index + 1])
        return weighted_gpa([r for r in dedupe_records(records) if r.period in included])

    # =========================================================================
    # REGISTRATION
    # =========================================================================

    def validate_registration_load(self, catalog, carry_over_codes,
                                   selected_elective_codes) -> RegistrationLoad:
        """
        Build and validate a student's registration load.

        REGISTERED SET:
        - every Compulsory course in the catalogue
        - every catalogue course in carry_over_codes
        - the Elective courses the student selected

        Compulsory and carry-over courses are always included; selecting
        them (or codes not in the catalogue) has no effect and they are
        reported back in ignored_selections.

        DISPLAY ORDER:
        Carry-overs first, then Compulsory, then Elective; each tier by
        course code.

        An over-cap load is reported with is_valid=False. Blocking the
        submission is the caller's job and nothing is trimmed here.
        """
        carry_over_codes = set(carry_over_codes)
        selected = set(selected_elective_codes)

        selectable = {
            c.code for c in catalog
            if not c.is_compulsory and c.code not in carry_over_codes
        }
        ignored = sorted(selected - selectable)

        courses = [
            c for c in catalog
            if c.is_compulsory or c.code in carry_over_codes or c.code in selected
        ]

        def display_key(course):
            if course.code in carry_over_codes:
                tier = 0
            elif course.is_compulsory:
                tier = 1
            else:
                tier = 2
            return (tier, course.code)

        courses.sort(key=display_key)

        total_units = sum(c.units for c in courses)
        carry_over_units = sum(c.units for c in courses if c.code in carry_over_codes)

        return RegistrationLoad(
            courses=courses,
            total_units=total_units,
            carry_over_units=carry_over_units,
            is_valid=total_units <= self.max_units,
            carry_over_codes={c.code for c in courses if c.code in carry_over_codes},
            max_units=self.max_units,
            ignored_selections=ignored,
        )

    def registration_for(self, records, catalog, selected_elective_codes) -> RegistrationLoad:
        """Validate a load using the carry-overs computed from the student's history."""
        return self.validate_registration_load(
            catalog, self.compute_carry_overs(records), selected_elective_codes
        )

    # =========================================================================
    # TRANSCRIPT VIEW
    # =========================================================================

    def transcript_rows(self, records, session: str, semester_filter=ALL_SEMESTERS,
                        catalog=None) -> list:
        """
        Rows for the results table of one session/semester selection.

        Each row carries its per-period carry-over tag. When a catalogue is
        given its title replaces the record's; a record with no title and
        no catalogue match shows "N/A".
        """
        tags = self.tag_carry_overs_by_period(records)
        titles = {c.code: c.title for c in catalog} if catalog else {}

        rows = []
        for record in chronological(self.filter_period(records, session, semester_filter)):
            title = titles.get(record.course_code) or record.course_title or "N/A"
            if title != record.course_title:
                record = replace(record, course_title=title)
            rows.append(TranscriptRow(record=record, is_carry_over=tags.get(record.key, False)))
        return rows

    def build_report(self, records, session: str, semester_filter=ALL_SEMESTERS,
                     catalog=None) -> StandingReport:
        """
        Assemble everything the results page shows for a selection.

        Returns:
            StandingReport with rows, period GPA, CGPA and the outstanding
            carry-overs across the whole history
        """
        semester = self._resolve_semester_filter(semester_filter)
        if isinstance(semester, Semester):
            label = semester.value
        elif semester == ALL_SEMESTERS:
            label = ALL_SEMESTERS
        else:
            label = str(semester_filter)

        return StandingReport(
            session=session,
            semester_filter=label,
            rows=self.transcript_rows(records, session, semester_filter, catalog),
            period_gpa=self.period_gpa(records, session, semester_filter),
            cumulative_gpa=self.cumulative_gpa(records, session, semester_filter),
            carry_overs=self.outstanding_carry_overs(records),
        )
