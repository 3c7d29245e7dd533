"""
Score Audit Engine.

This module checks graded scores before they are committed to the results
store, and computes course totals from their assessment components.
"""

import math

from ..config import MIN_SCORE, MAX_SCORE, MAX_CA_SCORE, MAX_EXAM_SCORE
from ..models import ScoreAnomaly
from .grading import grade_of


class ScoreAuditEngine:
    """
    Audits bulk-uploaded scores for integrity.

    CHECKS:
    -------
    - out_of_range: score below 0 or above 100. These block the commit.
    - grade_mismatch: the recorded grade is not the grade the cutoff table
      gives for the score. Reported for review but does not block.

    Records without a score (grade-only uploads) are never anomalous.
    """

    def total_score(self, ca_score: float, exam_score: float) -> float:
        """
        Course total from continuous assessment and examination scores.

        CA is capped at 30 and the exam at 70, so the total never exceeds
        100. Negative entries count as zero.
        """
        ca = min(max(ca_score, 0), MAX_CA_SCORE)
        exam = min(max(exam_score, 0), MAX_EXAM_SCORE)
        return ca + exam

    def grade_components(self, ca_score: float, exam_score: float) -> tuple:
        """Return (total, grade) for a CA/exam pair, as the grade-entry sheet shows it."""
        total = self.total_score(ca_score, exam_score)
        return total, grade_of(total)

    def is_out_of_range(self, score) -> bool:
        """NaN and infinities count as out of range."""
        if score is None:
            return False
        return not math.isfinite(score) or score < MIN_SCORE or score > MAX_SCORE

    def find_anomalies(self, records) -> list:
        """
        Scan records and return a ScoreAnomaly for each problem found.

        A record is reported at most once: an out-of-range score is not
        also reported as a grade mismatch.
        """
        anomalies = []
        for record in records:
            if record.score is None:
                continue
            if self.is_out_of_range(record.score):
                anomalies.append(ScoreAnomaly(record=record, reason="out_of_range"))
                continue
            expected = grade_of(record.score)
            if expected != record.grade:
                anomalies.append(ScoreAnomaly(
                    record=record, reason="grade_mismatch", expected_grade=expected,
                ))
        return anomalies

    def can_commit(self, records) -> bool:
        """True when no record has an out-of-range score."""
        return not any(self.is_out_of_range(r.score) for r in records)
