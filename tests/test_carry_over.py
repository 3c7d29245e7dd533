import random

import pytest

from conftest import make_record, FIRST, SECOND


S1 = "2022/2023"
S2 = "2023/2024"


class TestComputeCarryOvers:

    def test_cleared_by_later_pass(self, engine):
        records = [make_record(S1, FIRST, "X", "F"), make_record(S2, FIRST, "X", "C")]
        assert "X" not in engine.compute_carry_overs(records)

    def test_persists_without_later_pass(self, engine):
        assert engine.compute_carry_overs([make_record(S1, FIRST, "X", "F")]) == {"X"}

    def test_retrips_on_later_failure(self, engine):
        records = [make_record(S1, FIRST, "X", "C"), make_record(S2, FIRST, "X", "F")]
        assert engine.compute_carry_overs(records) == {"X"}

    def test_input_order_does_not_matter(self, engine):
        # Later period listed first: chronology, not list position, decides
        records = [make_record(S2, FIRST, "X", "C"), make_record(S1, FIRST, "X", "F")]
        assert engine.compute_carry_overs(records) == set()

    def test_second_semester_after_first(self, engine):
        records = [make_record(S1, SECOND, "X", "F"), make_record(S1, FIRST, "X", "B")]
        assert engine.compute_carry_overs(records) == {"X"}

    def test_only_passes_never_carry_over(self, engine):
        records = [make_record(S1, FIRST, "X", "E"), make_record(S2, FIRST, "Y", "A")]
        assert engine.compute_carry_overs(records) == set()

    def test_repeated_failures(self, engine):
        records = [make_record(S1, FIRST, "X", "F"), make_record(S2, FIRST, "X", "F")]
        assert engine.compute_carry_overs(records) == {"X"}

    def test_empty_history(self, engine):
        assert engine.compute_carry_overs([]) == set()

    def test_sample_history(self, engine, sample_records):
        assert engine.compute_carry_overs(sample_records) == {"COM 121"}

    def test_duplicate_in_period_resolved_last_write_wins(self, engine):
        records = [make_record(S1, FIRST, "X", "F"), make_record(S1, FIRST, "X", "D")]
        assert engine.compute_carry_overs(records) == set()
        assert engine.compute_carry_overs(list(reversed(records))) == {"X"}


class TestOutstandingCarryOvers:

    def test_returns_latest_failing_record(self, engine):
        early = make_record(S1, FIRST, "X", "F", score=20)
        late = make_record(S2, FIRST, "X", "F", score=30)
        assert engine.outstanding_carry_overs([late, early]) == [late]

    def test_sorted_by_code(self, engine):
        records = [make_record(S1, FIRST, "B", "F"), make_record(S1, FIRST, "A", "F")]
        assert [r.course_code for r in engine.outstanding_carry_overs(records)] == ["A", "B"]


class TestTagCarryOversByPeriod:

    def test_sample_history(self, engine, sample_records):
        tags = engine.tag_carry_overs_by_period(sample_records)
        assert tags == {
            ("2022/2023", FIRST, "COM 111"): False,
            ("2022/2023", FIRST, "MTH 111"): False,
            ("2022/2023", FIRST, "GNS 101"): False,
            ("2022/2023", SECOND, "COM 121"): False,
            ("2022/2023", SECOND, "GNS 101"): True,
            ("2023/2024", FIRST, "COM 211"): False,
            ("2023/2024", FIRST, "COM 212"): False,
        }

    def test_pass_clears_only_future_periods(self, engine):
        records = [
            make_record(S1, FIRST, "X", "F"),
            make_record(S1, SECOND, "X", "B"),
            make_record(S2, FIRST, "X", "A"),
        ]
        tags = engine.tag_carry_overs_by_period(records)
        assert tags[(S1, FIRST, "X")] is False
        assert tags[(S1, SECOND, "X")] is True
        assert tags[(S2, FIRST, "X")] is False

    def test_failure_in_same_period_does_not_tag(self, engine):
        tags = engine.tag_carry_overs_by_period([make_record(S1, FIRST, "X", "F")])
        assert tags == {(S1, FIRST, "X"): False}

    def test_other_course_unaffected(self, engine):
        records = [
            make_record(S1, FIRST, "X", "F"),
            make_record(S1, SECOND, "Y", "C"),
            make_record(S1, SECOND, "X", "F"),
        ]
        tags = engine.tag_carry_overs_by_period(records)
        assert tags[(S1, SECOND, "Y")] is False
        assert tags[(S1, SECOND, "X")] is True


def _random_history(rng):
    sessions = ["2020/2021", "2021/2022", "2022/2023", "2023/2024"]
    codes = ["A", "B", "C", "D"]
    records = []
    for session in sessions:
        for semester in (FIRST, SECOND):
            for code in rng.sample(codes, rng.randint(0, len(codes))):
                records.append(make_record(session, semester, code, rng.choice("ABCDEFFF")))
    rng.shuffle(records)
    return records


@pytest.mark.parametrize("seed", range(50))
def test_tags_agree_with_current_carry_overs(engine, seed):
    """
    A row's tag equals membership in the carry-over set computed from the
    strictly-earlier history, and folding in the final period reproduces
    compute_carry_overs.
    """
    records = _random_history(random.Random(seed))
    tags = engine.tag_carry_overs_by_period(records)

    for record in records:
        earlier = [
            r for r in records
            if (r.session, r.semester.order) < (record.session, record.semester.order)
        ]
        assert tags[record.key] == (record.course_code in engine.compute_carry_overs(earlier))

    # Latest attempt per course: its tag says whether the previous attempt
    # failed, and its own outcome decides current membership
    previous, latest = {}, {}
    for record in sorted(records, key=lambda r: (r.session, r.semester.order)):
        if record.course_code in latest:
            previous[record.course_code] = latest[record.course_code]
        latest[record.course_code] = record

    current = engine.compute_carry_overs(records)
    for code, record in latest.items():
        before = previous.get(code)
        assert tags[record.key] == (before is not None and before.grade == "F")
        if tags[record.key] and record.grade != "F":
            assert code not in current
        if record.grade == "F":
            assert code in current
    assert current == {code for code, r in latest.items() if r.grade == "F"}


@pytest.mark.parametrize("seed", range(10))
def test_idempotent(engine, seed):
    records = _random_history(random.Random(seed))
    assert engine.compute_carry_overs(records) == engine.compute_carry_overs(records)
    assert engine.tag_carry_overs_by_period(records) == engine.tag_carry_overs_by_period(records)
