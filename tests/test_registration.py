from standing.engines import AcademicStandingEngine
from standing.models import CourseType

from conftest import make_course


def _codes(load):
    return [c.code for c in load.courses]


class TestValidateRegistrationLoad:

    def test_over_cap_then_within_after_dropping_elective(self, engine):
        catalog = [
            make_course("COM 211", 4),
            make_course("COM 212", 4),
            make_course("COM 213", 4),
            make_course("MTH 211", 4),
            make_course("COM 121", 3),
            make_course("COM 215", 3, CourseType.ELECTIVE),
            make_course("COM 216", 3, CourseType.ELECTIVE),
        ]
        over = engine.validate_registration_load(catalog, {"COM 121"}, ["COM 215", "COM 216"])
        assert over.total_units == 25
        assert over.is_valid is False

        within = engine.validate_registration_load(catalog, {"COM 121"}, ["COM 216"])
        assert within.total_units == 22
        assert within.is_valid is True

    def test_exactly_at_cap_is_valid(self, engine):
        catalog = [make_course("A", 12), make_course("B", 12)]
        assert engine.validate_registration_load(catalog, set(), []).is_valid is True

    def test_carry_over_forced_even_if_elective_and_unselected(self, engine):
        catalog = [make_course("COM 101", 3), make_course("ELE 101", 2, CourseType.ELECTIVE)]
        load = engine.validate_registration_load(catalog, {"ELE 101"}, [])
        assert "ELE 101" in _codes(load)
        assert load.carry_over_units == 2
        assert load.carry_over_codes == {"ELE 101"}

    def test_locked_courses_cannot_be_toggled(self, engine):
        catalog = [
            make_course("COM 101", 3),
            make_course("ELE 101", 2, CourseType.ELECTIVE),
            make_course("ELE 102", 2, CourseType.ELECTIVE),
        ]
        load = engine.validate_registration_load(
            catalog, {"ELE 101"}, ["COM 101", "ELE 101", "NOPE 999"]
        )
        assert sorted(_codes(load)) == ["COM 101", "ELE 101"]
        assert load.ignored_selections == ["COM 101", "ELE 101", "NOPE 999"]

    def test_unselected_electives_excluded(self, engine, sample_catalog):
        load = engine.validate_registration_load(sample_catalog, set(), [])
        assert "COM 215" not in _codes(load)
        assert load.total_units == 17

    def test_display_order(self, engine):
        catalog = [
            make_course("ZZZ 101", 2, CourseType.ELECTIVE),
            make_course("MTH 211", 3),
            make_course("COM 211", 3),
            make_course("GNS 101", 2),
            make_course("AAA 101", 2, CourseType.ELECTIVE),
            make_course("COM 121", 3),
        ]
        load = engine.validate_registration_load(
            catalog, {"GNS 101", "COM 121"}, ["ZZZ 101", "AAA 101"]
        )
        assert _codes(load) == ["COM 121", "GNS 101", "COM 211", "MTH 211", "AAA 101", "ZZZ 101"]

    def test_carry_over_not_in_catalog_is_skipped(self, engine, sample_catalog):
        load = engine.validate_registration_load(sample_catalog, {"GNS 101"}, [])
        assert "GNS 101" not in _codes(load)
        assert load.carry_over_units == 0
        assert load.carry_over_codes == set()

    def test_custom_cap(self, sample_catalog):
        load = AcademicStandingEngine(max_units=16).validate_registration_load(
            sample_catalog, set(), []
        )
        assert load.max_units == 16
        assert load.is_valid is False


def test_registration_from_history(engine, sample_records, sample_catalog):
    load = engine.registration_for(sample_records, sample_catalog, ["COM 215"])

    assert _codes(load)[0] == "COM 121"
    assert load.carry_over_codes == {"COM 121"}
    assert load.carry_over_units == 3
    assert load.total_units == 19
    assert load.is_valid is True


def test_idempotent(engine, sample_catalog):
    first = engine.validate_registration_load(sample_catalog, {"COM 121"}, ["COM 215"])
    second = engine.validate_registration_load(sample_catalog, {"COM 121"}, ["COM 215"])
    assert first == second
