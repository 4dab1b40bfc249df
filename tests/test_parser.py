import logging

from cru2cal.lexer import Line
from cru2cal.models import (
    DUPLICATE_SLOT_ERROR,
    ORPHAN_SLOT_ERROR,
    SLOT_GRAMMAR_ERROR,
    STRUCTURAL_ERROR,
    Course,
    ParseContext,
    Slot,
)
from cru2cal.parser import CruParser

SLOT_A101 = "1,C1,P=30,H=L 08:00-10:00,FG1,S=A101//"
SLOT_A102 = "1,C1,P=30,H=L 08:00-10:00,FG1,S=A102//"


def test_well_formed_input_keeps_order(sample_text):
    parser = CruParser(show_errors=False)
    courses = parser.parse(sample_text)

    assert [c.name for c in courses] == ["+AP03", "+GL02", "+MT01"]
    assert [s.session_type for s in courses[1].slots] == ["C1", "T1", "D1"]
    assert parser.error_count == 0
    assert parser.diagnostics == []


def test_slot_fields_are_extracted():
    parser = CruParser(show_errors=False)
    courses = parser.parse("+AB12\n1,D2,P=24,H=MA 9:30-11:00,FA2,S=B1X3//")

    assert courses[0].slots == [Slot(
        session_type="D2",
        capacity=24,
        day="MA",
        time_range="9:30-11:00",
        group="A2",
        room="B1X3",
    )]


def test_garbage_between_slots_does_not_corrupt_parse():
    text = f"+AB12\n{SLOT_A101}\nGARBAGE\n{SLOT_A102}"
    parser = CruParser(show_errors=False)
    courses = parser.parse(text)

    assert len(courses) == 1
    assert courses[0].name == "+AB12"
    assert [s.room for s in courses[0].slots] == ["A101", "A102"]
    assert parser.error_count == 0
    # GARBAGE je odbacen vec u filteru; parse_lines ga vidi kao gresku
    parser = CruParser(show_errors=False)
    courses = parser.parse_lines(text.split("\n"))
    assert [s.room for s in courses[0].slots] == ["A101", "A102"]
    assert parser.error_count == 1
    assert parser.diagnostics[0].kind == SLOT_GRAMMAR_ERROR
    assert parser.diagnostics[0].message == "Invalid creneau format"
    assert parser.diagnostics[0].line == "GARBAGE"


def test_duplicate_slot_keeps_first():
    text = f"+AB12\n{SLOT_A101}\n1,D1,P=20,H=L 08:00-10:00,FG2,S=A101//"
    parser = CruParser(show_errors=False)
    courses = parser.parse(text)

    assert len(courses) == 1
    assert len(courses[0].slots) == 1
    assert courses[0].slots[0].session_type == "C1"
    assert courses[0].slots[0].capacity == 30
    assert parser.error_count == 1
    diag = parser.diagnostics[0]
    assert diag.kind == DUPLICATE_SLOT_ERROR
    assert diag.message == "Duplicate creneau found for salle A101 at L 08:00-10:00"


def test_one_error_per_duplicate_occurrence():
    text = "\n".join(["+AB12", SLOT_A101, SLOT_A101, SLOT_A101])
    parser = CruParser(show_errors=False)
    courses = parser.parse(text)

    assert len(courses[0].slots) == 1
    assert parser.error_count == 2
    assert all(d.kind == DUPLICATE_SLOT_ERROR for d in parser.diagnostics)


def test_same_triple_in_different_courses_is_allowed():
    parser = CruParser(show_errors=False)
    courses = parser.parse(f"+AB12\n{SLOT_A101}\n+CD34\n{SLOT_A101}")

    assert [len(c.slots) for c in courses] == [1, 1]
    assert parser.error_count == 0


def test_slot_before_any_header():
    parser = CruParser(show_errors=False)
    courses = parser.parse(f"{SLOT_A101}\n{SLOT_A102}")

    assert courses == []
    assert parser.error_count == 2
    assert {d.kind for d in parser.diagnostics} == {STRUCTURAL_ERROR}
    assert parser.diagnostics[0].message == "Expected course name but got something else"


def test_invalid_header_does_not_reattach_slots_to_previous_course():
    text = f"+AB12\n{SLOT_A101}\n+bad name\n{SLOT_A102}\n+CD34\n{SLOT_A101}"
    parser = CruParser(show_errors=False)
    courses = parser.parse(text)

    assert [c.name for c in courses] == ["+AB12", "+CD34"]
    assert [s.room for s in courses[0].slots] == ["A101"]
    assert [s.room for s in courses[1].slots] == ["A101"]
    assert [d.message for d in parser.diagnostics] == [
        "Invalid course name format",
        "Expected course name but got something else",
    ]


def test_course_without_slots():
    parser = CruParser(show_errors=False)
    courses = parser.parse("+AB12\n+CD34\n" + SLOT_A101)

    assert [c.name for c in courses] == ["+AB12", "+CD34"]
    assert courses[0].slots == []
    assert len(courses[1].slots) == 1


def test_capacity_is_integer():
    parser = CruParser(show_errors=False)
    courses = parser.parse("+AB12\n1,C1,P=030,H=L 08:00-10:00,FG1,S=A101//")

    assert courses[0].slots[0].capacity == 30
    assert isinstance(courses[0].slots[0].capacity, int)


def test_empty_group_is_rejected():
    parser = CruParser(show_errors=False)
    courses = parser.parse_lines(["+AB12", "1,C1,P=30,H=L 08:00-10:00,F,S=A101//"])

    assert courses[0].slots == []
    assert parser.diagnostics[0].kind == SLOT_GRAMMAR_ERROR


def test_crlf_input(sample_text):
    parser = CruParser(show_errors=False)
    courses = parser.parse(sample_text.replace("\n", "\r\n"))

    assert [c.name for c in courses] == ["+AP03", "+GL02", "+MT01"]
    assert courses[0].slots[0].room == "B101"
    assert parser.error_count == 0


def test_fresh_instances_are_deterministic(sample_text):
    text = sample_text + f"\n+XX\n{SLOT_A101}\n{SLOT_A101}\n+y\n"
    first, second = CruParser(show_errors=False), CruParser(show_errors=False)

    assert first.parse(text) == second.parse(text)
    assert first.error_count == second.error_count == 2
    assert first.diagnostics == second.diagnostics


def test_state_accumulates_until_reset():
    parser = CruParser(show_errors=False)
    parser.parse(f"+AB12\n{SLOT_A101}")
    parser.parse(f"{SLOT_A102}")

    assert len(parser.courses) == 1
    assert parser.error_count == 1

    parser.reset()
    assert parser.courses == []
    assert parser.error_count == 0
    assert parser.summary() == "Parsing completed with 0 error(s)."


def test_orphan_slot_guard():
    parser = CruParser(show_errors=False)
    slot = parser.slot(SLOT_A101, ParseContext())

    assert slot is None
    assert parser.error_count == 1
    assert parser.diagnostics[0].kind == ORPHAN_SLOT_ERROR
    assert parser.diagnostics[0].message == "Creneau found without an associated course"


def test_add_slot_uses_explicit_context():
    parser = CruParser(show_errors=False)
    course = Course("+AB12")
    context = ParseContext(current=course)

    slot = parser.slot(SLOT_A101, context)

    assert course.slots == [slot]
    assert parser.courses == []


def test_diagnostics_carry_line_numbers():
    parser = CruParser(show_errors=False)
    parser.parse(f"header\n\n{SLOT_A101}\n+AB12")

    assert parser.diagnostics[0].line_number == 3
    assert parser.diagnostics[0].line == SLOT_A101


def test_parse_lines_accepts_line_objects():
    parser = CruParser(show_errors=False)
    courses = parser.parse_lines([Line("COURSE", "+AB12", 1), Line("SLOT", SLOT_A101, 2)])

    assert courses[0].slots[0].room == "A101"


def test_show_errors_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="cru2cal.parser"):
        CruParser(show_errors=True).parse(SLOT_A101)

    assert f'Parsing Error ! on "{SLOT_A101}"' in caplog.text
    assert "Expected course name but got something else" in caplog.text


def test_hidden_errors_are_still_counted(caplog):
    with caplog.at_level(logging.WARNING, logger="cru2cal.parser"):
        parser = CruParser(show_errors=False)
        parser.parse(SLOT_A101)

    assert caplog.records == []
    assert parser.error_count == 1
    assert parser.summary() == "Parsing completed with 1 error(s)."
