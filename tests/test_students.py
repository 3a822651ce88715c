import pytest

from primer.students import Student, format_roster


def test_details_of_sample_student():
    student = Student(1, "Ravi", 89.5)
    assert student.details() == "Roll: 1\nName: Ravi\nMarks: 89.50"


def test_parse_reads_fields():
    student = Student.parse("7 Asha 72.25")
    assert student == Student(7, "Asha", 72.25)


def test_parse_round_trips_row():
    original = Student(3, "Meena", 64.5)
    assert Student.parse(original.row()) == original


@pytest.mark.parametrize("text", ["", "1 Ravi", "1 Ravi 80 extra", "x Ravi 80", "1 Ravi high"])
def test_parse_rejects_bad_input(text):
    with pytest.raises(ValueError):
        Student.parse(text)


def test_row_uses_two_decimals():
    assert Student(2, "Kiran", 90).row() == "2 Kiran 90.00"


def test_format_roster_has_heading_and_rows():
    students = [Student(1, "Ravi", 89.5), Student(2, "Kiran", 90.0)]
    text = format_roster(students)
    lines = text.splitlines()
    assert lines[0] == "Student Details:"
    assert lines[1:] == [s.row() for s in students]
    assert text.endswith("\n")


def test_format_roster_empty():
    assert format_roster([]) == "Student Details:\n"