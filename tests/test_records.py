import pytest
from hypothesis import given
from hypothesis import strategies as st

from algobox.records import StudentRecord, format_marks, format_records, rank_by_total


def _record(roll, marks, name="Asha"):
    return StudentRecord(roll, name, marks)


def test_total_and_average_of_three_marks():
    record = _record(1, [10, 20, 30])
    assert record.total() == 60
    assert record.average() == pytest.approx(20.0)


def test_marks_are_stored_as_tuple():
    record = _record(1, [4, 5, 6])
    assert record.marks == (4, 5, 6)


def test_average_without_marks_raises():
    with pytest.raises(ValueError):
        _record(7, []).average()


def test_total_without_marks_is_zero():
    assert _record(7, []).total() == 0


def test_rank_by_total_puts_higher_total_first():
    low = _record(1, [1, 1, 1], "Low")
    high = _record(2, [9, 9, 9], "High")
    assert rank_by_total([low, high]) == [high, low]


def test_rank_by_total_keeps_order_of_ties():
    first = _record(1, [5, 5, 5], "First")
    second = _record(2, [5, 5, 5], "Second")
    assert rank_by_total([first, second]) == [first, second]


def test_rank_does_not_modify_input():
    records = [_record(1, [1]), _record(2, [2])]
    snapshot = list(records)
    rank_by_total(records)
    assert records == snapshot


@given(
    st.lists(
        st.lists(st.integers(min_value=0, max_value=100), min_size=3, max_size=3),
        max_size=10,
    )
)
def test_rank_is_a_nonincreasing_permutation(mark_lists):
    records = [_record(i, marks) for i, marks in enumerate(mark_lists)]
    ranked = rank_by_total(records)
    assert sorted(r.roll_number for r in ranked) == list(range(len(records)))
    totals = [r.total() for r in ranked]
    assert all(a >= b for a, b in zip(totals, totals[1:]))


def test_format_records_row_layout():
    text = format_records([_record(1, [10, 20, 30])])
    lines = text.split("\n")
    assert lines[0] == " ROLLNO   NAME  TOTAL-MARKS  AVG"
    assert lines[1] == " 1\t Asha\t 60\t 20.00"


def test_format_records_has_one_line_per_record():
    records = [_record(i, [i, i, i]) for i in range(4)]
    assert len(format_records(records).split("\n")) == len(records) + 1


def test_format_records_empty_is_header_only():
    assert format_records([]) == " ROLLNO   NAME  TOTAL-MARKS  AVG"


def test_format_marks_numbers_from_zero():
    lines = format_marks([55, 72]).split("\n")
    assert lines == ["marks of students 0 are: 55", "marks of students 1 are: 72"]


def test_format_marks_empty():
    assert format_marks([]) == ""


@given(st.lists(st.integers(), max_size=20))
def test_format_marks_line_count_matches(marks):
    text = format_marks(marks)
    lines = text.split("\n") if text else []
    assert len(lines) == len(marks)
    for index, (line, mark) in enumerate(zip(lines, marks)):
        assert line.endswith(f" {mark}")
        assert line.startswith(f"marks of students {index} ")