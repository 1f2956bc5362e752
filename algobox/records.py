"""Student mark records: totals, averages, ranking and plain-text reports."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = ["StudentRecord", "rank_by_total", "format_records", "format_marks"]

_HEADER = " ROLLNO   NAME  TOTAL-MARKS  AVG"


@dataclass(frozen=True)
class StudentRecord:
    """A student's roll number, name and subject marks."""

    roll_number: int
    name: str
    marks: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "marks", tuple(self.marks))

    def total(self) -> int:
        """Sum of all subject marks."""
        return sum(self.marks)

    def average(self) -> float:
        """Mean mark over the subjects; raises ValueError when there are none."""
        if not self.marks:
            raise ValueError(f"student {self.roll_number} has no marks")
        return self.total() / len(self.marks)


def rank_by_total(records: Iterable[StudentRecord]) -> list[StudentRecord]:
    """Records ordered by total marks, highest first; ties keep their input order."""
    return sorted(records, key=StudentRecord.total, reverse=True)


def format_records(records: Iterable[StudentRecord]) -> str:
    """A table of roll number, name, total and average, one record per line."""
    lines = [_HEADER]
    lines.extend(
        f" {record.roll_number}\t {record.name}\t {record.total()}\t "
        f"{record.average():.2f}"
        for record in records
    )
    return "\n".join(lines)


def format_marks(marks: Iterable[int]) -> str:
    """One line per mark, numbered from 0 in input order."""
    return "\n".join(
        f"marks of students {index} are: {mark}" for index, mark in enumerate(marks)
    )