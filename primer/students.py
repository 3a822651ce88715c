"""Student records with roll number, name and marks."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Student:
    """One student's roll number, single-word name and marks."""

    roll: int
    name: str
    marks: float

    @classmethod
    def parse(cls, text: str) -> Student:
        """Build a student from "roll name marks"; raises ValueError on bad input."""
        fields = text.split()
        if len(fields) != 3:
            raise ValueError("expected roll, name and marks")
        roll, name, marks = fields
        return cls(int(roll), name, float(marks))

    def details(self) -> str:
        """Labelled lines for roll, name and marks."""
        return f"Roll: {self.roll}\nName: {self.name}\nMarks: {self.marks:.2f}"

    def row(self) -> str:
        """Roll, name and marks on one line, separated by spaces."""
        return f"{self.roll} {self.name} {self.marks:.2f}"


def format_roster(students: Iterable[Student]) -> str:
    """A heading followed by one row per student."""
    return "Student Details:\n" + "".join(f"{student.row()}\n" for student in students)