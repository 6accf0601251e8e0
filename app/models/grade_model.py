# /app/models/grade_model.py

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class Term(str, Enum):
    """
    The terms offered by the grade form. The `term` field itself stays a free
    string so records entered with other values are still accepted.
    """
    Q1 = "Q1"
    Q2 = "Q2"
    Q3 = "Q3"
    Q4 = "Q4"
    MIDTERM = "Midterm"
    FINAL = "Final"

    @property
    def label(self) -> str:
        return TERM_LABELS[self]


TERM_LABELS = {
    Term.Q1: "Quarter 1",
    Term.Q2: "Quarter 2",
    Term.Q3: "Quarter 3",
    Term.Q4: "Quarter 4",
    Term.MIDTERM: "Midterm",
    Term.FINAL: "Final",
}


def _today() -> str:
    return date.today().isoformat()


class GradeBase(BaseModel):
    """
    The base model for a Grade record. `score` is not checked against
    `maxScore`, and neither foreign key is checked for existence.
    """
    studentId: str = Field(default="", description="ID of the graded student. Not validated.")
    classId: str = Field(default="", description="ID of the class the grade belongs to. Not validated.")
    subject: str = Field(..., min_length=1, description="Free text, e.g. 'Mathematics'.")
    score: float = Field(default=0, ge=0)
    maxScore: float = Field(default=100, ge=1)
    date: str = Field(default_factory=_today, min_length=1, description="ISO formatted (YYYY-MM-DD).")
    term: str = Field(..., min_length=1, description="One of the Term values, or any other label.")

class GradeCreate(GradeBase):
    """The model used for creating and for replacing a grade."""
    pass

class Grade(BaseModel):
    """The full representation of a Grade as stored and returned."""
    model_config = ConfigDict(extra="allow")

    id: str
    studentId: str = ""
    classId: str = ""
    subject: str = ""
    score: float = 0
    maxScore: float = 100
    date: str = ""
    term: str = ""

class GradeRow(Grade):
    """
    A grade enriched for the grades table: resolved names (or "Unknown" for
    orphaned references), the rounded percentage and its letter. Both are
    None when the stored scores cannot produce a percentage (e.g. maxScore 0).
    """
    studentName: str
    className: str
    percentage: Optional[int] = None
    letter: Optional[str] = None

class TermOption(BaseModel):
    value: str
    label: str
