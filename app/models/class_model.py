# /app/models/class_model.py

from datetime import date

from pydantic import BaseModel, Field, ConfigDict


def _current_academic_year() -> str:
    return str(date.today().year)


class ClassBase(BaseModel):
    """
    The base model for a Class: the fields the class form collects.
    """
    name: str = Field(..., min_length=1, description="Display name, e.g. 'Mathematics A'.")
    teacherName: str = Field(..., min_length=1, description="Name of the teacher. Used for the distinct-teacher count.")
    grade: str = Field(..., min_length=1, description="Grade level the class is taught at ('1' through '12').")
    academicYear: str = Field(default_factory=_current_academic_year, min_length=1, description="e.g. '2024-2025'.")
    capacity: int = Field(default=30, ge=1, description="Seat count. Not enforced against enrollment.")
    schedule: str = Field(..., min_length=1, description="Free text, e.g. 'Mon/Wed/Fri 9:00-10:30'.")

class ClassCreate(ClassBase):
    """The model used for creating and for replacing a class."""
    pass

class Class(BaseModel):
    """
    The full representation of a Class resource as stored and returned.
    """
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="The unique, server-generated identifier for the class.")
    name: str = ""
    teacherName: str = ""
    grade: str = ""
    academicYear: str = ""
    capacity: int = 0
    schedule: str = ""
