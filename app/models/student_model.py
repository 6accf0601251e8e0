# /app/models/student_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field, ConfigDict

# --- Model Definitions ---

class StudentBase(BaseModel):
    """
    The base model for a Student. Contains every field the enrollment form
    collects. Field names are camelCase because they are persisted verbatim.
    """
    firstName: str = Field(..., min_length=1, description="The student's given name.")
    lastName: str = Field(..., min_length=1, description="The student's family name.")
    email: str = Field(..., min_length=1, description="Contact email address.")
    phone: str = Field(default="", description="Contact phone number.")
    dateOfBirth: str = Field(default="", description="Date of birth, ISO formatted (YYYY-MM-DD).")
    grade: str = Field(..., min_length=1, description="Grade level, e.g. '9'.")
    classId: str = Field(default="", description="The ID of the class this student belongs to. Not validated.")
    enrollmentDate: str = Field(default="", description="Enrollment date, ISO formatted (YYYY-MM-DD).")
    guardianName: str = Field(default="")
    guardianPhone: str = Field(default="")
    address: str = Field(default="")

class StudentCreate(StudentBase):
    """
    The model used both for creating a student and for replacing one.
    Updates are whole-record overwrites, so there is no partial update model.
    """
    pass

class Student(BaseModel):
    """
    The full representation of a Student as it is stored and returned.
    Every field besides `id` is defaulted so records written before a field
    existed still load.
    """
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="The unique, server-generated identifier for the student.")
    firstName: str = ""
    lastName: str = ""
    email: str = ""
    phone: str = ""
    dateOfBirth: str = ""
    grade: str = ""
    classId: str = ""
    enrollmentDate: str = ""
    guardianName: str = ""
    guardianPhone: str = ""
    address: str = ""
