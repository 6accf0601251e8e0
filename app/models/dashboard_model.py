# /app/models/dashboard_model.py

# --- Core Imports ---
# Import the necessary components from Pydantic for data modeling.
from typing import Dict, List

from pydantic import BaseModel, Field

from .class_model import Class
from .student_model import Student

# --- Model Definitions ---

class DashboardStats(BaseModel):
    """
    Defines the data contract for the four headline cards of the dashboard.
    These values are derived on every request and never persisted.
    """

    totalStudents: int = Field(
        ...,  # This field is required.
        description="The number of student records.",
        # The 'example' is used by FastAPI to generate richer API documentation.
        examples=[112]
    )

    totalClasses: int = Field(
        ...,
        description="The number of class records.",
        examples=[4]
    )

    totalTeachers: int = Field(
        ...,
        description="The number of distinct teacher names across all classes (exact match).",
        examples=[3]
    )

    averageGrade: int = Field(
        ...,
        description="Average grade percentage across every grade record, rounded. 0 when there are no grades.",
        examples=[78]
    )


class GradeLevelCount(BaseModel):
    grade: str
    count: int


class SubjectPerformance(BaseModel):
    subject: str
    average: float


class DashboardSummary(BaseModel):
    """
    The full payload for the dashboard page: headline stats, the two preview
    lists and the series behind the charts.
    """
    stats: DashboardStats
    recentStudents: List[Student] = Field(default_factory=list, description="The first five student records.")
    activeClasses: List[Class] = Field(default_factory=list, description="The first five class records.")
    gradeDistribution: Dict[str, int] = Field(
        default_factory=dict,
        description="Count of grade records per letter, always keyed A through F."
    )
    studentsByGradeLevel: List[GradeLevelCount] = Field(default_factory=list)
    performanceBySubject: List[SubjectPerformance] = Field(default_factory=list)
