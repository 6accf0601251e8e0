# /app/services/dashboard_service.py

"""
Aggregations behind the dashboard.

All functions below except `get_summary_data` are pure: they take record
dicts that were already loaded from storage and never touch the database.
Nothing is cached; every dashboard request recomputes from full collections.
"""

import logging
import math
from typing import Dict, List

import numpy as np
import pandas as pd

# Import the Pydantic models to ensure our output matches the data contract.
from ..models.dashboard_model import DashboardStats, DashboardSummary, GradeLevelCount, SubjectPerformance
# Import the DatabaseService to interact with our data layer.
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

LETTERS = ["A", "B", "C", "D", "F"]
PREVIEW_SIZE = 5


# --- PURE UTILITY FUNCTIONS ---

def grade_percentage(score: float, max_score: float) -> float:
    return score * 100 / max_score


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def letter_grade(percentage: float) -> str:
    """Lower bounds are inclusive: 90 is an A, 89.99 is a B."""
    if percentage >= 90: return "A"
    if percentage >= 80: return "B"
    if percentage >= 70: return "C"
    if percentage >= 60: return "D"
    return "F"


def _grade_percentages(grades: List[Dict]) -> pd.Series:
    """
    Per-record percentages. Records without a numeric score or max score, or
    with a zero max score, are dropped.
    """
    df = pd.DataFrame(grades)
    if df.empty or 'score' not in df.columns or 'maxScore' not in df.columns:
        return pd.Series(dtype=float)
    score = pd.to_numeric(df['score'], errors='coerce')
    max_score = pd.to_numeric(df['maxScore'], errors='coerce')
    return (score * 100 / max_score).replace([np.inf, -np.inf], np.nan).dropna()


def average_grade_percentage(grades: List[Dict]) -> float:
    """Mean of score/maxScore*100 over all grades; 0 when there are none."""
    percentages = _grade_percentages(grades)
    if percentages.empty:
        return 0.0
    return float(percentages.mean())


def count_distinct_teachers(classes: List[Dict]) -> int:
    # Exact string match: "Dr. Smith" and "dr. smith" are two teachers.
    return len({c.get('teacherName') for c in classes})


def letter_grade_distribution(grades: List[Dict]) -> Dict[str, int]:
    percentages = _grade_percentages(grades)
    if percentages.empty:
        return {letter: 0 for letter in LETTERS}

    bins = [-math.inf, 60, 70, 80, 90, math.inf]
    labels = ["F", "D", "C", "B", "A"]
    buckets = pd.cut(percentages, bins=bins, labels=labels, right=False)
    counts = buckets.value_counts().reindex(LETTERS, fill_value=0)
    return {letter: int(count) for letter, count in counts.items()}


def _grade_level_sort_key(level: str):
    try:
        value = float(level)
        if not math.isfinite(value):
            raise ValueError(level)
        return (0, value, level)
    except (TypeError, ValueError):
        return (1, 0.0, str(level))


def students_by_grade_level(students: List[Dict]) -> List[GradeLevelCount]:
    """
    Student counts per grade level, ordered by the level's numeric value.
    Levels that are not numbers come last, in string order.
    """
    df = pd.DataFrame(students)
    if df.empty or 'grade' not in df.columns:
        return []
    counts = df['grade'].fillna("").astype(str).value_counts()
    return [
        GradeLevelCount(grade=level, count=int(counts[level]))
        for level in sorted(counts.index, key=_grade_level_sort_key)
    ]


def performance_by_subject(grades: List[Dict]) -> List[SubjectPerformance]:
    """Average percentage per subject, best subject first."""
    df = pd.DataFrame(grades)
    if df.empty or 'subject' not in df.columns:
        return []
    df['percentage'] = _grade_percentages(grades)
    df = df.dropna(subset=['percentage'])
    if df.empty:
        return []

    averages = df.groupby('subject')['percentage'].mean().sort_values(ascending=False, kind='mergesort')
    return [
        SubjectPerformance(subject=str(subject), average=round(float(avg), 2))
        for subject, avg in averages.items()
    ]


def build_dashboard_stats(students: List[Dict], classes: List[Dict], grades: List[Dict]) -> DashboardStats:
    return DashboardStats(
        totalStudents=len(students),
        totalClasses=len(classes),
        totalTeachers=count_distinct_teachers(classes),
        averageGrade=round_half_up(average_grade_percentage(grades)),
    )


# --- Core Public Function ---

def get_summary_data(db: DatabaseService) -> DashboardSummary:
    """
    Loads the three collections and assembles everything the dashboard page
    shows.

    Args:
        db: An instance of the DatabaseService, provided by dependency injection.

    Returns:
        A DashboardSummary Pydantic object.
    """
    try:
        all_students = db.get_all_students()
        all_classes = db.get_all_classes()
        all_grades = db.get_all_grades()
    except Exception:
        logger.exception("Failed to load collections for the dashboard summary")
        # Re-raise so the exception handler answers with a 500.
        raise

    return DashboardSummary(
        stats=build_dashboard_stats(all_students, all_classes, all_grades),
        recentStudents=all_students[:PREVIEW_SIZE],
        activeClasses=all_classes[:PREVIEW_SIZE],
        gradeDistribution=letter_grade_distribution(all_grades),
        studentsByGradeLevel=students_by_grade_level(all_students),
        performanceBySubject=performance_by_subject(all_grades),
    )
