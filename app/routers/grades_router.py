# /app/routers/grades_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from typing import List

from ..models import grade_model
from ..services import grade_service, database_service

router = APIRouter()

# --- GRADE COLLECTION ENDPOINTS (/api/grades) ---

@router.get("", response_model=List[grade_model.GradeRow], summary="Get All Grades with Student and Class Names")
def get_all_grades(db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    return grade_service.get_grade_rows(db=db)

@router.post("", response_model=grade_model.Grade, status_code=status.HTTP_201_CREATED, summary="Record a New Grade")
def create_new_grade(grade_create: grade_model.GradeCreate, db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    return grade_service.create_grade(grade_data=grade_create, db=db)

@router.get("/terms", response_model=List[grade_model.TermOption], summary="List the Selectable Terms")
def get_terms():
    return grade_service.get_term_options()

# --- INDIVIDUAL GRADE RESOURCE ENDPOINTS (/api/grades/{grade_id}) ---

@router.get("/{grade_id}", response_model=grade_model.Grade, summary="Get a Single Grade")
def get_grade_by_id(grade_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    grade = grade_service.get_grade_by_id(grade_id=grade_id, db=db)
    if grade is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Grade with ID {grade_id} not found")
    return grade

@router.put("/{grade_id}", response_model=grade_model.Grade, summary="Replace a Grade")
def update_grade_details(grade_id: str, grade_update: grade_model.GradeCreate, db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    updated_grade = grade_service.update_grade(grade_id=grade_id, grade_update=grade_update, db=db)
    if updated_grade is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Grade with ID {grade_id} not found")
    return updated_grade

@router.delete("/{grade_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Grade")
def delete_grade(grade_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    was_deleted = grade_service.delete_grade(grade_id=grade_id, db=db)
    if not was_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Grade with ID {grade_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
