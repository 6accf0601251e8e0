# /app/routers/students_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response, Query
from typing import List, Optional

from ..models import student_model
from ..services import student_service, database_service

router = APIRouter()

# --- STUDENT COLLECTION ENDPOINTS (/api/students) ---

@router.get("", response_model=List[student_model.Student], summary="Get All Students")
def get_all_students(
    search: Optional[str] = Query(default=None, description="Matches first name, last name or email, case-insensitively."),
    db: database_service.DatabaseService = Depends(database_service.get_db_service)
):
    return student_service.get_all_students(db=db, search=search)

@router.post("", response_model=student_model.Student, status_code=status.HTTP_201_CREATED, summary="Enroll a New Student")
def create_new_student(student_create: student_model.StudentCreate, db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    return student_service.create_student(student_data=student_create, db=db)

# --- INDIVIDUAL STUDENT RESOURCE ENDPOINTS (/api/students/{student_id}) ---

@router.get("/{student_id}", response_model=student_model.Student, summary="Get a Single Student")
def get_student_by_id(student_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    student = student_service.get_student_by_id(student_id=student_id, db=db)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return student

@router.put("/{student_id}", response_model=student_model.Student, summary="Replace a Student")
def update_student_details(student_id: str, student_update: student_model.StudentCreate, db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    updated_student = student_service.update_student(student_id=student_id, student_update=student_update, db=db)
    if updated_student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return updated_student

@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Student")
def delete_student(student_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    was_deleted = student_service.delete_student(student_id=student_id, db=db)
    if not was_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student with ID {student_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
