# /app/routers/classes_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from typing import List

from ..models import class_model
from ..services import class_service, database_service

router = APIRouter()

# --- CLASS COLLECTION ENDPOINTS (/api/classes) ---

@router.get("", response_model=List[class_model.Class], summary="Get All Classes")
def get_all_classes(db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    return class_service.get_all_classes(db=db)

@router.post("", response_model=class_model.Class, status_code=status.HTTP_201_CREATED, summary="Create a New Class")
def create_new_class(class_create: class_model.ClassCreate, db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    return class_service.create_class(class_data=class_create, db=db)

# --- INDIVIDUAL CLASS RESOURCE ENDPOINTS (/api/classes/{class_id}) ---

@router.get("/{class_id}", response_model=class_model.Class, summary="Get a Single Class")
def get_class_by_id(class_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    class_record = class_service.get_class_by_id(class_id=class_id, db=db)
    if class_record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return class_record

@router.put("/{class_id}", response_model=class_model.Class, summary="Replace a Class")
def update_class_details(class_id: str, class_update: class_model.ClassCreate, db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    updated_class = class_service.update_class(class_id=class_id, class_update=class_update, db=db)
    if updated_class is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return updated_class

@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Class")
def delete_class(class_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service)):
    # Students and grades pointing at this class are left in place.
    was_deleted = class_service.delete_class_by_id(class_id=class_id, db=db)
    if not was_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
