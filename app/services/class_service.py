# /app/services/class_service.py

"""
Business logic for class records. Deleting a class never touches the students
or grades that point at it.
"""

import logging
import uuid
from typing import List, Dict, Optional

from ..models import class_model
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def get_all_classes(db: DatabaseService) -> List[Dict]:
    return db.get_all_classes()


def get_class_by_id(class_id: str, db: DatabaseService) -> Optional[Dict]:
    return db.get_class_by_id(class_id)


def create_class(class_data: class_model.ClassCreate, db: DatabaseService) -> Dict:
    new_class_record = class_data.model_dump()
    new_class_record['id'] = f"cls_{uuid.uuid4().hex[:12]}"
    db.add_class(new_class_record)
    logger.info("Added class %s (%s)", new_class_record['id'], new_class_record['name'])
    return new_class_record


def update_class(class_id: str, class_update: class_model.ClassCreate, db: DatabaseService) -> Optional[Dict]:
    updated_record = {'id': class_id, **class_update.model_dump()}
    if not db.update_class(class_id, updated_record):
        logger.warning("Update skipped: class %s not found", class_id)
        return None
    logger.info("Updated class %s", class_id)
    return updated_record


def delete_class_by_id(class_id: str, db: DatabaseService) -> bool:
    if not db.delete_class(class_id):
        logger.warning("Delete skipped: class %s not found", class_id)
        return False
    logger.info("Deleted class %s", class_id)
    return True
