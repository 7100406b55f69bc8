from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.core.database import get_db
from app.schemas.classes import ClassResponse
from app.services.classes import class_service

router = APIRouter(prefix="/api", tags=["Users"])

@router.get("/academicos/{academic_id}/turmas", response_model=List[ClassResponse])
async def list_academic_classes(academic_id: int, db: Session = Depends(get_db)):
    """Classes the academic is enrolled in"""
    return await class_service.list_academic_classes(db, academic_id)

@router.get("/professores/{professor_id}/turmas", response_model=List[ClassResponse])
async def list_professor_classes(professor_id: int, db: Session = Depends(get_db)):
    """Classes owned by the professor"""
    return await class_service.list_professor_classes(db, professor_id)
