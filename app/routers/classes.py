from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import List
from app.core.database import get_db
from app.schemas.classes import ClassRequest, ClassResponse
from app.services.classes import class_service

# Open routes: the portal has no authentication layer
router = APIRouter(prefix="/api/turmas", tags=["Classes"])

@router.post("", response_model=ClassResponse, status_code=status.HTTP_201_CREATED)
async def create_class(
    class_in: ClassRequest,
    db: Session = Depends(get_db)
):
    """Create a class owned by an existing professor"""
    return await class_service.create_class(db, class_in)

@router.get("", response_model=List[ClassResponse])
async def list_classes(db: Session = Depends(get_db)):
    return await class_service.list_classes(db)

@router.get("/buscar", response_model=List[ClassResponse])
async def search_classes(
    nome: str = Query(..., description="Case-insensitive substring of the class name"),
    db: Session = Depends(get_db)
):
    return await class_service.search_by_name(db, nome)

@router.put("/{class_id}", response_model=ClassResponse)
async def update_class(
    class_id: int,
    class_in: ClassRequest,
    db: Session = Depends(get_db)
):
    """Replace name, description and professor; enrollments are kept"""
    return await class_service.update_class(db, class_id, class_in)

@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_class(class_id: int, db: Session = Depends(get_db)):
    await class_service.delete_class(db, class_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.post("/{class_id}/matricular/{academic_id}", response_model=ClassResponse)
async def enroll_academic(
    class_id: int,
    academic_id: int,
    db: Session = Depends(get_db)
):
    """Enroll an academic; enrolling twice is a no-op"""
    return await class_service.enroll_academic(db, class_id, academic_id)

@router.delete("/{class_id}/remover/{academic_id}", response_model=ClassResponse)
async def unenroll_academic(
    class_id: int,
    academic_id: int,
    db: Session = Depends(get_db)
):
    """Remove an academic from a class; removing a non-member is a no-op"""
    return await class_service.unenroll_academic(db, class_id, academic_id)
