from typing import List, Optional
from sqlalchemy import func, select
from sqlalchemy.orm import Query, Session
from app.repositories.base import BaseRepository
from app.models.academic import Class, ClassEnrollment
from app.models.user import User

def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")

class ClassRepository(BaseRepository[Class]):
    def __init__(self):
        super().__init__(Class)

    def _view_query(self, db: Session) -> Query:
        """Class rows joined with the professor name and the enrollment count."""
        enrolled_count = (
            select(func.count(ClassEnrollment.academic_id))
            .where(ClassEnrollment.class_id == Class.id)
            .correlate(Class)
            .scalar_subquery()
        )
        return (
            db.query(
                Class.id,
                Class.name,
                Class.description,
                Class.professor_id,
                User.name.label("professor_name"),
                enrolled_count.label("enrolled_count"),
            )
            .join(User, User.id == Class.professor_id)
        )

    def get_view(self, db: Session, class_id: int) -> Optional[object]:
        return self._view_query(db).filter(Class.id == class_id).first()

    def list_views(self, db: Session) -> List[object]:
        return self._view_query(db).order_by(Class.id).all()

    def search_views(self, db: Session, name: str) -> List[object]:
        """Case-insensitive substring match on the class name"""
        pattern = f"%{_escape_like(name)}%"
        return (
            self._view_query(db)
            .filter(Class.name.ilike(pattern, escape="\\"))
            .order_by(Class.id)
            .all()
        )

    def list_views_for_academic(self, db: Session, academic_id: int) -> List[object]:
        return (
            self._view_query(db)
            .join(ClassEnrollment, ClassEnrollment.class_id == Class.id)
            .filter(ClassEnrollment.academic_id == academic_id)
            .order_by(Class.id)
            .all()
        )

    def list_views_for_professor(self, db: Session, professor_id: int) -> List[object]:
        return (
            self._view_query(db)
            .filter(Class.professor_id == professor_id)
            .order_by(Class.id)
            .all()
        )

class_repository = ClassRepository()
