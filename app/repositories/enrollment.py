from sqlalchemy import delete, insert
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session
from app.models.academic import ClassEnrollment

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

class EnrollmentRepository:
    """Explicit insert/delete access to the class_academics junction."""

    def add(self, db: Session, class_id: int, academic_id: int) -> int:
        """Insert one edge unless it exists; returns the number of rows added (0 or 1).

        The existence check is the pair constraint itself, so two identical
        enrollments racing each other both succeed.
        """
        dialect = db.get_bind().dialect.name
        if dialect in _UPSERT_DIALECTS:
            stmt = (
                _UPSERT_DIALECTS[dialect](ClassEnrollment)
                .values(class_id=class_id, academic_id=academic_id)
                .on_conflict_do_nothing(index_elements=["class_id", "academic_id"])
            )
            return db.execute(stmt).rowcount
        if self.is_enrolled(db, class_id, academic_id):
            return 0
        db.execute(insert(ClassEnrollment).values(class_id=class_id, academic_id=academic_id))
        return 1

    def is_enrolled(self, db: Session, class_id: int, academic_id: int) -> bool:
        query = db.query(ClassEnrollment).filter(
            ClassEnrollment.class_id == class_id,
            ClassEnrollment.academic_id == academic_id,
        )
        return db.query(query.exists()).scalar()

    def remove(self, db: Session, class_id: int, academic_id: int) -> int:
        """Delete one edge and return the number of rows removed (0 or 1)."""
        result = db.execute(
            delete(ClassEnrollment).where(
                ClassEnrollment.class_id == class_id,
                ClassEnrollment.academic_id == academic_id,
            )
        )
        return result.rowcount

    def remove_all_for_class(self, db: Session, class_id: int) -> int:
        result = db.execute(delete(ClassEnrollment).where(ClassEnrollment.class_id == class_id))
        return result.rowcount

enrollment_repository = EnrollmentRepository()
