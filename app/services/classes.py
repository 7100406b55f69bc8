import logging
from typing import List
from sqlalchemy.orm import Session
from app.core.database import transaction
from app.core.exceptions import InvalidRoleError, NotFoundError
from app.models.academic import Class
from app.models.user import Academic, Professor, UserRole
from app.repositories.classes import class_repository
from app.repositories.enrollment import enrollment_repository
from app.repositories.user import user_repository
from app.schemas.classes import ClassRequest, ClassResponse

logger = logging.getLogger(__name__)

class ClassService:
    """Class (turma) management: CRUD, name search and enrollment.

    Every public method is one unit of work: it commits when it returns and
    rolls back when it raises.
    """

    def __init__(self, class_repo=None, enrollment_repo=None, user_repo=None):
        self.class_repo = class_repo or class_repository
        self.enrollment_repo = enrollment_repo or enrollment_repository
        self.user_repo = user_repo or user_repository

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _to_response(self, row) -> ClassResponse:
        return ClassResponse(
            id=row.id,
            name=row.name,
            description=row.description,
            professor_id=row.professor_id,
            professor_name=row.professor_name,
            enrolled_count=row.enrolled_count,
        )

    def _view(self, db: Session, class_id: int) -> ClassResponse:
        return self._to_response(self.class_repo.get_view(db, class_id))

    def _get_class(self, db: Session, class_id: int) -> Class:
        db_class = self.class_repo.get(db, class_id)
        if db_class is None:
            logger.warning(f"Class {class_id} not found")
            raise NotFoundError("Class", class_id)
        return db_class

    def _get_user_with_role(self, db: Session, user_id: int, role: UserRole, label: str):
        user = self.user_repo.get(db, user_id)
        if user is None:
            logger.warning(f"{label} {user_id} not found")
            raise NotFoundError(label, user_id)
        if user.role != role:
            logger.warning(f"User {user_id} has role {user.role.value}, expected {role.value}")
            raise InvalidRoleError(user_id, role.value)
        return user

    def _get_professor(self, db: Session, professor_id: int) -> Professor:
        return self._get_user_with_role(db, professor_id, UserRole.PROFESSOR, "Professor")

    def _get_academic(self, db: Session, academic_id: int) -> Academic:
        return self._get_user_with_role(db, academic_id, UserRole.ACADEMIC, "Academic")

    # =========================================================================
    # CRUD
    # =========================================================================

    async def create_class(self, db: Session, class_in: ClassRequest) -> ClassResponse:
        with transaction(db):
            professor = self._get_professor(db, class_in.professor_id)
            db_class = self.class_repo.create(db, {
                "name": class_in.name,
                "description": class_in.description,
                "professor_id": professor.id,
            })
            result = self._view(db, db_class.id)
        logger.info(f"Class {result.id} created for professor {result.professor_id}")
        return result

    async def list_classes(self, db: Session) -> List[ClassResponse]:
        with transaction(db):
            return [self._to_response(row) for row in self.class_repo.list_views(db)]

    async def search_by_name(self, db: Session, name: str) -> List[ClassResponse]:
        with transaction(db):
            return [self._to_response(row) for row in self.class_repo.search_views(db, name)]

    async def update_class(self, db: Session, class_id: int, class_in: ClassRequest) -> ClassResponse:
        with transaction(db):
            db_class = self._get_class(db, class_id)
            professor = self._get_professor(db, class_in.professor_id)
            self.class_repo.update(db, db_class, {
                "name": class_in.name,
                "description": class_in.description,
                "professor_id": professor.id,
            })
            result = self._view(db, class_id)
        logger.info(f"Class {class_id} updated")
        return result

    async def delete_class(self, db: Session, class_id: int) -> None:
        with transaction(db):
            db_class = self._get_class(db, class_id)
            # Junction rows go first so the foreign keys never dangle
            removed = self.enrollment_repo.remove_all_for_class(db, class_id)
            self.class_repo.delete(db, db_class)
        logger.info(f"Class {class_id} deleted with {removed} enrollment(s)")

    # =========================================================================
    # ENROLLMENT
    # =========================================================================

    async def enroll_academic(self, db: Session, class_id: int, academic_id: int) -> ClassResponse:
        with transaction(db):
            self._get_class(db, class_id)
            self._get_academic(db, academic_id)
            added = self.enrollment_repo.add(db, class_id, academic_id)
            result = self._view(db, class_id)
        if added:
            logger.info(f"Academic {academic_id} enrolled in class {class_id}")
        return result

    async def unenroll_academic(self, db: Session, class_id: int, academic_id: int) -> ClassResponse:
        with transaction(db):
            self._get_class(db, class_id)
            self._get_academic(db, academic_id)
            removed = self.enrollment_repo.remove(db, class_id, academic_id)
            result = self._view(db, class_id)
        if removed:
            logger.info(f"Academic {academic_id} removed from class {class_id}")
        return result

    async def list_academic_classes(self, db: Session, academic_id: int) -> List[ClassResponse]:
        with transaction(db):
            self._get_academic(db, academic_id)
            return [
                self._to_response(row)
                for row in self.class_repo.list_views_for_academic(db, academic_id)
            ]

    async def list_professor_classes(self, db: Session, professor_id: int) -> List[ClassResponse]:
        with transaction(db):
            self._get_professor(db, professor_id)
            return [
                self._to_response(row)
                for row in self.class_repo.list_views_for_professor(db, professor_id)
            ]

class_service = ClassService()
