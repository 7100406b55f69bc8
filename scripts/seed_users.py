"""
Seed professors and academics.

Users have no creation endpoint, so this script inserts a small sample set
to exercise the class API against a fresh database.

Usage:
    python -m scripts.seed_users
"""
import logging

from app.core.database import SessionLocal, init_db, transaction
from app.models.user import Academic, Professor
from app.repositories.user import user_repository

logger = logging.getLogger(__name__)

PROFESSORS = [
    {"email": "maria.silva@portal.edu", "name": "Prof. Maria Silva", "department": "Computação"},
    {"email": "joao.santos@portal.edu", "name": "Prof. João Santos", "department": "Matemática"},
]

ACADEMICS = [
    {"email": "miguel.ferreira@portal.edu", "name": "Miguel Ferreira", "registration_number": "2024001"},
    {"email": "ana.costa@portal.edu", "name": "Ana Costa", "registration_number": "2024002"},
    {"email": "pedro.almeida@portal.edu", "name": "Pedro Almeida", "registration_number": "2024003"},
]

DEFAULT_PASSWORD = "changeme"


def seed_users(db) -> int:
    """Insert the sample users that are not there yet; returns how many were added."""
    created = 0
    with transaction(db):
        for data in PROFESSORS:
            if user_repository.get_by_email(db, data["email"]):
                continue
            db.add(Professor(plaintext_password=DEFAULT_PASSWORD, **data))
            created += 1
        for data in ACADEMICS:
            if user_repository.get_by_email(db, data["email"]):
                continue
            db.add(Academic(plaintext_password=DEFAULT_PASSWORD, **data))
            created += 1
    return created


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    db = SessionLocal()
    try:
        logger.info(f"Seeded {seed_users(db)} user(s)")
    finally:
        db.close()
