# tests/conftest.py
import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import configure_sqlite_connection, get_db, init_db
from app.main import app
from app.models.user import Academic, Professor

@pytest.fixture
def mock_db_session():
    """Fake DB session for service unit tests"""
    session = MagicMock(spec=Session)
    session.query.return_value.filter.return_value = session.query.return_value
    session.query.return_value.join.return_value = session.query.return_value
    session.query.return_value.order_by.return_value = session.query.return_value
    return session

@pytest.fixture
def engine():
    """In-memory SQLite shared by every connection of one test"""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    configure_sqlite_connection(test_engine)
    init_db(bind=test_engine)
    yield test_engine
    test_engine.dispose()

@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()

@pytest.fixture
def people(db):
    """Two professors and three academics; returns their ids by key"""
    users = {
        "maria": Professor(email="maria@portal.edu", name="Maria Silva",
                           plaintext_password="x", department="Computação"),
        "joao": Professor(email="joao@portal.edu", name="João Santos",
                          plaintext_password="x", department="Matemática"),
        "ana": Academic(email="ana@portal.edu", name="Ana Costa",
                        plaintext_password="x", registration_number="2024001"),
        "pedro": Academic(email="pedro@portal.edu", name="Pedro Almeida",
                          plaintext_password="x", registration_number="2024002"),
        "sofia": Academic(email="sofia@portal.edu", name="Sofia Rodrigues",
                          plaintext_password="x", registration_number="2024003"),
    }
    db.add_all(users.values())
    db.flush()
    ids = {key: user.id for key, user in users.items()}
    db.commit()
    return ids

@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
