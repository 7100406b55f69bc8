from app.models.academic import Class
from app.repositories.classes import class_repository
from app.repositories.enrollment import enrollment_repository
from app.repositories.user import user_repository
from app.models.user import UserRole

def add_class(db, name, professor_id):
    return class_repository.create(db, {"name": name, "description": "", "professor_id": professor_id})

def test_polymorphic_user_lookup(db, people):
    professor = user_repository.get(db, people["maria"])
    academic = user_repository.get(db, people["ana"])

    assert professor.role == UserRole.PROFESSOR
    assert professor.department == "Computação"
    assert academic.role == UserRole.ACADEMIC
    assert academic.registration_number == "2024001"
    assert user_repository.get(db, 999) is None

def test_view_joins_professor_and_counts_enrollments(db, people):
    db_class = add_class(db, "Algorithms", people["maria"])
    enrollment_repository.add(db, db_class.id, people["ana"])
    enrollment_repository.add(db, db_class.id, people["pedro"])

    view = class_repository.get_view(db, db_class.id)

    assert view.professor_name == "Maria Silva"
    assert view.enrolled_count == 2

def test_enrollment_edges(db, people):
    db_class = add_class(db, "Algorithms", people["maria"])

    assert not enrollment_repository.is_enrolled(db, db_class.id, people["ana"])
    assert enrollment_repository.add(db, db_class.id, people["ana"]) == 1
    assert enrollment_repository.is_enrolled(db, db_class.id, people["ana"])

    assert enrollment_repository.remove(db, db_class.id, people["ana"]) == 1
    assert enrollment_repository.remove(db, db_class.id, people["ana"]) == 0

def test_academic_view_counts_all_members(db, people):
    db_class = add_class(db, "Algorithms", people["maria"])
    for key in ("ana", "pedro", "sofia"):
        enrollment_repository.add(db, db_class.id, people[key])

    views = class_repository.list_views_for_academic(db, people["ana"])

    assert [v.id for v in views] == [db_class.id]
    assert views[0].enrolled_count == 3

def test_remove_all_for_class_then_delete(db, people):
    db_class = add_class(db, "Algorithms", people["maria"])
    enrollment_repository.add(db, db_class.id, people["ana"])
    enrollment_repository.add(db, db_class.id, people["sofia"])

    assert enrollment_repository.remove_all_for_class(db, db_class.id) == 2
    class_repository.delete(db, db_class)
    db.commit()

    assert db.query(Class).count() == 0
    assert class_repository.list_views_for_academic(db, people["ana"]) == []

def test_duplicate_add_is_ignored_by_pair_constraint(db, people):
    db_class = add_class(db, "Algorithms", people["maria"])

    assert enrollment_repository.add(db, db_class.id, people["ana"]) == 1
    assert enrollment_repository.add(db, db_class.id, people["ana"]) == 0
    db.commit()

    assert class_repository.get_view(db, db_class.id).enrolled_count == 1
