# /tests/test_database_service.py

from datetime import date

import pytest

from tutorhub.services.database_service import DatabaseService


@pytest.fixture
def db_service(db_session):
    """A DatabaseService over the same fresh in-memory database the API tests use."""
    return DatabaseService(db_session)


def _add_test(db_service, test_id, test_date, teacher_id, max_marks=50):
    return db_service.add_test({
        "id": test_id, "title": f"Test {test_id}", "subject": "Physics",
        "test_date": test_date, "max_marks": max_marks, "created_by": teacher_id,
    })


def test_session_is_required():
    with pytest.raises(ValueError):
        DatabaseService(None)


def test_recent_results_follow_test_date_not_entry_order(db_service, seeded):
    student_id, teacher_id = seeded["student_id"], seeded["teacher_id"]
    _add_test(db_service, "tst_late", date(2026, 10, 12), teacher_id)
    _add_test(db_service, "tst_early", date(2026, 9, 5), teacher_id, max_marks=100)

    # Marks for the later test are entered first; the back-filled older test must not displace it.
    db_service.upsert_result({"id": "res_late", "test_id": "tst_late", "student_id": student_id, "marks_obtained": 40})
    db_service.upsert_result({"id": "res_early", "test_id": "tst_early", "student_id": student_id, "marks_obtained": 70})

    latest = db_service.get_results_with_max_marks(student_id=student_id, limit=1)
    assert [r["test_id"] for r in latest] == ["tst_late"]
    assert latest[0]["max_marks"] == 50

    everything = db_service.get_results_with_max_marks(student_id=student_id)
    assert [r["test_id"] for r in everything] == ["tst_late", "tst_early"]
