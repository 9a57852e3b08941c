# /tests/test_record_boundary.py

from types import SimpleNamespace

from tutorhub.models.attendance_model import AttendanceRecord, AttendanceStatus
from tutorhub.services.record_boundary import narrow


def test_narrow_accepts_orm_like_objects_and_dicts():
    rows = [
        SimpleNamespace(id="att_1", student_id="stu_1", class_date="2026-10-01", status="PRESENT",
                        notes=None, marked_by="prf_t"),
        {"id": "att_2", "student_id": "stu_1", "class_date": "2026-10-02", "status": " Late "},
    ]
    records = narrow(rows, AttendanceRecord)
    assert [r.status for r in records] == [AttendanceStatus.PRESENT, AttendanceStatus.LATE]


def test_narrow_skips_rows_it_cannot_read():
    rows = [
        {"id": "att_1", "student_id": "stu_1", "class_date": "2026-10-01", "status": "present"},
        {"id": "att_2", "student_id": "stu_1", "class_date": "2026-10-02", "status": "excused"},
        {"id": "att_3", "class_date": "2026-10-03", "status": "absent"},
    ]
    records = narrow(rows, AttendanceRecord)
    assert [r.id for r in records] == ["att_1"]


def test_narrow_none_is_empty():
    assert narrow(None, AttendanceRecord) == []
