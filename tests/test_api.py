# /tests/test_api.py

from datetime import date, timedelta

from tutorhub.services.fee_service import billing_period_label


def test_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "running" in response.json()["status"]
    assert response.headers["X-Request-Id"]


# --- Identity & Roles ---

def test_missing_or_unknown_profile_is_unauthorized(client):
    assert client.get("/api/students").status_code == 401
    assert client.get("/api/students", headers={"X-Profile-Id": "prf_nobody"}).status_code == 401


def test_wrong_role_is_forbidden(client, seeded):
    assert client.get("/api/students", headers=seeded["parent"]).status_code == 403
    assert client.get("/api/dashboard/teacher", headers=seeded["student"]).status_code == 403


def test_duplicate_profile_email_conflicts(client, seeded):
    response = client.post("/api/profiles", json={"name": "Asha Again", "email": "asha@example.com", "user_type": "teacher"})
    assert response.status_code == 409


def test_read_own_profile(client, seeded):
    response = client.get("/api/profiles/me", headers=seeded["student"])
    assert response.status_code == 200
    assert response.json()["user_type"] == "student"


# --- Students ---

def test_student_crud(client, seeded):
    teacher = seeded["teacher"]
    student_id = seeded["student_id"]

    roster = client.get("/api/students", headers=teacher, params={"class_label": "10th"}).json()
    assert [s["id"] for s in roster] == [student_id]
    assert roster[0]["subjects"] == ["Maths", "Physics"]

    response = client.put(f"/api/students/{student_id}", headers=teacher, json={"class_label": "11th"})
    assert response.status_code == 200
    assert response.json()["class_label"] == "11th"

    assert client.put(f"/api/students/{student_id}", headers=teacher, json={}).status_code == 400

    assert client.delete(f"/api/students/{student_id}", headers=teacher).status_code == 204
    assert client.get(f"/api/students/{student_id}", headers=teacher).status_code == 404


def test_parent_sees_only_own_child(client, seeded):
    other_parent = client.post("/api/profiles", json={
        "name": "Other Parent", "email": "other@example.com", "user_type": "parent",
    }).json()["id"]

    assert client.get(f"/api/students/{seeded['student_id']}", headers=seeded["parent"]).status_code == 200
    assert client.get(f"/api/students/{seeded['student_id']}",
                      headers={"X-Profile-Id": other_parent}).status_code == 404


# --- Attendance ---

def test_marking_twice_replaces_the_first_mark(client, seeded):
    teacher, student_id = seeded["teacher"], seeded["student_id"]
    mark = {"student_id": student_id, "class_date": "2026-10-05", "status": "present"}

    assert client.post("/api/attendance", headers=teacher, json=mark).status_code == 200
    response = client.post("/api/attendance", headers=teacher, json=dict(mark, status="Late"))
    assert response.status_code == 200
    assert response.json()["status"] == "late"

    summary = client.get(f"/api/attendance/students/{student_id}/summary", headers=teacher).json()
    assert summary == {"total": 1, "present": 0, "late": 1, "absent": 0, "percentage": 100}


def test_bulk_mark_and_register(client, seeded):
    teacher = seeded["teacher"]
    response = client.post("/api/attendance/bulk", headers=teacher,
                           json={"class_date": "2026-10-06", "status": "absent", "class_label": "10th"})
    assert response.json()["marked"] == 1

    register = client.get("/api/attendance/register", headers=teacher, params={"class_date": "2026-10-06"}).json()
    assert register[0]["status"] == "absent"

    unmarked = client.get("/api/attendance/register", headers=teacher, params={"class_date": "2026-10-07"}).json()
    assert unmarked[0]["status"] == "unmarked"


def test_attendance_for_unknown_student(client, seeded):
    response = client.post("/api/attendance", headers=seeded["teacher"],
                           json={"student_id": "stu_missing", "class_date": "2026-10-05", "status": "present"})
    assert response.status_code == 404


def test_attendance_export(client, seeded):
    client.post("/api/attendance", headers=seeded["teacher"],
                json={"student_id": seeded["student_id"], "class_date": "2026-10-05", "status": "present"})
    response = client.get("/api/attendance/export", headers=seeded["teacher"])
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    lines = response.text.strip().splitlines()
    assert lines[0] == "Date,Student Name,Class,Status,Notes"
    assert lines[1].startswith("2026-10-05,Meera Shah,10th,present")


# --- Fees ---

def test_fee_lifecycle(client, seeded):
    teacher, student_id = seeded["teacher"], seeded["student_id"]
    fee = client.post("/api/fees", headers=teacher,
                      json={"student_id": student_id, "month": "October 2026", "amount_due": "1000.00"})
    assert fee.status_code == 201, fee.text
    fee_id = fee.json()["id"]

    duplicate = client.post("/api/fees", headers=teacher,
                            json={"student_id": student_id, "month": "October 2026", "amount_due": "500.00"})
    assert duplicate.status_code == 400

    before = client.get("/api/fees/summary", headers=teacher, params={"month": "October 2026"}).json()
    assert before["pendingAmount"] == "1000.00"
    assert before["totalRevenue"] == "0.00"

    paid = client.post(f"/api/fees/{fee_id}/pay", headers=teacher, json={"payment_method": "UPI"})
    assert paid.status_code == 200
    assert paid.json()["status"] == "paid"
    assert paid.json()["amount_paid"] == "1000.00"

    after = client.get("/api/fees/summary", headers=teacher, params={"month": "October 2026"}).json()
    assert after["pendingAmount"] == "0.00"
    assert after["totalRevenue"] == "1000.00"

    assert client.post(f"/api/fees/{fee_id}/pay", headers=teacher, json={}).status_code == 409
    assert client.post("/api/fees/fee_missing/pay", headers=teacher, json={}).status_code == 404


def test_unpaid_fee_cannot_be_created_with_a_payment(client, seeded):
    teacher, student_id = seeded["teacher"], seeded["student_id"]
    for status in ("pending", "overdue"):
        rejected = client.post("/api/fees", headers=teacher, json={
            "student_id": student_id, "month": "October 2026", "amount_due": "1000.00",
            "amount_paid": "300.00", "status": status,
        })
        assert rejected.status_code == 400
    assert client.get("/api/fees", headers=teacher).json() == []

    fee_id = client.post("/api/fees", headers=teacher, json={
        "student_id": student_id, "month": "October 2026", "amount_due": "1000.00", "amount_paid": "0",
    }).json()["id"]
    before = client.get("/api/fees/summary", headers=teacher, params={"month": "October 2026"}).json()
    client.post(f"/api/fees/{fee_id}/pay", headers=teacher, json={})
    after = client.get("/api/fees/summary", headers=teacher, params={"month": "October 2026"}).json()

    # Settling moves exactly the same amount out of pending and into revenue.
    pending_drop = float(before["pendingAmount"]) - float(after["pendingAmount"])
    revenue_rise = float(after["totalRevenue"]) - float(before["totalRevenue"])
    assert pending_drop == revenue_rise == 1000.0


def test_fee_created_as_paid_is_settled_in_full(client, seeded):
    teacher, student_id = seeded["teacher"], seeded["student_id"]
    created = client.post("/api/fees", headers=teacher, json={
        "student_id": student_id, "month": "September 2026", "amount_due": "1200.00", "status": "paid",
    })
    assert created.status_code == 201, created.text
    body = created.json()
    assert body["status"] == "paid"
    assert body["amount_paid"] == "1200.00"
    assert body["payment_method"] == "Cash"
    assert body["payment_date"] == date.today().isoformat()

    summary = client.get("/api/fees/summary", headers=teacher, params={"month": "September 2026"}).json()
    assert summary["totalRevenue"] == "1200.00"
    assert summary["pendingAmount"] == "0.00"

    with_method = client.post("/api/fees", headers=teacher, json={
        "student_id": student_id, "month": "August 2026", "amount_due": "800.00", "status": "paid",
        "payment_method": "UPI", "payment_date": "2026-08-03",
    }).json()
    assert with_method["payment_method"] == "UPI"
    assert with_method["payment_date"] == "2026-08-03"

    partial = client.post("/api/fees", headers=teacher, json={
        "student_id": student_id, "month": "July 2026", "amount_due": "800.00", "amount_paid": "200.00", "status": "paid",
    })
    assert partial.status_code == 400


# --- Homework ---

def test_homework_assignment_and_progress(client, seeded):
    teacher, student_id = seeded["teacher"], seeded["student_id"]
    homework = client.post("/api/homework", headers=teacher, json={
        "title": "Quadratic equations", "subject": "Maths",
        "assigned_date": "2026-10-01", "due_date": "2026-10-08", "assigned_to": [student_id],
    })
    assert homework.status_code == 201, homework.text
    homework_id = homework.json()["id"]

    submissions = client.get(f"/api/homework/{homework_id}/submissions", headers=teacher).json()
    assert [s["status"] for s in submissions] == ["pending"]
    submission_id = submissions[0]["id"]

    updated = client.put(f"/api/homework/submissions/{submission_id}", headers=teacher, json={"status": "late"})
    assert updated.json()["status"] == "late"
    assert updated.json()["submitted_date"] is not None

    progress = client.get(f"/api/homework/students/{student_id}/progress", headers=seeded["parent"]).json()
    assert progress["submitted"] == 0
    assert progress["late"] == 1

    acknowledged = client.post(f"/api/homework/submissions/{submission_id}/acknowledge", headers=seeded["parent"])
    assert acknowledged.json()["parent_acknowledged"] is True

    assert client.delete(f"/api/homework/{homework_id}", headers=teacher).status_code == 204
    assert client.get(f"/api/homework/students/{student_id}/submissions", headers=teacher).json() == []


# --- Tests & Results ---

def test_results_are_scored_and_summarized(client, seeded):
    teacher, student_id = seeded["teacher"], seeded["student_id"]
    created = client.post("/api/tests", headers=teacher,
                          json={"title": "Unit Test 1", "subject": "Physics", "test_date": "2026-10-10", "max_marks": 50})
    assert created.status_code == 201
    test_id = created.json()["id"]

    scored = client.post(f"/api/tests/{test_id}/results", headers=teacher,
                         json={"student_id": student_id, "marks_obtained": 45})
    assert scored.status_code == 200
    assert scored.json()["percentage"] == 90

    too_many = client.post(f"/api/tests/{test_id}/results", headers=teacher,
                           json={"student_id": student_id, "marks_obtained": 60})
    assert too_many.status_code == 400
    assert client.post("/api/tests/tst_missing/results", headers=teacher,
                       json={"student_id": student_id, "marks_obtained": 1}).status_code == 404

    summary = client.get(f"/api/tests/{test_id}/summary", headers=teacher, params={"scale": "simple"}).json()
    assert summary["count"] == 1
    assert summary["best"] == 90
    assert summary["gradeHistogram"] == {"A": 1}

    assert client.get("/api/tests/summary", headers=teacher, params={"scale": "curved"}).status_code == 400


def test_summary_without_results(client, seeded):
    summary = client.get("/api/tests/summary", headers=seeded["teacher"]).json()
    assert summary["count"] == 0
    assert summary["best"] == "N/A"


# --- Timetable ---

def test_schedule_write_into_taken_slot_conflicts(client, seeded):
    teacher = seeded["teacher"]
    entry = {"subject": "Maths", "class_label": "10th", "day": "monday", "start_time": "09:00", "end_time": "10:00"}
    first = client.post("/api/schedules", headers=teacher, json=entry).json()["id"]

    matrix = client.get("/api/schedules/matrix", headers=seeded["student"])
    assert matrix.status_code == 200
    assert matrix.json()["grid"]["Monday"]["09:00 - 10:00"]["id"] == first

    # Another class in the same slot is still a double booking for the tutor.
    clash = client.post("/api/schedules", headers=teacher, json=dict(entry, subject="Chemistry", class_label="9th"))
    assert clash.status_code == 409
    detail = clash.json()["detail"]
    assert detail["day"] == "Monday"
    assert detail["slot"] == "09:00 - 10:00"
    assert first in detail["entryIds"]
    assert len(client.get("/api/schedules", headers=teacher).json()) == 1

    second = client.post("/api/schedules", headers=teacher, json=dict(entry, subject="Chemistry", day="Tuesday"))
    assert second.status_code == 201, second.text
    second_id = second.json()["id"]

    moved = client.put(f"/api/schedules/{second_id}", headers=teacher, json={"day": "Monday"})
    assert moved.status_code == 409
    assert set(moved.json()["detail"]["entryIds"]) == {first, second_id}

    # Re-saving an entry in its own slot is not a conflict.
    renamed = client.put(f"/api/schedules/{first}", headers=teacher, json={"subject": "Algebra"})
    assert renamed.status_code == 200
    assert client.get("/api/schedules/matrix", headers=teacher).status_code == 200


def test_schedule_rejects_end_before_start(client, seeded):
    response = client.post("/api/schedules", headers=seeded["teacher"], json={
        "subject": "Maths", "class_label": "10th", "day": "Friday", "start_time": "10:00", "end_time": "09:00",
    })
    assert response.status_code == 422


# --- Syllabus ---

def test_syllabus_progress(client, seeded):
    teacher = seeded["teacher"]
    topic_ids = [
        client.post("/api/syllabus", headers=teacher,
                    json={"class_label": "10th", "subject": "Maths", "topic": name}).json()["id"]
        for name in ("Algebra", "Geometry")
    ]
    done = client.put(f"/api/syllabus/{topic_ids[0]}/status", headers=teacher, json={"status": "Completed"})
    assert done.json()["completion_date"] is not None

    progress = client.get("/api/syllabus/progress", headers=seeded["student"]).json()
    assert progress == [{
        "class_label": "10th", "subject": "Maths", "total": 2,
        "completed": 1, "inProgress": 0, "pending": 1, "percentage": 50,
    }]


# --- Dashboards ---

def test_dashboards(client, seeded):
    teacher, student_id = seeded["teacher"], seeded["student_id"]
    today = date.today()

    client.post("/api/fees", headers=teacher,
                json={"student_id": student_id, "month": billing_period_label(today), "amount_due": "1200.00"})
    client.post("/api/attendance", headers=teacher,
                json={"student_id": student_id, "class_date": today.isoformat(), "status": "present"})
    test_id = client.post("/api/tests", headers=teacher, json={
        "title": "Weekly Quiz", "subject": "Maths",
        "test_date": (today + timedelta(days=3)).isoformat(), "max_marks": 20,
    }).json()["id"]
    client.post(f"/api/tests/{test_id}/results", headers=teacher, json={"student_id": student_id, "marks_obtained": 11})

    teacher_stats = client.get("/api/dashboard/teacher", headers=teacher).json()
    assert teacher_stats["totalStudents"] == 1
    assert teacher_stats["pendingFees"] == "1200.00"
    assert teacher_stats["billingPeriod"] == billing_period_label(today)

    student_stats = client.get("/api/dashboard/student", headers=seeded["student"]).json()
    assert student_stats["upcomingTests"] == 1
    assert student_stats["averageScore"] == 55

    parent_stats = client.get(f"/api/dashboard/parent/{student_id}", headers=seeded["parent"]).json()
    assert parent_stats["childAttendance"] == 100
    assert parent_stats["averagePerformance"] == "C"
    assert parent_stats["feeStatus"] == "pending"

    assert client.get("/api/dashboard/parent/stu_missing", headers=seeded["parent"]).status_code == 404
