# /tutorhub/services/reporting_helpers/attendance_aggregator.py

"""
Attendance totals and the attendance rate.

A "late" mark counts as attended: the rate is (present + late) / total. This
is long-standing policy and every dashboard shows the figure this way.
"""

from collections import Counter, defaultdict
from datetime import date
from typing import Dict, Iterable, List, Optional

from ...models.attendance_model import (
    AttendanceRecord,
    AttendanceStatus,
    AttendanceSummary,
    RegisterEntry,
    StudentAttendanceSummary,
)
from .numbers import percentage

UNMARKED = "unmarked"


def summarize(records: Optional[Iterable[AttendanceRecord]]) -> AttendanceSummary:
    """Counts each status and derives the attendance percentage. `None` is an empty snapshot."""
    counts = Counter(r.status for r in (records or []))
    total = sum(counts.values())
    present = counts[AttendanceStatus.PRESENT]
    late = counts[AttendanceStatus.LATE]
    absent = counts[AttendanceStatus.ABSENT]

    return AttendanceSummary(
        total=total,
        present=present,
        late=late,
        absent=absent,
        percentage=percentage(present + late, total) if total > 0 else 0,
    )


def summarize_by_student(records: Optional[Iterable[AttendanceRecord]]) -> List[StudentAttendanceSummary]:
    """One summary per student found in a class-wide snapshot, ordered by student id."""
    grouped: Dict[str, List[AttendanceRecord]] = defaultdict(list)
    for record in records or []:
        grouped[record.student_id].append(record)

    return [
        StudentAttendanceSummary(student_id=student_id, **summarize(rows).model_dump())
        for student_id, rows in sorted(grouped.items())
    ]


def daily_register(students: Iterable, records: Optional[Iterable[AttendanceRecord]], on: date) -> List[RegisterEntry]:
    """
    Pairs every roster student with their mark for `on`. Students without a
    record for that day are reported as "unmarked".
    """
    by_student = {r.student_id: r for r in (records or []) if r.class_date == on}
    register = []
    for student in students:
        record = by_student.get(student.id)
        register.append(RegisterEntry(
            student_id=student.id,
            name=student.name,
            class_label=student.class_label,
            status=record.status.value if record else UNMARKED,
            notes=record.notes if record else None,
        ))
    return register
