# /tutorhub/services/reporting_helpers/homework_progress.py

"""
Homework completion figures.

Only a `completed` submission counts as submitted. A `late` one is counted
in `late` and still falls under `pending`; the parent and student dashboards
depend on this split.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from ...models.homework_model import (
    AssignmentProgress,
    HomeworkProgress,
    StatusCounts,
    SubmissionRecord,
    SubmissionStatus,
)


def summarize(submissions: Optional[Iterable[SubmissionRecord]], student_id: Optional[str] = None) -> HomeworkProgress:
    rows = [s for s in (submissions or []) if student_id is None or s.student_id == student_id]

    total = len(rows)
    submitted = sum(1 for s in rows if s.status == SubmissionStatus.COMPLETED)
    return HomeworkProgress(
        total=total,
        submitted=submitted,
        pending=total - submitted,
        acknowledged=sum(1 for s in rows if s.parent_acknowledged),
        late=sum(1 for s in rows if s.status == SubmissionStatus.LATE),
    )


def summarize_by_assignment(submissions: Optional[Iterable[SubmissionRecord]]) -> List[AssignmentProgress]:
    """Progress for every homework id present in the snapshot, in first-seen order."""
    grouped: Dict[str, List[SubmissionRecord]] = defaultdict(list)
    for submission in submissions or []:
        grouped[submission.homework_id].append(submission)

    return [
        AssignmentProgress(homework_id=homework_id, **summarize(rows).model_dump())
        for homework_id, rows in grouped.items()
    ]


def status_counts(submissions: Optional[Iterable[SubmissionRecord]]) -> StatusCounts:
    """Raw per-status counts for the teacher's homework overview cards."""
    counts = StatusCounts()
    for submission in submissions or []:
        field = submission.status.value
        setattr(counts, field, getattr(counts, field) + 1)
    return counts
