# /tutorhub/services/reporting_helpers/syllabus_progress.py

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from ...models.syllabus_model import SyllabusProgress, SyllabusStatus
from .numbers import percentage


def summarize(topics: Optional[Iterable]) -> List[SyllabusProgress]:
    """Completion per (class, subject), sorted by class then subject."""
    grouped: Dict[Tuple[str, str], List] = defaultdict(list)
    for topic in topics or []:
        grouped[(topic.class_label, topic.subject)].append(topic)

    progress = []
    for (class_label, subject), rows in sorted(grouped.items()):
        total = len(rows)
        completed = sum(1 for t in rows if t.status == SyllabusStatus.COMPLETED)
        progress.append(SyllabusProgress(
            class_label=class_label,
            subject=subject,
            total=total,
            completed=completed,
            inProgress=sum(1 for t in rows if t.status == SyllabusStatus.IN_PROGRESS),
            pending=sum(1 for t in rows if t.status == SyllabusStatus.PENDING),
            percentage=percentage(completed, total) if total else 0,
        ))
    return progress
