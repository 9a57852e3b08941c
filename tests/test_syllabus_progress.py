# /tests/test_syllabus_progress.py

from tutorhub.models.syllabus_model import SyllabusStatus, Topic
from tutorhub.services.reporting_helpers import syllabus_progress


def _topic(topic_id, class_label, subject, status):
    return Topic(id=topic_id, class_label=class_label, subject=subject, topic=f"Topic {topic_id}", status=status)


def test_progress_per_class_and_subject():
    progress = syllabus_progress.summarize([
        _topic("1", "10th", "Maths", "completed"),
        _topic("2", "10th", "Maths", "In Progress"),
        _topic("3", "10th", "Maths", "pending"),
        _topic("4", "10th", "Biology", "Completed"),
    ])
    assert [(p.class_label, p.subject) for p in progress] == [("10th", "Biology"), ("10th", "Maths")]

    maths = progress[1]
    assert (maths.total, maths.completed, maths.inProgress, maths.pending) == (3, 1, 1, 1)
    assert maths.percentage == 33
    assert progress[0].percentage == 100


def test_status_aliases():
    assert _topic("1", "10th", "Maths", "in_progress").status == SyllabusStatus.IN_PROGRESS


def test_no_topics():
    assert syllabus_progress.summarize([]) == []
