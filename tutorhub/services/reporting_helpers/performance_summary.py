# /tutorhub/services/reporting_helpers/performance_summary.py

"""
Test result scoring: percentage, letter grade and the aggregate figures shown
on the test screens.

Letter grades come from a threshold table. Tables are configuration: the
active one is named by `GRADE_SCALE`, and callers can pass any table they need
(the parent dashboard uses the `parent` table, for instance).
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from ...core import config
from ...core.logging_config import get_logger, log_with_context
from ...models.exam_model import PerformanceSummary, ScoredResult, TestResultRecord
from .errors import DivisionUndefined
from .numbers import percentage, round_half_up

logger = get_logger("reporting")

# (minimum percentage, grade) pairs from the highest band down, followed by
# the grade for everything below the last threshold.
GradeScale = Tuple[Sequence[Tuple[int, str]], str]

GRADE_SCALES = {
    "teacher": ([(90, "A+"), (80, "A"), (70, "B+"), (60, "B")], "C"),
    "parent": ([(90, "A+"), (80, "A"), (70, "B+"), (60, "B"), (50, "C")], "D"),
    "simple": ([(90, "A"), (80, "B"), (70, "C"), (60, "D")], "F"),
}

NO_DATA = "N/A"


def get_grade_scale(name: Optional[str] = None) -> GradeScale:
    """Looks up a named table, defaulting to the configured one."""
    name = (name or config.GRADE_SCALE).lower()
    if name not in GRADE_SCALES:
        raise ValueError(f"Unknown grade scale '{name}'. Expected one of: {', '.join(GRADE_SCALES)}.")
    return GRADE_SCALES[name]


def grade_for(pct: int, scale: Optional[GradeScale] = None) -> str:
    thresholds, floor_grade = scale or get_grade_scale()
    for minimum, grade in thresholds:
        if pct >= minimum:
            return grade
    return floor_grade


def grade_order(scale: GradeScale) -> List[str]:
    thresholds, floor_grade = scale
    return [grade for _, grade in thresholds] + [floor_grade]


def score_result(result: TestResultRecord, scale: Optional[GradeScale] = None) -> ScoredResult:
    """Derives percentage and grade for one result. Raises DivisionUndefined when max_marks <= 0."""
    if result.max_marks <= 0:
        raise DivisionUndefined(result.id or f"{result.test_id}/{result.student_id}", result.max_marks)

    pct = percentage(result.marks_obtained, result.max_marks)
    return ScoredResult(
        id=result.id,
        test_id=result.test_id,
        student_id=result.student_id,
        marks_obtained=result.marks_obtained,
        max_marks=result.max_marks,
        percentage=pct,
        grade=grade_for(pct, scale),
    )


def score_results(results: Optional[Iterable[TestResultRecord]],
                  scale: Optional[GradeScale] = None) -> Tuple[List[ScoredResult], int]:
    """
    Scores every result it can. Malformed rows are skipped, logged, and
    counted; the second element of the tuple is the number skipped.
    """
    scale = scale or get_grade_scale()
    scored, skipped = [], 0
    for result in results or []:
        try:
            scored.append(score_result(result, scale))
        except DivisionUndefined as e:
            skipped += 1
            log_with_context(logger, "WARNING", "Skipping test result with undefined percentage",
                             context={"test_id": result.test_id, "student_id": result.student_id},
                             extra_data={"reason": str(e)})
    return scored, skipped


def summarize(results: Optional[Iterable[TestResultRecord]], scale: Optional[GradeScale] = None) -> PerformanceSummary:
    """
    count, rounded mean percentage, grade histogram and best percentage.
    With nothing to score, `best` is the "N/A" sentinel rather than 0 so that
    "no data" stays distinguishable from "scored zero".
    """
    scale = scale or get_grade_scale()
    scored, skipped = score_results(results, scale)
    if not scored:
        return PerformanceSummary(count=0, average=0, gradeHistogram={}, best=NO_DATA, skipped=skipped)

    percentages = [s.percentage for s in scored]
    histogram = {}
    for grade in grade_order(scale):
        count = sum(1 for s in scored if s.grade == grade)
        if count:
            histogram[grade] = count

    return PerformanceSummary(
        count=len(scored),
        average=round_half_up(sum(percentages) / len(percentages)),
        gradeHistogram=histogram,
        best=max(percentages),
        skipped=skipped,
    )
