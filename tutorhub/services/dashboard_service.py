# /tutorhub/services/dashboard_service.py

"""
Assembles the quick-info cards of the three role dashboards.

Each function receives the acting identity (or the already-resolved student)
as an argument, fetches the snapshots it needs through the DatabaseService and
delegates every figure to a reporting helper, so the dashboards and the detail
screens always agree.
"""

from datetime import date, timedelta
from typing import Optional

# --- Core Imports ---
from ..core import config
from ..core.logging_config import get_logger, log_with_context
from ..models import attendance_model, homework_model
from ..models.dashboard_model import ParentDashboardStats, StudentDashboardStats, TeacherDashboardStats
from .database_service import DatabaseService
from .record_boundary import narrow
from .reporting_helpers import attendance_aggregator, homework_progress, performance_summary
from . import exam_service, fee_service

logger = get_logger("reporting")


def _month_bounds(on: date):
    first = on.replace(day=1)
    next_month = (first + timedelta(days=32)).replace(day=1)
    return first, next_month - timedelta(days=1)


def get_teacher_stats(db: DatabaseService, today: Optional[date] = None) -> TeacherDashboardStats:
    """
    Roster size, the current billing period's revenue and pending balance, and
    the number of weekly class slots.
    """
    today = today or date.today()
    try:
        period = fee_service.billing_period_label(today)
        fee_summary = fee_service.get_summary(db, month=period)

        return TeacherDashboardStats(
            totalStudents=len(db.get_all_students()),
            monthlyRevenue=fee_summary.totalRevenue,
            pendingFees=fee_summary.pendingAmount,
            activeClasses=len(db.get_schedules()),
            billingPeriod=period,
        )
    except Exception:
        log_with_context(logger, "ERROR", "Failed to calculate teacher dashboard stats", exc_info=True)
        # Re-raise so the router layer turns it into a 500.
        raise


def get_student_stats(student, db: DatabaseService, today: Optional[date] = None) -> StudentDashboardStats:
    """Figures for the signed-in student's own dashboard."""
    today = today or date.today()
    try:
        progress = homework_progress.summarize(
            narrow(db.get_submissions(student_id=student.id), homework_model.SubmissionRecord),
            student_id=student.id,
        )
        recent = exam_service.get_performance_summary(
            db, student_id=student.id, limit=config.RECENT_RESULTS_LIMIT,
        )
        return StudentDashboardStats(
            pendingHomework=progress.pending,
            upcomingTests=len(db.get_upcoming_tests(today)),
            averageScore=recent.average,
            scheduledClasses=len(db.get_schedules(class_label=student.class_label)),
        )
    except Exception:
        log_with_context(logger, "ERROR", "Failed to calculate student dashboard stats",
                         context={"student_id": student.id}, exc_info=True)
        raise


def get_parent_stats(child, db: DatabaseService, today: Optional[date] = None) -> ParentDashboardStats:
    """
    Figures for one child on the parent dashboard: this month's attendance,
    homework assigned in the recent window, the recent average as a letter
    grade on the parent table, and this period's fee status.
    """
    today = today or date.today()
    try:
        month_start, month_end = _month_bounds(today)
        attendance = attendance_aggregator.summarize(
            narrow(db.get_attendance(student_id=child.id, start=month_start, end=month_end),
                   attendance_model.AttendanceRecord)
        )

        window_start = today - timedelta(days=config.HOMEWORK_WINDOW_DAYS)
        homework = homework_progress.summarize(
            narrow(db.get_submissions(student_id=child.id, assigned_since=window_start),
                   homework_model.SubmissionRecord),
            student_id=child.id,
        )

        recent = exam_service.get_performance_summary(
            db, student_id=child.id, limit=config.RECENT_RESULTS_LIMIT, scale_name="parent",
        )
        if recent.count:
            scale = performance_summary.get_grade_scale("parent")
            average_performance = performance_summary.grade_for(recent.average, scale)
        else:
            average_performance = performance_summary.NO_DATA

        return ParentDashboardStats(
            studentId=child.id,
            childAttendance=attendance.percentage,
            homeworkSubmitted=homework.submitted,
            homeworkTotal=homework.total,
            averagePerformance=average_performance,
            feeStatus=fee_service.get_fee_status(child.id, fee_service.billing_period_label(today), db),
        )
    except Exception:
        log_with_context(logger, "ERROR", "Failed to calculate parent dashboard stats",
                         context={"student_id": child.id}, exc_info=True)
        raise
