"""Initial TutorHub schema

Revision ID: a1c4e7f2b9d0
Revises:
Create Date: 2026-10-19 20:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c4e7f2b9d0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Create every table the application uses, parents before children."""
    op.create_table(
        'profiles',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('user_type', sa.String(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_profiles_id', 'profiles', ['id'])
    op.create_index('ix_profiles_email', 'profiles', ['email'], unique=True)
    op.create_index('ix_profiles_user_type', 'profiles', ['user_type'])

    op.create_table(
        'students',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('class_label', sa.String(), nullable=False),
        sa.Column('subjects', sa.JSON(), nullable=False),
        sa.Column('parent_id', sa.String(), nullable=True),
        sa.Column('profile_id', sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['parent_id'], ['profiles.id']),
        sa.ForeignKeyConstraint(['profile_id'], ['profiles.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('profile_id'),
    )
    op.create_index('ix_students_id', 'students', ['id'])
    op.create_index('ix_students_name', 'students', ['name'])
    op.create_index('ix_students_class_label', 'students', ['class_label'])
    op.create_index('ix_students_parent_id', 'students', ['parent_id'])

    op.create_table(
        'tests',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('test_date', sa.Date(), nullable=False),
        sa.Column('max_marks', sa.Integer(), nullable=False),
        sa.Column('created_by', sa.String(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['created_by'], ['profiles.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_tests_id', 'tests', ['id'])
    op.create_index('ix_tests_subject', 'tests', ['subject'])
    op.create_index('ix_tests_test_date', 'tests', ['test_date'])

    op.create_table(
        'homework',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('assigned_date', sa.Date(), server_default=sa.func.current_date(), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=False),
        sa.Column('assigned_by', sa.String(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['assigned_by'], ['profiles.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_homework_id', 'homework', ['id'])
    op.create_index('ix_homework_subject', 'homework', ['subject'])

    op.create_table(
        'class_schedules',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('class_label', sa.String(), nullable=False),
        sa.Column('day', sa.String(), nullable=False),
        sa.Column('start_time', sa.String(length=5), nullable=False),
        sa.Column('end_time', sa.String(length=5), nullable=False),
        sa.Column('created_by', sa.String(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['created_by'], ['profiles.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_class_schedules_id', 'class_schedules', ['id'])
    op.create_index('ix_class_schedules_class_label', 'class_schedules', ['class_label'])
    op.create_index('ix_class_schedules_day', 'class_schedules', ['day'])

    op.create_table(
        'syllabus_topics',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('class_label', sa.String(), nullable=False),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('topic', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('completion_date', sa.Date(), nullable=True),
        sa.Column('created_by', sa.String(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['created_by'], ['profiles.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_syllabus_topics_id', 'syllabus_topics', ['id'])
    op.create_index('ix_syllabus_topics_class_label', 'syllabus_topics', ['class_label'])
    op.create_index('ix_syllabus_topics_subject', 'syllabus_topics', ['subject'])

    op.create_table(
        'attendance',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('student_id', sa.String(), nullable=False),
        sa.Column('class_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('notes', sa.String(), nullable=True),
        sa.Column('marked_by', sa.String(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['student_id'], ['students.id']),
        sa.ForeignKeyConstraint(['marked_by'], ['profiles.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('student_id', 'class_date', name='uq_attendance_student_date'),
    )
    op.create_index('ix_attendance_id', 'attendance', ['id'])
    op.create_index('ix_attendance_student_id', 'attendance', ['student_id'])
    op.create_index('ix_attendance_class_date', 'attendance', ['class_date'])

    op.create_table(
        'fees',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('student_id', sa.String(), nullable=False),
        sa.Column('month', sa.String(), nullable=False),
        sa.Column('amount_due', sa.Numeric(10, 2), nullable=False),
        sa.Column('amount_paid', sa.Numeric(10, 2), nullable=True),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('payment_date', sa.Date(), nullable=True),
        sa.Column('payment_method', sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['student_id'], ['students.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('student_id', 'month', name='uq_fees_student_month'),
    )
    op.create_index('ix_fees_id', 'fees', ['id'])
    op.create_index('ix_fees_student_id', 'fees', ['student_id'])
    op.create_index('ix_fees_month', 'fees', ['month'])

    op.create_table(
        'homework_submissions',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('homework_id', sa.String(), nullable=False),
        sa.Column('student_id', sa.String(), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('submitted_date', sa.Date(), nullable=True),
        sa.Column('parent_acknowledged', sa.Boolean(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['homework_id'], ['homework.id']),
        sa.ForeignKeyConstraint(['student_id'], ['students.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('homework_id', 'student_id', name='uq_submission_homework_student'),
    )
    op.create_index('ix_homework_submissions_id', 'homework_submissions', ['id'])
    op.create_index('ix_homework_submissions_homework_id', 'homework_submissions', ['homework_id'])
    op.create_index('ix_homework_submissions_student_id', 'homework_submissions', ['student_id'])

    op.create_table(
        'test_results',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('test_id', sa.String(), nullable=False),
        sa.Column('student_id', sa.String(), nullable=False),
        sa.Column('marks_obtained', sa.Float(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['test_id'], ['tests.id']),
        sa.ForeignKeyConstraint(['student_id'], ['students.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('test_id', 'student_id', name='uq_result_test_student'),
    )
    op.create_index('ix_test_results_id', 'test_results', ['id'])
    op.create_index('ix_test_results_test_id', 'test_results', ['test_id'])
    op.create_index('ix_test_results_student_id', 'test_results', ['student_id'])


def downgrade() -> None:
    """Drop every table, children before parents."""
    for table in (
        'test_results', 'homework_submissions', 'fees', 'attendance', 'syllabus_topics',
        'class_schedules', 'homework', 'tests', 'students', 'profiles',
    ):
        op.drop_table(table)
