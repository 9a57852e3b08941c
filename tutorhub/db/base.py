# /tutorhub/db/base.py

# Central registry for all ORM models. Importing them here guarantees that
# Base.metadata knows every table before `create_all` runs.

from .base_class import Base

from .models.profile_student_models import Profile, Student
from .models.attendance_models import AttendanceRecord
from .models.fee_models import FeeRecord
from .models.homework_models import Homework, HomeworkSubmission
from .models.exam_models import Test, TestResult
from .models.schedule_models import ClassSchedule
from .models.syllabus_models import SyllabusTopic
