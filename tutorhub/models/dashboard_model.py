# /tutorhub/models/dashboard_model.py

# --- Core Imports ---
from decimal import Decimal
from pydantic import BaseModel, Field

# --- Model Definitions ---
# Values are raw numbers; currency glyphs and percent signs are added by the client.

class TeacherDashboardStats(BaseModel):
    """The four quick-info cards on the teacher dashboard."""
    totalStudents: int = Field(..., description="Students on the roster.", examples=[42])
    monthlyRevenue: Decimal = Field(..., description="Fees collected for the current billing period.")
    pendingFees: Decimal = Field(..., description="Outstanding pending balance for the current billing period.")
    activeClasses: int = Field(..., description="Scheduled weekly class slots.", examples=[12])
    billingPeriod: str = Field(..., description="The billing period the fee figures cover, e.g. 'October 2026'.")


class StudentDashboardStats(BaseModel):
    pendingHomework: int
    upcomingTests: int
    averageScore: int = Field(..., description="Mean percentage over the most recent results.")
    scheduledClasses: int


class ParentDashboardStats(BaseModel):
    studentId: str
    childAttendance: int = Field(..., description="Attendance percentage for the current month.")
    homeworkSubmitted: int
    homeworkTotal: int
    averagePerformance: str = Field(..., description="Letter grade, or 'N/A' with no results.")
    feeStatus: str = Field(..., description="paid, pending, overdue or unknown.")
