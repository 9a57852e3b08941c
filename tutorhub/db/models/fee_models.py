# /tutorhub/db/models/fee_models.py

from sqlalchemy import Column, String, Date, Numeric, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from ..base_class import Base, TimestampMixin


class FeeRecord(TimestampMixin, Base):
    """
    The fee a student owes for one billing period (e.g. "October 2026").

    Amounts are stored as NUMERIC(10, 2) and surface in Python as Decimal.
    `amount_paid` only counts as revenue once `status` is "paid".
    """
    __tablename__ = "fees"
    __table_args__ = (UniqueConstraint("student_id", "month", name="uq_fees_student_month"),)

    id = Column(String, primary_key=True, index=True)
    student_id = Column(String, ForeignKey("students.id"), nullable=False, index=True)
    month = Column(String, nullable=False, index=True)
    amount_due = Column(Numeric(10, 2), nullable=False)
    amount_paid = Column(Numeric(10, 2), nullable=True, default=0)
    status = Column(String, nullable=False, default="pending")
    payment_date = Column(Date, nullable=True)
    payment_method = Column(String, nullable=True)

    student = relationship("Student", back_populates="fees")
