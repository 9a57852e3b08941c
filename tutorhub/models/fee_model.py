# /tutorhub/models/fee_model.py

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import normalize_status, to_money


class FeeStatus(str, Enum):
    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"


class FeeRecord(BaseModel):
    """A narrowed `fees` row. Amounts are always two-place Decimals."""
    model_config = ConfigDict(from_attributes=True)

    id: Optional[str] = None
    student_id: str
    month: str
    amount_due: Decimal
    amount_paid: Decimal = Decimal("0.00")
    status: FeeStatus
    payment_date: Optional[date] = None
    payment_method: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def _normalize(cls, v):
        return normalize_status(v)

    @field_validator("amount_due", "amount_paid", mode="before")
    @classmethod
    def _money(cls, v):
        return to_money(v)

    @property
    def outstanding(self) -> Decimal:
        """What is still owed on this record, never below zero."""
        return max(self.amount_due - self.amount_paid, Decimal("0.00"))


class FeeCreate(BaseModel):
    student_id: str
    month: str = Field(..., min_length=3, description="Billing period label, e.g. 'October 2026'.")
    amount_due: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    amount_paid: Decimal = Field(default=Decimal("0.00"), ge=0, max_digits=10, decimal_places=2,
                                 description="Must be 0 unless the record is created already paid.")
    status: FeeStatus = FeeStatus.PENDING
    payment_method: Optional[str] = Field(default=None, description="For records created as paid; defaults to 'Cash'.")
    payment_date: Optional[date] = Field(default=None, description="For records created as paid; defaults to today.")

    @field_validator("status", mode="before")
    @classmethod
    def _normalize(cls, v):
        return normalize_status(v)


class MarkPaidRequest(BaseModel):
    payment_method: str = Field(default="Cash", min_length=1)
    payment_date: Optional[date] = Field(default=None, description="Defaults to today.")


class FeeSummary(BaseModel):
    totalRevenue: Decimal = Decimal("0.00")
    pendingAmount: Decimal = Decimal("0.00")
    paidCount: int = 0
    pendingCount: int = 0
    overdueAmount: Decimal = Decimal("0.00")
    overdueCount: int = 0
