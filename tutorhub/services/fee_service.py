# /tutorhub/services/fee_service.py

"""
Fee records, the fee ledger summary and the mark-as-paid write.
"""

import calendar
import uuid
from datetime import date
from typing import List, Optional

import pandas as pd

from ..core.logging_config import get_logger, log_with_context
from ..models import fee_model
from .database_service import DatabaseService
from .record_boundary import narrow
from .reporting_helpers import fee_ledger

logger = get_logger("reporting")

EXPORT_COLUMNS = ['Student Name', 'Billing Period', 'Amount Due', 'Amount Paid', 'Status', 'Payment Date', 'Payment Method']


def billing_period_label(on: Optional[date] = None) -> str:
    """The label fee records are keyed by, e.g. "October 2026"."""
    on = on or date.today()
    return f"{calendar.month_name[on.month]} {on.year}"


def list_fees(db: DatabaseService, month: Optional[str] = None, student_id: Optional[str] = None) -> List[fee_model.FeeRecord]:
    return narrow(db.get_fees(month=month, student_id=student_id), fee_model.FeeRecord)


def create_fee(fee_data: fee_model.FeeCreate, db: DatabaseService) -> fee_model.FeeRecord:
    """
    Opens a fee record for one billing period. Partial payments are not
    recorded: an unpaid record starts at amount_paid 0, and a record created
    as paid goes through the same settle transition as `mark_fee_paid`.
    """
    if fee_data.status != fee_model.FeeStatus.PAID and fee_data.amount_paid != 0:
        raise ValueError(f"A {fee_data.status.value} fee cannot carry amount_paid; record the payment with mark-paid instead.")
    if fee_data.status == fee_model.FeeStatus.PAID and fee_data.amount_paid not in (0, fee_data.amount_due):
        raise ValueError("A paid fee must be settled in full: amount_paid has to equal amount_due.")
    if not db.get_student_by_id(fee_data.student_id):
        raise ValueError(f"Student with ID {fee_data.student_id} not found")
    if db.get_fee_for_period(fee_data.student_id, fee_data.month):
        raise ValueError(f"A fee record for {fee_data.month} already exists for this student.")

    opened = fee_model.FeeRecord(
        student_id=fee_data.student_id,
        month=fee_data.month,
        amount_due=fee_data.amount_due,
        status=fee_model.FeeStatus.PENDING if fee_data.status == fee_model.FeeStatus.PAID else fee_data.status,
    )
    if fee_data.status == fee_model.FeeStatus.PAID:
        opened = fee_ledger.mark_paid(opened, fee_data.payment_method or "Cash", fee_data.payment_date)

    record = opened.model_dump(exclude={"id"})
    record['id'] = f"fee_{uuid.uuid4().hex[:12]}"
    record['status'] = opened.status.value
    new_fee = db.add_fee(record)
    return fee_model.FeeRecord.model_validate(new_fee)


def get_summary(db: DatabaseService, month: Optional[str] = None, student_id: Optional[str] = None) -> fee_model.FeeSummary:
    return fee_ledger.summarize(list_fees(db, month=month, student_id=student_id))


def mark_fee_paid(fee_id: str, request: fee_model.MarkPaidRequest, db: DatabaseService) -> Optional[fee_model.FeeRecord]:
    """
    Settles a fee record in full. Returns None when the record does not exist;
    raises FeeAlreadySettled when it is already paid.
    """
    db_fee = db.get_fee_by_id(fee_id)
    if db_fee is None:
        return None

    settled = fee_ledger.mark_paid(fee_model.FeeRecord.model_validate(db_fee), request.payment_method, request.payment_date)
    updated = db.update_fee(fee_id, {
        "status": settled.status.value,
        "amount_paid": settled.amount_paid,
        "payment_date": settled.payment_date,
        "payment_method": settled.payment_method,
    })
    log_with_context(logger, "INFO", "Fee marked as paid",
                     context={"fee_id": fee_id, "student_id": settled.student_id},
                     extra_data={"amount": str(settled.amount_paid), "method": settled.payment_method})
    return fee_model.FeeRecord.model_validate(updated)


def get_fee_status(student_id: str, month: str, db: DatabaseService) -> str:
    """paid, pending or overdue for one student and period; "unknown" when no record exists."""
    db_fee = db.get_fee_for_period(student_id, month)
    if db_fee is None:
        return "unknown"
    records = narrow([db_fee], fee_model.FeeRecord)
    return records[0].status.value if records else "unknown"


def export_fees_as_csv(db: DatabaseService, month: Optional[str] = None) -> str:
    names = {s.id: s.name for s in db.get_all_students()}
    export_data = [
        {
            'Student Name': names.get(f.student_id, "Unknown Student"),
            'Billing Period': f.month,
            'Amount Due': str(f.amount_due),
            'Amount Paid': str(f.amount_paid),
            'Status': f.status.value,
            'Payment Date': f.payment_date.isoformat() if f.payment_date else "",
            'Payment Method': f.payment_method or "",
        }
        for f in list_fees(db, month=month)
    ]
    df = pd.DataFrame(export_data) if export_data else pd.DataFrame(columns=EXPORT_COLUMNS)
    return df.to_csv(index=False)
