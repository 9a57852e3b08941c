# /tutorhub/services/reporting_helpers/fee_ledger.py

"""
Fee ledger totals and the mark-as-paid transition.

All arithmetic is Decimal. `amount_paid` is only revenue once the record's
status is `paid`; partial payments are not modelled.
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from ...models.fee_model import FeeRecord, FeeStatus, FeeSummary
from ...models.common import CENT
from .errors import FeeAlreadySettled

ZERO = Decimal("0.00")


def summarize(records: Optional[Iterable[FeeRecord]]) -> FeeSummary:
    total_revenue = ZERO
    pending_amount = ZERO
    overdue_amount = ZERO
    paid_count = pending_count = overdue_count = 0

    for record in records or []:
        if record.status == FeeStatus.PAID:
            total_revenue += record.amount_paid
            paid_count += 1
        elif record.status == FeeStatus.PENDING:
            pending_amount += record.outstanding
            pending_count += 1
        elif record.status == FeeStatus.OVERDUE:
            overdue_amount += record.outstanding
            overdue_count += 1

    return FeeSummary(
        totalRevenue=total_revenue.quantize(CENT),
        pendingAmount=pending_amount.quantize(CENT),
        paidCount=paid_count,
        pendingCount=pending_count,
        overdueAmount=overdue_amount.quantize(CENT),
        overdueCount=overdue_count,
    )


def mark_paid(record: FeeRecord, payment_method: str, on: Optional[date] = None) -> FeeRecord:
    """
    Returns a copy of `record` settled in full: status paid, amount_paid equal
    to amount_due, stamped with the payment date and method.
    """
    if record.status == FeeStatus.PAID:
        raise FeeAlreadySettled(record.id)

    return record.model_copy(update={
        "status": FeeStatus.PAID,
        "amount_paid": record.amount_due,
        "payment_date": on or date.today(),
        "payment_method": payment_method,
    })
