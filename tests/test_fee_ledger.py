# /tests/test_fee_ledger.py

from datetime import date
from decimal import Decimal

import pytest

from tutorhub.models.fee_model import FeeRecord, FeeStatus
from tutorhub.services.reporting_helpers import fee_ledger
from tutorhub.services.reporting_helpers.errors import FeeAlreadySettled


def _fee(fee_id, due, paid, status, month="October 2026"):
    return FeeRecord(id=fee_id, student_id="stu_1", month=month, amount_due=due, amount_paid=paid, status=status)


def test_one_paid_one_pending():
    summary = fee_ledger.summarize([
        _fee("fee_1", 1000, 0, "pending"),
        _fee("fee_2", 1000, 1000, "paid"),
    ])
    assert summary.totalRevenue == Decimal("1000.00")
    assert summary.pendingAmount == Decimal("1000.00")
    assert summary.paidCount == 1
    assert summary.pendingCount == 1


def test_empty_ledger():
    summary = fee_ledger.summarize(None)
    assert summary.totalRevenue == Decimal("0.00")
    assert summary.pendingAmount == Decimal("0.00")
    assert summary.paidCount == summary.pendingCount == 0


def test_pending_amount_uses_outstanding_balance():
    summary = fee_ledger.summarize([_fee("fee_1", "1500.00", "500.00", "pending")])
    assert summary.pendingAmount == Decimal("1000.00")


def test_overpaid_pending_record_never_goes_negative():
    summary = fee_ledger.summarize([_fee("fee_1", 100, 150, "pending")])
    assert summary.pendingAmount == Decimal("0.00")


def test_overdue_is_reported_separately():
    summary = fee_ledger.summarize([
        _fee("fee_1", 800, 0, "overdue"),
        _fee("fee_2", 200, 0, "Pending"),
    ])
    assert summary.overdueAmount == Decimal("800.00")
    assert summary.overdueCount == 1
    assert summary.pendingAmount == Decimal("200.00")


def test_float_amounts_keep_exact_cents():
    summary = fee_ledger.summarize([_fee("fee_1", 0.1, 0.1, "paid"), _fee("fee_2", 0.2, 0.2, "paid")])
    assert summary.totalRevenue == Decimal("0.30")


def test_mark_paid_moves_outstanding_into_revenue():
    pending = _fee("fee_1", 1200, 0, "pending")
    other = _fee("fee_2", 1000, 1000, "paid")
    before = fee_ledger.summarize([pending, other])

    settled = fee_ledger.mark_paid(pending, "UPI", on=date(2026, 10, 19))
    after = fee_ledger.summarize([settled, other])

    assert settled.status == FeeStatus.PAID
    assert settled.amount_paid == Decimal("1200.00")
    assert settled.payment_date == date(2026, 10, 19)
    assert settled.payment_method == "UPI"
    assert before.pendingAmount - after.pendingAmount == Decimal("1200.00")
    assert after.totalRevenue - before.totalRevenue == Decimal("1200.00")
    # The input record is left untouched.
    assert pending.status == FeeStatus.PENDING


def test_mark_paid_rejects_settled_record():
    with pytest.raises(FeeAlreadySettled) as exc_info:
        fee_ledger.mark_paid(_fee("fee_9", 1000, 1000, "paid"), "Cash")
    assert exc_info.value.fee_id == "fee_9"
    assert isinstance(exc_info.value, ValueError)
