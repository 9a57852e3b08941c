# /tutorhub/models/common.py

"""
Boundary helpers shared by the pydantic models.

Rows come back from the database (and from older clients) with statuses in
mixed case. Every enumerated status is narrowed to one lower-case vocabulary
here, before any aggregator sees it.
"""

from decimal import Decimal
from typing import Any, Dict, Optional

CENT = Decimal("0.01")


def normalize_status(value: Any, aliases: Optional[Dict[str, str]] = None) -> Any:
    """
    Lower-cases and trims a status string and applies legacy aliases.
    Non-string values (enum members included) pass through untouched so that
    pydantic can validate them.
    """
    if isinstance(value, str):
        value = value.strip().lower()
        if aliases:
            value = aliases.get(value, value)
    return value


def to_money(value: Any) -> Decimal:
    """Coerces a stored amount to a two-place Decimal; None counts as zero."""
    if value is None or value == "":
        return Decimal("0.00")
    if isinstance(value, float):
        # Go through str() so 0.1 becomes Decimal("0.1"), not its binary expansion.
        value = str(value)
    return Decimal(value).quantize(CENT)
