# /tutorhub/services/reporting_helpers/numbers.py

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, Decimal]


def round_half_up(value: Number) -> int:
    """
    Rounds to the nearest integer with halves going up (62.5 -> 63), which is
    how the dashboards have always displayed percentages. Python's built-in
    round() would give 62.
    """
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def percentage(part: Number, whole: Number) -> int:
    """
    Whole-number percentage of `part` over `whole`, rounded half-up.
    The caller guarantees `whole > 0`.
    """
    return round_half_up(Decimal(str(part)) * 100 / Decimal(str(whole)))
