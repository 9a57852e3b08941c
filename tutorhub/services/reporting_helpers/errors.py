# /tutorhub/services/reporting_helpers/errors.py

"""Error kinds raised by the reporting helpers. All are ValueErrors so routers can catch them broadly."""

from typing import Any, Sequence


class DivisionUndefined(ValueError):
    """A derived percentage cannot be computed because the denominator is not positive."""

    def __init__(self, record_id: Any, denominator: Any):
        self.record_id = record_id
        self.denominator = denominator
        super().__init__(f"Cannot compute a percentage for record {record_id}: denominator is {denominator}.")


class ScheduleConflict(ValueError):
    """Two or more schedule entries claim the same day and time slot."""

    def __init__(self, day: str, slot: str, entries: Sequence[Any]):
        self.day = day
        self.slot = slot
        self.entries = list(entries)
        ids = ", ".join(str(getattr(e, "id", None) or getattr(e, "subject", "?")) for e in self.entries)
        super().__init__(f"Schedule conflict on {day} {slot}: entries {ids} share the slot.")


class FeeAlreadySettled(ValueError):
    """A fee record that is already paid cannot be marked paid again."""

    def __init__(self, fee_id: Any):
        self.fee_id = fee_id
        super().__init__(f"Fee record {fee_id} is already paid.")
