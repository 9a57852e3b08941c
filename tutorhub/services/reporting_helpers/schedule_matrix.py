# /tutorhub/services/reporting_helpers/schedule_matrix.py

"""
Lays weekly schedule entries out as a day x time-slot grid.

Slots are sorted as plain strings by their start time. That is only correct
because times are zero-padded 24-hour "HH:MM", which `ScheduleEntry`
enforces on the way in.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from ...models.schedule_model import ScheduleEntry, ScheduleMatrix, Weekday
from .errors import ScheduleConflict

DAYS: List[Weekday] = list(Weekday)


def build(entries: Optional[Iterable[ScheduleEntry]], class_label: Optional[str] = None) -> ScheduleMatrix:
    """
    Builds the grid. Every (day, slot) cell holds at most one entry; a second
    entry for an occupied cell raises ScheduleConflict naming all of them.
    """
    rows = [e for e in (entries or []) if class_label is None or e.class_label == class_label]

    cells: Dict[Tuple[Weekday, str], List[ScheduleEntry]] = defaultdict(list)
    starts: Dict[str, str] = {}
    for entry in rows:
        cells[(entry.day, entry.slot_label)].append(entry)
        starts[entry.slot_label] = entry.start_time

    for (day, slot), claimants in cells.items():
        if len(claimants) > 1:
            raise ScheduleConflict(day.value, slot, claimants)

    # Ties on start time fall back to the full label, so 09:00 - 10:00 precedes 09:00 - 11:00.
    slots = sorted(starts, key=lambda label: (starts[label], label))

    grid = {
        day.value: {slot: (cells[(day, slot)][0] if cells.get((day, slot)) else None) for slot in slots}
        for day in DAYS
    }
    return ScheduleMatrix(days=DAYS, slots=slots, grid=grid)
