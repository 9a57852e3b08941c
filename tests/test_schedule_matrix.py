# /tests/test_schedule_matrix.py

import pytest
from pydantic import ValidationError

from tutorhub.models.schedule_model import ScheduleEntry, Weekday
from tutorhub.services.reporting_helpers import schedule_matrix
from tutorhub.services.reporting_helpers.errors import ScheduleConflict


def _entry(entry_id, day, start, end, subject="Maths", class_label="10th"):
    return ScheduleEntry(id=entry_id, subject=subject, class_label=class_label, day=day,
                         start_time=start, end_time=end)


def test_grid_is_laid_out_by_day_and_slot():
    matrix = schedule_matrix.build([
        _entry("sch_1", "Monday", "09:00", "10:00"),
        _entry("sch_2", "Wednesday", "07:30", "08:30", subject="Physics"),
    ])
    assert matrix.days == list(Weekday)
    assert matrix.slots == ["07:30 - 08:30", "09:00 - 10:00"]
    assert matrix.grid["Monday"]["09:00 - 10:00"].id == "sch_1"
    assert matrix.grid["Monday"]["07:30 - 08:30"] is None
    assert matrix.grid["Saturday"]["09:00 - 10:00"] is None


def test_two_entries_in_one_cell_raise_conflict():
    with pytest.raises(ScheduleConflict) as exc_info:
        schedule_matrix.build([
            _entry("sch_1", "Monday", "09:00", "10:00"),
            _entry("sch_2", "Monday", "09:00", "10:00", subject="Chemistry"),
        ])
    conflict = exc_info.value
    assert conflict.day == "Monday"
    assert conflict.slot == "09:00 - 10:00"
    assert {e.id for e in conflict.entries} == {"sch_1", "sch_2"}


def test_class_filter_avoids_conflicts_between_classes():
    entries = [
        _entry("sch_1", "Monday", "09:00", "10:00", class_label="10th"),
        _entry("sch_2", "Monday", "09:00", "10:00", class_label="12th"),
    ]
    matrix = schedule_matrix.build(entries, class_label="12th")
    assert matrix.grid["Monday"]["09:00 - 10:00"].id == "sch_2"


def test_same_start_different_end_sorts_by_label():
    matrix = schedule_matrix.build([
        _entry("sch_1", "Monday", "09:00", "11:00"),
        _entry("sch_2", "Tuesday", "09:00", "10:00"),
    ])
    assert matrix.slots == ["09:00 - 10:00", "09:00 - 11:00"]


def test_empty_schedule_has_days_but_no_slots():
    matrix = schedule_matrix.build(None)
    assert matrix.slots == []
    assert set(matrix.grid) == {d.value for d in Weekday}


def test_day_names_are_normalized():
    assert _entry("sch_1", "monday", "09:00", "10:00").day == Weekday.MONDAY


@pytest.mark.parametrize("start, end", [("9:00", "10:00"), ("10:00", "09:00"), ("24:00", "25:00")])
def test_bad_times_are_rejected(start, end):
    with pytest.raises(ValidationError):
        _entry("sch_1", "Monday", start, end)
