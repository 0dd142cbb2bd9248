import pytest

from life_morale.models import TimeCategory, TimeRow, ValidationError
from life_morale.services.allocation import resolve_allocation


def test_empty_time_map_uses_defaults():
    allocation = resolve_allocation([])
    assert allocation.hours(TimeCategory.SLEEP) == 49
    assert all(allocation.ri(category) == 5 for category in TimeCategory)
    assert all(
        allocation.hours(category) == 0 for category in TimeCategory if category is not TimeCategory.SLEEP
    )
    assert allocation.awake_hours == 119
    assert allocation.other_awake == 119


def test_residual_bucket_excludes_tracked_categories():
    rows = [
        TimeRow("Sleep", 56),
        TimeRow("Work", 40),
        TimeRow("Commute", 5),
        TimeRow("Gym", 5),
        TimeRow("Relationships", 20),
        TimeRow("Leisure", 15),
        TimeRow("Chores", 30),
    ]
    allocation = resolve_allocation(rows)
    assert allocation.awake_hours == 112
    assert allocation.other_awake == 27
    assert allocation.bucket_hours(TimeCategory.OTHER) == 27
    assert allocation.bucket_hours(TimeCategory.WORK) == 40


def test_first_duplicate_row_wins():
    rows = [TimeRow("Work", 40, 3), TimeRow("Work", 10, 9)]
    allocation = resolve_allocation(rows)
    assert allocation.hours(TimeCategory.WORK) == 40
    assert allocation.ri(TimeCategory.WORK) == 3


def test_duplicate_rows_rejected_on_request():
    rows = [TimeRow("Work", 40), TimeRow("Work", 10)]
    with pytest.raises(ValidationError, match="Duplicate time row"):
        resolve_allocation(rows, duplicate_policy="reject")


def test_overrun_week_clamps_awake_hours():
    allocation = resolve_allocation([TimeRow("Sleep", 100), TimeRow("Work", 80)])
    assert allocation.awake_hours == 68
    assert allocation.other_awake == 0


def test_oversleep_clamps_to_zero_awake():
    allocation = resolve_allocation([TimeRow("Sleep", 200)])
    assert allocation.awake_hours == 0
    assert allocation.other_awake == 0


def test_unknown_category_is_ignored():
    allocation = resolve_allocation([TimeRow("Naps", 30), TimeRow("Work", 10)])
    assert allocation.hours(TimeCategory.WORK) == 10
    assert allocation.other_awake == 109
