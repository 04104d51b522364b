from __future__ import annotations

import pytest

from nexhex import physique as phy
from nexhex import planning as plan
from nexhex.parametres import ScanParameters


def test_reference_projection() -> None:
    proj = plan.project_schedule(144.0, 4)
    assert proj.slot_minutes == 25
    assert proj.slots_per_day == 28
    assert proj.daily_revenue == 8400
    assert len(proj.schedule) == 28
    assert proj.schedule[0].start_label == "8:00 AM"
    assert proj.schedule[0].end_label == "8:25 AM"
    assert proj.schedule[1].start_label == "8:25 AM"
    # 28 * 25 = 700 min -> last slot ends 19:40, no partial slot after it
    assert proj.schedule[-1].end_label == "7:40 PM"


def test_projection_from_engine_outcome() -> None:
    outcome = phy.compute_outcome(ScanParameters())
    proj = plan.project_schedule(outcome.scan_time_seconds, 4)
    assert proj == plan.project_schedule(144.0, 4)


def test_slots_are_consecutive() -> None:
    proj = plan.project_schedule(300.0, 2)
    # 600 + 600 + 300 = 1500 s -> 25 min
    assert proj.slot_minutes == 25
    for i, slot in enumerate(proj.schedule):
        assert slot.index == i
        assert slot.start_minute == 480 + i * proj.slot_minutes
        assert slot.end_minute == slot.start_minute + proj.slot_minutes
    assert proj.schedule[-1].end_minute <= 20 * 60


def test_slot_minutes_round_half_up() -> None:
    # 900 s overhead + 30 s = 930 s = 15.5 min -> 16
    proj = plan.project_schedule(30.0, 1)
    assert proj.slot_minutes == 16
    assert proj.slots_per_day == 720 // 16


def test_long_exam_fits_few_slots() -> None:
    p = ScanParameters(nex=4, matrix_size=512, slice_thickness_mm=1, sequence_id="3D_FSE")
    proj = plan.project_schedule(phy.calculate_scan_time(p), 10)
    # 600 + 126000 + 300 s = 2115 min, more than the whole day
    assert proj.slot_minutes == 2115
    assert proj.slots_per_day == 0
    assert proj.daily_revenue == 0
    assert proj.schedule == ()


def test_degenerate_slot_length_returns_empty_schedule() -> None:
    proj = plan.project_schedule(-1000.0, 1)
    assert proj.slot_minutes <= 0
    assert proj.slots_per_day == 0
    assert proj.daily_revenue == 0
    assert proj.schedule == ()


@pytest.mark.parametrize(
    "minute, label",
    [
        (0, "12:00 AM"),
        (480, "8:00 AM"),
        (505, "8:25 AM"),
        (719, "11:59 AM"),
        (720, "12:00 PM"),
        (805, "1:25 PM"),
        (1200, "8:00 PM"),
        (1440, "12:00 AM"),
    ],
)
def test_format_clock(minute, label) -> None:
    assert plan.format_clock(minute) == label


def test_schedule_to_dataframe() -> None:
    proj = plan.project_schedule(144.0, 4)
    df = plan.schedule_to_dataframe(proj)
    assert list(df.columns) == ["Créneau", "Début", "Fin"]
    assert len(df) == 28
    assert df.iloc[0].tolist() == [1, "8:00 AM", "8:25 AM"]


def test_empty_schedule_dataframe() -> None:
    df = plan.schedule_to_dataframe(plan.project_schedule(-1000.0, 1))
    assert df.empty
