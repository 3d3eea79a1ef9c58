"""Tests für die Statusauflösung (Override vs. Stundenplan)."""

from datetime import datetime

import pytest

from models.room import Room, RoomStatus
from models.schedule import ClassSchedule
from engine.resolver import resolve, find_active_schedule, day_of_week


# 2026-10-19 ist ein Montag
MONDAY_1030 = datetime(2026, 10, 19, 10, 30)
MONDAY_1200 = datetime(2026, 10, 19, 12, 0)
TUESDAY_1030 = datetime(2026, 10, 20, 10, 30)


def make_room(override=None, room_id: str = "f1-r1") -> Room:
    return Room(id=room_id, name="MB-101", floor=1, capacity=40,
                manual_override=override)


def make_schedule(
    start: str = "10:00",
    end: str = "11:30",
    day: int = 1,
    course: str = "Web Dev",
    schedule_id: str = "f1-r1-1-10:00",
    room_id: str = "f1-r1",
) -> ClassSchedule:
    return ClassSchedule(
        id=schedule_id, room_id=room_id, course_name=course,
        instructor="Dr. Smith", day_of_week=day,
        start_time=start, end_time=end,
    )


# ─── WOCHENTAG ────────────────────────────────────────────────────────────────

class TestDayOfWeek:
    def test_sunday_is_zero(self):
        """Sonntag → 0 (nicht 6 wie bei datetime.weekday)."""
        assert day_of_week(datetime(2026, 10, 18, 9, 0)) == 0

    def test_monday_is_one(self):
        assert day_of_week(MONDAY_1030) == 1

    def test_saturday_is_six(self):
        assert day_of_week(datetime(2026, 10, 24, 9, 0)) == 6


# ─── STUNDENPLAN ──────────────────────────────────────────────────────────────

class TestScheduleResolution:
    def test_running_class_occupies_room(self):
        """Mo 10:30 in Web Dev (10:00–11:30) → belegt mit Kursname."""
        result = resolve(make_room(), [make_schedule()], MONDAY_1030)
        assert result.status == RoomStatus.OCCUPIED
        assert result.current_activity == "Web Dev"

    def test_after_class_room_is_free(self):
        """Mo 12:00 nach Web Dev → frei, keine Aktivität."""
        result = resolve(make_room(), [make_schedule()], MONDAY_1200)
        assert result.status == RoomStatus.FREE
        assert result.current_activity is None

    def test_other_weekday_is_free(self):
        result = resolve(make_room(), [make_schedule()], TUESDAY_1030)
        assert result.status == RoomStatus.FREE

    def test_start_inclusive(self):
        result = resolve(make_room(), [make_schedule()],
                         datetime(2026, 10, 19, 10, 0))
        assert result.status == RoomStatus.OCCUPIED

    def test_end_exclusive(self):
        """Halboffenes Intervall: um 11:30 ist die Veranstaltung vorbei."""
        result = resolve(make_room(), [make_schedule()],
                         datetime(2026, 10, 19, 11, 30))
        assert result.status == RoomStatus.FREE

    def test_last_minute_still_occupied(self):
        result = resolve(make_room(), [make_schedule()],
                         datetime(2026, 10, 19, 11, 29, 59))
        assert result.status == RoomStatus.OCCUPIED

    def test_schedule_of_other_room_ignored(self):
        other = make_schedule(room_id="f1-r2", schedule_id="f1-r2-1-10:00")
        result = resolve(make_room(), [other], MONDAY_1030)
        assert result.status == RoomStatus.FREE

    def test_no_schedules_is_free(self):
        result = resolve(make_room(), [], MONDAY_1030)
        assert result.status == RoomStatus.FREE
        assert result.current_activity is None

    def test_overlap_earliest_start_wins(self):
        """Überschneidung: früherer Beginn gewinnt, unabhängig von der Reihenfolge."""
        late = make_schedule(start="10:15", end="11:00", course="Physics",
                             schedule_id="a-late")
        early = make_schedule(start="10:00", end="11:30", course="Calculus",
                              schedule_id="z-early")
        for order in ([late, early], [early, late]):
            result = resolve(make_room(), order, MONDAY_1030)
            assert result.current_activity == "Calculus"

    def test_overlap_same_start_lowest_id_wins(self):
        a = make_schedule(course="History", schedule_id="s-1")
        b = make_schedule(course="Ethics", schedule_id="s-2")
        assert find_active_schedule(make_room(), [b, a], MONDAY_1030).id == "s-1"


# ─── OVERRIDE ─────────────────────────────────────────────────────────────────

class TestOverrideResolution:
    @pytest.mark.parametrize("override", list(RoomStatus))
    def test_override_beats_schedule(self, override):
        """Override gewinnt immer, auch während einer laufenden Veranstaltung."""
        result = resolve(make_room(override), [make_schedule()], MONDAY_1030)
        assert result.status == override

    def test_occupied_override_label(self):
        result = resolve(make_room(RoomStatus.OCCUPIED), [], MONDAY_1200)
        assert result.current_activity == "Manual Override"

    def test_reserved_override_has_no_label(self):
        result = resolve(make_room(RoomStatus.RESERVED), [make_schedule()], MONDAY_1030)
        assert result.status == RoomStatus.RESERVED
        assert result.current_activity is None

    def test_free_override_hides_running_class(self):
        result = resolve(make_room(RoomStatus.FREE), [make_schedule()], MONDAY_1030)
        assert result.status == RoomStatus.FREE
        assert result.current_activity is None


# ─── REINHEIT ─────────────────────────────────────────────────────────────────

class TestPurity:
    def test_same_inputs_same_output(self):
        room = make_room()
        schedules = [make_schedule()]
        assert resolve(room, schedules, MONDAY_1030) == resolve(room, schedules, MONDAY_1030)

    def test_inputs_unchanged(self):
        room = make_room(RoomStatus.OCCUPIED)
        before = room.model_dump()
        resolve(room, [make_schedule()], MONDAY_1030)
        assert room.model_dump() == before
