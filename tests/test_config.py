"""Tests für das Konfigurationssystem und die Datenmodelle."""

from datetime import datetime
from pathlib import Path

import pytest

from config.schema import (
    BuildingConfig,
    FacilityConfig,
    ScheduleConfig,
    ServiceConfig,
    TimeSlotDef,
)
from config.defaults import (
    COURSES,
    INSTRUCTORS,
    SAMPLE_LOST_ITEMS,
    default_facility_config,
    default_schedule,
    default_time_slots,
)
from config.manager import ConfigManager


# ─── DEFAULT-KONFIGURATION ────────────────────────────────────────────────────

class TestDefaultConfig:
    def test_default_building(self):
        """6 Stockwerke × 12 Räume, Kapazität 30–49."""
        bc = BuildingConfig()
        assert bc.num_floors == 6
        assert bc.rooms_per_floor == 12
        assert (bc.capacity_min, bc.capacity_max) == (30, 49)

    def test_default_time_slots(self):
        slots = default_time_slots()
        assert [s.start_time for s in slots] == ["08:00", "10:00", "13:00", "15:00"]

    def test_default_schedule_weekdays(self):
        sc = default_schedule()
        assert sc.days == [1, 2, 3, 4, 5]
        assert sc.courses == COURSES
        assert sc.instructors == INSTRUCTORS

    def test_default_facility_config_valid(self):
        config = default_facility_config()
        assert config.seed == 42
        assert config.service.default_actor == "Admin"
        assert config.service.simulated_latency_ms == 0

    def test_sample_lost_items(self):
        assert {s["item_name"] for s in SAMPLE_LOST_ITEMS} == {
            "Calculus Textbook", "Blue Umbrella"}


# ─── PYDANTIC-VALIDIERUNG ─────────────────────────────────────────────────────

class TestPydanticValidation:
    def test_capacity_range_inverted_raises(self):
        with pytest.raises(Exception):
            BuildingConfig(capacity_min=50, capacity_max=40)

    def test_too_many_floors_raises(self):
        with pytest.raises(Exception):
            BuildingConfig(num_floors=0)

    def test_time_slot_end_before_start_raises(self):
        with pytest.raises(Exception):
            TimeSlotDef(start_time="10:00", end_time="09:00")

    def test_time_slot_bad_format_raises(self):
        with pytest.raises(Exception):
            TimeSlotDef(start_time="8 Uhr", end_time="09:00")

    def test_days_sorted_and_deduplicated(self):
        sc = ScheduleConfig(days=[5, 1, 1, 3], time_slots=default_time_slots(),
                            courses=["Physics"])
        assert sc.days == [1, 3, 5]

    def test_invalid_day_raises(self):
        with pytest.raises(Exception):
            ScheduleConfig(days=[7], time_slots=[], courses=["Physics"])

    def test_empty_course_pool_raises(self):
        with pytest.raises(Exception):
            ScheduleConfig(time_slots=default_time_slots(), courses=[])

    def test_empty_pool_allowed_without_fill(self):
        sc = ScheduleConfig(time_slots=[], courses=[], fill_probability=0.0)
        assert sc.courses == []

    def test_latency_upper_bound(self):
        with pytest.raises(Exception):
            ServiceConfig(simulated_latency_ms=10_000)


# ─── YAML SPEICHERN / LADEN ───────────────────────────────────────────────────

class TestConfigManager:
    def test_save_and_load_roundtrip(self, tmp_path: Path):
        """Config speichern, laden und validieren, vollständiger Roundtrip."""
        config = default_facility_config()
        config = config.model_copy(update={
            "building": BuildingConfig(building_name="Test-Gebäude", num_floors=3),
        })
        mgr = ConfigManager()
        mgr.CONFIG_DIR = tmp_path
        mgr.DEFAULT_CONFIG = tmp_path / "facility_config.yaml"

        mgr.save(config)
        assert mgr.DEFAULT_CONFIG.exists()

        loaded = mgr.load(mgr.DEFAULT_CONFIG)
        assert loaded == config
        assert loaded.building.building_name == "Test-Gebäude"

    def test_saved_file_has_comments(self, tmp_path: Path):
        mgr = ConfigManager()
        target = tmp_path / "facility_config.yaml"
        mgr.save(default_facility_config(), target)
        text = target.read_text(encoding="utf-8")
        assert text.startswith("# ====")
        assert "─── Gebäude ───" in text
        assert "─── Stundenplan ───" in text

    def test_first_run_check_no_file(self, tmp_path: Path):
        mgr = ConfigManager()
        mgr.DEFAULT_CONFIG = tmp_path / "nonexistent.yaml"
        assert mgr.first_run_check() is True

    def test_first_run_check_with_file(self, tmp_path: Path):
        mgr = ConfigManager()
        mgr.DEFAULT_CONFIG = tmp_path / "facility_config.yaml"
        mgr.save(default_facility_config())
        assert mgr.first_run_check() is False

    def test_load_nonexistent_raises(self, tmp_path: Path):
        mgr = ConfigManager()
        with pytest.raises(FileNotFoundError):
            mgr.load(tmp_path / "not_there.yaml")

    def test_load_invalid_raises_value_error(self, tmp_path: Path):
        target = tmp_path / "broken.yaml"
        target.write_text("building:\n  num_floors: 0\n", encoding="utf-8")
        with pytest.raises(ValueError):
            ConfigManager().load(target)


# ─── MODELLE ──────────────────────────────────────────────────────────────────

class TestModels:
    def test_schedule_minutes_and_day_name(self):
        from models.schedule import ClassSchedule
        s = ClassSchedule(id="s", room_id="f1-r1", course_name="Ethics",
                          instructor="Dr. Smith", day_of_week=0,
                          start_time="08:00", end_time="09:30")
        assert s.start_minutes == 480
        assert s.end_minutes == 570
        assert s.day_name == "So"
        assert s.covers(0, 480)
        assert not s.covers(0, 570)

    def test_to_minutes_rejects_garbage(self):
        from models.schedule import to_minutes
        assert to_minutes("23:59") == 1439
        with pytest.raises(ValueError):
            to_minutes("24:00")

    def test_room_capacity_positive(self):
        from models.room import Room
        with pytest.raises(Exception):
            Room(id="f1-r1", name="MB-101", floor=1, capacity=0)

    def test_room_status_values(self):
        from models.room import RoomStatus
        assert [s.value for s in RoomStatus] == ["free", "occupied", "reserved"]

    def test_request_status_rank(self):
        from models.maintenance import RequestStatus
        assert (RequestStatus.PENDING.rank
                < RequestStatus.IN_PROGRESS.rank
                < RequestStatus.RESOLVED.rank)

    def test_audit_entry_frozen(self):
        from models.audit_log import AuditLogEntry
        entry = AuditLogEntry(id="log-000001", room_id="f1-r1", room_name="MB-101",
                              action="Manual override cleared", user="Admin",
                              timestamp=datetime(2026, 10, 19, 9, 0))
        with pytest.raises(Exception):
            entry.user = "Jemand"

    def test_facility_data_summary(self):
        from data.seed import FacilityDataGenerator
        data = FacilityDataGenerator(default_facility_config()).generate(
            now=datetime(2026, 10, 19, 9, 0))
        assert data.room_count == 72
        assert "72" in data.summary()


# ─── EINDEUTIGE ZEITFENSTER ───────────────────────────────────────────────────

class TestTimeSlotUniqueness:
    def test_duplicate_start_time_raises(self):
        """Gleicher Beginn → gleiche Kurs-ID, daher abgelehnt."""
        with pytest.raises(Exception):
            ScheduleConfig(
                time_slots=[
                    TimeSlotDef(start_time="08:00", end_time="09:30"),
                    TimeSlotDef(start_time="08:00", end_time="09:00"),
                ],
                courses=["Physics"],
            )

    def test_duplicate_start_time_in_yaml_rejected(self, tmp_path: Path):
        mgr = ConfigManager()
        target = tmp_path / "facility_config.yaml"
        mgr.save(default_facility_config(), target)
        text = target.read_text(encoding="utf-8").replace("10:00", "08:00")
        target.write_text(text, encoding="utf-8")
        with pytest.raises(ValueError):
            mgr.load(target)


# ─── INTERAKTIVES BEARBEITEN ──────────────────────────────────────────────────

def _answers(monkeypatch, prompts: list, floats: list) -> None:
    """Ersetzt die rich-Prompts durch vorgegebene Antworten."""
    import config.manager as manager
    prompt_iter = iter(prompts)
    float_iter = iter(floats)
    monkeypatch.setattr(manager.Prompt, "ask", lambda *a, **k: next(prompt_iter))
    monkeypatch.setattr(manager.FloatPrompt, "ask", lambda *a, **k: next(float_iter))


class TestEditSchedule:
    def test_valid_input_applied(self, monkeypatch):
        _answers(monkeypatch, ["0", "5, 1"], [0.3])
        result = ConfigManager()._edit_schedule(default_schedule())
        assert isinstance(result, ScheduleConfig)
        assert result.days == [1, 5]
        assert result.fill_probability == 0.3

    def test_non_numeric_day_keeps_old_values(self, monkeypatch):
        _answers(monkeypatch, ["0", "1,Mo"], [0.6])
        original = default_schedule()
        assert ConfigManager()._edit_schedule(original) == original

    def test_out_of_range_day_keeps_old_values(self, monkeypatch):
        _answers(monkeypatch, ["0", "1,9"], [0.6])
        original = default_schedule()
        assert ConfigManager()._edit_schedule(original) == original

    def test_fill_probability_above_one_keeps_old_values(self, monkeypatch):
        _answers(monkeypatch, ["0", "1,2"], [1.5])
        original = default_schedule()
        assert ConfigManager()._edit_schedule(original) == original

    def test_invalid_slot_skipped(self, monkeypatch):
        _answers(monkeypatch, ["1", "10:00", "09:00", "0", "1,2,3,4,5"], [0.6])
        original = default_schedule()
        result = ConfigManager()._edit_schedule(original)
        assert result.time_slots == original.time_slots

    def test_duplicate_slot_start_keeps_old_values(self, monkeypatch):
        _answers(monkeypatch, ["1", "08:00", "09:00", "0", "1,2,3,4,5"], [0.6])
        original = default_schedule()
        assert ConfigManager()._edit_schedule(original) == original
