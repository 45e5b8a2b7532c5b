"""Unit tests for the crew schedule reader and filters."""

import pytest

from iss_core.errors import ScheduleFileNotFoundError, ScheduleParseError
from iss_core.models import ScheduleRecord
from iss_core.schedule import DEFAULT_SCHEDULE_PATH, filter_schedule, load_schedule

from tests.conftest import HEADER, SAMPLE_ROWS


class TestLoadSchedule:
    """Test CSV parsing."""

    def test_returns_every_row_in_file_order(self, schedule_csv):
        records = load_schedule(schedule_csv)

        assert [r.date for r in records] == [row[0] for row in SAMPLE_ROWS]
        assert [r.crew_member for r in records] == [row[2] for row in SAMPLE_ROWS]

    def test_maps_columns_to_fields(self, schedule_csv):
        record = load_schedule(schedule_csv)[1]

        assert record == ScheduleRecord(
            date="2025-10-06",
            day="Monday",
            crew_member="Alexei Petrov",
            role="Flight Engineer",
            shift_start="07:00",
            shift_end="15:00",
            activity="Filter swap",
            location="Node 3 (Tranquility)",
            notes="Coordinate with ground",
        )

    def test_empty_notes_become_none(self, schedule_csv):
        assert load_schedule(schedule_csv)[0].notes is None

    def test_notes_column_is_optional(self, write_schedule):
        path = write_schedule([row[:8] for row in SAMPLE_ROWS], header=HEADER[:8])

        records = load_schedule(path)

        assert len(records) == len(SAMPLE_ROWS)
        assert all(r.notes is None for r in records)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ScheduleFileNotFoundError, match="not found"):
            load_schedule(tmp_path / "nope.csv")

    def test_missing_required_column(self, write_schedule):
        header = [h for h in HEADER if h != "Role"]
        rows = [[c for i, c in enumerate(row) if i != 3] for row in SAMPLE_ROWS]

        with pytest.raises(ScheduleParseError, match="Role"):
            load_schedule(write_schedule(rows, header=header))

    def test_short_row_fails_whole_read(self, write_schedule):
        rows = [SAMPLE_ROWS[0], SAMPLE_ROWS[1][:5], SAMPLE_ROWS[2]]

        with pytest.raises(ScheduleParseError, match="line 3"):
            load_schedule(write_schedule(rows))

    def test_empty_file(self, write_schedule):
        with pytest.raises(ScheduleParseError, match="empty"):
            load_schedule(write_schedule([], header=None))

    def test_header_only_file_has_no_records(self, write_schedule):
        assert load_schedule(write_schedule([])) == []

    def test_packaged_schedule_loads(self):
        records = load_schedule()

        assert DEFAULT_SCHEDULE_PATH.is_file()
        assert records
        assert {r.day for r in records} >= {"Monday", "Tuesday"}


class TestFilterSchedule:
    """Test day / name filtering."""

    @pytest.fixture
    def records(self, schedule_csv):
        return load_schedule(schedule_csv)

    def test_no_filters_returns_everything(self, records):
        assert filter_schedule(records) == records

    def test_empty_string_filters_are_ignored(self, records):
        assert filter_schedule(records, day="", name="") == records

    def test_day_is_exact_and_case_insensitive(self, records):
        result = filter_schedule(records, day="mONDAY")

        assert len(result) == 2
        assert all(r.day.lower() == "monday" for r in result)

    def test_day_is_not_a_substring_match(self, records):
        assert filter_schedule(records, day="Mon") == []

    def test_name_is_substring_and_case_insensitive(self, records):
        result = filter_schedule(records, name="JANE")

        # "Jane Doe" twice and "John Janeway"
        assert [r.crew_member for r in result] == ["Jane Doe", "Jane Doe", "John Janeway"]

    def test_filters_compose_with_and(self, records):
        both = filter_schedule(records, day="monday", name="jane")
        by_day = filter_schedule(records, day="monday")
        by_name = filter_schedule(records, name="jane")

        assert both == [r for r in by_day if r in by_name]
        assert [r.crew_member for r in both] == ["Jane Doe"]

    def test_preserves_input_order(self, records):
        result = filter_schedule(records, name="e")

        assert result == [r for r in records if "e" in r.crew_member.lower()]

    def test_unknown_day_is_empty_not_error(self, records):
        assert filter_schedule(records, day="Sunday") == []
