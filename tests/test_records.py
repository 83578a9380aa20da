# ==============================================
# Tests for Records Module
# ==============================================

from datetime import datetime, timezone

import pytest

from record_vault.errors import ValidationError
from record_vault.records import (
    Record,
    SortField,
    SortOrder,
    compute_statistics,
    generate_id,
    parse_timestamp,
    validate_record,
)

T0 = datetime(2026, 10, 19, 10, 0, 0, tzinfo=timezone.utc)


class TestRecordWireFormat:

    def test_to_dict_uses_camel_case_keys(self):
        """createdDate is ISO with a Z suffix; modifiedDate omitted until set."""
        data = Record(id=1, name="Alpha", value="1", created_date=T0).to_dict()
        assert data == {
            "id": 1,
            "name": "Alpha",
            "value": "1",
            "createdDate": "2026-10-19T10:00:00.000Z",
        }

    def test_to_dict_includes_modified_date(self):
        record = Record(id=1, name="a", value="b", created_date=T0,
                        modified_date=datetime(2026, 10, 20, tzinfo=timezone.utc))
        assert record.to_dict()["modifiedDate"] == "2026-10-20T00:00:00.000Z"

    def test_from_dict_ignores_mongo_id(self):
        """Documents read from MongoDB carry _id; it must not leak into the Record."""
        record = Record.from_dict({
            "_id": "65f0c0ffee",
            "id": 7,
            "name": "Alpha",
            "value": "1",
            "createdDate": "2026-10-19T10:00:00.000Z",
        })
        assert record == Record(id=7, name="Alpha", value="1", created_date=T0)

    def test_from_dict_tolerates_missing_dates(self):
        record = Record.from_dict({"id": 3, "name": "x", "value": "y"})
        assert record.created_date is None
        assert record.modified_date is None

    def test_parse_timestamp_treats_naive_as_utc(self):
        assert parse_timestamp("2026-10-19T10:00:00") == T0
        assert parse_timestamp(datetime(2026, 10, 19, 10, 0, 0)) == T0


class TestValidation:

    @pytest.mark.parametrize("name,value", [
        ("", "v"),
        ("   ", "v"),
        ("n", ""),
        (None, "v"),
        ("n", None),
    ])
    def test_rejects_empty_fields(self, name, value):
        with pytest.raises(ValidationError):
            validate_record(name, value)

    def test_accepts_non_empty_fields(self):
        validate_record("name", "value")


class TestIdGeneration:

    def test_uses_epoch_milliseconds(self):
        assert generate_id([], T0) == int(T0.timestamp() * 1000)

    def test_bumps_past_highest_existing_id(self):
        """A clock that lags behind stored ids must still produce a fresh id."""
        existing = [int(T0.timestamp() * 1000) + 50]
        assert generate_id(existing, T0) == existing[0] + 1

    def test_avoids_string_id_collision(self):
        candidate = int(T0.timestamp() * 1000)
        assert generate_id([str(candidate)], T0) == candidate + 1

    def test_stays_above_issued_floor(self):
        """Ids handed out earlier but since deleted still block reuse."""
        now_ms = int(T0.timestamp() * 1000)
        assert generate_id([], T0, issued_floor=now_ms) == now_ms + 1
        assert generate_id([], T0, issued_floor=now_ms - 10) == now_ms


class TestSortOptions:

    @pytest.mark.parametrize("raw", ["Name", "name", " NAME "])
    def test_parse_name(self, raw):
        assert SortField.parse(raw) is SortField.NAME

    @pytest.mark.parametrize("raw", ["CreationDate", "Creation Date", "creation_date"])
    def test_parse_creation_date(self, raw):
        assert SortField.parse(raw) is SortField.CREATION_DATE

    def test_parse_order(self):
        assert SortOrder.parse("Ascending") is SortOrder.ASCENDING
        assert SortOrder.parse("descending") is SortOrder.DESCENDING

    @pytest.mark.parametrize("raw", ["Value", "", None, 3])
    def test_invalid_field(self, raw):
        with pytest.raises(ValidationError):
            SortField.parse(raw)

    def test_invalid_order(self):
        with pytest.raises(ValidationError):
            SortOrder.parse("Sideways")


class TestStatistics:

    def test_empty_collection(self):
        stats = compute_statistics([])
        assert stats.total_records == 0
        assert stats.last_modified == "N/A"
        assert stats.longest_name == "N/A"
        assert stats.longest_name_length == 0
        assert stats.earliest_record == "N/A"
        assert stats.latest_record == "N/A"

    def test_falls_back_to_latest_created_date(self):
        records = [
            Record(id=1, name="a", value="v", created_date=T0),
            Record(id=2, name="b", value="v", created_date=datetime(2026, 10, 21, 8, 30, tzinfo=timezone.utc)),
        ]
        stats = compute_statistics(records)
        assert stats.last_modified == "2026-10-21 08:30:00"
        assert stats.earliest_record == "2026-10-19"
        assert stats.latest_record == "2026-10-21"

    def test_prefers_latest_modified_date(self):
        records = [
            Record(id=1, name="a", value="v", created_date=datetime(2026, 10, 25, tzinfo=timezone.utc)),
            Record(id=2, name="b", value="v", created_date=T0,
                   modified_date=datetime(2026, 10, 20, 12, 0, 5, tzinfo=timezone.utc)),
        ]
        assert compute_statistics(records).last_modified == "2026-10-20 12:00:05"

    def test_longest_name_keeps_first_on_tie(self):
        records = [
            Record(id=1, name="abc", value="v", created_date=T0),
            Record(id=2, name="xyz", value="v", created_date=T0),
            Record(id=3, name="ab", value="v", created_date=T0),
        ]
        stats = compute_statistics(records)
        assert stats.longest_name == "abc"
        assert stats.longest_name_length == 3

    def test_no_dates_at_all(self):
        stats = compute_statistics([Record(id=1, name="a", value="v")])
        assert stats.total_records == 1
        assert stats.last_modified == "N/A"
        assert stats.earliest_record == "N/A"
