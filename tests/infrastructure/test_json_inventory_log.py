"""Tests for the JSON-file-backed inventory log (real files under tmp_path)."""

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from wms.domain.exceptions import (
    DeserializationError,
    InvalidArgumentError,
    StorageIOError,
)
from wms.domain.model.inventory import InventoryRecord
from wms.domain.model.items import GroceryItem
from wms.domain.repository.inventory_log import StorageStatus
from wms.infrastructure.persistence.json_inventory_log import JsonInventoryLog


@dataclass(frozen=True)
class Stock:
    id: int
    name: str
    quantity: int


def _log(path, entity_type=Stock):
    return JsonInventoryLog(path, entity_type)


def _abc_log(path):
    log = _log(path)
    log.add(Stock(1, "A", 10))
    log.add(Stock(2, "B", 25))
    log.add(Stock(3, "C", 10))
    return log


class TestAdd:

    def test_append_order_preserved(self, tmp_path):
        log = _abc_log(tmp_path / "inv.json")
        assert [s.id for s in log.list_all()] == [1, 2, 3]

    def test_duplicate_ids_allowed(self, tmp_path):
        log = _log(tmp_path / "inv.json")
        log.add(Stock(1, "A", 1))
        log.add(Stock(1, "A", 2))
        assert len(log.list_all()) == 2

    def test_none_rejected(self, tmp_path):
        log = _log(tmp_path / "inv.json")
        with pytest.raises(InvalidArgumentError):
            log.add(None)

    def test_list_all_is_a_snapshot(self, tmp_path):
        log = _abc_log(tmp_path / "inv.json")
        snapshot = log.list_all()
        log.add(Stock(4, "D", 1))
        assert len(snapshot) == 3


class TestRoundTrip:

    def test_save_then_load_on_fresh_instance(self, tmp_path):
        path = tmp_path / "inv.json"
        original = _abc_log(path)
        assert original.save_to_file().status == StorageStatus.SAVED

        reloaded = _log(path)
        result = reloaded.load_from_file()

        assert result.status == StorageStatus.LOADED
        assert result.ok
        assert reloaded.list_all() == [Stock(1, "A", 10), Stock(2, "B", 25), Stock(3, "C", 10)]

    def test_datetimes_round_trip(self, tmp_path):
        path = tmp_path / "inv.json"
        now = datetime(2026, 10, 19, 8, 30, 15, 123456, tzinfo=timezone.utc)
        log = _log(path, InventoryRecord)
        log.add(InventoryRecord(1, "Laptop stand", 10, now - timedelta(days=10)))
        log.add(InventoryRecord(2, "Keyboard", 12, now))
        log.save_to_file()

        reloaded = _log(path, InventoryRecord)
        reloaded.load_from_file()
        assert reloaded.list_all() == log.list_all()

    def test_grocery_expiry_dates_round_trip(self, tmp_path):
        path = tmp_path / "groceries.json"
        log = _log(path, GroceryItem)
        log.add(GroceryItem(1, "Tomatoes", 100, date(2030, 1, 1)))
        log.add(GroceryItem(2, "Bread Spread", 30, date(2030, 1, 8)))
        assert log.save_to_file().ok

        reloaded = _log(path, GroceryItem)
        assert reloaded.load_from_file().status == StorageStatus.LOADED
        assert reloaded.list_all() == log.list_all()

    def test_expiry_with_time_part_cannot_enter_the_log(self, tmp_path):
        log = _log(tmp_path / "groceries.json", GroceryItem)
        with pytest.raises(InvalidArgumentError, match="without a time"):
            log.add(GroceryItem(1, "Tomatoes", 100, datetime(2030, 1, 1, 9, 0)))
        assert log.list_all() == []

    def test_file_is_indented_json_with_named_fields(self, tmp_path):
        path = tmp_path / "inv.json"
        _abc_log(path).save_to_file()

        text = path.read_text(encoding="utf-8")
        assert text.startswith("[\n  {")
        assert json.loads(text)[1] == {"id": 2, "name": "B", "quantity": 25}

    def test_save_creates_parent_directories(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "inv.json"
        assert _abc_log(path).save_to_file().ok
        assert path.exists()

    def test_save_overwrites_previous_content(self, tmp_path):
        path = tmp_path / "inv.json"
        _abc_log(path).save_to_file()

        log = _log(path)
        log.add(Stock(9, "Z", 1))
        log.save_to_file()

        reloaded = _log(path)
        reloaded.load_from_file()
        assert reloaded.list_all() == [Stock(9, "Z", 1)]
        assert list(tmp_path.iterdir()) == [path]

    def test_load_replaces_current_content(self, tmp_path):
        path = tmp_path / "inv.json"
        _abc_log(path).save_to_file()

        log = _log(path)
        log.add(Stock(7, "Old", 1))
        log.load_from_file()
        assert [s.id for s in log.list_all()] == [1, 2, 3]

    def test_unknown_fields_are_ignored(self, tmp_path):
        path = tmp_path / "inv.json"
        path.write_text(
            json.dumps([{"id": 1, "name": "A", "quantity": 3, "colour": "red"}]),
            encoding="utf-8",
        )
        log = _log(path)
        assert log.load_from_file().status == StorageStatus.LOADED
        assert log.list_all() == [Stock(1, "A", 3)]


class TestLoadExpectedAbsence:

    def test_missing_file_is_not_an_error(self, tmp_path):
        log = _log(tmp_path / "never-saved.json")
        log.add(Stock(1, "A", 1))

        result = log.load_from_file()

        assert result.status == StorageStatus.NOT_FOUND
        assert result.ok
        assert result.error is None
        assert log.list_all() == [Stock(1, "A", 1)]

    @pytest.mark.parametrize("content", ["", "  \n", "null"])
    def test_empty_content_keeps_current_log(self, tmp_path, content):
        path = tmp_path / "inv.json"
        path.write_text(content, encoding="utf-8")
        log = _log(path)
        log.add(Stock(1, "A", 1))

        result = log.load_from_file()

        assert result.status == StorageStatus.EMPTY
        assert log.list_all() == [Stock(1, "A", 1)]


class TestLoadFailures:

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            '{"id": 1, "name": "A", "quantity": 1}',
            "[1, 2, 3]",
            '[{"id": 1, "name": "A"}]',
            "[null]",
            pytest.param("[" * 100000 + "]" * 100000, id="deeply-nested"),
            '[{"id": 1, "name": "A", "quantity": 1}, {"id": 2}]',
        ],
    )
    def test_bad_content_reports_deserialization_error(self, tmp_path, content):
        path = tmp_path / "inv.json"
        path.write_text(content, encoding="utf-8")
        log = _abc_log(path)
        before = log.list_all()

        result = log.load_from_file()

        assert result.status == StorageStatus.FAILED
        assert not result.ok
        assert isinstance(result.error, DeserializationError)
        assert log.list_all() == before

    def test_bad_date_reports_deserialization_error(self, tmp_path):
        path = tmp_path / "inv.json"
        path.write_text(
            '[{"id": 1, "name": "A", "quantity": 1, "date_added": "yesterday"}]',
            encoding="utf-8",
        )
        log = _log(path, InventoryRecord)
        result = log.load_from_file()
        assert isinstance(result.error, DeserializationError)
        assert log.list_all() == []

    def test_raise_for_error_escalates(self, tmp_path):
        path = tmp_path / "inv.json"
        path.write_text("garbage", encoding="utf-8")
        result = _log(path).load_from_file()
        with pytest.raises(DeserializationError, match="Invalid JSON"):
            result.raise_for_error()

    def test_unreadable_location_reports_io_error(self, tmp_path):
        log = _abc_log(tmp_path)  # a directory, not a file
        result = log.load_from_file()
        assert isinstance(result.error, StorageIOError)
        assert len(log.list_all()) == 3

    def test_failure_is_logged(self, tmp_path, caplog):
        path = tmp_path / "inv.json"
        path.write_text("garbage", encoding="utf-8")
        with caplog.at_level(logging.ERROR):
            _log(path).load_from_file()
        assert "Error deserializing" in caplog.text


class TestSaveFailures:

    def test_unwritable_parent_reports_io_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        log = _abc_log(blocker / "inv.json")

        result = log.save_to_file()

        assert result.status == StorageStatus.FAILED
        assert isinstance(result.error, StorageIOError)
        assert blocker.read_text(encoding="utf-8") == "not a directory"

    def test_failed_replace_keeps_target_and_cleans_up(self, tmp_path):
        target = tmp_path / "inv.json"
        target.mkdir()
        (target / "keep.txt").write_text("x", encoding="utf-8")

        result = _abc_log(target).save_to_file()

        assert isinstance(result.error, StorageIOError)
        assert (target / "keep.txt").read_text(encoding="utf-8") == "x"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["inv.json"]


@dataclass(frozen=True)
class Priced:
    id: int
    price: Decimal


class TestUnsupportedEntityTypes:

    def test_non_scalar_field_rejected_before_anything_is_stored(self, tmp_path):
        with pytest.raises(TypeError, match="Priced.price has unsupported type"):
            _log(tmp_path / "priced.json", Priced)
        assert list(tmp_path.iterdir()) == []
