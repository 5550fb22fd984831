# tests/test_roster.py

import os

from core.response import ErrorCode
from models.record import Record
from models.roster import Roster

# === data manipulators ===


def test_new_roster_is_empty_and_clean(sample_roster):
    assert len(sample_roster) == 0
    assert not sample_roster.has_unsaved_changes


def test_add_record(sample_roster, sample_record):
    response = sample_roster.add_record(sample_record)

    assert response.success
    assert response.data["record"] == sample_record
    assert sample_record in sample_roster.records
    assert sample_roster.has_unsaved_changes


def test_add_duplicate_roll_number(populated_roster):
    before = [r.to_dict() for r in populated_roster]

    response = populated_roster.add_record(Record("Impostor", 20, 10))

    assert not response.success
    assert response.error is ErrorCode.DUPLICATE_KEY
    assert response.status_code == 409
    assert [r.to_dict() for r in populated_roster] == before


def test_add_then_find(sample_roster, sample_record):
    sample_roster.add_record(sample_record)

    response = sample_roster.find_record(sample_record.roll_number)

    assert response.success
    assert response.data["record"] == sample_record
    assert response.data["index"] == 0


def test_find_missing_record(populated_roster):
    response = populated_roster.find_record(99)

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert response.status_code == 404


def test_update_record(populated_roster):
    response = populated_roster.update_record(20, "Chani of Sietch Tabr", 95)

    assert response.success
    record = populated_roster.find_record(20).data["record"]
    assert record.name == "Chani of Sietch Tabr"
    assert record.marks == 95.0


def test_update_missing_record(populated_roster):
    response = populated_roster.update_record(99, "Nobody", 50)

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND


def test_update_record_is_atomic(populated_roster):
    populated_roster.shutdown()

    response = populated_roster.update_record(20, "Valid Name", 101)

    assert not response.success
    assert response.error is ErrorCode.INVALID_FIELD_VALUE
    record = populated_roster.find_record(20).data["record"]
    assert record.name == "Chani Kynes"
    assert record.marks == 70.0
    assert not populated_roster.has_unsaved_changes

    response = populated_roster.update_record(20, "", 50)

    assert not response.success
    record = populated_roster.find_record(20).data["record"]
    assert record.name == "Chani Kynes"
    assert record.marks == 70.0


def test_added_record_changes_do_not_reach_roster(sample_roster):
    record = Record("Gurney Halleck", 40, 60)
    sample_roster.add_record(record)
    sample_roster.add_record(Record("Thufir Hawat", 20, 55))

    record.roll_number = 20
    record.marks = 0

    found = sample_roster.find_record(40)
    assert found.success
    assert found.data["record"].marks == 60.0
    assert [r.roll_number for r in sample_roster] == [40, 20]


def test_found_record_changes_do_not_reach_roster(populated_roster):
    handle = populated_roster.find_record(10).data["record"]

    handle.roll_number = 20
    handle.name = "Impostor"

    assert [r.roll_number for r in populated_roster] == [10, 20, 30]
    assert populated_roster.find_record(10).data["record"].name == "Paul Atreides"
    assert populated_roster.find_record(20).data["record"].name == "Chani Kynes"


def test_listed_record_changes_do_not_reach_roster(populated_roster):
    records = populated_roster.list_records().data["records"]

    for record in records:
        record.roll_number = 99
    records[0].marks = 0

    assert [r.roll_number for r in populated_roster] == [10, 20, 30]
    assert populated_roster.find_record(10).data["record"].marks == 40.0


def test_mutated_handles_still_save_and_reload(populated_roster, sample_store):
    populated_roster.find_record(10).data["record"].roll_number = 20
    populated_roster.add_record(Record("Gurney Halleck", 40, 60)).data["record"].roll_number = 30

    assert populated_roster.shutdown().success

    reloaded = Roster(sample_store)
    response = reloaded.initialize()

    assert response.success
    assert [r.roll_number for r in reloaded] == [10, 20, 30, 40]


def test_update_returns_copy(populated_roster):
    updated = populated_roster.update_record(20, "Chani of Sietch Tabr", 95).data["record"]

    updated.roll_number = 30

    assert [r.roll_number for r in populated_roster] == [10, 20, 30]


def test_remove_record_preserves_order(populated_roster):
    response = populated_roster.remove_record(10)

    assert response.success
    assert response.data["record"].name == "Paul Atreides"
    assert len(populated_roster) == 2
    assert not populated_roster.find_record(10).success
    assert [r.roll_number for r in populated_roster] == [20, 30]


def test_remove_missing_record(populated_roster):
    response = populated_roster.remove_record(99)

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert len(populated_roster) == 3


# === data accessors ===


def test_list_records_in_insertion_order(populated_roster):
    response = populated_roster.list_records()
    records = response.data["records"]

    assert response.success
    assert [r.roll_number for r in records] == [10, 20, 30]
    # restartable
    assert [r.roll_number for r in records] == [10, 20, 30]


def test_list_records_reflects_later_changes(populated_roster):
    records = populated_roster.list_records().data["records"]

    populated_roster.add_record(Record("Gurney Halleck", 40, 60))

    assert len(records) == 4
    assert records[-1].name == "Gurney Halleck"


def test_list_records_when_empty(sample_roster):
    response = sample_roster.list_records()

    assert response.success
    assert list(response.data["records"]) == []


def test_statistics(populated_roster):
    response = populated_roster.statistics()

    assert response.success
    assert response.data["count"] == 3
    assert round(response.data["mean"], 2) == 70.00
    assert response.data["max"] == 100
    assert response.data["min"] == 40


def test_statistics_when_empty(sample_roster):
    response = sample_roster.statistics()

    assert not response.success
    assert response.error is ErrorCode.EMPTY_COLLECTION


# === lifecycle ===


def test_initialize_without_data_file(sample_roster):
    response = sample_roster.initialize()

    assert response.success
    assert response.data["count"] == 0
    assert "Starting fresh" in response.detail
    assert len(sample_roster) == 0


def test_shutdown_then_initialize_round_trip(populated_roster, sample_store):
    save_response = populated_roster.shutdown()

    assert save_response.success
    assert save_response.data["count"] == 3
    assert not populated_roster.has_unsaved_changes

    reloaded = Roster(sample_store)
    load_response = reloaded.initialize()

    assert load_response.success
    assert load_response.data["count"] == 3
    assert [r.to_dict() for r in reloaded] == [r.to_dict() for r in populated_roster]


def test_initialize_with_truncated_record(sample_roster, write_data_file):
    write_data_file("Paul Atreides\n10\n40\nChani Kynes\n20\n")

    response = sample_roster.initialize()

    assert not response.success
    assert response.error is ErrorCode.CORRUPT_DATA
    assert len(sample_roster) == 0


def test_initialize_with_duplicate_roll_numbers(sample_roster, write_data_file):
    write_data_file("Paul\n10\n40\nChani\n10\n70\n")

    response = sample_roster.initialize()

    assert not response.success
    assert response.error is ErrorCode.CORRUPT_DATA
    assert len(sample_roster) == 0


def test_initialize_unreadable_path(tmp_path, roster_at):
    roster = roster_at(str(tmp_path))

    response = roster.initialize()

    assert not response.success
    assert response.error is ErrorCode.IO_ERROR
    assert len(roster) == 0


def test_shutdown_to_missing_directory(tmp_path, roster_at, sample_record):
    roster = roster_at(os.path.join(str(tmp_path), "missing", "students.dat"))
    roster.add_record(sample_record)

    response = roster.shutdown()

    assert not response.success
    assert response.error is ErrorCode.IO_ERROR
    assert roster.has_unsaved_changes


def test_shutdown_with_unstorable_name(sample_roster):
    sample_roster.add_record(Record("Line\nBreak", 1, 50))

    response = sample_roster.shutdown()

    assert not response.success
    assert response.error is ErrorCode.INVALID_FIELD_VALUE


def test_shutdown_with_unencodable_name(sample_roster, tmp_path):
    sample_roster.add_record(Record("bad\udcff", 1, 50))

    response = sample_roster.shutdown()

    assert not response.success
    assert response.error is ErrorCode.INVALID_FIELD_VALUE
    assert sample_roster.has_unsaved_changes
    assert os.listdir(tmp_path) == []
