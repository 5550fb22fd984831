# tests/test_record_store.py

import os
import stat

import pytest

from models.record import Record
from models.record_store import CorruptDataError, RecordStore, format_marks


def test_load_missing_file(sample_store):
    assert not sample_store.exists()
    assert sample_store.load() == []


def test_load_empty_file(sample_store, write_data_file):
    write_data_file("")

    assert sample_store.exists()
    assert sample_store.load() == []


def test_save_writes_three_lines_per_record(sample_store, data_path):
    count = sample_store.save([Record("Paul Atreides", 10, 40), Record("Chani", 20, 72.5)])

    assert count == 2

    with open(data_path, encoding="utf-8") as f:
        assert f.read() == "Paul Atreides\n10\n40\nChani\n20\n72.5\n"


def test_save_then_load_preserves_records_and_order(populated_roster, sample_store):
    sample_store.save(populated_roster.records)

    loaded = sample_store.load()

    assert [r.to_dict() for r in loaded] == [r.to_dict() for r in populated_roster]


def test_save_overwrites_previous_contents(sample_store):
    sample_store.save([Record("First", 1, 10), Record("Second", 2, 20)])
    sample_store.save([Record("Only", 3, 30)])

    assert sample_store.load() == [Record("Only", 3, 30)]


def test_save_leaves_no_temporary_files(sample_store, tmp_path):
    sample_store.save([Record("Paul", 1, 50)])

    assert os.listdir(tmp_path) == ["students.dat"]


def test_load_without_final_newline(sample_store, write_data_file):
    write_data_file("Paul\n10\n40")

    assert sample_store.load() == [Record("Paul", 10, 40)]


def test_load_with_windows_line_endings(sample_store, write_data_file):
    write_data_file("Paul\r\n10\r\n40\r\n")

    assert sample_store.load() == [Record("Paul", 10, 40)]


@pytest.mark.parametrize(
    "text",
    [
        "Paul\n10\n40\nChani\n20\n",
        "Paul\n10\n",
        "Paul\nten\n40\n",
        "Paul\n10\nforty\n",
        "Paul\n-10\n40\n",
        "Paul\n10\n140\n",
        "\n10\n40\n",
    ],
)
def test_load_corrupt_data(sample_store, write_data_file, text):
    write_data_file(text)

    with pytest.raises(CorruptDataError):
        sample_store.load()


def test_corrupt_data_error_is_value_error():
    assert issubclass(CorruptDataError, ValueError)


def test_save_rejects_name_with_line_break(sample_store, write_data_file):
    write_data_file("Paul\n10\n40\n")

    with pytest.raises(ValueError):
        sample_store.save([Record("Two\nLines", 1, 50)])

    assert sample_store.load() == [Record("Paul", 10, 40)]


def test_save_to_missing_directory(tmp_path):
    store = RecordStore(os.path.join(str(tmp_path), "missing", "students.dat"))

    with pytest.raises(OSError):
        store.save([Record("Paul", 1, 50)])


@pytest.mark.parametrize(
    "marks, expected",
    [
        (70.0, "70"),
        (72.5, "72.5"),
        (0.1, "0.1"),
        (100.0, "100"),
    ],
)
def test_format_marks(marks, expected):
    assert format_marks(marks) == expected


def test_save_unencodable_name_leaves_no_temporary_files(sample_store, tmp_path):
    sample_store.save([Record("Paul", 10, 40)])

    with pytest.raises(ValueError):
        sample_store.save([Record("bad\udcff", 1, 50)])

    assert os.listdir(tmp_path) == ["students.dat"]
    assert sample_store.load() == [Record("Paul", 10, 40)]


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
@pytest.mark.parametrize("mode", [0o644, 0o640, 0o600])
def test_save_keeps_existing_file_mode(sample_store, write_data_file, data_path, mode):
    write_data_file("Paul\n10\n40\n")
    os.chmod(data_path, mode)

    sample_store.save([Record("Chani", 20, 70)])

    assert stat.S_IMODE(os.stat(data_path).st_mode) == mode


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_save_new_file_uses_umask(sample_store, data_path):
    previous = os.umask(0o022)
    try:
        sample_store.save([Record("Chani", 20, 70)])
    finally:
        os.umask(previous)

    assert stat.S_IMODE(os.stat(data_path).st_mode) == 0o644
