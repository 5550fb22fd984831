# tests/conftest.py

import pytest

from models.record import Record
from models.record_store import RecordStore
from models.roster import Roster


@pytest.fixture
def data_path(tmp_path):
    return str(tmp_path / "students.dat")


@pytest.fixture
def sample_store(data_path):
    return RecordStore(data_path)


@pytest.fixture
def sample_roster(sample_store):
    return Roster(sample_store)


@pytest.fixture
def sample_record():
    return Record("Leto Atreides", 1, 88.5)


@pytest.fixture
def populated_roster(sample_roster):
    for record in (
        Record("Paul Atreides", 10, 40),
        Record("Chani Kynes", 20, 70),
        Record("Duncan Idaho", 30, 100),
    ):
        sample_roster.add_record(record)

    return sample_roster


@pytest.fixture
def write_data_file(data_path):
    def write(text: str) -> None:
        with open(data_path, "w", encoding="utf-8") as f:
            f.write(text)

    return write


@pytest.fixture
def roster_at():
    def make(path: str) -> Roster:
        return Roster(RecordStore(path))

    return make
