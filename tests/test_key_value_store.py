# /tests/test_key_value_store.py

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.db.base import Base
from app.services.database_helpers.key_value_store import InMemoryKeyValueStore, JsonFileKeyValueStore
from app.services.database_helpers.key_value_store_sql import SQLKeyValueStore


@pytest.fixture
def sql_session():
    """A throwaway SQLite in-memory database with the key-value table created."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine)()
    yield session
    session.close()


@pytest.fixture(params=["memory", "json", "sql"])
def kv_store(request, tmp_path):
    """Runs each contract test against every backend."""
    if request.param == "memory":
        return InMemoryKeyValueStore()
    if request.param == "json":
        return JsonFileKeyValueStore(str(tmp_path / "data"))
    return SQLKeyValueStore(request.getfixturevalue("sql_session"))


def test_missing_key_reads_as_none(kv_store):
    assert kv_store.get_item("school_classes") is None


def test_set_then_get(kv_store):
    kv_store.set_item("school_classes", '[{"id": "cls_1"}]')
    assert kv_store.get_item("school_classes") == '[{"id": "cls_1"}]'


def test_set_overwrites_previous_value(kv_store):
    kv_store.set_item("k", "first")
    kv_store.set_item("k", "second")
    assert kv_store.get_item("k") == "second"


def test_remove_item(kv_store):
    kv_store.set_item("k", "value")
    kv_store.remove_item("k")
    assert kv_store.get_item("k") is None
    # Removing a missing key is a no-op.
    kv_store.remove_item("k")


def test_clear(kv_store):
    kv_store.set_item("a", "1")
    kv_store.set_item("b", "2")
    kv_store.clear()
    assert kv_store.get_item("a") is None
    assert kv_store.get_item("b") is None


def test_json_store_writes_one_file_per_key(tmp_path):
    data_dir = tmp_path / "data"
    kv = JsonFileKeyValueStore(str(data_dir))

    kv.set_item("school_grades", "[]")

    assert (data_dir / "school_grades.json").read_text(encoding="utf-8") == "[]"


def test_json_store_survives_a_new_instance(tmp_path):
    data_dir = str(tmp_path / "data")
    JsonFileKeyValueStore(data_dir).set_item("school_students", '[{"id": "stu_1"}]')
    assert JsonFileKeyValueStore(data_dir).get_item("school_students") == '[{"id": "stu_1"}]'


def test_in_memory_store_accepts_initial_items():
    kv = InMemoryKeyValueStore({"school_students": "[]"})
    assert kv.get_item("school_students") == "[]"


def test_partial_backend_fails_at_construction():
    from app.services.database_helpers.key_value_store import KeyValueStore

    class ReadOnlyStore(KeyValueStore):
        def get_item(self, key):
            return None

    with pytest.raises(TypeError):
        ReadOnlyStore()
