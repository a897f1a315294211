import json

import pytest

from store import MockCollection, MockStore, RecordNotFound, StoreError


@pytest.fixture
def collection(tmp_path):
    path = tmp_path / "things.json"
    path.write_text(json.dumps([{"id": 1, "name": "one"}, {"id": 4, "name": "four"}]))
    return MockCollection(path)


def test_create_assigns_next_id_and_persists(collection):
    record = collection.create({"name": "five"})

    assert record == {"id": 5, "name": "five"}
    on_disk = json.loads(collection.path.read_text())
    assert on_disk[-1] == record


def test_create_in_missing_file_starts_at_one(tmp_path):
    collection = MockCollection(tmp_path / "empty.json")

    assert collection.all() == []
    assert collection.create({"name": "first"})["id"] == 1


def test_list_applies_skip_and_limit(collection):
    collection.create({"name": "five"})

    assert [r["id"] for r in collection.list(skip=1)] == [4, 5]
    assert [r["id"] for r in collection.list(skip=1, limit=1)] == [4]


def test_get_missing_raises(collection):
    with pytest.raises(RecordNotFound) as exc_info:
        collection.get(99)
    assert exc_info.value.record_id == 99
    assert exc_info.value.collection == "things"


def test_update_merges_fields_and_keeps_id(collection):
    updated = collection.update(4, {"name": "FOUR", "id": 100, "extra": True})

    assert updated == {"id": 4, "name": "FOUR", "extra": True}
    assert collection.get(4) == updated


def test_replace_drops_old_fields(collection):
    collection.update(1, {"color": "red"})

    replaced = collection.replace(1, {"name": "uno"})

    assert replaced == {"id": 1, "name": "uno"}


def test_delete_returns_removed_record(collection):
    removed = collection.delete(1)

    assert removed["name"] == "one"
    assert [r["id"] for r in collection.all()] == [4]
    with pytest.raises(RecordNotFound):
        collection.delete(1)


def test_remove_where_rewrites_only_when_something_matches(collection):
    before = collection.path.stat().st_mtime_ns

    assert collection.remove_where(lambda r: r["id"] > 10) == []
    assert collection.path.stat().st_mtime_ns == before

    removed = collection.remove_where(lambda r: r["id"] == 4)
    assert [r["id"] for r in removed] == [4]
    assert [r["id"] for r in collection.all()] == [1]


def test_write_leaves_no_temp_files(collection):
    collection.create({"name": "x"})

    assert sorted(p.name for p in collection.path.parent.iterdir()) == ["things.json"]


def test_corrupt_file_raises_store_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    with pytest.raises(StoreError):
        MockCollection(path).all()


def test_collection_requires_a_list(tmp_path):
    path = tmp_path / "object.json"
    path.write_text('{"a": 1}')

    with pytest.raises(StoreError):
        MockCollection(path).all()


def test_document_store_default(tmp_path):
    store = MockStore(tmp_path / "doc.json", default={})

    assert store.read() == {}
    store.write({"base": "USD"})
    assert store.read() == {"base": "USD"}


def test_database_reuses_collections(db):
    assert db.collection("users") is db.collection("users")
    assert db.document("currency").read()["base"] == "USD"
