import json

from townhall.config import get_settings
from townhall.constants import VideoStatus
from townhall.models import VideoRecord
from townhall.services.storage import FileVideoStore, MongoVideoStore, get_store

from conftest import make_analyzed


async def test_file_store_round_trip(store):
    record = make_analyzed("abc12345678", state="CA", city="X", meeting_date="2024-01-01")
    await store.set(record.id, record)

    loaded = await store.get(record.id)
    assert loaded == record
    assert (store.data_dir / "abc12345678.json").exists()


async def test_file_store_missing_key_is_absent(store):
    assert await store.get("nope1234567") is None


async def test_file_store_unsafe_key_is_absent(store):
    assert await store.get("../etc/passwd") is None


async def test_file_store_corrupt_entry_is_absent_and_skipped_by_list(store):
    good = VideoRecord.fetched("good1234567", "u", None, "Hello")
    await store.set(good.id, good)
    (store.data_dir / "bad12345678.json").write_text("{not json", encoding="utf-8")
    (store.data_dir / "inv12345678.json").write_text(json.dumps({"id": "inv12345678"}), encoding="utf-8")

    assert await store.get("bad12345678") is None
    assert await store.get("inv12345678") is None
    assert [r.id for r in await store.list()] == ["good1234567"]


async def test_file_store_set_replaces_whole_record(store):
    first = VideoRecord.failed("abc12345678", "u", "boom")
    await store.set(first.id, first)
    second = VideoRecord.fetched("abc12345678", "u", "Title", "Hello world")
    await store.set(second.id, second)

    loaded = await store.get("abc12345678")
    assert loaded == second
    assert loaded.error is None
    assert [p.name for p in store.data_dir.iterdir()] == ["abc12345678.json"]


async def test_file_store_list_on_empty_dir(tmp_path):
    assert await FileVideoStore(tmp_path / "fresh").list() == []


async def test_mongo_store_round_trip(fake_collection):
    store = MongoVideoStore(fake_collection)
    record = make_analyzed("abc12345678", state="NY", city="Y")
    await store.set(record.id, record)

    assert fake_collection.docs["abc12345678"]["_id"] == "abc12345678"
    assert "id" not in fake_collection.docs["abc12345678"]
    assert await store.get("abc12345678") == record
    assert await store.get("missing0000") is None


async def test_mongo_store_list_drops_unparseable_documents(fake_collection):
    store = MongoVideoStore(fake_collection)
    await store.set("abc12345678", VideoRecord.fetched("abc12345678", "u", None, "text"))
    fake_collection.docs["broken00000"] = {"_id": "broken00000", "status": "analyzed"}

    records = await store.list()
    assert [r.id for r in records] == ["abc12345678"]
    assert records[0].status == VideoStatus.FETCHED


def test_get_store_defaults_to_file_backend(monkeypatch, tmp_path):
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "records"))
    store = get_store()
    assert isinstance(store, FileVideoStore)
    assert store.data_dir == tmp_path / "records"
    assert get_store() is store


def test_auto_backend_picks_mongo_when_database_url_set(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "mongodb://localhost:27017")
    assert get_settings().resolved_storage_backend.value == "mongo"


def test_explicit_file_backend_wins_over_database_url(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "mongodb://localhost:27017")
    monkeypatch.setenv("STORAGE_BACKEND", "file")
    assert isinstance(get_store(), FileVideoStore)
