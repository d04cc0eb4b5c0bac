import json
from concurrent.futures import ThreadPoolExecutor

from egov_portal_api.app.core.store import Collection, DataStore, load_dataset


def test_bundled_dataset_loads(store):
    assert len(store.categories) == 6
    assert len(store.list_services()) == 14
    assert len(store.tracking) == 5
    assert store.demo_items("voters")


def test_missing_directory_gives_empty_store(tmp_path):
    store = DataStore.from_directory(str(tmp_path))
    assert store.categories == []
    assert store.list_services() == []
    assert len(store.tracking) == 0


def test_malformed_services_are_skipped(tmp_path):
    catalog = {
        "categories": [{"id": "x", "name": "X", "description": ""}],
        "services": [
            {"id": "ok", "name": "OK", "categoryId": "x", "views": 3, "extraField": "kept"},
            {"id": "bad-views", "name": "Bad", "categoryId": "x", "views": -1},
            {"id": "bad-status", "name": "Bad", "categoryId": "x", "status": "closed"},
            {"name": "no id", "categoryId": "x"},
        ],
    }
    (tmp_path / "services.json").write_text(json.dumps(catalog), encoding="utf-8")
    dataset = load_dataset(tmp_path)
    assert [s["id"] for s in dataset["services"]] == ["ok"]
    service = dataset["services"][0]
    assert service["extraField"] == "kept"
    assert service["relatedServices"] == []
    assert service["status"] == "online"
    assert "fullDescription" not in service
    assert "fee" not in service


def test_invalid_json_gives_empty_dataset(tmp_path):
    (tmp_path / "services.json").write_text("{not json", encoding="utf-8")
    dataset = load_dataset(tmp_path)
    assert dataset["services"] == []
    assert dataset["categories"] == []


def test_increment_views(store):
    before = store.get_service("cap-cccd")["views"]
    assert store.increment_views("cap-cccd")["views"] == before + 1
    assert store.get_service("cap-cccd")["views"] == before + 1
    assert store.increment_views("missing") is None


def test_concurrent_view_increments_are_not_lost(store):
    before = store.get_service("cap-cccd")["views"]
    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(lambda _: store.increment_views("cap-cccd"), range(400)))
    assert store.get_service("cap-cccd")["views"] == before + 400


def test_returned_services_are_copies(store):
    service = store.get_service("cap-cccd")
    service["views"] = -100
    assert store.get_service("cap-cccd")["views"] >= 0


def test_collection_append_unless():
    coll = Collection("subs")
    assert coll.append_unless(lambda r: r["email"] == "a@b.vn", {"email": "a@b.vn"})
    assert not coll.append_unless(lambda r: r["email"] == "a@b.vn", {"email": "a@b.vn"})
    assert len(coll) == 1


def test_collection_ids_are_unique_under_threads():
    coll = Collection("contacts")
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: coll.next_id(), range(300)))
    assert sorted(ids) == list(range(1, 301))
