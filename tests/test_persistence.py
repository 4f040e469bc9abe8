import json

import pytest

from material_tracker.models.request import Request
from material_tracker.services.persistence import (
    InMemoryKeyValueStore,
    SQLModelKeyValueStore,
    deserialize_requests,
    serialize_requests,
)
from material_tracker.services.repository import RequestRepository

from .factories import item, make_draft

BROWSER_VALUE = json.dumps(
    [
        {
            "warehouse": "WH1",
            "notes": "",
            "date": "2024-01-10",
            "items": [
                {
                    "material": "Cement",
                    "unit": "bag",
                    "requestedQty": 100,
                    "supplied": [{"date": "2024-01-12", "qty": 40}],
                }
            ],
            "projectTitle": "Site A",
            "id": "00001",
        }
    ]
)


def test_loads_browser_format():
    requests = deserialize_requests(BROWSER_VALUE)
    assert len(requests) == 1
    r = requests[0]
    assert (r.id, r.project_title, r.warehouse) == ("00001", "Site A", "WH1")
    assert r.items[0].supplied[0].qty == 40


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "",
        "not json",
        '{"id": "00001"}',
        '[{"id": "00001"}]',
        '[{"id": "1", "date": "x", "projectTitle": "p", "warehouse": "w", "items": [{"material": "m"}]}]',
        "[1, 2]",
    ],
)
def test_malformed_values_degrade_to_empty(raw):
    assert deserialize_requests(raw) == []


def test_save_after_load_is_byte_identical():
    store = InMemoryKeyValueStore()
    repo = RequestRepository.from_bridge(store)
    repo.add(make_draft(notes="Ürgent – gate 2", items=[item("Cement", 100), item("Sand", 5)]))
    repo.add_delivery("00001", 1, "2024-01-12", 7)
    before = store.values["materialRequests"]

    store.save(store.load())

    assert store.values["materialRequests"] == before


def test_browser_value_is_normalized_once_then_stable():
    store = InMemoryKeyValueStore(initial={"materialRequests": BROWSER_VALUE})

    store.save(store.load())
    normalized = store.values["materialRequests"]

    assert normalized != BROWSER_VALUE
    assert normalized == serialize_requests(deserialize_requests(BROWSER_VALUE))
    assert normalized.startswith('[{"id":"00001","date":"2024-01-10","projectTitle":"Site A"')

    store.save(store.load())
    assert store.values["materialRequests"] == normalized


def test_serialization_is_compact_camel_case():
    raw = serialize_requests(
        [Request(id="00001", date="2024-01-10", project_title="P", warehouse="W", items=[item("M", 1)])]
    )
    assert raw.startswith('[{"id":"00001","date":"2024-01-10","projectTitle":"P"')
    assert '"requestedQty":1' in raw


def test_sqlmodel_store_round_trip(engine):
    store = SQLModelKeyValueStore(engine, key="materialRequests")
    assert store.load() == []

    repo = RequestRepository.from_bridge(store)
    repo.add(make_draft())
    repo.add(make_draft(project="Site B"))

    again = SQLModelKeyValueStore(engine, key="materialRequests").load()
    assert [r.id for r in again] == ["00002", "00001"]

    other_key = SQLModelKeyValueStore(engine, key="otherNamespace")
    assert other_key.load() == []
