"""Tests for the HTTP read API."""

import pytest
from fastapi.testclient import TestClient

from api import index as api_index
from bean_board import BeanStore
from bean_board.config import BoardConfig
from bean_board.exceptions import FetchError
from bean_board.sources.base import BaseSource

CSV_TEXT = (
    "Timestamp,Bean/blend name,Origin,Caffeine,Roast level,Roast date,Roaster,City,Country,"
    "Weight,Currency,Price,Per100g,PerLb,Notes,Rating\n"
    "t,Hologram,Ethiopia,Caffeinated,Light,2024-01-10,counterculture,Durham,USA,"
    "340,USD,18,,,blueberry,9\n"
    "t,Geometry,Colombia,Caffeinated,Medium,2024-02-01,Onyx,Rogers,USA,"
    "283,USD,22,,,jasmine,7.5\n"
    "t,Southern Weather,Colombia,Decaf,Dark,,Onyx,Rogers,USA,"
    "283,USD,20,,,,\n"
)


class StaticSource(BaseSource):
    def __init__(self, result):
        self.result = result
        self.calls = 0

    def read_text(self) -> str:
        self.calls += 1
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


@pytest.fixture
def client(monkeypatch):
    source = StaticSource(CSV_TEXT)
    monkeypatch.setattr(api_index, "STORE", BeanStore(BoardConfig(), source=source))
    return TestClient(api_index.app)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_list_beans_defaults_to_newest_roast_first(client):
    response = client.get("/beans")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert [bean["beanName"] for bean in body["beans"]] == ["Geometry", "Hologram", "Southern Weather"]
    assert body["beans"][1]["roaster"] == "Counter Culture"
    assert body["error"] is None
    assert body["fetchedAt"] is not None


def test_list_beans_filters_and_sorts(client):
    response = client.get(
        "/beans",
        params={"roaster": "Onyx", "sortBy": "price", "order": "asc"},
    )

    body = response.json()
    assert [bean["beanName"] for bean in body["beans"]] == ["Southern Weather", "Geometry"]


def test_list_beans_min_rating_and_search(client):
    body = client.get("/beans", params={"search": "JASMINE", "minRating": 7}).json()

    assert [bean["id"] for bean in body["beans"]] == [2]


def test_list_beans_rejects_unknown_sort_key(client):
    response = client.get("/beans", params={"sortBy": "flavor"})

    assert response.status_code == 400


def test_get_bean_detail(client):
    response = client.get("/beans/1")

    assert response.status_code == 200
    assert response.json()["tastingNotes"] == "blueberry"


def test_get_missing_bean_returns_404(client):
    assert client.get("/beans/42").status_code == 404


def test_raw_beans_are_not_standardized(client):
    body = client.get("/beans/raw").json()

    assert body["beans"][0]["roaster"] == "counterculture"


def test_columns(client):
    body = client.get("/columns").json()

    assert body[0] == {"key": "beanName", "label": "Coffee Bean", "sortable": True}


def test_filter_options(client):
    body = client.get("/filters/options").json()

    assert body == {"origins": ["Colombia", "Ethiopia"], "roasters": ["Counter Culture", "Onyx"]}


def test_stats(client):
    body = client.get("/stats").json()

    assert body["totalBeans"] == 3
    assert body["averageRating"] == 8.25
    assert body["topRoasters"][0] == {"name": "Onyx", "count": 2}
    assert body["monthlyTrends"] == [{"month": "2024-01", "count": 1}, {"month": "2024-02", "count": 1}]


def test_refresh_refetches(client):
    client.get("/beans")
    response = client.post("/refresh")

    assert response.status_code == 200
    assert response.json()["ok"] is True
    assert api_index.STORE.source.calls == 2


def test_unavailable_data_returns_503(monkeypatch):
    store = BeanStore(BoardConfig(), source=StaticSource(FetchError("HTTP error! status: 500", status=500)))
    monkeypatch.setattr(api_index, "STORE", store)
    client = TestClient(api_index.app)

    response = client.get("/beans")

    assert response.status_code == 503
    assert response.json()["detail"] == "HTTP error! status: 500"
