from itertools import product as cartesian

from material_tracker.models.request import Request
from material_tracker.services.fulfillment import STATUS_LABELS
from material_tracker.services.projection import (
    EXPORT_COLUMNS,
    RowFilters,
    export_records,
    project,
    unique_projects,
    unique_statuses,
)

from .factories import item


def _requests():
    # newest first, as the repository keeps them
    return [
        Request(
            id="00003",
            date="2024-02-01",
            project_title="Bridge",
            warehouse="WH2",
            items=[item("Steel beam", 10, ("2024-02-03", 15)), item("Cement", 20)],
        ),
        Request(
            id="00002",
            date="2024-01-20",
            project_title="Site A",
            warehouse="WH1",
            items=[item("Gravel", 40, ("2024-01-22", 40))],
        ),
        Request(
            id="00001",
            date="2024-01-10",
            project_title="Site A",
            warehouse="WH1",
            items=[item("Cement", 100, ("2024-01-12", 40)), item("Rebar 12mm", 8)],
        ),
    ]


def test_rows_follow_request_then_item_order():
    rows = project(_requests())
    assert [(r.request_id, r.material) for r in rows] == [
        ("00003", "Steel beam"),
        ("00003", "Cement"),
        ("00002", "Gravel"),
        ("00001", "Cement"),
        ("00001", "Rebar 12mm"),
    ]


def test_row_values_are_derived():
    rows = project(_requests())
    over = rows[0]
    assert (over.supplied, over.remaining, over.status_text, over.status_color) == (
        15, -5, "Supplied More", "orange",
    )
    partial = rows[3]
    assert (partial.supplied, partial.remaining, partial.status_text) == (40, 60, "Partially Supplied")
    assert rows[1].status_text == "Pending"
    assert rows[2].status_color == "green"


def test_project_and_status_filters():
    rows = project(_requests(), RowFilters(project="Site A", status="Pending"))
    assert [(r.request_id, r.material) for r in rows] == [("00001", "Rebar 12mm")]


def test_search_is_case_insensitive_on_material_and_project():
    assert [r.material for r in project(_requests(), RowFilters(search="CEMENT"))] == ["Cement", "Cement"]
    assert {r.request_id for r in project(_requests(), RowFilters(search="site a"))} == {"00001", "00002"}


def test_search_matches_request_id_substring():
    rows = project(_requests(), RowFilters(search="003"))
    assert {r.request_id for r in rows} == {"00003"}


def test_empty_filters_match_everything():
    assert len(project(_requests(), RowFilters(project="", status="", search=""))) == 5


def test_filters_are_intersective():
    requests = _requests()
    everything = project(requests)
    projects = [None, "Site A", "Bridge", "Nowhere"]
    statuses = [None] + STATUS_LABELS
    searches = [None, "cement", "0000", "beam"]

    for p, s, t in cartesian(projects, statuses, searches):
        combined = project(requests, RowFilters(project=p, status=s, search=t))
        expected = [
            r
            for r in everything
            if RowFilters(project=p).matches(r)
            and RowFilters(status=s).matches(r)
            and RowFilters(search=t).matches(r)
        ]
        assert combined == expected


def test_facets():
    assert unique_projects(_requests()) == ["Bridge", "Site A"]
    assert unique_projects([]) == []
    # always all four, even with no matching rows
    assert unique_statuses() == ["Pending", "Partially Supplied", "Fully Supplied", "Supplied More"]


def test_export_records_use_fixed_columns():
    records = export_records(project(_requests(), RowFilters(search="Gravel")))
    assert list(records[0]) == EXPORT_COLUMNS
    assert records[0] == {
        "RequestID": "00002",
        "Date": "2024-01-20",
        "Project": "Site A",
        "Warehouse": "WH1",
        "Material": "Gravel",
        "Unit": "pcs",
        "Requested": 40,
        "Supplied": 40,
        "Remaining": 0,
        "Status": "Fully Supplied",
    }
