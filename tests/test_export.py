import io

import pandas as pd
from openpyxl import load_workbook

from material_tracker.config import EXPORT_SHEET_NAME
from material_tracker.models.request import Request
from material_tracker.services.export import build_export_frame, export_bytes, write_export
from material_tracker.services.projection import EXPORT_COLUMNS, RowFilters, project

from .factories import item


def _rows(**filters):
    requests = [
        Request(
            id="00002",
            date="2024-01-20",
            project_title="Site B",
            warehouse="WH2",
            items=[item("Gravel", 40, ("2024-01-22", 50))],
        ),
        Request(
            id="00001",
            date="2024-01-10",
            project_title="Site A",
            warehouse="WH1",
            items=[item("Cement", 100, ("2024-01-12", 40), unit="bag")],
        ),
    ]
    return project(requests, RowFilters(**filters))


def test_frame_has_fixed_columns_and_filtered_rows():
    df = build_export_frame(_rows(project="Site A"))
    assert list(df.columns) == EXPORT_COLUMNS
    assert df.to_dict("records") == [
        {
            "RequestID": "00001",
            "Date": "2024-01-10",
            "Project": "Site A",
            "Warehouse": "WH1",
            "Material": "Cement",
            "Unit": "bag",
            "Requested": 100,
            "Supplied": 40,
            "Remaining": 60,
            "Status": "Partially Supplied",
        }
    ]


def test_empty_selection_keeps_header():
    df = build_export_frame([])
    assert list(df.columns) == EXPORT_COLUMNS
    assert df.empty


def test_write_export_single_named_sheet(tmp_path):
    path = write_export(_rows(), tmp_path / "material_requests.xlsx")

    wb = load_workbook(path)
    assert wb.sheetnames == [EXPORT_SHEET_NAME]
    ws = wb[EXPORT_SHEET_NAME]
    header = [c.value for c in ws[1]]
    assert header == EXPORT_COLUMNS
    assert ws.max_row == 3


def test_write_export_defaults_to_fixed_filename(tmp_path, monkeypatch):
    from material_tracker.config import settings

    monkeypatch.setattr(settings, "export_dir", str(tmp_path))
    path = write_export(_rows())
    assert path == tmp_path / "material_requests.xlsx"
    assert path.exists()


def test_export_bytes_reads_back():
    data = export_bytes(_rows())
    df = pd.read_excel(io.BytesIO(data), sheet_name=EXPORT_SHEET_NAME, dtype={"RequestID": str})
    assert list(df["RequestID"]) == ["00002", "00001"]
    assert list(df["Remaining"]) == [-10, 60]
    assert list(df["Status"]) == ["Supplied More", "Partially Supplied"]
