# material_tracker/api/reports.py

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse, Response

from ..config import EXPORT_FILENAME
from ..services.export import export_bytes
from ..services.printing import render_request, render_summary
from ..services.projection import RowFilters, project
from ..services.tracker import Tracker, get_tracker

router = APIRouter(prefix="/api", tags=["reports"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _filtered_rows(tracker: Tracker, project_title, status, search):
    filters = RowFilters(project=project_title, status=status, search=search)
    with tracker.lock:
        return project(tracker.repository.list(), filters)


@router.get("/export.xlsx")
def export_rows(
    project_title: Optional[str] = Query(None, alias="project"),
    status: Optional[str] = None,
    search: Optional[str] = None,
    tracker: Tracker = Depends(get_tracker),
):
    """Spreadsheet of the currently filtered rows."""
    rows = _filtered_rows(tracker, project_title, status, search)
    return Response(
        content=export_bytes(rows),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@router.get("/print/summary", response_class=HTMLResponse)
def print_summary(
    project_title: Optional[str] = Query(None, alias="project"),
    status: Optional[str] = None,
    search: Optional[str] = None,
    tracker: Tracker = Depends(get_tracker),
):
    rows = _filtered_rows(tracker, project_title, status, search)
    return HTMLResponse(render_summary(rows))


@router.get("/print/requests/{request_id}", response_class=HTMLResponse)
def print_request(request_id: str, tracker: Tracker = Depends(get_tracker)):
    with tracker.lock:
        request = tracker.repository.get(request_id).copy()
    return HTMLResponse(render_request(request))
