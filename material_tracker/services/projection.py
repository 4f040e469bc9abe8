# material_tracker/services/projection.py

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..models.request import LineItem, Request
from . import fulfillment

# Column order of the spreadsheet export
EXPORT_COLUMNS: List[str] = [
    "RequestID",
    "Date",
    "Project",
    "Warehouse",
    "Material",
    "Unit",
    "Requested",
    "Supplied",
    "Remaining",
    "Status",
]

# Summary print drops the warehouse
SUMMARY_PRINT_COLUMNS: List[str] = [
    "Request ID",
    "Date",
    "Project",
    "Material",
    "Unit",
    "Requested",
    "Supplied",
    "Remaining",
    "Status",
]


@dataclass
class Row:
    """One (request, line item) pair, flattened for tables, export and print."""
    request_id: str
    request_date: str
    warehouse: str
    project_title: str
    material: str
    unit: str
    requested_qty: int
    supplied: int
    remaining: int
    status_text: str
    status_color: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "requestId": self.request_id,
            "requestDate": self.request_date,
            "warehouse": self.warehouse,
            "projectTitle": self.project_title,
            "material": self.material,
            "unit": self.unit,
            "requestedQty": self.requested_qty,
            "supplied": self.supplied,
            "remaining": self.remaining,
            "statusText": self.status_text,
            "statusColor": self.status_color,
        }


@dataclass
class RowFilters:
    """All optional; empty values match everything. Combined with AND."""
    project: Optional[str] = None
    status: Optional[str] = None
    search: Optional[str] = None

    def matches(self, row: Row) -> bool:
        if self.project and row.project_title != self.project:
            return False
        if self.status and row.status_text != self.status:
            return False
        if self.search:
            needle = self.search.lower()
            # ids are numeric strings, so they are compared without lowering
            if not (
                needle in row.material.lower()
                or needle in row.project_title.lower()
                or self.search in row.request_id
            ):
                return False
        return True


def to_row(request: Request, item: LineItem) -> Row:
    total = fulfillment.supplied_total(item)
    st = fulfillment.classify(item.requested_qty, total)
    return Row(
        request_id=request.id,
        request_date=request.date,
        warehouse=request.warehouse,
        project_title=request.project_title,
        material=item.material,
        unit=item.unit,
        requested_qty=item.requested_qty,
        supplied=total,
        remaining=item.requested_qty - total,
        status_text=st.value,
        status_color=fulfillment.status_color(st),
    )


def project(requests: Iterable[Request], filters: Optional[RowFilters] = None) -> List[Row]:
    """
    Flatten requests into rows and filter them.
    Order is request order, then item order; filtering never reorders.
    """
    filters = filters or RowFilters()
    out: List[Row] = []
    for req in requests:
        for item in req.items:
            row = to_row(req, item)
            if filters.matches(row):
                out.append(row)
    return out


def unique_projects(requests: Iterable[Request]) -> List[str]:
    """Distinct project titles in first-seen order."""
    seen: Dict[str, None] = {}
    for r in requests:
        seen.setdefault(r.project_title, None)
    return list(seen)


def unique_statuses() -> List[str]:
    return list(fulfillment.STATUS_LABELS)


def export_records(rows: Iterable[Row]) -> List[Dict[str, Any]]:
    return [
        {
            "RequestID": r.request_id,
            "Date": r.request_date,
            "Project": r.project_title,
            "Warehouse": r.warehouse,
            "Material": r.material,
            "Unit": r.unit,
            "Requested": r.requested_qty,
            "Supplied": r.supplied,
            "Remaining": r.remaining,
            "Status": r.status_text,
        }
        for r in rows
    ]


def summary_print_records(rows: Iterable[Row]) -> List[Dict[str, Any]]:
    return [
        {
            "Request ID": r.request_id,
            "Date": r.request_date,
            "Project": r.project_title,
            "Material": r.material,
            "Unit": r.unit,
            "Requested": r.requested_qty,
            "Supplied": r.supplied,
            "Remaining": r.remaining,
            "Status": r.status_text,
        }
        for r in rows
    ]
