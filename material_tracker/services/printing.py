# material_tracker/services/printing.py
"""
Printable HTML pages.

- render_summary: the filtered row table, one row per line item.
- render_request: one request with a column per distinct delivery date,
  showing how much of each item arrived that day.

The browser prints these; here they are only rendered. All text is escaped.
"""

from html import escape
from typing import Iterable, List

from ..models.request import LineItem, Request
from . import fulfillment
from .projection import SUMMARY_PRINT_COLUMNS, Row, summary_print_records

_CLASS_BY_LABEL = {
    s.value: fulfillment.status_css_class(s) for s in fulfillment.SupplyStatus
}

SUMMARY_STYLE = """
  body { font-family: Arial, sans-serif; padding: 20px; font-size: 14px; margin: 0; background: white; }
  h2 { margin-bottom: 20px; }
  table { border-collapse: collapse; width: 100%; border-spacing: 0; border: none; }
  thead th { border-bottom: 2px solid #ccc; background-color: #eee; font-weight: bold; padding: 8px; text-align: center; }
  tbody td { border: none; padding: 4px 8px; text-align: center; }
  tbody td.material-cell { text-align: left; width: 300px; }
  .status-pending { color: red; font-weight: bold; }
  .status-partial { color: blue; font-weight: bold; }
  .status-fully { color: green; font-weight: bold; }
  .status-over { color: orange; font-weight: bold; }
"""

REQUEST_STYLE = """
  body { font-family: Arial, sans-serif; font-size: 14px; padding: 20px; }
  table { border-collapse: collapse; width: 100%; margin-top: 10px; }
  th, td { border: 1px solid #ccc; padding: 8px; text-align: center; }
  th { background-color: #f2f2f2; }
"""


def _cell(value, css_class: str = "") -> str:
    cls = f' class="{css_class}"' if css_class else ""
    return f"<td{cls}>{escape(str(value))}</td>"


def _page(title: str, style: str, body: str) -> str:
    return (
        "<html>\n<head>\n"
        f"<title>{escape(title)}</title>\n"
        f"<style>{style}</style>\n"
        "</head>\n<body>\n"
        f"{body}\n"
        "</body>\n</html>\n"
    )


def render_summary(rows: Iterable[Row]) -> str:
    rows = list(rows)
    head = "".join(f"<th>{escape(c)}</th>" for c in SUMMARY_PRINT_COLUMNS)

    body_rows: List[str] = []
    for row, rec in zip(rows, summary_print_records(rows)):
        cells = []
        for col in SUMMARY_PRINT_COLUMNS:
            if col == "Material":
                cells.append(_cell(rec[col], "material-cell"))
            elif col == "Status":
                cells.append(_cell(rec[col], _CLASS_BY_LABEL.get(row.status_text, "")))
            else:
                cells.append(_cell(rec[col]))
        body_rows.append("<tr>" + "".join(cells) + "</tr>")

    body = (
        "<h2>Material Requests Summary</h2>\n"
        "<table>\n"
        f"<thead><tr>{head}</tr></thead>\n"
        "<tbody>\n" + "\n".join(body_rows) + "\n</tbody>\n"
        "</table>"
    )
    return _page("Print Summary Table", SUMMARY_STYLE, body)


def delivery_dates(request: Request) -> List[str]:
    """Distinct delivery dates across all items, ascending."""
    return sorted({d.date for item in request.items for d in item.supplied})


def qty_on_date(item: LineItem, date: str) -> int:
    return sum(d.qty for d in item.supplied if d.date == date)


def render_request(request: Request) -> str:
    dates = delivery_dates(request)
    head = "".join(
        f"<th>{escape(c)}</th>"
        for c in ["Material", "Unit", "Requested Qty", "Supplied Qty", "Remaining", "Status"] + dates
    )

    body_rows: List[str] = []
    for item in request.items:
        cells = [
            _cell(item.material),
            _cell(item.unit),
            _cell(item.requested_qty),
            _cell(fulfillment.supplied_total(item)),
            _cell(fulfillment.remaining(item)),
            _cell(fulfillment.status(item).value),
        ]
        # a zero sum prints as an empty cell, same as no delivery that day
        cells += [_cell(qty_on_date(item, d) or "") for d in dates]
        body_rows.append("<tr>" + "".join(cells) + "</tr>")

    body = (
        f"<h2>Request ID: {escape(request.id)}</h2>\n"
        f"<p><strong>Date:</strong> {escape(request.date)}</p>\n"
        f"<p><strong>Project Title:</strong> {escape(request.project_title)}</p>\n"
        f"<p><strong>Warehouse:</strong> {escape(request.warehouse)}</p>\n"
        f"<p><strong>Notes:</strong> {escape(request.notes or 'N/A')}</p>\n"
        "<table>\n"
        f"<thead><tr>{head}</tr></thead>\n"
        "<tbody>\n" + "\n".join(body_rows) + "\n</tbody>\n"
        "</table>"
    )
    return _page(f"Print Request {request.id}", REQUEST_STYLE, body)
