# material_tracker/services/export.py

import io
import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd

from ..config import EXPORT_FILENAME, EXPORT_SHEET_NAME, settings
from .projection import EXPORT_COLUMNS, Row, export_records

logger = logging.getLogger(__name__)


def build_export_frame(rows: Iterable[Row]) -> pd.DataFrame:
    """
    Spreadsheet view of the (already filtered) rows, in the fixed export
    column order. An empty selection still carries the header.
    """
    return pd.DataFrame(export_records(rows), columns=EXPORT_COLUMNS)


def _write(df: pd.DataFrame, target) -> None:
    with pd.ExcelWriter(target, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=EXPORT_SHEET_NAME, index=False)


def write_export(rows: Iterable[Row], path: Optional[Union[str, Path]] = None) -> Path:
    """Write material_requests.xlsx (one sheet) and return where it went."""
    target = Path(path) if path is not None else Path(settings.export_dir) / EXPORT_FILENAME
    df = build_export_frame(rows)
    _write(df, target)
    logger.info("Exported %d row(s) to %s.", len(df), target)
    return target


def export_bytes(rows: Iterable[Row]) -> bytes:
    buf = io.BytesIO()
    _write(build_export_frame(rows), buf)
    return buf.getvalue()
