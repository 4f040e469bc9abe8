# material_tracker/api/schemas.py
"""
Request bodies for the API. Field names follow the camelCase used by the
persisted JSON; Python attributes stay snake_case.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..models.request import Delivery, LineItem, RequestDraft


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class DeliveryIn(_CamelModel):
    date: str
    qty: int


class LineItemIn(_CamelModel):
    material: str
    unit: str
    requested_qty: int = Field(alias="requestedQty", ge=0)
    supplied: List[DeliveryIn] = []

    def to_item(self) -> LineItem:
        return LineItem(
            material=self.material,
            unit=self.unit,
            requested_qty=self.requested_qty,
            supplied=[Delivery(date=d.date, qty=d.qty) for d in self.supplied],
        )


class RequestIn(_CamelModel):
    """A complete draft, submitted in one go."""
    date: str = ""
    project_title: str = Field("", alias="projectTitle")
    warehouse: str = ""
    notes: Optional[str] = ""
    items: List[LineItemIn] = []

    def to_draft(self) -> RequestDraft:
        return RequestDraft(
            date=self.date,
            project_title=self.project_title,
            warehouse=self.warehouse,
            notes=self.notes or "",
            items=[i.to_item() for i in self.items],
        )


class DraftFieldsIn(_CamelModel):
    date: Optional[str] = None
    project_title: Optional[str] = Field(None, alias="projectTitle")
    warehouse: Optional[str] = None
    notes: Optional[str] = None


class DraftItemIn(_CamelModel):
    # raw form input; the draft builder parses the quantity
    material: Optional[str] = None
    unit: Optional[str] = None
    requested_qty: Optional[Union[int, str]] = Field(None, alias="requestedQty")


class DeliveryInputIn(_CamelModel):
    date: Optional[str] = None
    qty: Optional[Union[int, str]] = None


def draft_to_dict(draft: RequestDraft, editing_id: Optional[str]) -> dict:
    return {
        "editingId": editing_id,
        "date": draft.date,
        "projectTitle": draft.project_title,
        "warehouse": draft.warehouse,
        "notes": draft.notes,
        "items": [i.to_dict() for i in draft.items],
    }
