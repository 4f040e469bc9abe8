# material_tracker/models/request.py
"""
Request data models - requests, line items and deliveries.

Field names on the wire (persisted JSON, API payloads) are camelCase so that
data written by the browser version of the tracker loads unchanged.
Status and totals are deliberately absent: they are derived on read by
services.fulfillment.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Delivery:
    """One supply event against a line item. qty may be zero or negative."""
    date: str
    qty: int

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "qty": self.qty}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Delivery":
        return cls(date=str(data["date"]), qty=int(data["qty"]))


@dataclass
class LineItem:
    material: str
    unit: str
    requested_qty: int
    supplied: List[Delivery] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "material": self.material,
            "unit": self.unit,
            "requestedQty": self.requested_qty,
            "supplied": [d.to_dict() for d in self.supplied],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LineItem":
        return cls(
            material=str(data["material"]),
            unit=str(data["unit"]),
            requested_qty=int(data["requestedQty"]),
            supplied=[Delivery.from_dict(d) for d in data.get("supplied") or []],
        )


@dataclass
class Request:
    """
    A material procurement document.

    ``id`` is assigned by the repository on first submission and never
    changes afterwards; edits replace every other field.
    """
    id: str
    date: str
    project_title: str
    warehouse: str
    notes: str = ""
    items: List[LineItem] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "date": self.date,
            "projectTitle": self.project_title,
            "warehouse": self.warehouse,
            "notes": self.notes,
            "items": [i.to_dict() for i in self.items],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Request":
        """Create from dictionary. Raises KeyError/TypeError/ValueError on bad shape."""
        return cls(
            id=str(data["id"]),
            date=str(data["date"]),
            project_title=str(data["projectTitle"]),
            warehouse=str(data["warehouse"]),
            notes=data.get("notes") or "",
            items=[LineItem.from_dict(i) for i in data["items"]],
        )

    def copy(self) -> "Request":
        return copy.deepcopy(self)


@dataclass
class RequestDraft:
    """
    Transient, unpersisted staging object for a new or edited request.
    Has no id; the repository assigns or keeps one on submission.
    """
    date: str = ""
    project_title: str = ""
    warehouse: str = ""
    notes: str = ""
    items: List[LineItem] = field(default_factory=list)

    @classmethod
    def from_request(cls, request: Request) -> "RequestDraft":
        return cls(
            date=request.date,
            project_title=request.project_title,
            warehouse=request.warehouse,
            notes=request.notes,
            items=copy.deepcopy(request.items),
        )
