# material_tracker/services/fulfillment.py
"""
Fulfillment calculations for a single line item.

Everything here is a pure function of (requested_qty, supplied deliveries);
nothing is cached or stored on the item.
"""

from enum import Enum
from typing import Dict, List

from ..models.request import LineItem


class SupplyStatus(str, Enum):
    """Fulfillment state of a line item. Values are the display labels."""
    PENDING = "Pending"
    PARTIALLY_SUPPLIED = "Partially Supplied"
    FULLY_SUPPLIED = "Fully Supplied"
    SUPPLIED_MORE = "Supplied More"


# Filter dropdowns always offer all four, whether or not any row has them
STATUS_LABELS: List[str] = [s.value for s in SupplyStatus]

STATUS_COLORS: Dict[SupplyStatus, str] = {
    SupplyStatus.PENDING: "red",
    SupplyStatus.PARTIALLY_SUPPLIED: "blue",
    SupplyStatus.FULLY_SUPPLIED: "green",
    SupplyStatus.SUPPLIED_MORE: "orange",
}

STATUS_CSS_CLASSES: Dict[SupplyStatus, str] = {
    SupplyStatus.PENDING: "status-pending",
    SupplyStatus.PARTIALLY_SUPPLIED: "status-partial",
    SupplyStatus.FULLY_SUPPLIED: "status-fully",
    SupplyStatus.SUPPLIED_MORE: "status-over",
}


def supplied_total(item: LineItem) -> int:
    return sum(d.qty for d in item.supplied)


def remaining(item: LineItem) -> int:
    """requested - supplied; negative when over-supplied."""
    return item.requested_qty - supplied_total(item)


def classify(requested_qty: int, supplied: int) -> SupplyStatus:
    """
    Order matters: the zero check comes first, so a 0-qty request with no
    deliveries is Pending rather than Fully Supplied.
    A net-negative total falls through to Partially Supplied.
    """
    if supplied == 0:
        return SupplyStatus.PENDING
    if supplied == requested_qty:
        return SupplyStatus.FULLY_SUPPLIED
    if supplied > requested_qty:
        return SupplyStatus.SUPPLIED_MORE
    return SupplyStatus.PARTIALLY_SUPPLIED


def status(item: LineItem) -> SupplyStatus:
    return classify(item.requested_qty, supplied_total(item))


def status_color(s: SupplyStatus) -> str:
    return STATUS_COLORS[s]


def status_css_class(s: SupplyStatus) -> str:
    return STATUS_CSS_CLASSES[s]
