# material_tracker/services/identifiers.py

from typing import Iterable

from ..models.request import Request
from ..utils.helpers import parse_int

ID_WIDTH = 5


def next_request_id(existing: Iterable[Request]) -> str:
    """
    Next request id: highest numeric id so far + 1, zero-padded to 5 digits.

    Unparseable ids are skipped. Gaps left by deleted requests are never
    filled, and ids wider than 5 digits are not truncated.
    """
    highest = 0
    for r in existing:
        n = parse_int(r.id)
        if n is not None and n > highest:
            highest = n
    return str(highest + 1).zfill(ID_WIDTH)
