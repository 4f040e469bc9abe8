import re
from typing import Any, Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Any) -> Optional[int]:
    """
    Leading-integer parsing, the way quantities are typed into a form:

      "40"     -> 40
      " 0012"  -> 12
      "12abc"  -> 12
      "3.7"    -> 3
      "abc"    -> None
      ""/None  -> None

    Real ints pass through; bools and floats are truncated like text would be.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)
    m = _LEADING_INT.match(str(value))
    if not m:
        return None
    return int(m.group(1))


def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty once stripped."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False
