# material_tracker/errors.py
"""
Error taxonomy for the tracker.

Domain code raises these; the API layer turns them into JSON error bodies,
so nothing here ever reaches a client as an unhandled exception.
"""

from typing import Optional


class TrackerError(Exception):
    """Base class. ``message`` is safe to show to the user as is."""

    status_code: int = 400

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(TrackerError):
    """A draft (or draft item) is missing a required field or has no items."""

    status_code = 422


class AddressingError(TrackerError):
    """
    A delivery or edit targets a request/item that does not exist, or the
    delivery input is incomplete.
    """

    status_code = 404
