# material_tracker/api/drafts.py
"""
Draft endpoints - the add/edit form, one field or item at a time.
"""

from fastapi import APIRouter, Depends

from ..services.tracker import Tracker, get_tracker
from .schemas import DraftFieldsIn, DraftItemIn, draft_to_dict

router = APIRouter(prefix="/api/draft", tags=["draft"])


def _current(tracker: Tracker) -> dict:
    return draft_to_dict(tracker.drafts.draft, tracker.drafts.editing_id)


@router.get("")
def get_draft(tracker: Tracker = Depends(get_tracker)):
    with tracker.lock:
        return _current(tracker)


@router.patch("")
def update_draft_fields(body: DraftFieldsIn, tracker: Tracker = Depends(get_tracker)):
    with tracker.lock:
        tracker.drafts.set_fields(
            date=body.date,
            project_title=body.project_title,
            warehouse=body.warehouse,
            notes=body.notes,
        )
        return _current(tracker)


@router.post("/items", status_code=201)
def add_draft_item(body: DraftItemIn, tracker: Tracker = Depends(get_tracker)):
    with tracker.lock:
        tracker.drafts.add_item(body.material, body.unit, body.requested_qty)
        return _current(tracker)


@router.delete("/items/{index}")
def remove_draft_item(index: int, tracker: Tracker = Depends(get_tracker)):
    with tracker.lock:
        tracker.drafts.remove_item(index)
        return _current(tracker)


@router.post("/edit/{request_id}")
def edit_request(request_id: str, tracker: Tracker = Depends(get_tracker)):
    """Load a stored request into the draft; the next submit replaces it."""
    with tracker.lock:
        tracker.drafts.load_from(tracker.repository.get(request_id))
        return _current(tracker)


@router.post("/submit")
def submit_draft(tracker: Tracker = Depends(get_tracker)):
    with tracker.lock:
        editing_id = tracker.drafts.editing_id
        request = tracker.drafts.submit(tracker.repository)
        if editing_id is not None:
            tracker.deliveries.discard(editing_id)
    return request.to_dict()


@router.post("/reset")
def reset_draft(tracker: Tracker = Depends(get_tracker)):
    with tracker.lock:
        tracker.drafts.reset()
        return _current(tracker)
