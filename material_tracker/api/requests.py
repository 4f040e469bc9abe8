# material_tracker/api/requests.py

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..services.projection import RowFilters, project, unique_projects, unique_statuses
from ..services.tracker import Tracker, get_tracker
from .schemas import DeliveryInputIn, RequestIn

router = APIRouter(prefix="/api", tags=["requests"])


# ---------- rows + facets ----------

@router.get("/rows")
def get_rows(
    project_title: Optional[str] = Query(None, alias="project"),
    status: Optional[str] = None,
    search: Optional[str] = None,
    tracker: Tracker = Depends(get_tracker),
):
    """
    Flattened (request, item) rows with derived supplied/remaining/status.

    Filters are optional and AND-combined:
      project (exact), status (exact label),
      search (material/project, case-insensitive; or request id substring)
    """
    filters = RowFilters(project=project_title, status=status, search=search)
    with tracker.lock:
        rows = project(tracker.repository.list(), filters)
    return [r.to_dict() for r in rows]


@router.get("/facets")
def get_facets(tracker: Tracker = Depends(get_tracker)):
    with tracker.lock:
        projects = unique_projects(tracker.repository.list())
    return {"projects": projects, "statuses": unique_statuses()}


# ---------- requests ----------

@router.get("/requests")
def list_requests(tracker: Tracker = Depends(get_tracker)):
    with tracker.lock:
        return [r.to_dict() for r in tracker.repository.list()]


@router.get("/requests/{request_id}")
def get_request(request_id: str, tracker: Tracker = Depends(get_tracker)):
    with tracker.lock:
        return tracker.repository.get(request_id).to_dict()


@router.post("/requests", status_code=201)
def create_request(body: RequestIn, tracker: Tracker = Depends(get_tracker)):
    with tracker.lock:
        return tracker.repository.add(body.to_draft()).to_dict()


@router.put("/requests/{request_id}")
def replace_request(request_id: str, body: RequestIn, tracker: Tracker = Depends(get_tracker)):
    with tracker.lock:
        request = tracker.repository.update(request_id, body.to_draft())
        tracker.deliveries.discard(request_id)
    return request.to_dict()


@router.delete("/requests/{request_id}")
def delete_request(request_id: str, tracker: Tracker = Depends(get_tracker)):
    """Deleting is the confirmed action; the client asks before calling."""
    with tracker.lock:
        removed = tracker.repository.remove(request_id)
        tracker.deliveries.discard(request_id)
    return {"deleted": removed.id}


# ---------- deliveries ----------

@router.post("/requests/{request_id}/items/{item_index}/deliveries", status_code=201)
def add_delivery(
    request_id: str,
    item_index: int,
    body: DeliveryInputIn,
    tracker: Tracker = Depends(get_tracker),
):
    key = (request_id, item_index)
    with tracker.lock:
        tracker.deliveries.set(key, "date", body.date)
        tracker.deliveries.set(key, "qty", body.qty)
        delivery = tracker.deliveries.submit(tracker.repository, request_id, item_index)
    return delivery.to_dict()
