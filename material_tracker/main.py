# material_tracker/main.py

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import settings
from .errors import TrackerError
from .services.tracker import init_tracker

from .api import requests as requests_api
from .api import drafts as drafts_api
from .api import reports as reports_api


logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Material Request Tracker")

# Include API routers
app.include_router(requests_api.router)
app.include_router(drafts_api.router)
app.include_router(reports_api.router)


@app.exception_handler(TrackerError)
async def tracker_error_handler(request: Request, exc: TrackerError):
    # validation/addressing failures are shown to the user, never a 500
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.on_event("startup")
async def startup_event():
    init_tracker()


@app.get("/health")
def health():
    return {"status": "ok"}
