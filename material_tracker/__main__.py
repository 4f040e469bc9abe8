# material_tracker/__main__.py
"""Serve the tracker locally: ``python -m material_tracker`` or ``material-tracker``."""

import uvicorn

from .config import settings


def main() -> None:
    uvicorn.run(
        "material_tracker.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
