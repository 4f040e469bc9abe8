# material_tracker/config.py
import os

EXPORT_FILENAME = "material_requests.xlsx"
EXPORT_SHEET_NAME = "MaterialRequests"


class Settings:
    """
    Very simple settings holder.
    Reads MATERIAL_TRACKER_* variables from the environment if present,
    otherwise defaults to a local sqlite file.
    """

    def __init__(self) -> None:
        self.database_url: str = os.getenv(
            "MATERIAL_TRACKER_DATABASE_URL", "sqlite:///./material_tracker.db"
        )
        self.storage_key: str = os.getenv("MATERIAL_TRACKER_STORAGE_KEY", "materialRequests")
        self.export_dir: str = os.getenv("MATERIAL_TRACKER_EXPORT_DIR", ".")
        self.log_level: str = os.getenv("MATERIAL_TRACKER_LOG_LEVEL", "INFO").upper()
        self.host: str = os.getenv("MATERIAL_TRACKER_HOST", "127.0.0.1")
        self.port: int = int(os.getenv("MATERIAL_TRACKER_PORT", "8000"))


settings = Settings()
