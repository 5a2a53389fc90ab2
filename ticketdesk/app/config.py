from pydantic import BaseModel
import os
from dotenv import load_dotenv
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
load_dotenv(ROOT / ".env")

class Settings(BaseModel):
    app_name: str = os.getenv("APP_NAME", "Ticket Management API")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    data_dir: str = os.getenv("DATA_DIR", "data")
    tickets_file: str = os.getenv("TICKETS_FILE", "tickets.json")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")
    docs_url: str = os.getenv("DOCS_URL", "/api-docs")

    @property
    def tickets_path(self) -> Path:
        return Path(self.data_dir) / self.tickets_file

    def cors_origin_list(self) -> list[str]:
        # "a.com, b.com" -> ["a.com", "b.com"]
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

settings = Settings()
