# bookgroups/config.py
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv()

DATA_DIR = Path(__file__).resolve().parent / "data"


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass
class Settings:
    # Server
    host: str = os.getenv("BOOKGROUPS_HOST", "127.0.0.1")
    port: int = int(os.getenv("BOOKGROUPS_PORT", "3000"))

    # Data sources
    groups_file: Path = Path(os.getenv("BOOKGROUPS_GROUPS_FILE", str(DATA_DIR / "groups.json")))
    books_file: Path = Path(os.getenv("BOOKGROUPS_BOOKS_FILE", str(DATA_DIR / "books.json")))
    title_field: str = os.getenv("BOOKGROUPS_TITLE_FIELD", "Title")

    # CORS
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.getenv("BOOKGROUPS_CORS_ORIGINS", "*"))
    )

    # Logging
    log_level: str = os.getenv("BOOKGROUPS_LOG_LEVEL", "INFO").upper()


settings = Settings()
