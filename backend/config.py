import os
from dotenv import load_dotenv

load_dotenv(override=False)


def _async_database_url(url: str) -> str:
    # Hosted Postgres hands out postgres:// URLs; the app talks to it through psycopg's async driver
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+psycopg://" + url[len(prefix):]
    return url


DATABASE_URL = _async_database_url(os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./lifttrack.db"))
PORT = int(os.getenv("PORT", "3000"))

DATABASE_POOL_SIZE = int(os.getenv("DATABASE_POOL_SIZE", "10"))
DATABASE_MAX_OVERFLOW = int(os.getenv("DATABASE_MAX_OVERFLOW", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Served at / when the directory exists
STATIC_DIR = os.getenv("STATIC_DIR", "public")
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
