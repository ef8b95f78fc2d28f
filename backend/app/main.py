import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

import config
from app.database import DatabaseSessionManager
import app.models
from app.api import users, workout_plan, exercises
from app.api.error_handlers import register_error_handlers

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the connection pool and make sure the tables exist."""
    db = DatabaseSessionManager(
        config.DATABASE_URL,
        pool_size=config.DATABASE_POOL_SIZE,
        max_overflow=config.DATABASE_MAX_OVERFLOW,
    )
    try:
        # No migration tool: tables are created if missing
        await db.create_all()
        app.state.db = db
        logger.info(f"Connected to {db.engine.url.get_backend_name()} database")
        logger.info(f"Lift Track API starting, configured port {config.PORT}")
        yield
    finally:
        await db.dispose()
        logger.info("Connection pool closed")


app = FastAPI(title="Lift Track API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(users.router)
app.include_router(workout_plan.router)
app.include_router(exercises.router)

# Root endpoint
@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Lift Track API!"

# Health check endpoint
@app.get("/health")
async def health_check(request: Request):
    database_ok = await request.app.state.db.health_check()
    return {"status": "healthy", "database": database_ok}

# Static assets, mounted after the API routes so those take precedence
if os.path.isdir(config.STATIC_DIR):
    app.mount("/", StaticFiles(directory=config.STATIC_DIR), name="static")


def run():
    uvicorn.run("app.main:app", host="0.0.0.0", port=config.PORT)


if __name__ == "__main__":
    run()
