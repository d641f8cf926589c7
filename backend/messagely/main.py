import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError

from messagely.core.config import settings
from messagely.core.exceptions import MessagelyError
from messagely.api.api import api_router
from messagely.api.errors import (
    messagely_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    general_exception_handler
)
from messagely.db.database import get_db, init_db
from messagely.services.background_tasks import background_manager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logging.getLogger("messagely").setLevel(settings.LOG_LEVEL)
    await init_db()
    await background_manager.start()
    logger.info(f"{settings.APP_NAME} {settings.VERSION} started")

    yield

    # Shutdown: pending login stamps still get their chance to land
    await background_manager.stop()
    await get_db().disconnect()


app = FastAPI(
    title="messagely API",
    description="User directory and direct messages",
    version=settings.VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add exception handlers
app.add_exception_handler(MessagelyError, messagely_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include API routes
app.include_router(api_router)


@app.get("/")
async def root():
    return {
        "message": "messagely API",
        "version": settings.VERSION,
        "status": "operational",
        "docs_url": "/docs"
    }


def run():
    """Console entry point: serve the app with uvicorn"""
    uvicorn.run("messagely.main:app", host="127.0.0.1", port=8000, reload=settings.DEBUG)
