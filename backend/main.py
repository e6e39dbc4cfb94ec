import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tasklist.api import api_router
from tasklist.core.config import settings
from tasklist.core.database import Store
from tasklist.core.errors import StoreError
from tasklist.core.logging_setup import setup_logging

logger = logging.getLogger("tasklist.main")

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    # Fail fast on a production deploy without a signing secret.
    settings.signing_secret()
    store = Store()
    try:
        await store.initialize()
    finally:
        await store.close()
    logger.info("Store initialized at %s (env=%s)", settings.database_path, settings.environment)
    yield

app = FastAPI(title="Task Lists (FastAPI + SQLite + JWT)", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid input", "errors": jsonable_encoder(exc.errors())},
    )

@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.error("Unhandled store error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})

@app.get("/")
def health():
    return {"message": "OK"}

app.include_router(api_router)
