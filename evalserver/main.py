"""
Teacher Evaluation Server application.

Mounts the versioned API, creates the database tables on startup and maps
request validation failures and store failures to the shared error body.
"""

import argparse
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from evalserver import config, __version__
from evalserver.api import api_router
from evalserver.database.init_db import init_db
from evalserver.repositories import StoreError
from evalserver.schemas import ErrorResponse

logger = logging.getLogger(__name__)

STORE_FAILURE_MESSAGE = "Evaluation data is currently unavailable"


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield


app = FastAPI(
    title="Teacher Evaluation Server",
    description="Collects student evaluations of teachers and aggregates the results",
    version=__version__,
    lifespan=lifespan,
)

# Reporting dashboards are served from other origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.get("/", tags=["Health"])
async def health_check():
    return {"status": "healthy", "service": "teacher-evaluation-server"}


def error_json(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Reject invalid payloads with a 400.

    Out-of-range ratings and missing fields are reported one item per field
    instead of FastAPI's default 422 body.
    """
    logger.info(f"Rejected {request.method} {request.url.path}: {len(exc.errors())} invalid fields")
    return error_json(status.HTTP_400_BAD_REQUEST, ErrorResponse.for_validation(exc.errors()))


@app.exception_handler(StoreError)
async def store_exception_handler(request: Request, exc: StoreError):
    logger.error(f"Store failure on {request.method} {request.url.path}: {str(exc)}")
    return error_json(status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorResponse(message=STORE_FAILURE_MESSAGE))


def run_server():
    """Run the server from the command line."""
    parser = argparse.ArgumentParser(description="Run the Teacher Evaluation Server")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to listen on")
    parser.add_argument("--port", type=int, default=config.PORT,
                        help=f"Port to listen on (default: {config.PORT})")
    parser.add_argument("--reload", action="store_true", help="Restart when the code changes")
    args = parser.parse_args()

    config.configure_logging()
    logger.info(f"Starting Teacher Evaluation Server on {args.host}:{args.port}")
    uvicorn.run("evalserver.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    run_server()
