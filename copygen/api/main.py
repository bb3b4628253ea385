"""FastAPI application exposing the generate-content function."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from copygen.api.models import ErrorResponse, GenerateContentRequest, GenerateContentResponse
from copygen.chains.copy_writer import CopyWriterChain
from copygen.config import configure_logging

# Configure logging for Cloud Run
configure_logging()
logger = logging.getLogger(__name__)

# Global instance (initialized on startup)
copy_writer: CopyWriterChain | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize and cleanup resources."""
    global copy_writer

    logger.info("Initializing API resources...")
    copy_writer = CopyWriterChain()

    yield

    logger.info("Cleaning up API resources...")


app = FastAPI(
    title="Copy Generator API",
    description="Marketing copy generation backed by Vertex AI",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report invalid request bodies as a single readable message."""
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{field}: {error.get('msg', 'invalid value')}" if field else error["msg"])
    message = "Invalid request: " + "; ".join(problems)
    return JSONResponse(status_code=400, content=ErrorResponse(error=message).model_dump())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Use the {"error": ...} body for every HTTP error."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.post(
    "/generate-content",
    response_model=GenerateContentResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_content(body: GenerateContentRequest) -> GenerateContentResponse:
    """Generate marketing copy.

    Args:
        body: Generation parameters.

    Returns:
        Generated copy.

    Raises:
        HTTPException: 500 if the chain is not initialized or generation fails.
    """
    if copy_writer is None:
        raise HTTPException(status_code=500, detail="Copy writer not initialized")

    try:
        content = await run_in_threadpool(copy_writer.generate, body)
    except Exception as e:
        logger.exception("Error generating content")
        raise HTTPException(status_code=500, detail=str(e) or "Generation failed") from e

    return GenerateContentResponse(content=content)
