"""FastAPI application entrypoint for prompt generation."""

from contextlib import asynccontextmanager
import logging
import socket
import time
from typing import List

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from promptmaster import config
from promptmaster.db import Database
from promptmaster.generator import PromptGenerator
from promptmaster.exceptions import PromptMasterError
from promptmaster.schemas import (
    ErrorResponse,
    PromptRequest,
    PromptResponse,
    TemplateResponse,
)
from promptmaster.storage import PromptStore, SqlPromptStore

logger = logging.getLogger(__name__)

MAX_LOG_LINE = 80


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database-backed store for the lifetime of the process."""
    config.configure_logging()
    database = Database(config.DATABASE_URL)
    database.initialize()
    app.state.store = SqlPromptStore(database)
    try:
        yield
    finally:
        database.close()


app = FastAPI(title="Prompt Master", version="1.0.0", lifespan=lifespan)


def get_store(request: Request) -> PromptStore:
    return request.app.state.store


@app.middleware("http")
async def log_api_requests(request: Request, call_next):
    """Log one line per `/api` call with status, duration and response body."""
    start = time.perf_counter()
    response = await call_next(request)
    path = request.url.path
    if not path.startswith("/api"):
        return response

    body = b"".join([chunk async for chunk in response.body_iterator])
    duration_ms = int((time.perf_counter() - start) * 1000)
    log_line = f"{request.method} {path} {response.status_code} in {duration_ms}ms"
    if body:
        log_line += f" :: {body.decode('utf-8', errors='replace')}"
    if len(log_line) > MAX_LOG_LINE:
        log_line = log_line[: MAX_LOG_LINE - 1] + "…"
    logger.info(log_line)

    logged = Response(
        content=body,
        status_code=response.status_code,
        media_type=response.media_type,
    )
    # Raw pairs keep repeated headers such as set-cookie.
    logged.raw_headers = list(response.headers.raw)
    return logged


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed payloads as 400 with the validation message."""
    logger.warning("Invalid request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.get("/health")
def health_check():
    """Return service liveness and the configured database backend."""
    return {"status": "ok", "database": config.DATABASE_URL.split(":", 1)[0]}


@app.post(
    "/api/prompts/generate",
    response_model=PromptResponse,
    responses={400: {"model": ErrorResponse}},
)
def generate_prompt(payload: PromptRequest, store: PromptStore = Depends(get_store)):
    """Generate a prompt with three alternatives and store the result."""
    logger.info("Received generate prompt request: %s", payload.model_dump())
    draft = PromptGenerator().generate(payload)
    try:
        record = store.save(draft)
    except PromptMasterError as exc:
        logger.error("Error generating prompt: %s", exc)
        return JSONResponse(status_code=400, content={"error": str(exc)})

    return PromptResponse(
        id=record.id,
        title=record.title,
        context=record.context,
        purpose=record.purpose,
        tone=record.tone,
        length=record.length,
        generated_prompt=record.generated_prompt,
        alternative_prompts=list(record.alternative_prompts),
    )


@app.get(
    "/api/templates",
    response_model=List[TemplateResponse],
    responses={500: {"model": ErrorResponse}},
)
def list_templates(store: PromptStore = Depends(get_store)):
    """Return the template catalog, seeding defaults on first read."""
    try:
        templates = store.list_templates()
    except PromptMasterError as exc:
        logger.error("Error fetching templates: %s", exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    return [
        TemplateResponse(
            id=item.id,
            name=item.name,
            description=item.description,
            template=item.template,
            fields=list(item.fields),
        )
        for item in templates
    ]


def find_free_port(host: str, start_port: int, attempts: int) -> int:
    """Return the first port in `start_port .. start_port+attempts-1` that binds."""
    for port in range(start_port, start_port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            try:
                sock.bind((host, port))
            except OSError:
                logger.warning("Port %s is in use, trying the next one", port)
                continue
        return port
    raise RuntimeError("No available ports")


def serve() -> None:
    """Run the API with uvicorn on the first free port from `PORT`."""
    import uvicorn

    config.configure_logging()
    port = find_free_port(config.HOST, config.PORT, config.PORT_ATTEMPTS)
    logger.info("serving on port %s", port)
    uvicorn.run(app, host=config.HOST, port=port, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    serve()
