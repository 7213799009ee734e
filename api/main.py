import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from activity_log import router as activity_log_router
from backlog import router as backlog_router
from bootstrap import schema, seed
from chat_threads import router as chat_threads_router
from core.config import Settings, load_settings
from core.errors import StoreError
from core.http import BodySizeLimitMiddleware, CORSMiddleware
from core.logs import configure_logging
from developers import router as developers_router
from records.repository import RecordRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(app.state.settings.log_level)
    if app.state.repository is not None:
        # Repository supplied by the caller; it owns provisioning and shutdown.
        yield
        return

    settings: Settings = app.state.settings
    db = await schema.provision(settings)
    repository = RecordRepository(db)
    if settings.seed_sample_data:
        await seed.seed_sample_data(repository)

    app.state.repository = repository
    try:
        yield
    finally:
        app.state.repository = None
        await db.close()


def _format_validation_errors(errors: list[dict]) -> str:
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request."


def create_app(*, settings: Settings | None = None, repository: RecordRepository | None = None) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(title="dev-tracker-api", lifespan=lifespan)
    app.state.settings = settings
    app.state.repository = repository

    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)

    # Any origin may call the API; browser preflights are answered here.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
        return PlainTextResponse(_format_validation_errors(exc.errors()), status_code=400)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> PlainTextResponse:
        logger.error(
            "store_error category=%s method=%s path=%s detail=%s",
            exc.category.value,
            request.method,
            request.url.path,
            exc.detail,
            exc_info=exc,
        )
        return PlainTextResponse(exc.public_message, status_code=exc.status_code)

    app.include_router(developers_router.router, tags=["developers"])
    app.include_router(backlog_router.router, tags=["backlog"])
    app.include_router(activity_log_router.router, tags=["activity-log"])
    app.include_router(chat_threads_router.router, tags=["chat-threads"])

    @app.get("/api/health")
    def health() -> dict:
        return {"status": "ok", "message": "Dev tracker API is running"}

    @app.options("/{path:path}", include_in_schema=False)
    def options(path: str) -> Response:
        return Response(status_code=200)

    return app


app = create_app()


def run() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("server_starting host=%s port=%s", settings.host, settings.port)
    uvicorn.run(create_app(settings=settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
