import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bloodwork_api.config import settings
from bloodwork_api.database import engine
from bloodwork_api.models import screening  # noqa: F401
from bloodwork_api.routers import screenings
from bloodwork_api.services.errors import ScreeningError
from bloodwork_api.services.rate_limit import UploadRateLimiter

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


def _assert_database_at_head() -> None:
    project_root = Path(__file__).resolve().parent.parent
    alembic_cfg = Config(str(project_root / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(project_root / "alembic"))
    script = ScriptDirectory.from_config(alembic_cfg)
    expected_heads = set(script.get_heads())

    with engine.connect() as connection:
        context = MigrationContext.configure(connection)
        current_heads = set(context.get_current_heads())

    if current_heads != expected_heads:
        raise RuntimeError(
            "Database schema is not at Alembic head. "
            "Run `alembic upgrade head` before starting the API. "
            f"Current revisions: {sorted(current_heads) or ['<none>']}, "
            f"expected: {sorted(expected_heads)}."
        )


@asynccontextmanager
async def lifespan(_: FastAPI):
    if settings.verify_schema_on_startup:
        _assert_database_at_head()
    yield


app = FastAPI(title="Bloodwork Screening API", version="0.1.0", lifespan=lifespan)
app.state.upload_limiter = UploadRateLimiter(settings.upload_rate_limit)

allowed_origins = [origin.strip() for origin in settings.allowed_origins.split(",") if origin.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def root():
    return {"statusCode": 200, "message": "Success", "data": {"status": "ok", "service": "bloodwork-screening"}}


@app.get("/health")
def health():
    return {
        "status": "ok",
        "service": "bloodwork-screening",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def _error_name(status_code: int) -> str:
    if status_code == 400:
        return "BadRequest"
    if status_code == 404:
        return "NotFound"
    if status_code == 422:
        return "ValidationError"
    if status_code == 429:
        return "TooManyRequests"
    if status_code >= 500:
        return "InternalServerError"
    return "HTTPError"


@app.exception_handler(ScreeningError)
async def screening_exception_handler(_: Request, exc: ScreeningError):
    if exc.status_code >= 500:
        logger.error("Bloodwork screening failed: %s", exc.message)
    content = {
        "statusCode": exc.status_code,
        "message": exc.message,
        "error": _error_name(exc.status_code),
    }
    if exc.suggestion:
        content["suggestion"] = exc.suggestion
    if exc.preview is not None:
        content["extractedTextPreview"] = exc.preview
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(HTTPException)
async def http_exception_handler(_: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "statusCode": exc.status_code,
            "message": str(exc.detail) if exc.detail else "Request failed",
            "error": _error_name(exc.status_code),
        },
    )


def _validation_errors(exc: RequestValidationError) -> list[dict]:
    return [{"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")} for err in exc.errors()]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={
            "statusCode": 422,
            "message": "Invalid request payload",
            "error": "ValidationError",
            "details": {"errors": _validation_errors(exc)},
        },
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(_: Request, exc: Exception):
    logger.exception("Unhandled server error: %s", exc)
    return JSONResponse(
        status_code=500,
        content={
            "statusCode": 500,
            "message": str(exc) or "An unexpected error occurred",
            "error": "InternalServerError",
        },
    )


app.include_router(screenings.router)
