"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import Response

from pacs_site.api.v1 import router as v1_router
from pacs_site.api.web import router as web_router
from pacs_site.api.web.templating import STATIC_DIR, render
from pacs_site.core.config import settings
from pacs_site.core.database import SessionLocal, engine
from pacs_site.core.errors import NotAuthenticated, PersistenceError, ValidationError
from pacs_site.core.logging_config import configure_logging
from pacs_site.core.security import resolve_session_secret
from pacs_site.services.bootstrap import run_startup

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Une erreur est survenue. Merci de réessayer plus tard."


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    configure_logging(settings.LOG_LEVEL)
    resolve_session_secret()
    # Bootstrap failures are logged inside run_startup; public pages keep working.
    run_startup(engine, SessionLocal, settings)
    yield


app = FastAPI(
    title="PACS/SIMPA",
    version="0.1.0",
    docs_url="/docs" if settings.APP_ENV == "dev" else None,
    redoc_url=None,
    lifespan=lifespan,
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
app.include_router(web_router)
app.include_router(v1_router, prefix=settings.API_V1_PREFIX)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> Response:
    return render(request, "error.html", {"message": exc.message}, status_code=400)


@app.exception_handler(NotAuthenticated)
async def not_authenticated_handler(request: Request, exc: NotAuthenticated) -> Response:
    return RedirectResponse("/login", status_code=303)


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError) -> Response:
    # Detail was logged where the error was raised.
    return render(request, "error.html", {"message": exc.message}, status_code=500)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> Response:
    logger.exception("Unhandled database error on %s %s", request.method, request.url.path)
    return render(request, "error.html", {"message": GENERIC_ERROR_MESSAGE}, status_code=500)


def main() -> None:
    """Run the development server (production: uvicorn pacs_site.main:app)."""
    uvicorn.run("pacs_site.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
