import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.db import init_schema
from app.routers import (
    auth,
    categories,
    currents,
    custom_sections,
    debts,
    expenses,
    families,
    health,
    savings,
    summary,
)

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Schema is checked once per process, before any request is served.
    init_schema()
    yield


app = FastAPI(
    title="Family Finance API",
    version="1.0.0",
    description="Family-scoped expenses, savings, current accounts, debts and custom ledgers.",
    docs_url=None,
    root_path=settings.root_path,
    lifespan=lifespan,
)


@app.get("/docs", include_in_schema=False)
def swagger_ui():
    prefix = (settings.root_path or "").rstrip("/")
    openapi_url = f"{prefix}{app.openapi_url}"
    return get_swagger_ui_html(openapi_url=openapi_url, title=f"{app.title} - Docs")


def _field_name(loc: tuple) -> str:
    # ("body", "familyId") -> "familyId"; ("query", "id") -> "id"
    parts = [str(part) for part in loc if part not in ("body", "query", "path", "header", "cookie")]
    return ".".join(parts) or "request"


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(_: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        message = f"{_field_name(tuple(first.get('loc', ())))}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "database error"})


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "internal server error"})


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(families.router)
app.include_router(categories.router)
app.include_router(expenses.router)
app.include_router(savings.router)
app.include_router(currents.router)
app.include_router(debts.router)
app.include_router(custom_sections.router)
app.include_router(custom_sections.transactions_router)
app.include_router(summary.router)
