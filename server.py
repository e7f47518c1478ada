"""FastAPI backend for the provider directory."""
import json

import structlog
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Settings, configure_logging
from fixtures import seed_store
from schemas import ErrorResponse, FieldError, Provider, ProviderFilter, ProviderPage, field_errors
from storage import ProviderStore

log = structlog.get_logger()


def error_response(
    status_code: int,
    message: str,
    errors: list[FieldError] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(message=message, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True), headers=headers)


def parse_positive_int(value: str | None, default: int) -> int:
    """Lenient query parsing: anything that isn't a positive integer falls back to the default."""
    try:
        parsed = int(value) if value is not None else default
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def get_store(request: Request) -> ProviderStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


router = APIRouter()


@router.get("/providers", response_model=ProviderPage)
async def list_providers(
    page: str | None = None,
    limit: str | None = None,
    sort: str | None = None,
    store: ProviderStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """Paged provider listing."""
    return store.get_providers(
        page=parse_positive_int(page, 1),
        limit=parse_positive_int(limit, settings.default_page_size),
        sort=sort or "relevance",
    )


@router.get("/providers/{provider_id}", response_model=Provider)
async def get_provider(provider_id: str, store: ProviderStore = Depends(get_store)):
    try:
        parsed_id = int(provider_id)
    except ValueError:
        return error_response(400, "Invalid provider ID")

    provider = store.get_provider(parsed_id)
    if not provider:
        log.warning("provider_not_found", provider_id=parsed_id)
        return error_response(404, "Provider not found")
    return provider


@router.post("/providers/filter", response_model=ProviderPage)
async def filter_providers(request: Request, store: ProviderStore = Depends(get_store)):
    """Search providers. An empty body searches with the defaults."""
    raw = await request.body()
    try:
        payload = json.loads(raw) if raw.strip() else {}
    except ValueError:
        log.warning("invalid_filter", reason="malformed_json")
        return error_response(
            400,
            "Invalid filter parameters",
            [FieldError(field="body", message="Malformed JSON")],
        )

    try:
        provider_filter = ProviderFilter.model_validate(payload)
    except ValidationError as e:
        errors = field_errors(e)
        log.warning("invalid_filter", fields=[err.field for err in errors])
        return error_response(400, "Invalid filter parameters", errors)

    return store.search_providers(provider_filter)


@router.get("/specialties", response_model=list[str])
async def list_specialties(store: ProviderStore = Depends(get_store)):
    return store.get_specialties()


@router.get("/insurance-plans", response_model=list[str])
async def list_insurance_plans(store: ProviderStore = Depends(get_store)):
    return store.get_insurance_plans()


def create_app(store: ProviderStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the application around an explicit store.

    When no store is given a fresh one is created, and seeded unless
    SEED_DATA is turned off.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    if store is None:
        store = ProviderStore(default_location=settings.default_location)
        if settings.seed_data:
            seed_store(store)

    app = FastAPI(title="Provider Directory")
    app.state.store = store
    app.state.settings = settings
    app.include_router(router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(Exception)
    async def internal_error(request: Request, exc: Exception):
        log.error("unhandled_error", path=request.url.path, exc_info=exc)
        return error_response(500, "Internal server error")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = Settings.from_env()
    uvicorn.run(app, host=settings.host, port=settings.port)
