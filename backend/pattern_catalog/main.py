import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pattern_catalog import config
from pattern_catalog.api.routes import router
from pattern_catalog.entries import CatalogError, EntryValidationError
from pattern_catalog.patterns import Catalog, build_catalog

logger = logging.getLogger(__name__)


def _catalog_error_handler(request: Request, exc: CatalogError):
    body = {"status": "error", "kind": exc.kind.value, "message": exc.message}
    if isinstance(exc, EntryValidationError):
        body["errors"] = [
            {"kind": e.kind.value, "field": e.field, "message": e.message} for e in exc.errors
        ]
    return JSONResponse(status_code=exc.status_code, content=body)


def create_app(catalog: Catalog = None) -> FastAPI:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Pattern Catalog",
        version="0.1.0",
    )

    # Middleware FIRST
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CatalogError, _catalog_error_handler)
    app.include_router(router)

    app.state.catalog = catalog if catalog is not None else build_catalog()
    logger.info(f"Serving {len(app.state.catalog)} patterns")
    return app
