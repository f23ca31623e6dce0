from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from pattern_catalog import config
from pattern_catalog.entries import EntryNotFoundError
from pattern_catalog.loader import record_to_entry
from pattern_catalog.patterns import Catalog, CatalogQuery
from pattern_catalog.renderer import entry_to_record, render_markdown, render_records
from pattern_catalog.schemas import (
    AmendRequest,
    PatternCreateRequest,
    PatternListResponse,
    ValidationResponse,
    ViolationOut,
)

router = APIRouter(tags=["patterns"])


def _catalog(request: Request) -> Catalog:
    return request.app.state.catalog


@router.get("/patterns", response_model=PatternListResponse)
def list_patterns(
    request: Request,
    category: Optional[str] = None,
    q: Optional[str] = None,
    tag: Optional[str] = None,
):
    query = CatalogQuery(_catalog(request))

    entries = query.search(q or "")
    if category is not None:
        in_category = {e.name for e in query.by_category(category)}
        entries = [e for e in entries if e.name in in_category]
    if tag is not None:
        tagged = {e.name for e in query.by_tag(tag)}
        entries = [e for e in entries if e.name in tagged]

    return {"count": len(entries), "patterns": [entry_to_record(e) for e in entries]}


@router.get("/patterns/{name}")
def get_pattern(name: str, request: Request):
    entry = CatalogQuery(_catalog(request)).by_name(name)
    if entry is None:
        raise EntryNotFoundError(f"pattern '{name}' is not in the catalog")
    return entry_to_record(entry)


@router.post("/patterns", status_code=201)
def add_pattern(req: PatternCreateRequest, request: Request):
    entry = record_to_entry(req)
    _catalog(request).add(entry)
    return entry_to_record(entry)


@router.delete("/patterns/{name}")
def remove_pattern(name: str, request: Request):
    catalog = _catalog(request)
    entry = catalog.remove(name)
    return {"removed": entry.name, "dangling_from": catalog.referenced_by(name)}


@router.post("/patterns/{name}/amend")
def amend_pattern(name: str, req: AmendRequest, request: Request):
    entry = _catalog(request).amend(
        name,
        notes=req.notes,
        applicability=req.applicability,
        known_uses=req.known_uses,
    )
    return entry_to_record(entry)


@router.get("/render", response_class=PlainTextResponse)
def render(request: Request, category: Optional[str] = None):
    catalog = _catalog(request)
    entries = None
    if category is not None:
        entries = CatalogQuery(catalog).by_category(category)
    return PlainTextResponse(
        render_markdown(catalog, entries=entries, title=config.CATALOG_TITLE),
        media_type="text/markdown",
    )


@router.get("/export")
def export(request: Request):
    return {"patterns": render_records(_catalog(request))}


@router.get("/validate", response_model=ValidationResponse)
def validate(request: Request):
    violations = [
        ViolationOut(entry_name=v.entry_name, kind=v.kind.value, detail=v.detail)
        for v in _catalog(request).validate_all()
    ]
    return ValidationResponse(is_valid=not violations, violations=violations)
