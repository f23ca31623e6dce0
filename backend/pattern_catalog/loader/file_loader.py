import json
import logging
from pathlib import Path
from typing import Union

from pattern_catalog.entries import CatalogLoadError
from pattern_catalog.loader.markdown_parser import load_markdown
from pattern_catalog.loader.record_loader import LoadReport, load_records
from pattern_catalog.patterns.registry import Catalog

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = {".md", ".markdown"}


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogLoadError(f"cannot read {path}: {e}") from e


def load_json_text(catalog: Catalog, text: str, source: str = "json") -> LoadReport:
    """
    Import a JSON document: either a list of records or an object with a
    "patterns" list.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"{source} is not valid JSON: {e}") from e

    if isinstance(payload, dict):
        payload = payload.get("patterns")
    if not isinstance(payload, list):
        raise CatalogLoadError(f"{source} must hold a list of pattern records")

    return load_records(catalog, payload, source=source)


def load_path(catalog: Catalog, path: Union[str, Path]) -> LoadReport:
    """Import a .json or .md/.markdown file into `catalog`"""
    path = Path(path)
    text = _read_text(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        report = load_json_text(catalog, text, source=path.name)
    elif suffix in MARKDOWN_SUFFIXES:
        report = load_markdown(catalog, text, source=path.name)
    else:
        raise CatalogLoadError(f"unsupported catalog format '{suffix}' for {path}")

    if report.errors:
        logger.warning(f"[Loader] {path}: {len(report.errors)} records rejected")
    return report
