"""Static document loading (catalog + translation tables).

Documents are read once at startup, either from local directories or, when
CATALOG_BASE_URL is set, fetched over HTTP from the static host that serves the
site. All documents are fetched concurrently.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
import json
import logging
from pathlib import Path
from typing import Any

import httpx

from antiquebooks.settings import Settings

logger = logging.getLogger("uvicorn.error")

CATEGORIES_DOCUMENT = "categories.json"
ITEMS_DOCUMENT = "items.json"


class DocumentError(RuntimeError):
    pass


@dataclass(frozen=True)
class SiteDocuments:
    """Raw (unvalidated) documents as loaded from disk or HTTP."""

    categories: list[Any]
    items: list[Any]
    translations: dict[str, dict[str, str]] = field(default_factory=dict)


def _read_local(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise DocumentError(f"Document not found: {path}") from e
    except json.JSONDecodeError as e:
        raise DocumentError(f"Invalid JSON in {path}: {e}") from e


async def _fetch_remote(client: httpx.AsyncClient, url: str) -> Any:
    resp = await client.get(url)
    if resp.status_code != 200:
        logger.error(f"Document fetch failed: {url} -> {resp.status_code}")
        raise DocumentError(f"Failed to fetch {url}: HTTP {resp.status_code}")
    try:
        return resp.json()
    except ValueError as e:
        raise DocumentError(f"Invalid JSON at {url}: {e}") from e


def _document_paths(settings: Settings) -> dict[str, str]:
    """Relative document paths keyed by logical name ("categories", "items", "i18n:<locale>")."""
    paths = {
        "categories": f"{settings.data_dir}/{CATEGORIES_DOCUMENT}",
        "items": f"{settings.data_dir}/{ITEMS_DOCUMENT}",
    }
    for locale in settings.supported_locales:
        paths[f"i18n:{locale}"] = f"{settings.i18n_dir}/{locale}.json"
    return paths


async def _load_all(
    settings: Settings, transport: httpx.AsyncBaseTransport | None = None
) -> dict[str, Any]:
    paths = _document_paths(settings)
    names = list(paths)

    if settings.catalog_base_url:
        base = settings.catalog_base_url.rstrip("/")
        logger.info(f"Fetching {len(names)} documents from {base}")
        async with httpx.AsyncClient(timeout=15.0, transport=transport) as client:
            results = await asyncio.gather(
                *(_fetch_remote(client, f"{base}/{paths[n]}") for n in names),
                return_exceptions=True,
            )
    else:
        results = [_safe_read_local(Path(paths[n])) for n in names]

    return dict(zip(names, results))


def _safe_read_local(path: Path) -> Any:
    try:
        return _read_local(path)
    except DocumentError as e:
        return e


async def load_site_documents(
    settings: Settings, transport: httpx.AsyncBaseTransport | None = None
) -> SiteDocuments:
    """Load categories, items and per-locale translation tables.

    Catalog documents are required. A missing or broken translation table is
    logged and replaced by an empty table (labels then fall back through the
    locale chain).

    Raises:
        DocumentError: If a catalog document cannot be loaded or has the wrong shape.
    """
    loaded = await _load_all(settings, transport)

    catalog: dict[str, list[Any]] = {}
    for name in ("categories", "items"):
        doc = loaded[name]
        if isinstance(doc, Exception):
            raise DocumentError(f"Cannot load {name} document: {doc}") from doc
        if not isinstance(doc, list):
            raise DocumentError(f"{name} document must be a JSON array, got {type(doc).__name__}")
        catalog[name] = doc

    translations: dict[str, dict[str, str]] = {}
    for locale in settings.supported_locales:
        doc = loaded[f"i18n:{locale}"]
        if isinstance(doc, Exception) or not isinstance(doc, dict):
            logger.warning(f"Translation table for '{locale}' unavailable ({doc!r}); using empty table")
            translations[locale] = {}
            continue
        translations[locale] = {str(k): str(v) for k, v in doc.items() if v is not None}

    return SiteDocuments(
        categories=catalog["categories"],
        items=catalog["items"],
        translations=translations,
    )
