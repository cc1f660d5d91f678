#!/usr/bin/env python3
"""Validate the static catalog documents.

Loads data/*.json and i18n/*.json exactly as the API does at startup and prints
audit findings (missing default-locale titles, unknown categories, missing UI
labels).

Run:
  python -m scripts.check_catalog

Optional env vars (same as the API):
  DATA_DIR=data
  I18N_DIR=i18n
  CATALOG_BASE_URL=https://example.github.io/shop
  SUPPORTED_LOCALES="en,sk,de"
  DEFAULT_LOCALE=en

Exit codes: 0 = loaded (findings are warnings), 1 = documents failed to load.
"""

import asyncio
import os
import sys


# Ensure imports work when executed as a script/module
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from antiquebooks.services.catalog import CatalogError, CatalogStore, audit_catalog  # noqa: E402
from antiquebooks.services.i18n import Translations  # noqa: E402
from antiquebooks.settings import get_settings  # noqa: E402
from antiquebooks.stores.documents import DocumentError, load_site_documents  # noqa: E402


async def _run() -> int:
    settings = get_settings()
    try:
        docs = await load_site_documents(settings)
        catalog = CatalogStore.from_documents(docs.items, docs.categories)
    except (DocumentError, CatalogError) as e:
        print(f"FAILED: {e}")
        return 1

    translations = Translations(docs.translations)
    findings = audit_catalog(catalog, settings.default_locale)
    for locale in settings.supported_locales:
        for key in translations.missing_labels(locale):
            findings.append(f"i18n {locale}: missing label '{key}'")

    print(
        f"Loaded {len(catalog)} items ({len(catalog.featured())} featured), "
        f"{len(catalog.categories)} categories, locales={translations.locales}"
    )
    for finding in findings:
        print(f"  - {finding}")
    print("OK" if not findings else f"{len(findings)} finding(s)")
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(_run()))
