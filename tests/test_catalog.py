"""Tests for catalog validation and auditing."""

import pytest

from antiquebooks.services.catalog import CatalogError, CatalogStore, audit_catalog

from tests.conftest import make_item


def test_lookup_and_featured(catalog):
    assert len(catalog) == 4
    assert catalog.get_item("B").price == 25
    assert catalog.get_item("missing") is None
    assert [item.id for item in catalog.featured()] == ["A"]


def test_duplicate_ids_rejected(categories):
    with pytest.raises(CatalogError):
        CatalogStore([make_item("A", 1), make_item("A", 2)], categories)


def test_from_documents_validates():
    store = CatalogStore.from_documents(
        [{"id": "X", "title": {"en": "Map"}, "price": 5, "category": "maps", "status": "available"}],
        [{"id": "maps", "title": {"en": "Maps"}}],
    )
    item = store.get_item("X")
    assert item.is_available
    assert item.currency == "EUR"


@pytest.mark.parametrize(
    "raw",
    [
        {"title": {"en": "No id"}, "price": 5},
        {"id": "X", "price": -1},
        {"id": "X", "price": 5, "status": "reserved"},
    ],
)
def test_from_documents_rejects_invalid_items(raw):
    with pytest.raises(CatalogError):
        CatalogStore.from_documents([raw], [])


def test_audit_reports_degraded_entries(catalog):
    findings = audit_catalog(catalog, "en")
    assert "item D: no 'en' title" in findings
    assert "category prints: no 'en' title" in findings
    assert not any(f.startswith("item A") for f in findings)


def test_audit_reports_unknown_category(categories):
    store = CatalogStore([make_item("Z", 1, "globes", title={"en": "Globe"})], categories)
    assert "item Z: unknown category 'globes'" in audit_catalog(store, "en")
