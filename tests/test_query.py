"""Tests for the collection query pipeline."""

import pytest

from antiquebooks.schemas import QuerySpec, SortKey
from antiquebooks.services.query import query

from tests.conftest import make_item

EN = ("en",)


def _ids(result) -> list[str]:
    return [item.id for item in result]


class TestScenario:
    """Two-item catalog: A (books, 10) and B (maps, 25)."""

    @pytest.fixture
    def ab(self):
        return [
            make_item("A", 10, "books", title={"en": "Old Atlas"}),
            make_item("B", 25, "maps", title={"en": "Town Map"}),
        ]

    def test_category_filter(self, ab):
        assert _ids(query(ab, QuerySpec(category="books"), EN)) == ["A"]

    def test_text_filter(self, ab):
        assert _ids(query(ab, QuerySpec(text="map"), EN)) == ["B"]

    def test_price_desc(self, ab):
        assert _ids(query(ab, QuerySpec(sort="price_desc"), EN)) == ["B", "A"]


class TestFiltering:
    def test_no_filters_keeps_catalog_order(self, items):
        assert _ids(query(items, QuerySpec(), EN)) == ["A", "B", "C", "D"]

    def test_every_result_has_requested_category(self, items):
        result = query(items, QuerySpec(category="books"), EN)
        assert result
        assert all(item.category == "books" for item in result)

    def test_unknown_category_matches_nothing(self, items):
        assert query(items, QuerySpec(category="globes"), EN) == []

    def test_text_is_case_insensitive(self, items):
        assert _ids(query(items, QuerySpec(text="OLD atlas"), EN)) == ["A"]

    def test_text_matches_author(self, items):
        assert _ids(query(items, QuerySpec(text="mattioli"), EN)) == ["C"]

    def test_text_uses_active_locale_title(self, items):
        assert _ids(query(items, QuerySpec(text="starý"), ("sk", "en"))) == ["A"]
        assert query(items, QuerySpec(text="starý"), EN) == []

    def test_text_falls_back_to_default_locale_title(self, items):
        # B has no Slovak title; the English one is searched instead.
        assert _ids(query(items, QuerySpec(text="town"), ("sk", "en"))) == ["B"]

    def test_missing_title_is_empty_not_an_error(self, items):
        # D only has a Slovak title; under ("en",) it has no title and no author.
        assert "D" not in _ids(query(items, QuerySpec(text="dunaj"), EN))
        assert _ids(query(items, QuerySpec(text="dunaj"), ("sk", "en"))) == ["D"]

    def test_filters_are_conjunctive(self, items):
        assert _ids(query(items, QuerySpec(category="maps", text="atlas"), EN)) == []
        assert _ids(query(items, QuerySpec(category="books", text="herbal"), EN)) == ["C"]

    def test_blank_inputs_mean_unset(self, items):
        spec = QuerySpec(category="", text="", sort="")
        assert spec.category is None and spec.text is None and spec.sort == SortKey.NONE
        assert len(query(items, spec, EN)) == len(items)


class TestSorting:
    def test_price_asc_is_ordered_and_stable(self, items):
        result = query(items, QuerySpec(sort=SortKey.PRICE_ASC), EN)
        prices = [item.price for item in result]
        assert prices == sorted(prices)
        # A and C share price 10: catalog order is preserved
        assert _ids(result) == ["D", "A", "C", "B"]

    def test_price_desc_is_ordered_and_stable(self, items):
        result = query(items, QuerySpec(sort=SortKey.PRICE_DESC), EN)
        assert all(a.price >= b.price for a, b in zip(result, result[1:]))
        assert _ids(result) == ["B", "A", "C", "D"]

    def test_date_desc_treats_missing_year_as_zero(self, items):
        result = query(items, QuerySpec(sort=SortKey.DATE_DESC), EN)
        assert all((a.year or 0) >= (b.year or 0) for a, b in zip(result, result[1:]))
        assert _ids(result) == ["A", "B", "C", "D"]

    def test_filter_then_sort(self, items):
        result = query(items, QuerySpec(category="books", sort=SortKey.PRICE_DESC), EN)
        assert _ids(result) == ["A", "C"]

    def test_unknown_sort_is_rejected(self):
        with pytest.raises(ValueError):
            QuerySpec(sort="title_asc")


def test_query_does_not_mutate_input(items):
    snapshot = list(items)
    query(items, QuerySpec(sort=SortKey.PRICE_ASC), EN)
    assert items == snapshot
