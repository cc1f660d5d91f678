"""Tests for item projections and currency formatting."""

from antiquebooks.services.formatting import format_currency
from antiquebooks.services.projection import detail_link, project, project_detail

from tests.conftest import make_item

EN = ("en",)
SK = ("sk", "en")


class TestFormatCurrency:
    def test_english_conventions(self):
        assert format_currency(1234.5, "EUR", "en") == "€1,234.50"
        assert format_currency(10, "USD", "en") == "$10.00"

    def test_german_conventions(self):
        assert format_currency(1234.5, "EUR", "de") == "1.234,50 €"

    def test_slovak_uses_no_break_space_grouping(self):
        assert format_currency(1234.5, "EUR", "sk") == "1\u00a0234,50 €"

    def test_zero_decimal_currency(self):
        assert format_currency(1500, "JPY", "en") == "¥1,500"

    def test_unknown_currency_uses_code(self):
        assert format_currency(10, "SEK", "en") == "SEK 10.00"
        assert format_currency(10, "sek", "de") == "10,00 SEK"

    def test_unknown_locale_uses_english_conventions(self):
        assert format_currency(2.5, "EUR", "xx") == "€2.50"


class TestProject:
    def test_available_item_card(self, translations):
        item = make_item("atlas 1/2", 1450, title={"en": "Old Atlas"}, images=("a.jpg", "b.jpg"))
        card = project(item, EN, translations)
        assert card.display_title == "Old Atlas"
        assert card.display_price == "€1,450.00"
        assert card.image_url == "a.jpg"
        assert card.detail_link == "item.html?id=atlas+1%2F2&lang=en"
        assert card.view_label == "View"
        assert card.sold is False

    def test_sold_item_shows_localized_label(self, translations):
        item = make_item("C", 10, status="sold")
        assert project(item, EN, translations).display_price == "Sold"
        assert project(item, SK, translations).display_price == "Predané"

    def test_placeholder_when_no_images(self, translations):
        item = make_item("X", 1)
        assert project(item, EN, translations).image_url == "assets/images/placeholder.jpg"
        assert project(item, EN, translations, placeholder_image="none.png").image_url == "none.png"

    def test_title_falls_back_through_chain(self, translations):
        item = make_item("B", 25, title={"en": "Town Map", "de": "Stadtplan"})
        card = project(item, SK, translations)
        assert card.display_title == "Town Map"
        assert card.detail_link.endswith("lang=sk")

    def test_price_uses_active_locale_conventions(self, translations):
        item = make_item("A", 1234.5)
        assert project(item, ("de", "en"), translations).display_price == "1.234,50 €"

    def test_aliases_in_serialized_card(self, translations):
        payload = project(make_item("A", 1), EN, translations).model_dump(by_alias=True)
        assert set(payload) >= {"displayTitle", "displayPrice", "imageUrl", "detailLink"}


class TestProjectDetail:
    def test_available_item(self, translations):
        item = make_item(
            "A",
            10,
            title={"en": "Old Atlas"},
            author="Homann",
            year=1790,
            description={"en": "<p>Folio</p>"},
            images=("1.jpg", "2.jpg"),
        )
        detail = project_detail(item, EN, translations)
        assert detail.author == "Homann"
        assert detail.year == 1790
        assert detail.status_label == "Available"
        assert detail.description_html == "<p>Folio</p>"
        assert detail.images == ["1.jpg", "2.jpg"]
        assert detail.can_add_to_cart is True
        assert detail.inquire_link == "contact.html?subject=Inquiry%3A+Old+Atlas&lang=en"

    def test_sold_item_with_missing_fields(self, translations):
        item = make_item("C", 10, status="sold")
        detail = project_detail(item, SK, translations)
        assert detail.author == ""
        assert detail.year is None
        assert detail.description_html == ""
        assert detail.status_label == "Predané"
        assert detail.can_add_to_cart is False


def test_detail_link_is_deterministic():
    assert detail_link("A", "de") == detail_link("A", "de") == "item.html?id=A&lang=de"
