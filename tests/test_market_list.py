"""
Tests for market list aggregation.
"""

from decimal import Decimal

from services.market_list_service import DEFAULT_UNIT, MarketListService


class StubIngredientRepository:
    def __init__(self, docs):
        self.docs = docs

    def list_all(self):
        return list(self.docs)


def test_same_ingredient_is_merged_case_insensitively():
    items = MarketListService.aggregate(
        [
            {"name": "Tomates", "quantity": 2, "unit": "kg", "price": 3.5},
            {"name": " tomates ", "quantity": 1, "unit": "kg", "price": 3.5},
            {"name": "Oignons", "quantity": 3, "unit": "pièce", "price": 0.4},
        ]
    )

    assert [i.name for i in items] == ["Tomates", "Oignons"]
    tomatoes = items[0]
    assert tomatoes.quantity == Decimal("3")
    assert tomatoes.price == Decimal("10.5")
    assert items[1].price == Decimal("1.2")


def test_documents_without_name_are_skipped():
    items = MarketListService.aggregate([{"quantity": 2}, {"name": ""}, {"name": "   "}, {"name": 12}, {"name": "Riz"}])

    assert [i.name for i in items] == ["Riz"]


def test_defaults_for_missing_fields():
    (item,) = MarketListService.aggregate([{"name": "Citron"}])

    assert item.quantity == Decimal(1)
    assert item.unit == DEFAULT_UNIT == "unité"
    assert item.price == Decimal(0)


def test_zero_or_invalid_quantity_counts_as_one():
    (item,) = MarketListService.aggregate(
        [{"name": "Ail", "quantity": 0, "price": 1}, {"name": "ail", "quantity": "beaucoup", "price": 1}]
    )

    assert item.quantity == Decimal(2)
    assert item.price == Decimal(2)


def test_first_unit_wins():
    (item,) = MarketListService.aggregate(
        [{"name": "Lait", "quantity": 1, "unit": "L"}, {"name": "Lait", "quantity": 500, "unit": "mL"}]
    )

    assert item.unit == "L"
    assert item.quantity == Decimal(501)


def test_build_list_reads_repository():
    repository = StubIngredientRepository([{"name": "Farine", "quantity": "1.5", "unit": "kg", "price": "2"}])

    (item,) = MarketListService.build_list(repository)

    assert item.quantity == Decimal("1.5")
    assert item.price == Decimal("3.0")


def test_empty_catalog():
    assert MarketListService.build_list(StubIngredientRepository([])) == []
