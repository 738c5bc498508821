"""Tests for the in-memory product store."""
from datetime import date
from decimal import Decimal
import pytest
from pydantic import ValidationError
from stockdash.data.product_schema import ProductDraft
from stockdash.data.seed import INITIAL_PRODUCTS, seed_products
from stockdash.data.store import ProductStore


def _draft(**overrides) -> ProductDraft:
    data = {
        "name": "Lampe de Bureau",
        "sku": "LAM-010",
        "category": "Mobilier",
        "quantity": 7,
        "min_stock": 2,
        "price": Decimal("35.50"),
        "description": "Lumière douce.",
    }
    data.update(overrides)
    return ProductDraft(**data)


@pytest.fixture
def store():
    return ProductStore(seed_products())


def test_seed_matches_initial_products(store):
    assert [p.sku for p in store.products] == [p["sku"] for p in INITIAL_PRODUCTS]
    assert len({p.id for p in store.products}) == len(INITIAL_PRODUCTS)


def test_each_start_gets_fresh_seed():
    first, second = seed_products(), seed_products()

    assert [p.sku for p in first] == [p.sku for p in second]
    assert {p.id for p in first}.isdisjoint({p.id for p in second})


def test_create_appends_one_record(store):
    before = store.products

    product = store.create(_draft())

    assert len(store) == len(before) + 1
    assert store.products[-1] == product
    assert product.id not in {p.id for p in before}
    assert product.last_updated == date.today()
    assert product.price == Decimal("35.50")


def test_create_generates_unique_ids(store):
    ids = {store.create(_draft()).id for _ in range(20)}

    assert len(ids) == 20


def test_duplicate_skus_are_allowed(store):
    store.create(_draft(sku="LAP-001"))

    assert sum(1 for p in store.products if p.sku == "LAP-001") == 2


def test_update_preserves_id_and_refreshes_date(store):
    target = store.products[1]
    others = [p for p in store.products if p.id != target.id]

    updated = store.update(target.id, _draft(name="Chaise Pro", quantity=30))

    assert updated.id == target.id
    assert updated.name == "Chaise Pro"
    assert updated.quantity == 30
    assert updated.sku == "LAM-010"
    assert updated.last_updated == date.today()
    assert store.products[1] == updated
    assert [p for p in store.products if p.id != target.id] == others


def test_update_unknown_id_leaves_store_unchanged(store):
    before = store.products

    assert store.update("missing", _draft()) is None
    assert store.products is before


def test_delete_removes_exactly_one(store):
    target = store.products[0]

    assert store.delete(target.id) is True
    assert len(store) == len(INITIAL_PRODUCTS) - 1
    assert store.get(target.id) is None


def test_delete_unknown_id_leaves_store_unchanged(store):
    before = store.products

    assert store.delete("missing") is False
    assert store.products is before


def test_mutation_replaces_collection(store):
    before = store.products

    store.create(_draft())

    assert store.products is not before
    assert len(before) == len(INITIAL_PRODUCTS)


@pytest.mark.parametrize("field,value", [
    ("quantity", -1),
    ("min_stock", -3),
    ("price", Decimal("-0.01")),
    ("name", "   "),
    ("sku", ""),
])
def test_draft_rejects_invalid_values(field, value):
    with pytest.raises(ValidationError):
        _draft(**{field: value})


def test_draft_rejects_system_fields():
    with pytest.raises(ValidationError):
        _draft(id="abc")
    with pytest.raises(ValidationError):
        _draft(last_updated=date(2020, 1, 1))


def test_draft_defaults():
    draft = ProductDraft(name="Stylo", sku="STY-1")

    assert draft.category == ""
    assert draft.quantity == 0
    assert draft.min_stock == 5
    assert draft.price == 0
    assert draft.description == ""


def test_critical_flag(make_product):
    assert make_product(quantity=4, min_stock=4).is_critical
    assert make_product(quantity=4, min_stock=4).stock_status == "Bas"
    assert not make_product(quantity=5, min_stock=4).is_critical
    assert make_product(quantity=5, min_stock=4).stock_status == "OK"
