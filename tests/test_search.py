"""Tests for the product search filter."""
from stockdash.services.search import filter_products


def _catalog(make_product):
    return [
        make_product(name="Ordinateur Portable Pro", sku="LAP-001", category="Électronique"),
        make_product(name="Chaise Ergonomique", sku="FUR-002", category="Mobilier"),
        make_product(name="Casque Audio Sans Fil", sku="AUD-005", category="Électronique"),
    ]


def test_empty_query_returns_everything_in_order(make_product):
    products = _catalog(make_product)

    assert filter_products(products, "") == products


def test_matching_ignores_case_including_accents(make_product):
    products = _catalog(make_product)

    lower = filter_products(products, "élec")
    upper = filter_products(products, "ÉLEC")

    assert [p.sku for p in lower] == ["LAP-001", "AUD-005"]
    assert lower == upper


def test_any_single_field_is_enough(make_product):
    products = _catalog(make_product)

    assert [p.sku for p in filter_products(products, "chaise")] == ["FUR-002"]
    assert [p.sku for p in filter_products(products, "aud-")] == ["AUD-005"]
    assert [p.sku for p in filter_products(products, "mobil")] == ["FUR-002"]


def test_substring_not_prefix(make_product):
    products = _catalog(make_product)

    assert [p.sku for p in filter_products(products, "gonom")] == ["FUR-002"]


def test_filter_is_idempotent(make_product):
    products = _catalog(make_product)

    once = filter_products(products, "o")
    twice = filter_products(once, "o")

    assert twice == once


def test_no_match(make_product):
    assert filter_products(_catalog(make_product), "zzz") == []
