"""Seed products loaded into the store at every start."""
import uuid
from datetime import date
from decimal import Decimal
from typing import List
from stockdash.data.product_schema import Product

SUGGESTED_CATEGORIES = [
    "Électronique",
    "Mobilier",
    "Vêtements",
    "Alimentation",
    "Divers",
]

INITIAL_PRODUCTS = [
    {
        "name": "Ordinateur Portable Pro",
        "sku": "LAP-001",
        "category": "Électronique",
        "quantity": 12,
        "min_stock": 5,
        "price": Decimal("1200"),
        "description": "PC portable haute performance.",
        "last_updated": date(2023, 10, 25),
    },
    {
        "name": "Chaise Ergonomique",
        "sku": "FUR-002",
        "category": "Mobilier",
        "quantity": 3,
        "min_stock": 10,
        "price": Decimal("250"),
        "description": "Confort optimal.",
        "last_updated": date(2023, 10, 26),
    },
    {
        "name": "Casque Audio Sans Fil",
        "sku": "AUD-005",
        "category": "Électronique",
        "quantity": 45,
        "min_stock": 8,
        "price": Decimal("89"),
        "description": "Son pur.",
        "last_updated": date(2023, 10, 24),
    },
    {
        "name": "Bureau Assis-Debout",
        "sku": "FUR-008",
        "category": "Mobilier",
        "quantity": 8,
        "min_stock": 2,
        "price": Decimal("450"),
        "description": "Bureau ajustable.",
        "last_updated": date(2023, 10, 20),
    },
    {
        "name": "Moniteur 4K",
        "sku": "MON-022",
        "category": "Électronique",
        "quantity": 2,
        "min_stock": 4,
        "price": Decimal("340"),
        "description": "Écran ultra HD.",
        "last_updated": date(2023, 10, 27),
    },
]


def seed_products() -> List[Product]:
    """Build fresh seed records, each with a newly generated identifier."""
    return [Product(id=str(uuid.uuid4()), **data) for data in INITIAL_PRODUCTS]
