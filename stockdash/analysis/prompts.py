"""Prompt templates and builders for the text-generation service."""
from typing import Iterable
from stockdash.data.product_schema import Product

# Quantity above which a product may be over-stocked
OVERSTOCK_THRESHOLD = 100

DESCRIPTION_PLACEHOLDER = "Description non disponible."
ANALYSIS_PLACEHOLDER = "Analyse non disponible."

DESCRIPTION_PROMPT = (
    "Rédige une description commerciale courte, attrayante et professionnelle "
    "(max 50 mots) pour un produit nommé \"{name}\" appartenant à la catégorie "
    "\"{category}\". Le ton doit être vendeur."
)

STOCK_HEALTH_PROMPT = """Tu es un expert en logistique et gestion d'inventaire. Analyse la liste de stock suivante et fournis un rapport concis en format Markdown.

Tes objectifs :
1. Identifier les produits en rupture ou stock critique.
2. Identifier le sur-stockage potentiel (si quantité > {overstock_threshold}).
3. Suggérer une action prioritaire pour optimiser la valeur du stock.

Données du stock :
{stock_summary}

Reste professionnel et direct."""


def build_description_prompt(name: str, category: str) -> str:
    return DESCRIPTION_PROMPT.format(name=name, category=category)


def summarize_product(product: Product) -> str:
    """One-line summary: name, quantity, minimum threshold and price."""
    return (
        f"- {product.name} (Qté: {product.quantity}, "
        f"Min: {product.min_stock}, Prix: {product.price}€)"
    )


def build_stock_summary(products: Iterable[Product]) -> str:
    return "\n".join(summarize_product(p) for p in products)


def build_stock_health_prompt(products: Iterable[Product]) -> str:
    """
    Build the stock-health report prompt.
    
    An empty collection still yields the full template with an empty
    data section.
    """
    return STOCK_HEALTH_PROMPT.format(
        overstock_threshold=OVERSTOCK_THRESHOLD,
        stock_summary=build_stock_summary(products)
    )
