"""Shared fixtures: sample products and a fake text-generation client."""
import asyncio
import os
from decimal import Decimal
from types import SimpleNamespace

# Keep Langfuse quiet and offline during tests
os.environ.setdefault("LANGFUSE_TRACING_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient
from stockdash.analysis.pipeline import StockAnalyst
from stockdash.data.product_schema import Product, ProductDraft
from stockdash.main import create_app
from stockdash.state import InventoryState


class FakeChatClient:
    """Stands in for AsyncOpenAI: records prompts and replays a canned outcome."""

    def __init__(self, content="Rapport", error=None, gate=None):
        self.content = content
        self.error = error
        self.gate = gate
        self.calls = []
        self.chat = SimpleNamespace(completions=self)

    async def create(self, model, messages, **kwargs):
        self.calls.append({"model": model, "messages": messages, **kwargs})
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])

    @property
    def last_prompt(self):
        return self.calls[-1]["messages"][-1]["content"]


def build_product(**overrides) -> Product:
    data = {
        "name": "Produit",
        "sku": "SKU-1",
        "category": "Divers",
        "quantity": 1,
        "min_stock": 0,
        "price": Decimal("1"),
        "description": "",
    }
    data.update(overrides)
    return Product.from_draft(ProductDraft(**data))


@pytest.fixture
def make_product():
    return build_product


@pytest.fixture
def chat_client_factory():
    return FakeChatClient


@pytest.fixture
def fake_client():
    return FakeChatClient(content="Texte généré")


@pytest.fixture
def analyst(fake_client):
    return StockAnalyst(client=fake_client, model="test-model")


@pytest.fixture
def state(analyst):
    return InventoryState(analyst=analyst)


@pytest.fixture
def client(state):
    return TestClient(create_app(state))


@pytest.fixture
def gate():
    return asyncio.Event()
