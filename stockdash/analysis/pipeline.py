"""Text-generation pipeline for product descriptions and stock reports."""
import logging
from typing import Optional, Sequence
from langfuse import get_client
from langfuse.openai import AsyncOpenAI
from stockdash.config import settings
from stockdash.data.product_schema import Product
from stockdash.analysis.prompts import (
    ANALYSIS_PLACEHOLDER,
    DESCRIPTION_PLACEHOLDER,
    build_description_prompt,
    build_stock_health_prompt,
)
from stockdash.utils.llm import build_chat_client, create_chat_completion

logger = logging.getLogger(__name__)


class PipelineError(Exception):
    """A remote text-generation call failed."""


class GenerationError(PipelineError):
    """Product description could not be generated."""


class AnalysisError(PipelineError):
    """Stock-health analysis could not be produced."""


class StockAnalyst:
    """
    Builds prompts from inventory data and sends them to the remote
    text-generation service.
    
    There is no caching and no retry: every call goes to the service, and
    every failure (network, authentication, quota, timeout) surfaces as a
    single generic error type per operation.
    """
    
    def __init__(self, client: Optional[AsyncOpenAI] = None, model: Optional[str] = None):
        """
        Initialize the analyst.
        
        Args:
            client: Optional pre-built client; one is created from settings on first use
            model: Model identifier (defaults to settings.chat_model)
        """
        self._client = client
        self.model = model or settings.chat_model
    
    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = build_chat_client()
        return self._client
    
    async def _complete(self, prompt: str) -> Optional[str]:
        response = await create_chat_completion(
            client=self.client,
            model=self.model,
            messages=[{"role": "user", "content": prompt}]
        )
        return response.choices[0].message.content
    
    async def generate_product_description(self, name: str, category: str) -> str:
        """
        Generate a short promotional description for a product.
        
        Args:
            name: Product name (caller guarantees it is non-empty)
            category: Product category (caller guarantees it is non-empty)
            
        Returns:
            The service's text verbatim, or a placeholder if it came back empty
            
        Raises:
            GenerationError: If the remote call fails for any reason
        """
        langfuse = get_client()
        
        with langfuse.start_as_current_observation(
            as_type="span",
            name="product-description",
            input={"name": name, "category": category}
        ) as span:
            try:
                text = await self._complete(build_description_prompt(name, category))
            except Exception as e:
                logger.error("Description generation failed: %s", e)
                span.update(output={"error": str(e)})
                raise GenerationError(
                    "Impossible de générer la description. Vérifiez votre clé API."
                ) from e
            
            span.update(output={"response": text or ""})
            return text or DESCRIPTION_PLACEHOLDER
    
    async def analyze_stock_health(self, products: Sequence[Product]) -> str:
        """
        Ask the service for a Markdown stock-health report.
        
        Args:
            products: Full product collection (may be empty)
            
        Returns:
            The Markdown report verbatim, or a placeholder if it came back empty
            
        Raises:
            AnalysisError: If the remote call fails for any reason
        """
        langfuse = get_client()
        prompt = build_stock_health_prompt(products)
        
        with langfuse.start_as_current_observation(
            as_type="span",
            name="stock-health-analysis",
            input={"products_count": len(products)}
        ) as span:
            try:
                text = await self._complete(prompt)
            except Exception as e:
                logger.error("Stock analysis failed: %s", e)
                span.update(output={"error": str(e)})
                raise AnalysisError(
                    "Impossible d'analyser le stock. Vérifiez votre clé API."
                ) from e
            
            span.update(output={"response": text[:500] if text else ""})
            return text or ANALYSIS_PLACEHOLDER
