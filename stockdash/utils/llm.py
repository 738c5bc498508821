"""Utility functions for LLM operations."""
import asyncio
from typing import Any, Optional
from langfuse.openai import AsyncOpenAI
from stockdash.config import settings


def build_chat_client() -> AsyncOpenAI:
    """
    Create the (Langfuse-instrumented) OpenAI-compatible client from settings.
    
    Raises whatever the client raises for an unusable configuration; callers
    treat that like any other remote-call failure.
    """
    client_kwargs = {
        "api_key": settings.openai_api_key
    }
    if settings.openai_api_base:
        client_kwargs["base_url"] = settings.openai_api_base
    return AsyncOpenAI(**client_kwargs)


async def create_chat_completion(
    client: AsyncOpenAI,
    model: str,
    messages: list,
    timeout: Optional[float] = None,
    **kwargs
) -> Any:
    """
    Create a chat completion, optionally bounded by a timeout.
    
    Args:
        client: AsyncOpenAI client instance
        model: Model name to use
        messages: List of messages for the chat completion
        timeout: Timeout in seconds (defaults to settings.llm_timeout; None means
            no limit beyond the transport's own)
        **kwargs: Additional arguments to pass to chat.completions.create
        
    Returns:
        Chat completion response
        
    Raises:
        asyncio.TimeoutError: If a timeout is set and the request exceeds it
    """
    if timeout is None:
        timeout = settings.llm_timeout
    if settings.llm_temperature is not None:
        kwargs.setdefault("temperature", settings.llm_temperature)
    
    request = client.chat.completions.create(
        model=model,
        messages=messages,
        **kwargs
    )
    if timeout is None:
        return await request
    return await asyncio.wait_for(request, timeout=timeout)
