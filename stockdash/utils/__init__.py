"""Utility functions for the application."""
from .llm import build_chat_client, create_chat_completion

__all__ = [
    "build_chat_client",
    "create_chat_completion"
]
