"""
llm
===

Does: Expose the text generator interface: protocol, client factory and API-key check.
Returns: Re-exports of stable symbols from `llm_api_client` and `types`.
Used by: The play loop and the demo CLI.
Example:
    generator = get_generator(); text = generator.generate("write a sad sentence")
"""

from __future__ import annotations

# ── Public API re-exports ─────────────────────────────────────────────────────
from .llm_api_client import (
    OpenRouterGenerator,
    get_generator,
    has_api_key,
)
from .types import GeneratorProtocol

__all__ = [
    "GeneratorProtocol",
    "OpenRouterGenerator",
    "get_generator",
    "has_api_key",
]

__docformat__ = "google"
