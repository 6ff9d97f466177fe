"""
types.py.

Does: Define the structural contract for text generators feeding the scorers.
Used by: orchestrator (play loop), llm_api_client, tests with fake generators.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class GeneratorProtocol(Protocol):
    """
    Anything that turns a player's instruction into generated text.

    - generate(prompt): Return the model's reply, or None when no answer
      could be obtained (after the generator's own retries).
    """

    def generate(self, prompt: str) -> str | None: ...
