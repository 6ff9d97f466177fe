"""
promptify_scoring
=================

Does: Root package for the Promptify scoring engine.
Returns: Exposes the `engine` subpackage (scorers, generator client, rounds) and the demo CLI.
Used by: All imports starting from `promptify_scoring.*`.
"""

__all__: list[str] = []
__docformat__ = "google"
