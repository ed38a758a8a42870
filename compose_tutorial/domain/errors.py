"""Domain-level error types for composition lifecycle misuse.

State transitions in this package are total, so the only errors raised here
describe a host used outside its lifecycle (started twice, or recomposed after
it left the composition).
"""
from __future__ import annotations


class CompositionError(Exception):
    """Base class for composition lifecycle errors."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


ALREADY_COMPOSED = "ALREADY_COMPOSED"
LEFT_COMPOSITION = "LEFT_COMPOSITION"


__all__ = ["ALREADY_COMPOSED", "CompositionError", "LEFT_COMPOSITION"]
