from __future__ import annotations
from typing import Dict, List, Type

# ---- Global oracle registry ----
REGISTRY: Dict[str, Type["BaseOracle"]] = {}


def register(cls: Type["BaseOracle"]) -> Type["BaseOracle"]:
    """
    Decorator: @register on an oracle class adds it to REGISTRY by its `id`.
    """
    oid = getattr(cls, "id", None)
    if not oid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if oid in REGISTRY:
        raise ValueError(f"Duplicate oracle id: {oid}")
    REGISTRY[oid] = cls
    return cls


# ---- Base class that dictionary oracles inherit ----
class BaseOracle:
    """
    Answers "is this a real word in `language`?" for the last pipeline check.

    The game treats the oracle as opaque: exact word in, bool out.
    """
    id = "base"
    name = "Base"
    languages: List[str] = []

    def supports(self, language: str) -> bool:
        return language in self.languages

    def is_known_word(self, word: str, language: str) -> bool:
        raise NotImplementedError("Override in subclass")
