"""Layered translation backends with deterministic locale fallback."""

from .core import (
    Backend,
    BackendFrozenError,
    Catalog,
    CombinedBackend,
    Resolver,
    SimpleBackend,
    Translator,
    fallback_chain,
    lookup_fallback,
    resolve,
)

__all__ = [
    "Backend",
    "BackendFrozenError",
    "Catalog",
    "CombinedBackend",
    "Resolver",
    "SimpleBackend",
    "Translator",
    "fallback_chain",
    "lookup_fallback",
    "resolve",
]
