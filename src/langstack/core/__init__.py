"""Runtime core: catalogues, backends, locale fallback and resolution."""

from .backends import Backend, CombinedBackend, SimpleBackend, SupportsTranslations
from .catalog import BackendFrozenError, Catalog
from .extraction import (
    ExtractedMessage,
    SourceLocation,
    ordered_messages,
    register_explicit_keys,
)
from .fallback import fallback_chain, lookup_fallback
from .resolver import Resolver, miss_marker, resolve
from .translator import Translator, interpolate

__all__ = [
    "Backend",
    "BackendFrozenError",
    "Catalog",
    "CombinedBackend",
    "ExtractedMessage",
    "Resolver",
    "SimpleBackend",
    "SourceLocation",
    "SupportsTranslations",
    "Translator",
    "fallback_chain",
    "interpolate",
    "lookup_fallback",
    "miss_marker",
    "ordered_messages",
    "register_explicit_keys",
    "resolve",
]
