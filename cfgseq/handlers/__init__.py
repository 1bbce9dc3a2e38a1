from __future__ import annotations

# Public API of handlers package:
#  • HandlerResolver: loads handlers by symbolic name, lazily
#  • LoadedHandler: typed handle exposing the two optional capabilities
from .base import DeclaresAliases, DeclaresMultivalueNames, LoadedHandler, SectionHandler
from .registry import HandlerResolver, get_resolver, is_handler_ref, register, register_lazy

__all__ = [
    "DeclaresAliases",
    "DeclaresMultivalueNames",
    "LoadedHandler",
    "SectionHandler",
    "HandlerResolver",
    "get_resolver",
    "is_handler_ref",
    "register",
    "register_lazy",
]
