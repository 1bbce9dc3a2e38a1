"""
Sections of a multi-section configuration sequence.

A Section is a named block of settings, optionally bound to a handler
that declares which settings are multivalue and which names are aliases.
"""

from __future__ import annotations

from .errors import CfgSeqError
from .handlers import HandlerResolver, LoadedHandler, SectionHandler, register, register_lazy
from .section import (
    Section,
    SectionError,
    ConstructionError,
    InvalidSectionName,
    InvalidHandlerName,
    HandlerLoadError,
    MetadataDerivationError,
    DuplicateValueError,
)
from .version import tool_version

__all__ = [
    "CfgSeqError",
    "Section",
    "SectionError",
    "ConstructionError",
    "InvalidSectionName",
    "InvalidHandlerName",
    "HandlerLoadError",
    "MetadataDerivationError",
    "DuplicateValueError",
    "HandlerResolver",
    "LoadedHandler",
    "SectionHandler",
    "register",
    "register_lazy",
    "tool_version",
]
