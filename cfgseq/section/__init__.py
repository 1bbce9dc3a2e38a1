from __future__ import annotations

from .errors import (
    SectionError,
    ConstructionError,
    InvalidSectionName,
    InvalidHandlerName,
    HandlerLoadError,
    MetadataDerivationError,
    DuplicateValueError,
)
from .model import Section

__all__ = [
    # Model
    "Section",
    # Errors
    "SectionError",
    "ConstructionError",
    "InvalidSectionName",
    "InvalidHandlerName",
    "HandlerLoadError",
    "MetadataDerivationError",
    "DuplicateValueError",
]
