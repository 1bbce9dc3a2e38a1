from __future__ import annotations

from ..errors import CfgSeqError


class SectionError(CfgSeqError):
    """Base class for errors tied to a single section."""
    def __init__(self, section: str, message: str):
        self.section = section
        super().__init__(message)


class ConstructionError(SectionError):
    """Raised when a section cannot be constructed and bound."""
    pass


class InvalidSectionName(ConstructionError):
    def __init__(self, section: object):
        super().__init__(
            section if isinstance(section, str) else repr(section),
            f"Section name must be a non-empty string, got {section!r}",
        )


class InvalidHandlerName(ConstructionError):
    """Raised when handler_ref is not a well-formed handler identifier."""
    def __init__(self, section: str, handler_ref: object):
        self.handler_ref = handler_ref
        super().__init__(
            section,
            f"Illegal handler name {handler_ref!r} in section '{section}'",
        )


class HandlerLoadError(ConstructionError):
    """Raised when the handler bound to a section cannot be loaded."""
    def __init__(self, section: str, handler_ref: str, cause: BaseException):
        self.handler_ref = handler_ref
        self.cause = cause
        super().__init__(
            section,
            f"Couldn't load handler '{handler_ref}' given for section '{section}': "
            f"{type(cause).__name__}: {cause}",
        )


class MetadataDerivationError(ConstructionError):
    """Raised when a handler capability fails or returns malformed data."""
    def __init__(self, section: str, capability: str, cause: BaseException):
        self.capability = capability
        self.cause = cause
        super().__init__(
            section,
            f"Handler capability '{capability}' failed for section '{section}': "
            f"{type(cause).__name__}: {cause}",
        )


class DuplicateValueError(SectionError):
    """Raised when a single-value setting is assigned a second time."""
    def __init__(self, section: str, setting: str):
        self.setting = setting
        super().__init__(
            section,
            f"Multiple values given for property '{setting}' in section '{section}'",
        )


__all__ = [
    "SectionError",
    "ConstructionError",
    "InvalidSectionName",
    "InvalidHandlerName",
    "HandlerLoadError",
    "MetadataDerivationError",
    "DuplicateValueError",
]
