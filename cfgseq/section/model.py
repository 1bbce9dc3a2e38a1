from __future__ import annotations

import logging
from functools import cached_property
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional

from .errors import (
    DuplicateValueError,
    HandlerLoadError,
    InvalidHandlerName,
    InvalidSectionName,
    MetadataDerivationError,
)
from ..handlers.base import LoadedHandler
from ..handlers.registry import HandlerResolver, get_resolver, is_handler_ref

logger = logging.getLogger(__name__)

__all__ = ["Section"]


class Section:
    """
    One named block of settings in a configuration sequence.

    A section may be bound to a handler (``handler_ref``). The handler is
    loaded while the section is built, and its optional capabilities
    supply defaults for the alias table and the set of multivalue
    settings. Values are fed one raw pair at a time via `add_value`.

    Construction either returns a fully bound section or raises a
    ConstructionError subclass; there is no half-built instance.
    """

    def __init__(
        self,
        name: str,
        handler_ref: Optional[str] = None,
        *,
        aliases: Optional[Mapping[str, str]] = None,
        multivalue_names: Optional[Iterable[str]] = None,
        resolver: Optional[HandlerResolver] = None,
    ):
        if not isinstance(name, str) or not name:
            raise InvalidSectionName(name)
        if isinstance(multivalue_names, (str, bytes)):
            raise TypeError("multivalue_names must be an iterable of names, not a string")

        self._name = name
        self._handler_ref = handler_ref
        self._resolver = resolver or get_resolver()
        self._handler: Optional[LoadedHandler] = None
        # Explicit metadata wins over handler declarations
        self._explicit_aliases = None if aliases is None else dict(aliases)
        self._explicit_multivalue = None if multivalue_names is None else frozenset(multivalue_names)
        self._payload: Dict[str, Any] = {}

        self._bind()

    # ---- Binding ----

    def _bind(self) -> None:
        ref = self._handler_ref
        if ref is not None:
            if not is_handler_ref(ref):
                raise InvalidHandlerName(self._name, ref)
            try:
                self._handler = self._resolver.load(ref)
            except Exception as e:
                raise HandlerLoadError(self._name, ref, e) from e

        # Force the memoized metadata now so that errors surface at construction
        self.multivalue_names
        self.aliases

    # ---- Read-only attributes ----

    @property
    def name(self) -> str:
        return self._name

    @property
    def handler_ref(self) -> Optional[str]:
        return self._handler_ref

    @property
    def has_handler(self) -> bool:
        return self._handler_ref is not None

    @property
    def handler(self) -> Optional[LoadedHandler]:
        """Loaded handler handle, for whatever applies the section afterwards."""
        return self._handler

    @property
    def payload(self) -> Mapping[str, Any]:
        """
        Snapshot of the settings stored so far: canonical name → value, or
        → tuple of values (in call order) for multivalue settings.
        """
        return MappingProxyType({
            name: tuple(value) if name in self.multivalue_names else value
            for name, value in self._payload.items()
        })

    @cached_property
    def multivalue_names(self) -> FrozenSet[str]:
        if self._explicit_multivalue is not None:
            return self._explicit_multivalue
        if self._handler is None:
            return frozenset()
        try:
            names = frozenset(self._handler.multivalue_names())
        except Exception as e:
            raise MetadataDerivationError(self._name, "multivalue_names", e) from e
        logger.debug("section %s: multivalue names from %s: %s", self._name, self._handler.ref, sorted(names))
        return names

    @cached_property
    def aliases(self) -> Mapping[str, str]:
        if self._explicit_aliases is not None:
            return MappingProxyType(self._explicit_aliases)
        if self._handler is None:
            return MappingProxyType({})
        try:
            table = self._handler.aliases()
        except Exception as e:
            raise MetadataDerivationError(self._name, "aliases", e) from e
        logger.debug("section %s: aliases from %s: %s", self._name, self._handler.ref, table)
        return MappingProxyType(table)

    # ---- Value assignment ----

    def canonical_name(self, name: str) -> str:
        """Rewrite an alias to its canonical setting name (single lookup)."""
        return self.aliases.get(name, name)

    def is_multivalue(self, name: str) -> bool:
        return self.canonical_name(name) in self.multivalue_names

    def add_value(self, name: str, value: Any) -> None:
        """
        Store `value` under the canonical name of `name`.

        Multivalue settings accumulate in call order. Any other setting is
        write-once: a second assignment raises DuplicateValueError and
        leaves the payload untouched.
        """
        name = self.canonical_name(name)

        if name in self.multivalue_names:
            values: List[Any] = self._payload.setdefault(name, [])
            values.append(value)
            logger.debug("section %s: %s += %r", self._name, name, value)
            return

        if name in self._payload:
            raise DuplicateValueError(self._name, name)

        self._payload[name] = value
        logger.debug("section %s: %s = %r", self._name, name, value)

    def __repr__(self) -> str:
        handler = f" handler={self._handler_ref}" if self._handler_ref else ""
        return f"<Section [{self._name}]{handler} values={len(self._payload)}>"
