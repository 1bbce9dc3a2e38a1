from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Protocol, Sequence, runtime_checkable

__all__ = [
    "DeclaresMultivalueNames",
    "DeclaresAliases",
    "SectionHandler",
    "LoadedHandler",
]


@runtime_checkable
class DeclaresMultivalueNames(Protocol):
    """Handler capability: names of settings that accumulate into lists."""
    def multivalue_names(self) -> Sequence[str]: ...   # noqa: E701


@runtime_checkable
class DeclaresAliases(Protocol):
    """Handler capability: alias name → canonical setting name."""
    def aliases(self) -> Mapping[str, str]: ...   # noqa: E701


class SectionHandler:
    """
    Optional base class for handler classes.

    Subclasses override the class-level tables (or the classmethods
    themselves) to declare their defaults. Modules and arbitrary objects
    may act as handlers too: all that matters is the presence of the
    two capability callables.

    Capabilities are called with no arguments. On a handler registered as
    a class they must be classmethods or staticmethods; a plain instance
    method fails when called and the section reports it as a
    MetadataDerivationError.
    """
    #: Settings stored as ordered lists
    MULTIVALUE_NAMES: ClassVar[Sequence[str]] = ()
    #: Alternate setting names
    ALIASES: ClassVar[Mapping[str, str]] = {}

    @classmethod
    def multivalue_names(cls) -> Sequence[str]:
        return list(cls.MULTIVALUE_NAMES)

    @classmethod
    def aliases(cls) -> Mapping[str, str]:
        return dict(cls.ALIASES)


def _capability(target: Any, proto: type, attr: str) -> Optional[Any]:
    # Protocol check only looks at attribute presence; None-valued or
    # non-callable attributes do not count as a declared capability.
    if not isinstance(target, proto):
        return None
    fn = getattr(target, attr, None)
    return fn if callable(fn) else None


@dataclass(frozen=True)
class LoadedHandler:
    """
    Typed handle on a loaded handler unit.

    The section model talks to handlers only through the four methods
    below, never through arbitrary reflection on `target`.
    """
    ref: str
    target: Any

    def declares_multivalue_names(self) -> bool:
        return _capability(self.target, DeclaresMultivalueNames, "multivalue_names") is not None

    def multivalue_names(self) -> List[str]:
        """Call the capability; empty list if the handler does not declare it."""
        fn = _capability(self.target, DeclaresMultivalueNames, "multivalue_names")
        if fn is None:
            return []
        names = fn()
        if isinstance(names, (str, bytes)) or isinstance(names, Mapping):
            raise TypeError(f"expected a sequence of names, got {type(names).__name__}")
        out = list(names)
        for n in out:
            if not isinstance(n, str):
                raise TypeError(f"multivalue name must be str, got {type(n).__name__}")
        return out

    def declares_aliases(self) -> bool:
        return _capability(self.target, DeclaresAliases, "aliases") is not None

    def aliases(self) -> Dict[str, str]:
        """Call the capability; empty dict if the handler does not declare it."""
        fn = _capability(self.target, DeclaresAliases, "aliases")
        if fn is None:
            return {}
        table = fn()
        if not isinstance(table, Mapping):
            raise TypeError(f"expected a mapping of aliases, got {type(table).__name__}")
        out: Dict[str, str] = {}
        for alias, canonical in table.items():
            if not isinstance(alias, str) or not isinstance(canonical, str):
                raise TypeError(f"alias entries must be str → str, got {alias!r} → {canonical!r}")
            out[alias] = canonical
        return out
