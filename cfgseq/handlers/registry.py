from __future__ import annotations

import importlib
import logging
import os
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .base import LoadedHandler

__all__ = [
    "HANDLER_REF_RE",
    "is_handler_ref",
    "HandlerResolver",
    "get_resolver",
    "register",
    "register_lazy",
]

# -------------------- Logging setup --------------------

_LOG = logging.getLogger("cfgseq")
logger = logging.getLogger(__name__)

def _setup_logging_once() -> None:
    if getattr(_setup_logging_once, "_inited", False):
        return
    _setup_logging_once._inited = True  # type: ignore[attr-defined]
    if not os.environ.get("CFGSEQ_DEBUG"):
        return
    _LOG.setLevel(logging.DEBUG)
    if not _LOG.handlers:
        h = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
        h.setFormatter(fmt)
        _LOG.addHandler(h)

_setup_logging_once()

# -------------------- Handler identifiers --------------------

_IDENT = r"[A-Za-z_]\w*"
#: "pkg.module" or "pkg.module:Attr.inner"
HANDLER_REF_RE = re.compile(rf"^{_IDENT}(?:\.{_IDENT})*(?::{_IDENT}(?:\.{_IDENT})*)?$")


def is_handler_ref(ref: object) -> bool:
    """True if `ref` is a syntactically legal handler identifier."""
    return isinstance(ref, str) and HANDLER_REF_RE.match(ref) is not None


@dataclass(frozen=True)
class _LazySpec:
    module: str
    attr: Optional[str]


def _split_ref(ref: str) -> _LazySpec:
    module, sep, attr = ref.partition(":")
    return _LazySpec(module=module, attr=attr if sep else None)


class HandlerResolver:
    """
    Makes handler code available by symbolic name.

    Registered names are looked up first (eager objects, then lazy
    module/attribute strings); anything else is treated as an import
    path of the form ``module[:attr]``. Nothing is imported until the
    first request for a name.
    """

    def __init__(self) -> None:
        # Lazy specs: name → where the handler lives
        self._lazy: Dict[str, _LazySpec] = {}
        # Objects registered directly: name → handle
        self._eager: Dict[str, LoadedHandler] = {}
        # Resolved handles: ref → handle
        self._loaded: Dict[str, LoadedHandler] = {}

    def register(self, name: str, target: Any) -> None:
        """Bind `name` to an already imported handler object."""
        self._check_name(name)
        self._lazy.pop(name, None)
        self._loaded.pop(name, None)
        self._eager[name] = LoadedHandler(ref=name, target=target)

    def register_lazy(self, name: str, *, module: str, attr: Optional[str] = None) -> None:
        """
        Bind `name` to a handler "by strings" without importing its module.
        Relative module names are not supported: there is no anchor package.
        """
        self._check_name(name)
        spec = _LazySpec(module=module, attr=attr)
        if not is_handler_ref(module if attr is None else f"{module}:{attr}"):
            raise ValueError(f"Illegal handler location {module!r}:{attr!r}")
        self._eager.pop(name, None)
        self._loaded.pop(name, None)
        self._lazy[name] = spec

    def is_registered(self, name: str) -> bool:
        return name in self._lazy or name in self._eager

    def registered_names(self) -> List[str]:
        return sorted(set(self._lazy) | set(self._eager))

    def load(self, ref: str) -> LoadedHandler:
        """
        Return a handle for `ref`, importing its module on first use.

        Raises whatever the import raises (ImportError, AttributeError,
        errors from module-level code). Failures are not cached.
        """
        cached = self._eager.get(ref) or self._loaded.get(ref)
        if cached is not None:
            logger.debug("handler %s: cache hit", ref)
            return cached

        spec = self._lazy.get(ref) or _split_ref(ref)
        target = self._import(spec)
        handle = LoadedHandler(ref=ref, target=target)
        self._loaded[ref] = handle
        logger.debug("handler %s: loaded from %s:%s", ref, spec.module, spec.attr or "")
        return handle

    def loadable(self, ref: str) -> None:
        """Raise exactly what `load` would raise; return None otherwise."""
        self.load(ref)

    @staticmethod
    def _import(spec: _LazySpec) -> Any:
        obj: Any = importlib.import_module(spec.module)
        if spec.attr is None:
            return obj
        for part in spec.attr.split("."):
            try:
                obj = getattr(obj, part)
            except AttributeError:
                raise AttributeError(f"Handler attribute '{spec.attr}' not found in {spec.module}") from None
        return obj

    @staticmethod
    def _check_name(name: str) -> None:
        if not is_handler_ref(name):
            raise ValueError(f"Illegal handler name {name!r}")


_DEFAULT = HandlerResolver()


def get_resolver() -> HandlerResolver:
    """Process-wide resolver used by sections built without `resolver=`."""
    return _DEFAULT


def register(name: str, target: Any) -> None:
    _DEFAULT.register(name, target)


def register_lazy(name: str, *, module: str, attr: Optional[str] = None) -> None:
    _DEFAULT.register_lazy(name, module=module, attr=attr)
