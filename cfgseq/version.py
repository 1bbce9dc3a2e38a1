from __future__ import annotations

from importlib import metadata


def tool_version() -> str:
    """
    Installed package version.
    Does not depend on other modules of the package (avoids import cycles).
    """
    try:
        return metadata.version("cfgseq")
    except metadata.PackageNotFoundError:
        return "0.0.0"

__all__ = ["tool_version"]
