"""
Base exception for user-facing errors.

All expected errors caused by configuration data (bad handler names,
handlers that fail to load, duplicate settings) inherit from CfgSeqError.

Programming errors and bugs should NOT inherit from CfgSeqError:
they propagate with full tracebacks.
"""

from __future__ import annotations


class CfgSeqError(Exception):
    """
    Base class for all user-facing errors of the section model.

    These errors indicate problems that the author of a configuration
    can fix: a misspelled handler, a setting given twice, etc.
    """
    pass


__all__ = ["CfgSeqError"]
