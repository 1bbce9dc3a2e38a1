"""
Shared test infrastructure.

Modules:
- file_utils: writing files and throw-away handler modules
"""

from .file_utils import write, write_module

__all__ = ["write", "write_module"]
