"""
Configuration package.

Allows callers to simply do ``from config import settings``.
"""

from . import settings

__all__ = ["settings"]
