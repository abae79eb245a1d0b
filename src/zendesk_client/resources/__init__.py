"""
Resource clients, one package per endpoint group.
"""

from .base import ResourceClient

__all__ = ["ResourceClient"]
