"""
Plugin package for the shell's pluggable providers.

This package provides the provider interfaces, precedence ordering and the
registry the shell uses to pick one provider among several.
"""

from .ordering import HIGHEST_PRECEDENCE, LOWEST_PRECEDENCE, get_order, order
from .provider import DefaultPromptProvider, NamedProvider, PromptProvider
from .registry import ProviderRegistry, default_registry

__all__ = [
    "HIGHEST_PRECEDENCE",
    "LOWEST_PRECEDENCE",
    "get_order",
    "order",
    "NamedProvider",
    "PromptProvider",
    "DefaultPromptProvider",
    "ProviderRegistry",
    "default_registry",
]
