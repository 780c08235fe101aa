"""Scope provider implementations."""

from webscope.providers.playwright import PlaywrightScope

__all__ = ["PlaywrightScope"]
