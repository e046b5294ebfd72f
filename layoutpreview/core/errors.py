"""Exceptions raised by the layout compiler and its helpers."""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for every layout related failure."""


class InvalidLayoutError(LayoutError, ValueError):
    """Raised when the compiler is handed something that is not a layout."""


class LayoutLoadError(LayoutError):
    """Raised when a layout document cannot be read or decoded."""

    def __init__(self, message: str, source: object = None) -> None:
        super().__init__(message)
        self.source = source
