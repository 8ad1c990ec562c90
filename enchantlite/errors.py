"""Exceptions raised by enchantlite."""

from __future__ import annotations


class EnchantError(Exception):
    """Base exception class for the enchantlite module."""


class LibraryNotFoundError(EnchantError, ImportError):
    """The Enchant C library could not be located or loaded."""


class InitializationError(EnchantError):
    """The native library failed to create a broker."""


class DictionaryUnavailableError(EnchantError):
    """No dictionary is installed for the requested language tag."""

    def __init__(self, tag: str, detail: str = ""):
        self.tag = tag
        msg = f"Dictionary for language {tag!r} could not be found"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class InvalidStateError(EnchantError):
    """A handle was used after release, or released through the wrong broker."""
