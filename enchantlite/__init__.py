"""Enchant spell checking — Python bindings via ctypes.

Usage:
    from enchantlite import Broker

    b = Broker()
    if b.dict_exists("en_US"):
        d = b.request_dictionary("en_US")
        d.check("hello")      # True
        d.suggest("helo")     # ["hello", ...]
        b.release_dictionary(d)
    b.release()
"""

from enchantlite._binding import load_library, version
from enchantlite.broker import Broker
from enchantlite.dictionary import Dictionary
from enchantlite.errors import (
    DictionaryUnavailableError,
    EnchantError,
    InitializationError,
    InvalidStateError,
    LibraryNotFoundError,
)

__all__ = [
    "Broker",
    "Dictionary",
    "DictionaryUnavailableError",
    "EnchantError",
    "InitializationError",
    "InvalidStateError",
    "LibraryNotFoundError",
    "load_library",
    "version",
]
