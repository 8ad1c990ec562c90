"""Dictionary handle wrapper."""

from __future__ import annotations

import logging
from ctypes import c_size_t, pointer
from typing import TYPE_CHECKING, Any, Optional

from enchantlite._binding import _enc, _read_counted
from enchantlite.errors import InvalidStateError

if TYPE_CHECKING:
    from enchantlite.broker import Broker

logger = logging.getLogger(__name__)


class Dictionary:
    """A language dictionary loaded through a :class:`Broker`.

    Instances are created by :meth:`Broker.request_dictionary` and released
    with :meth:`Broker.release_dictionary`; the broker stays the only owner
    of the native release call.

    Args:
        broker: The broker that requested the native dictionary.
        handle: Native ``EnchantDict*`` handle, never null.
        tag: Language tag the dictionary was requested for.
    """

    def __init__(self, broker: Broker, handle: int, tag: str):
        self._broker = broker
        self._lib = broker._lib
        self._handle: Optional[int] = handle
        self.tag = tag

    def __enter__(self):
        return self

    def __exit__(self, *args):
        if not self.released:
            self._broker.release_dictionary(self)

    def __repr__(self) -> str:
        state = "released" if self.released else "loaded"
        return f"<Dictionary tag={self.tag!r} {state}>"

    @property
    def broker(self) -> Broker:
        return self._broker

    @property
    def released(self) -> bool:
        return self._handle is None

    def check(self, word: str) -> bool:
        """Check spelling.

        The empty string is always reported as correct. A misspelled word and
        an internal checker error are both reported as ``False``.
        """
        self._check_handle()
        if not word:
            return True
        data = _enc(word)
        return self._lib.enchant_dict_check(self._handle, data, len(data)) == 0

    def suggest(self, word: str) -> list[str]:
        """Get spelling suggestions, in the order the provider ranked them."""
        self._check_handle()
        if not word:
            return []
        data = _enc(word)
        count = pointer(c_size_t(0))
        ptr = self._lib.enchant_dict_suggest(self._handle, data, len(data), count)
        if not ptr:
            return []
        try:
            return _read_counted(ptr, count.contents.value)
        finally:
            self._lib.enchant_dict_free_string_list(self._handle, ptr)

    def _detach(self) -> Any:
        handle, self._handle = self._handle, None
        return handle

    def _check_handle(self) -> None:
        if self._handle is None:
            raise InvalidStateError(f"Dictionary {self.tag!r} has been released")
