"""Broker handle wrapper."""

from __future__ import annotations

import logging
from typing import Any, Optional

from enchantlite._binding import _dec, _enc, load_library
from enchantlite.dictionary import Dictionary
from enchantlite.errors import (
    DictionaryUnavailableError,
    InitializationError,
    InvalidStateError,
)

logger = logging.getLogger(__name__)


class Broker:
    """Root object of the Enchant library.

    A broker locates dictionaries and is the only object allowed to free
    them. It must outlive every :class:`Dictionary` it hands out.

    Args:
        lib: Library object exposing the Enchant C API. Defaults to the
             process-wide library returned by :func:`load_library`.
    """

    def __init__(self, lib: Optional[Any] = None):
        self._lib = lib if lib is not None else load_library()
        self._dicts: list[Dictionary] = []
        handle = self._lib.enchant_broker_init()
        if not handle:
            raise InitializationError("Could not initialise an Enchant broker")
        self._handle: Optional[int] = handle
        logger.debug("Broker %#x initialised", handle)

    @classmethod
    def create(cls, lib: Optional[Any] = None) -> Broker:
        return cls(lib)

    def __del__(self):
        if getattr(self, "_handle", None) is not None:
            self.release()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.release()

    def __repr__(self) -> str:
        state = "released" if self.released else f"{len(self._dicts)} dicts"
        return f"<Broker {state}>"

    @property
    def released(self) -> bool:
        return self._handle is None

    def release(self) -> None:
        """Free the broker, and any dictionary that is still loaded."""
        if self._handle is None:
            return
        if self._dicts:
            logger.warning(
                "Releasing broker with %d dictionaries still loaded: %s",
                len(self._dicts),
                ", ".join(d.tag for d in self._dicts),
            )
            for d in list(self._dicts):
                self.release_dictionary(d)
        self._lib.enchant_broker_free(self._handle)
        logger.debug("Broker %#x released", self._handle)
        self._handle = None

    def dict_exists(self, tag: str) -> bool:
        """Whether a dictionary for ``tag`` (e.g. ``"en_GB"``) is installed."""
        self._check_handle()
        return self._lib.enchant_broker_dict_exists(self._handle, _enc(tag)) != 0

    def request_dictionary(self, tag: str) -> Dictionary:
        """Load the dictionary for ``tag``.

        Raises:
            DictionaryUnavailableError: the tag is unknown or malformed.
        """
        self._check_handle()
        handle = self._lib.enchant_broker_request_dict(self._handle, _enc(tag))
        if not handle:
            raise DictionaryUnavailableError(tag, self._error())
        d = Dictionary(self, handle, tag)
        self._dicts.append(d)
        logger.debug("Loaded dictionary %r as %#x", tag, handle)
        return d

    def release_dictionary(self, d: Dictionary) -> None:
        """Free a dictionary previously returned by :meth:`request_dictionary`."""
        self._check_handle()
        if d.broker is not self:
            raise InvalidStateError(
                f"Dictionary {d.tag!r} was not requested through this broker"
            )
        if d.released:
            raise InvalidStateError(f"Dictionary {d.tag!r} has already been released")
        self._dicts.remove(d)
        self._lib.enchant_broker_free_dict(self._handle, d._detach())
        logger.debug("Released dictionary %r", d.tag)

    def _error(self) -> str:
        return _dec(self._lib.enchant_broker_get_error(self._handle))

    def _check_handle(self) -> None:
        if self._handle is None:
            raise InvalidStateError("Broker has been released")
