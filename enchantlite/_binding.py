"""ctypes binding for the Enchant C library."""

from __future__ import annotations

import ctypes
import ctypes.util
import logging
import os
import platform
from ctypes import (
    POINTER,
    c_char_p,
    c_int,
    c_size_t,
    c_ssize_t,
    c_void_p,
)
from typing import Any, Optional

from enchantlite.errors import LibraryNotFoundError

logger = logging.getLogger(__name__)

LIBRARY_PATH_ENV = "ENCHANT_LIBRARY_PATH"

# Keep enchant-2 first
_CANDIDATE_NAMES = [
    "enchant-2",
    "libenchant-2",
    "enchant",
    "libenchant",
    "enchant-1",
    "libenchant-1",
]


# ── Library loading ──────────────────────────────────────────────

def _default_name() -> str:
    system = platform.system()
    if system == "Darwin":
        return "libenchant-2.dylib"
    elif system == "Windows":
        return "libenchant-2.dll"
    return "libenchant-2.so.2"


def _find_library() -> str:
    """Find the Enchant shared library."""
    # Check env var first
    env_path = os.environ.get(LIBRARY_PATH_ENV)
    if env_path:
        if not os.path.isfile(env_path):
            raise LibraryNotFoundError(
                f"{LIBRARY_PATH_ENV} points to {env_path!r}, which does not exist"
            )
        logger.debug("Using %s=%s", LIBRARY_PATH_ENV, env_path)
        return env_path

    for name in _CANDIDATE_NAMES:
        found = ctypes.util.find_library(name)
        if found:
            logger.debug("Found Enchant as %s (searched for %s)", found, name)
            return found

    # Fallback: let ctypes search system paths
    return _default_name()


# ── Function signatures ─────────────────────────────────────────

t_broker = c_void_p
t_dict = c_void_p


def _declare(lib: ctypes.CDLL) -> ctypes.CDLL:
    lib.enchant_broker_init.argtypes = []
    lib.enchant_broker_init.restype = t_broker

    lib.enchant_broker_free.argtypes = [t_broker]
    lib.enchant_broker_free.restype = None

    lib.enchant_broker_free_dict.argtypes = [t_broker, t_dict]
    lib.enchant_broker_free_dict.restype = None

    lib.enchant_broker_dict_exists.argtypes = [t_broker, c_char_p]
    lib.enchant_broker_dict_exists.restype = c_int

    lib.enchant_broker_request_dict.argtypes = [t_broker, c_char_p]
    lib.enchant_broker_request_dict.restype = t_dict

    lib.enchant_broker_get_error.argtypes = [t_broker]
    lib.enchant_broker_get_error.restype = c_char_p

    lib.enchant_dict_check.argtypes = [t_dict, c_char_p, c_ssize_t]
    lib.enchant_dict_check.restype = c_int

    lib.enchant_dict_suggest.argtypes = [t_dict, c_char_p, c_ssize_t, POINTER(c_size_t)]
    lib.enchant_dict_suggest.restype = POINTER(c_char_p)

    lib.enchant_dict_free_string_list.argtypes = [t_dict, POINTER(c_char_p)]
    lib.enchant_dict_free_string_list.restype = None

    lib.enchant_get_version.argtypes = []
    lib.enchant_get_version.restype = c_char_p
    return lib


_lib: Optional[ctypes.CDLL] = None


def load_library() -> ctypes.CDLL:
    """Load and declare the Enchant library, once per process."""
    global _lib
    if _lib is None:
        path = _find_library()
        try:
            lib = ctypes.CDLL(path)
        except OSError as exc:
            raise LibraryNotFoundError(
                f"The Enchant C library could not be loaded from {path!r}: {exc}"
            ) from exc
        logger.debug("Loaded Enchant from %s", path)
        _lib = _declare(lib)
    return _lib


# ── Helper functions ─────────────────────────────────────────────

def _enc(s: str) -> bytes:
    return s.encode("utf-8")


def _dec(b: Optional[bytes]) -> str:
    return b.decode("utf-8") if b else ""


def _read_counted(ptr: Any, count: int) -> list[str]:
    """Copy exactly ``count`` C strings out of a native array."""
    return [_dec(ptr[i]) for i in range(count)]


def version(lib: Optional[Any] = None) -> str:
    """Get the Enchant library version."""
    lib = lib if lib is not None else load_library()
    return _dec(lib.enchant_get_version())
