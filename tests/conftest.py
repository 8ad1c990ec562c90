"""Pytest configuration and fixtures."""

import ctypes
from ctypes import POINTER, c_char_p

import pytest

from enchantlite import Broker


class FakeEnchant:
    """In-process stand-in for the Enchant C API.

    Hands out integer handles, returns real ctypes string arrays from
    ``enchant_dict_suggest`` and counts every allocation so tests can assert
    that nothing is leaked.
    """

    def __init__(self, dictionaries=None, suggestions=None):
        self.dictionaries = dictionaries if dictionaries is not None else {
            "en_US": {"hello", "world", "naïve", "colour"},
            "en_GB": {"hello", "colour"},
        }
        self.suggestions = suggestions if suggestions is not None else {
            "helo": ["hello", "halo", "help", "hell"],
            "wrld": ["world"],
        }
        self.broker_init_fails = False
        self.check_result = None
        self.empty_as_null = True
        self.error_message = None

        self.live_brokers = set()
        self.live_dicts = {}
        self.live_lists = {}
        self.calls = []
        self._next_handle = 0x1000

    def _new_handle(self):
        self._next_handle += 0x10
        return self._next_handle

    # -- broker --

    def enchant_broker_init(self):
        self.calls.append(("broker_init",))
        if self.broker_init_fails:
            return None
        handle = self._new_handle()
        self.live_brokers.add(handle)
        return handle

    def enchant_broker_free(self, broker):
        self.calls.append(("broker_free", broker))
        assert broker in self.live_brokers, "double free of broker"
        assert not any(b == broker for b, _ in self.live_dicts.values()), \
            "broker freed before its dictionaries"
        self.live_brokers.remove(broker)

    def enchant_broker_dict_exists(self, broker, tag):
        self.calls.append(("dict_exists", broker, tag))
        assert broker in self.live_brokers
        return 1 if tag.decode("utf-8") in self.dictionaries else 0

    def enchant_broker_request_dict(self, broker, tag):
        self.calls.append(("request_dict", broker, tag))
        assert broker in self.live_brokers
        if tag.decode("utf-8") not in self.dictionaries:
            return None
        handle = self._new_handle()
        self.live_dicts[handle] = (broker, tag.decode("utf-8"))
        return handle

    def enchant_broker_free_dict(self, broker, d):
        self.calls.append(("free_dict", broker, d))
        assert d in self.live_dicts, "double free of dictionary"
        assert self.live_dicts[d][0] == broker, "dictionary freed by wrong broker"
        del self.live_dicts[d]

    def enchant_broker_get_error(self, broker):
        return self.error_message

    # -- dictionary --

    def enchant_dict_check(self, d, word, length):
        self.calls.append(("check", d, word, length))
        assert d in self.live_dicts
        assert length == len(word)
        if self.check_result is not None:
            return self.check_result
        tag = self.live_dicts[d][1]
        return 0 if word.decode("utf-8") in self.dictionaries[tag] else 1

    def enchant_dict_suggest(self, d, word, length, out_count):
        self.calls.append(("suggest", d, word, length))
        assert d in self.live_dicts
        assert length == len(word)
        words = self.suggestions.get(word.decode("utf-8"), [])
        out_count.contents.value = len(words)
        if not words and self.empty_as_null:
            return POINTER(c_char_p)()
        encoded = [w if isinstance(w, bytes) else w.encode("utf-8") for w in words]
        arr = (c_char_p * len(words))(*encoded)
        self.live_lists[ctypes.addressof(arr)] = arr
        return ctypes.cast(arr, POINTER(c_char_p))

    def enchant_dict_free_string_list(self, d, ptr):
        self.calls.append(("free_string_list", d))
        address = ctypes.cast(ptr, ctypes.c_void_p).value
        assert address in self.live_lists, "freeing unknown string list"
        del self.live_lists[address]

    def enchant_get_version(self):
        return b"2.6.9"

    # -- helpers --

    def called(self, name):
        return [c for c in self.calls if c[0] == name]

    @property
    def leaks(self):
        return len(self.live_brokers) + len(self.live_dicts) + len(self.live_lists)


@pytest.fixture
def fake_lib():
    return FakeEnchant()


@pytest.fixture
def broker(fake_lib):
    b = Broker(lib=fake_lib)
    yield b
    b.release()


@pytest.fixture
def en_us(broker):
    return broker.request_dictionary("en_US")
