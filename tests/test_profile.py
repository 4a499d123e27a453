"""
Hot path profiling tests.

Profiling is selected at import time from ``MJSON_PROFILE``; the enabled
variant is exercised by reloading the module with the variable set.
"""

import importlib
from collections.abc import Iterator

import pytest

import mjson
from mjson import _profile


@pytest.fixture
def profiling_enabled(monkeypatch: pytest.MonkeyPatch) -> Iterator[object]:
    if not __debug__:
        pytest.skip("profiling is compiled out under -O")
    monkeypatch.setenv("MJSON_PROFILE", "1")
    module = importlib.reload(_profile)
    try:
        yield module
    finally:
        monkeypatch.delenv("MJSON_PROFILE")
        importlib.reload(_profile)


def test_record_call() -> None:
    stats = mjson.HotPathStats("scan_string")
    stats.record_call(100, chars=5)
    stats.record_call(50)
    assert stats.call_count == 2
    assert stats.total_time_ns == 150
    assert stats.chars_processed == 5


def test_enabled_profile_context_records(profiling_enabled) -> None:
    module = profiling_enabled
    module.clear_hot_path_stats()

    with module.ProfileContext("tokenize", 10):
        pass
    with module.ProfileContext("tokenize", 5):
        pass

    stats = module.get_hot_path_stats()
    assert stats["tokenize"].call_count == 2
    assert stats["tokenize"].chars_processed == 15

    module.clear_hot_path_stats()
    assert module.get_hot_path_stats() == {}


def test_disabled_profile_context_is_noop(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("MJSON_PROFILE", raising=False)
    module = importlib.reload(_profile)

    with module.ProfileContext("parse", 3):
        pass
    assert module.get_hot_path_stats() == {}
    module.clear_hot_path_stats()
