"""Tests for cache keys and the result cache."""

from responsive_scaler.cache import ResultCache, format_number, make_cache_key
from responsive_scaler.config import ScaledValue, ScaleOptions
from responsive_scaler.presets import create_breakpoint

MOBILE = create_breakpoint("mobile", 390, 844)
TABLET = create_breakpoint("tablet", 768, 1024)


def _result(value, breakpoint):
    return ScaledValue(original=value, scaled=value, target_breakpoint=breakpoint, ratio=1.0)


class TestCacheKey:
    def test_defaults(self):
        key = make_cache_key(24, MOBILE, ScaleOptions())
        assert key == "24|mobile|default|default|default|default|default"

    def test_all_parts(self):
        options = ScaleOptions(token="fontSize", scale=0.5, min=12, max=48, step=2)
        key = make_cache_key(24.5, MOBILE, options)
        assert key == "24.5|mobile|fontSize|0.5|12|48|2"

    def test_int_and_float_share_key(self):
        assert make_cache_key(24, MOBILE, ScaleOptions()) == make_cache_key(24.0, MOBILE, ScaleOptions())

    def test_zero_is_not_default(self):
        key = make_cache_key(0, MOBILE, ScaleOptions(min=0))
        assert key == "0|mobile|default|default|0|default|default"

    def test_bypass_does_not_change_key(self):
        assert make_cache_key(1, MOBILE, ScaleOptions(bypass_cache=True)) == make_cache_key(
            1, MOBILE, ScaleOptions()
        )

    def test_format_number(self):
        assert format_number(12) == "12"
        assert format_number(0.1) == "0.1"
        assert format_number(-3.0) == "-3"


class TestResultCache:
    def test_get_set(self):
        cache = ResultCache()
        assert cache.get("k") is None
        cache.set("k", _result(1, MOBILE))
        assert cache.get("k").original == 1
        assert "k" in cache
        assert len(cache) == 1

    def test_clear(self):
        cache = ResultCache()
        cache.set("a", _result(1, MOBILE))
        cache.set("b", _result(2, MOBILE))
        cache.clear()
        assert len(cache) == 0

    def test_invalidate_pattern(self):
        cache = ResultCache()
        mobile_key = make_cache_key(1, MOBILE, ScaleOptions())
        tablet_key = make_cache_key(1, TABLET, ScaleOptions())
        cache.set(mobile_key, _result(1, MOBILE))
        cache.set(tablet_key, _result(1, TABLET))

        removed = cache.invalidate("mobile")

        assert removed == 1
        assert cache.keys() == [tablet_key]
        assert mobile_key not in cache
        assert tablet_key in cache

    def test_invalidate_without_pattern_clears(self):
        cache = ResultCache()
        cache.set("a", _result(1, MOBILE))
        cache.set("b", _result(2, TABLET))
        assert cache.invalidate() == 2
        assert len(cache) == 0

    def test_no_size_bound(self):
        cache = ResultCache()
        for i in range(5000):
            cache.set(str(i), _result(i, MOBILE))
        assert len(cache) == 5000
        assert "0" in cache
