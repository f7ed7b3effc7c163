"""
Unit tests for length resolution.
"""

import pytest
from smartgrid.protocol import UnitContext
from smartgrid.units import UnitResolver, resolve_length, parse_length


@pytest.mark.unit
class TestResolveLength:
    """Test pure length conversion."""

    def test_empty(self, default_context):
        assert resolve_length("", default_context) == 0
        assert resolve_length("   ", default_context) == 0

    def test_unitless(self, default_context):
        assert resolve_length("42", default_context) == 42
        assert resolve_length("16.5", default_context) == 16.5
        assert resolve_length("-10", default_context) == -10

    def test_pixels(self, default_context):
        assert resolve_length("100px", default_context) == 100
        assert resolve_length("12.5PX", default_context) == 12.5

    def test_font_relative(self):
        context = UnitContext(font_size=20, root_font_size=16)
        assert resolve_length("2rem", context) == 32
        assert resolve_length("2em", context) == 40

    def test_viewport(self, default_context):
        assert resolve_length("10vw", default_context) == 100
        assert resolve_length("50vh", default_context) == 400
        assert resolve_length("10vmin", default_context) == 80
        assert resolve_length("10vmax", default_context) == 100

    def test_absolute(self, default_context):
        assert resolve_length("1in", default_context) == 96
        assert resolve_length("1cm", default_context) == pytest.approx(37.795, abs=0.01)
        assert resolve_length("10mm", default_context) == pytest.approx(37.795, abs=0.01)
        assert resolve_length("72pt", default_context) == 96
        assert resolve_length("6pc", default_context) == 96

    def test_unsupported(self, default_context):
        assert resolve_length("50%", default_context) is None
        assert resolve_length("20ch", default_context) is None
        assert resolve_length("calc(1px + 2px)", default_context) is None

    def test_parse_length(self):
        assert parse_length(" 3.5 rem ") == (3.5, "rem")
        assert parse_length("abc") is None


@pytest.mark.unit
class TestUnitResolver:
    """Test the caching resolver."""

    def test_caches_values(self, default_context):
        resolver = UnitResolver(default_context)
        assert resolver.resolve("2rem") == 32
        assert resolver.resolve(" 2rem ") == 32
        assert len(resolver._cache) == 1

    def test_empty_not_cached(self):
        resolver = UnitResolver()
        assert resolver.resolve(None) == 0
        assert resolver.resolve("") == 0
        assert len(resolver._cache) == 0

    def test_clear_cache(self):
        resolver = UnitResolver()
        resolver.resolve("10px")
        resolver.clear_cache()
        assert len(resolver._cache) == 0

    def test_context_change_invalidates(self):
        resolver = UnitResolver(UnitContext(root_font_size=16))
        assert resolver.resolve("1rem") == 16
        resolver.set_context(UnitContext(root_font_size=20))
        assert resolver.resolve("1rem") == 20

    def test_same_context_keeps_cache(self):
        resolver = UnitResolver(UnitContext())
        resolver.resolve("1rem")
        resolver.set_context(UnitContext())
        assert len(resolver._cache) == 1

    def test_unsupported_reported_once(self):
        messages = []
        resolver = UnitResolver(report=messages.append)

        assert resolver.resolve("30%") == 30
        assert resolver.resolve("30%") == 30

        assert len(messages) == 1
        assert "percentage" in messages[0]

    def test_unsupported_without_number(self):
        messages = []
        resolver = UnitResolver(report=messages.append)
        assert resolver.resolve("auto") == 0
        assert "auto" in messages[0]
