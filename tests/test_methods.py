"""Unit tests for the method registry."""

from __future__ import annotations

import pytest

from analysiskit.methods import MethodRegistry, MethodSpec


def first(*args):
    """Stand-in strategy."""
    return "first"


def second(*args):
    """Stand-in strategy."""
    return "second"


@pytest.fixture
def registry():
    """A small registry with two strategies."""
    return MethodRegistry(
        "demo",
        [
            MethodSpec("first_method", first, ("one", "1st")),
            MethodSpec("second", second, supports_complex=False),
        ],
    )


@pytest.mark.parametrize("name", ["first_method", "First-Method", "FIRST METHOD", "one", "1st"])
def test_resolve_is_case_spacing_and_punctuation_insensitive(registry, name):
    """Tests that spellings and aliases map to the same spec."""
    spec = registry.resolve(name)
    assert spec.name == "first_method"
    assert spec.function() == "first"


def test_resolve_unknown_lists_canonical_names(registry):
    """Tests the error message for unknown names."""
    with pytest.raises(ValueError, match=r"Unknown demo method 'third'. Choose one of \{first_method, second\}"):
        registry.resolve("third")


def test_resolve_rejects_non_strings(registry):
    """Tests that non-string method tags are rejected."""
    with pytest.raises(ValueError):
        registry.resolve(3)


def test_supports_complex_flag(registry):
    """Tests that the complex capability is recorded per spec."""
    assert registry.resolve("one").supports_complex
    assert not registry.resolve("second").supports_complex


def test_register_adds_and_replaces(registry):
    """Tests registration of a new method and replacement of an existing one."""
    registry.register("third", second, aliases=("3rd",))
    assert registry.available() == ["first_method", "second", "third"]
    assert registry.resolve("3rd").function is second

    registry.register("First Method", second)
    assert registry.resolve("first_method").function is second
    assert registry.available() == ["second", "third", "First Method"]
