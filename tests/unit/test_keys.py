"""
Unit Tests for Namespace Keys

Tests for typed namespaces, lookup nodes and key normalization.
"""

import pytest

from ioc_core.di.keys import LookupKind, LookupNode, Namespace, namespace_name


class TestNamespace:
    """Tests for typed namespace keys."""

    def test_str_is_name(self):
        assert str(Namespace("Service/Logger")) == "Service/Logger"

    def test_equal_and_hashable(self):
        """Test that equal namespaces can be used as dict keys."""
        first = Namespace("Service/Logger", dict)
        second = Namespace("Service/Logger", dict)

        assert first == second
        assert {first: 1}[second] == 1

    def test_frozen(self):
        ns = Namespace("Service/Logger")
        with pytest.raises(AttributeError):
            ns.name = "Service/Other"

    @pytest.mark.parametrize("name", ["", None, 12])
    def test_invalid_name(self, name):
        """Test that names must be non-empty strings."""
        with pytest.raises(ValueError):
            Namespace(name)

    def test_accepts_without_type(self):
        assert Namespace("Core/Anything").accepts(object())

    def test_accepts_with_type(self):
        ns = Namespace("Core/Port", int)
        assert ns.accepts(8080)
        assert not ns.accepts("8080")


class TestLookupNode:
    """Tests for lookup nodes."""

    def test_default_kind(self):
        assert LookupNode("Service/Logger").kind is LookupKind.BINDING

    def test_kind_from_string(self):
        assert LookupNode("Service/Logger", kind="alias").kind is LookupKind.ALIAS

    def test_invalid_kind(self):
        with pytest.raises(ValueError):
            LookupNode("Service/Logger", kind="provider")


class TestNamespaceName:
    """Tests for key normalization."""

    @pytest.mark.parametrize(
        "key",
        [
            "Service/Logger",
            Namespace("Service/Logger"),
            LookupNode("Service/Logger"),
            LookupNode("Service/Logger", kind=LookupKind.ALIAS),
        ],
    )
    def test_all_forms_normalize(self, key):
        assert namespace_name(key) == "Service/Logger"

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            namespace_name(("Service", "Logger"))
