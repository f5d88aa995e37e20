"""
Unit tests for property access in privy.core.accessor.
"""

import pytest

from privy.core.accessor import get_property, set_property
from privy.core.exceptions import InvalidArgumentError, MemberNotFoundError
from tests.helpers.sample_types import Account, SavingsAccount


class TestGetProperty:
    """Tests for reading properties."""

    def test_reads_private_property(self):
        """Verify that a non-public property is evaluated."""
        account = Account(balance=-5)
        assert get_property(account, "_is_overdrawn") is True

    def test_reads_public_property(self):
        """Verify that property lookups also accept public names."""
        assert get_property(Account(balance=8), "balance") == 8

    def test_uses_runtime_type_by_default(self):
        """Verify that an overriding property on the subclass is used."""
        assert get_property(SavingsAccount(balance=8), "balance") == 9

    def test_declaring_type_selects_base_property(self):
        """Verify that declaring_type reads the base class definition."""
        savings = SavingsAccount(balance=8)
        assert get_property(savings, "balance", declaring_type=Account) == 8

    def test_reads_cached_property(self):
        """Verify that functools.cached_property counts as a property."""
        account = Account("ana", balance=3)
        assert get_property(account, "_statement") == "ana: 3"

    def test_missing_property_raises(self):
        """Verify the error for an unknown property."""
        with pytest.raises(MemberNotFoundError, match="Property '_missing' does not exist"):
            get_property(Account(), "_missing")

    def test_field_is_not_a_property(self):
        """Verify that an instance field is not returned by a property lookup."""
        with pytest.raises(MemberNotFoundError):
            get_property(Account(), "_balance")

    def test_method_is_not_a_property(self):
        """Verify that a method is not returned by a property lookup."""
        with pytest.raises(MemberNotFoundError):
            get_property(Account(), "deposit")

    def test_getter_exception_propagates(self):
        """Verify that errors raised by the getter reach the caller unchanged."""

        class Broken:
            @property
            def _value(self):
                raise KeyError("inside getter")

        with pytest.raises(KeyError, match="inside getter"):
            get_property(Broken(), "_value")

    def test_rejects_none_instance(self):
        """Verify that a None instance is rejected."""
        with pytest.raises(InvalidArgumentError):
            get_property(None, "balance")

    @pytest.mark.parametrize("name", [None, ""])
    def test_rejects_empty_name(self, name):
        """Verify that the property name is required."""
        with pytest.raises(InvalidArgumentError):
            get_property(Account(), name)


class TestSetProperty:
    """Tests for writing properties."""

    def test_sets_private_property(self):
        """Verify that the property setter runs."""
        account = Account("ana")

        set_property(account, "_nickname", "annie")

        assert get_property(account, "_nickname") == "annie"

    def test_sets_cached_property(self):
        """Verify that a cached_property value can be replaced."""
        account = Account("ana", balance=3)

        set_property(account, "_statement", "custom")

        assert get_property(account, "_statement") == "custom"

    def test_read_only_property_raises_with_value(self):
        """Verify that a property without setter fails, naming the value."""
        account = Account(balance=4)

        with pytest.raises(MemberNotFoundError) as exc_info:
            set_property(account, "balance", 10)

        assert str(exc_info.value) == "Property balance not found, unable to set it to value 10"
        assert "has no setter" in str(exc_info.value.__cause__)
        assert account.balance == 4

    def test_missing_property_wraps_resolution_failure(self):
        """Verify that the set path wraps the resolution error."""
        with pytest.raises(MemberNotFoundError) as exc_info:
            set_property(Account(), "_missing", "x")

        assert "Property _missing not found, unable to set it to value x" in str(exc_info.value)
        assert "does not exist" in str(exc_info.value.__cause__)
        assert exc_info.value.member_name == "_missing"

    def test_setter_exception_propagates(self):
        """Verify that errors raised by the setter are not wrapped."""

        class Guarded:
            @property
            def _level(self):
                return 0

            @_level.setter
            def _level(self, value):
                raise ValueError("level out of range")

        with pytest.raises(ValueError, match="level out of range") as exc_info:
            set_property(Guarded(), "_level", 99)

        assert not isinstance(exc_info.value, MemberNotFoundError)

    def test_rejects_none_instance(self):
        """Verify that a None instance is rejected."""
        with pytest.raises(InvalidArgumentError):
            set_property(None, "_nickname", "x")

    @pytest.mark.parametrize("name", [None, ""])
    def test_rejects_empty_name(self, name):
        """Verify that the property name is required."""
        with pytest.raises(InvalidArgumentError):
            set_property(Account(), name, "x")
