"""Tests for ProviderConfig."""

from __future__ import annotations

import pytest

from flags_openfeature import ContextPolicy, ProviderConfig, ProviderConfigurationError, TimestampPolicy


class TestDefaults:
    """Tests for default configuration values."""

    def test_defaults(self) -> None:
        """Test the documented defaults."""
        config = ProviderConfig()

        assert config.name == "flags-openfeature"
        assert config.context_policy is ContextPolicy.TYPE_PRESERVING
        assert config.context_timestamp_policy is TimestampPolicy.LENIENT
        assert config.object_timestamp_policy is TimestampPolicy.STRICT
        assert config.include_flag_metadata is True


class TestValidation:
    """Tests for __post_init__ validation."""

    def test_policies_coerced_from_strings(self) -> None:
        """Test string values are converted to enum members."""
        config = ProviderConfig(
            context_policy="coercing",
            context_timestamp_policy="strict",
            object_timestamp_policy="lenient",
        )

        assert config.context_policy is ContextPolicy.COERCING
        assert config.context_timestamp_policy is TimestampPolicy.STRICT
        assert config.object_timestamp_policy is TimestampPolicy.LENIENT

    def test_unknown_policy(self) -> None:
        """Test an unknown policy names the field and the choices."""
        with pytest.raises(ProviderConfigurationError, match="context_policy") as exc_info:
            ProviderConfig(context_policy="loose")

        assert "'coercing'" in str(exc_info.value)
        assert exc_info.value.field_name == "context_policy"

    def test_unknown_timestamp_policy(self) -> None:
        """Test an unknown timestamp policy is rejected."""
        with pytest.raises(ProviderConfigurationError, match="object_timestamp_policy"):
            ProviderConfig(object_timestamp_policy="sometimes")

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name(self, name: str) -> None:
        """Test the provider name must not be blank."""
        with pytest.raises(ProviderConfigurationError, match="name"):
            ProviderConfig(name=name)

    def test_configuration_error_is_value_error(self) -> None:
        """Test configuration errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            ProviderConfig(context_policy="loose")
