"""Benchmarks for conversion and resolution performance.

These benchmarks measure the work the provider adds on top of the Flags SDK:
- Value conversion in both directions
- Context conversion under both policies
- Flag metadata construction
- Typed resolution through the provider and the OpenFeature client

Performance Targets:
- Scalar resolution: <50us
- Small object conversion: <20us
- Context with 200 attributes: <2ms
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from openfeature import api

from flags_openfeature import ContextConverter, ContextPolicy, build_flag_metadata, to_flags_value, to_openfeature_value

if TYPE_CHECKING:
    from openfeature.evaluation_context import EvaluationContext

    from flags_openfeature import FlagsProvider


# -----------------------------------------------------------------------------
# Value Conversion
# -----------------------------------------------------------------------------


class TestValueConversion:
    """Benchmarks for value conversion."""

    @pytest.mark.benchmark(group="conversion")
    def test_small_to_flags_value(self, benchmark, small_payload: dict[str, Any]) -> None:
        """Benchmark converting a flat map."""
        result = benchmark(to_flags_value, small_payload)
        assert len(result.payload) == 5

    @pytest.mark.benchmark(group="conversion")
    def test_large_to_flags_value(self, benchmark, large_payload: dict[str, Any]) -> None:
        """Benchmark converting a nested map."""
        result = benchmark(to_flags_value, large_payload)
        assert result.payload

    @pytest.mark.benchmark(group="conversion")
    def test_large_round_trip(self, benchmark, large_payload: dict[str, Any]) -> None:
        """Benchmark converting a nested map there and back."""
        result = benchmark(lambda: to_openfeature_value(to_flags_value(large_payload)))
        assert result == large_payload


# -----------------------------------------------------------------------------
# Context Conversion
# -----------------------------------------------------------------------------


class TestContextConversion:
    """Benchmarks for context conversion."""

    @pytest.mark.benchmark(group="context")
    @pytest.mark.parametrize("policy", list(ContextPolicy))
    def test_large_context(self, benchmark, large_context: EvaluationContext, policy: ContextPolicy) -> None:
        """Benchmark converting 200 attributes."""
        converter = ContextConverter(policy)
        result = benchmark(converter.convert, large_context)
        assert len(result.attributes) == 200

    @pytest.mark.benchmark(group="context")
    def test_metadata(self, benchmark, large_context: EvaluationContext) -> None:
        """Benchmark building metadata for a large context."""
        result = benchmark(build_flag_metadata, "flag", large_context)
        assert result["targetingKey"] == "user-42"


# -----------------------------------------------------------------------------
# Resolution
# -----------------------------------------------------------------------------


class TestResolution:
    """Benchmarks for typed resolution."""

    @pytest.mark.benchmark(group="resolution")
    def test_boolean(self, benchmark, provider: FlagsProvider, simple_context: EvaluationContext) -> None:
        """Benchmark a boolean resolution with metadata."""
        result = benchmark(provider.resolve_boolean_details, "bool-flag", False, simple_context)
        assert result.value is True

    @pytest.mark.benchmark(group="resolution")
    def test_object(self, benchmark, provider: FlagsProvider, simple_context: EvaluationContext) -> None:
        """Benchmark an object resolution with a nested value."""
        result = benchmark(provider.resolve_object_details, "object-flag", {}, simple_context)
        assert result.value

    @pytest.mark.benchmark(group="resolution")
    def test_through_openfeature_client(self, benchmark, provider: FlagsProvider) -> None:
        """Benchmark the full OpenFeature client path."""
        api.set_provider(provider)
        client = api.get_client()
        try:
            result = benchmark(client.get_integer_value, "int-flag", 0)
        finally:
            api.clear_providers()
        assert result == 42
