"""Benchmark fixtures for flags-openfeature performance testing.

This module provides fixtures for benchmarking value conversion, context
conversion and flag resolution at various payload sizes.
"""

from __future__ import annotations

from typing import Any

import pytest
from openfeature.evaluation_context import EvaluationContext

from flags_openfeature import AnyValue, FlagsProvider, InMemoryFlagsClient, from_native

# -----------------------------------------------------------------------------
# Provider Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def flags_client() -> InMemoryFlagsClient:
    """Create an in-memory client with one flag per type."""
    client = InMemoryFlagsClient()
    client.set_flag("bool-flag", AnyValue.boolean(True), variant="on")
    client.set_flag("string-flag", AnyValue.string("blue"))
    client.set_flag("int-flag", AnyValue.integer(42))
    client.set_flag("float-flag", AnyValue.double(0.5))
    client.set_flag("object-flag", from_native(nested_payload(depth=3, width=5)))
    return client


@pytest.fixture
def provider(flags_client: InMemoryFlagsClient) -> FlagsProvider:
    """Create a provider for benchmarking."""
    return FlagsProvider(client=flags_client)


# -----------------------------------------------------------------------------
# Payload Fixtures
# -----------------------------------------------------------------------------


def nested_payload(depth: int, width: int) -> dict[str, Any]:
    """Build a nested map ``depth`` levels deep with ``width`` entries per level."""
    if depth == 0:
        return {f"leaf-{i}": i for i in range(width)}
    return {
        f"node-{i}": nested_payload(depth - 1, width) if i % 2 == 0 else [i, str(i), float(i), True, None]
        for i in range(width)
    }


@pytest.fixture
def small_payload() -> dict[str, Any]:
    """A flat map with a handful of scalars."""
    return {"a": 1, "b": "two", "c": 3.0, "d": True, "e": None}


@pytest.fixture
def large_payload() -> dict[str, Any]:
    """A nested map with a few thousand values."""
    return nested_payload(depth=4, width=6)


@pytest.fixture
def simple_context() -> EvaluationContext:
    """A context with a targeting key and a few attributes."""
    return EvaluationContext(targeting_key="user-42", attributes={"plan": "pro", "age": 30})


@pytest.fixture
def large_context() -> EvaluationContext:
    """A context with 200 attributes of mixed types."""
    attributes: dict[str, Any] = {}
    for i in range(200):
        kind = i % 4
        if kind == 0:
            attributes[f"attr-{i}"] = f"value-{i}"
        elif kind == 1:
            attributes[f"attr-{i}"] = i
        elif kind == 2:
            attributes[f"attr-{i}"] = [i, i + 1]
        else:
            attributes[f"attr-{i}"] = {"nested": i}
    return EvaluationContext(targeting_key="user-42", attributes=attributes)
