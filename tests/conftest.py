"""Test fixtures for flags-openfeature."""

from __future__ import annotations

from collections.abc import Generator
from datetime import UTC, datetime

import pytest
from openfeature import api
from openfeature.evaluation_context import EvaluationContext

from flags_openfeature import AnyValue, FlagsProvider, InMemoryFlagsClient

# -----------------------------------------------------------------------------
# pytest-asyncio Configuration
# -----------------------------------------------------------------------------
pytest_plugins = ["pytest_asyncio"]

FIXED_NOW = datetime(2024, 5, 17, 12, 30, 45, tzinfo=UTC)


# -----------------------------------------------------------------------------
# OpenFeature Global State
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_openfeature() -> Generator[None, None, None]:
    """Reset the global OpenFeature API around every test."""
    yield
    api.clear_providers()
    api.clear_hooks()
    api.set_evaluation_context(EvaluationContext())


# -----------------------------------------------------------------------------
# Flags Client Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def flags_client() -> InMemoryFlagsClient:
    """Create an in-memory Flags client with one flag of every type."""
    client = InMemoryFlagsClient()
    client.set_flag("enabled-feature", AnyValue.boolean(True), variant="on", reason="TARGETING_MATCH")
    client.set_flag("disabled-feature", AnyValue.boolean(False), variant="off")
    client.set_flag("string-flag", AnyValue.string("blue"), variant="blue")
    client.set_flag("number-flag", AnyValue.integer(42))
    client.set_flag("float-flag", AnyValue.double(3.14))
    client.set_flag(
        "object-flag",
        AnyValue.dictionary(
            {
                "settings": AnyValue.dictionary(
                    {
                        "enabled": AnyValue.boolean(True),
                        "count": AnyValue.integer(5),
                    }
                ),
                "tags": AnyValue.array([AnyValue.string("a"), AnyValue.string("b")]),
            }
        ),
        variant="v2",
    )
    return client


@pytest.fixture
def provider(flags_client: InMemoryFlagsClient) -> FlagsProvider:
    """Create a provider over the populated in-memory client."""
    return FlagsProvider(client=flags_client)


# -----------------------------------------------------------------------------
# Context Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def of_context() -> EvaluationContext:
    """Create an OpenFeature evaluation context."""
    return EvaluationContext(
        targeting_key="user-42",
        attributes={
            "plan": "pro",
            "age": 30,
            "beta": True,
            "score": 9.5,
        },
    )


@pytest.fixture
def fixed_clock():
    """Return a clock that always reads ``FIXED_NOW``."""
    return lambda: FIXED_NOW
