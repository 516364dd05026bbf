"""Litestar Integration Example.

This example demonstrates the OpenFeaturePlugin:
- Registering a FlagsProvider on application startup
- Setting a service-wide evaluation context
- Injecting the OpenFeature client into route handlers

To run this example:
    uvicorn examples.litestar_app:app --reload

Then visit:
    - http://localhost:8000/
    - http://localhost:8000/checkout
"""

from __future__ import annotations

from litestar import Litestar, get
from openfeature.client import OpenFeatureClient
from openfeature.evaluation_context import EvaluationContext

from flags_openfeature import AnyValue, FlagsProvider, InMemoryFlagsClient
from flags_openfeature.contrib.litestar import OpenFeatureConfig, OpenFeaturePlugin

flags = InMemoryFlagsClient(
    {
        "new_checkout": AnyValue.boolean(True),
        "checkout_steps": AnyValue.integer(3),
        "welcome_message": AnyValue.string("Hello from flags-openfeature"),
    }
)


@get("/")
async def index(openfeature_client: OpenFeatureClient) -> dict[str, str]:
    """Return a flag-driven greeting."""
    return {"message": openfeature_client.get_string_value("welcome_message", "Hello")}


@get("/checkout")
async def checkout(openfeature_client: OpenFeatureClient) -> dict[str, object]:
    """Describe the checkout flow selected by flags."""
    details = openfeature_client.get_boolean_details("new_checkout", False)
    return {
        "new_checkout": details.value,
        "steps": openfeature_client.get_integer_value("checkout_steps", 5),
        "reason": details.reason,
    }


app = Litestar(
    route_handlers=[index, checkout],
    plugins=[
        OpenFeaturePlugin(
            OpenFeatureConfig(
                provider=FlagsProvider(client=flags),
                evaluation_context=EvaluationContext(targeting_key="web-frontend", attributes={"region": "eu"}),
            )
        )
    ],
)
