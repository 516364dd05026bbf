"""Basic OpenFeature Usage Example.

This example demonstrates the fundamental usage of flags-openfeature:
- Wrapping a Flags SDK client in a FlagsProvider
- Registering the provider with the OpenFeature API
- Binding the evaluation context once with on_context_set
- Evaluating flags of every type and reading evaluation details

To run this example:
    python examples/basic_usage.py
"""

from __future__ import annotations

import logging

from openfeature import api
from openfeature.evaluation_context import EvaluationContext

from flags_openfeature import AnyValue, FlagsProvider, InMemoryFlagsClient, from_native
from flags_openfeature.contrib.logging import LoggingHook


def build_flags() -> InMemoryFlagsClient:
    """Create an in-memory Flags client with a few sample flags."""
    flags = InMemoryFlagsClient()
    flags.set_flag("dark_mode", AnyValue.boolean(True), variant="on")
    flags.set_flag("checkout_theme", AnyValue.string("compact"), variant="compact", reason="TARGETING_MATCH")
    flags.set_flag("max_items", AnyValue.integer(25))
    flags.set_flag("discount_rate", AnyValue.double(0.15))
    flags.set_flag("banner", from_native({"title": "Spring sale", "colors": ["green", "white"]}), variant="spring")
    return flags


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    provider = FlagsProvider(client=build_flags())
    api.set_provider(provider)
    api.add_hooks([LoggingHook(logger=logging.getLogger("example.flags"), evaluation_level="INFO")])

    # The Flags SDK evaluates against one bound context
    provider.on_context_set(None, EvaluationContext(targeting_key="user-42", attributes={"plan": "pro", "age": 30}))

    client = api.get_client()
    print("dark_mode:", client.get_boolean_value("dark_mode", False))
    print("checkout_theme:", client.get_string_value("checkout_theme", "classic"))
    print("max_items:", client.get_integer_value("max_items", 10))
    print("discount_rate:", client.get_float_value("discount_rate", 0.0))
    print("banner:", client.get_object_value("banner", {}))
    print("missing:", client.get_boolean_value("not_a_flag", False))

    details = client.get_string_details(
        "checkout_theme",
        "classic",
        EvaluationContext(targeting_key="user-42", attributes={"plan": "pro"}),
    )
    print("variant:", details.variant, "reason:", details.reason)
    print("metadata:", dict(details.flag_metadata))

    api.shutdown()


if __name__ == "__main__":
    main()
