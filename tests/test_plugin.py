"""Tests for OpenFeaturePlugin integration with Litestar."""

from __future__ import annotations

import pytest

pytest.importorskip("litestar")

from litestar import Litestar, get
from litestar.testing import TestClient
from openfeature import api
from openfeature.client import OpenFeatureClient
from openfeature.evaluation_context import EvaluationContext

from flags_openfeature import FlagsProvider, InMemoryFlagsClient, ProviderState
from flags_openfeature.contrib.litestar import OpenFeatureConfig, OpenFeaturePlugin


class TestPluginLifecycle:
    """Tests for plugin lifecycle (startup/shutdown)."""

    def test_plugin_initialization_with_default_config(self, provider: FlagsProvider) -> None:
        """Test plugin initializes with default configuration."""
        plugin = OpenFeaturePlugin(OpenFeatureConfig(provider=provider))

        assert plugin.config.client_dependency_key == "openfeature_client"
        assert plugin.config.domain is None
        assert plugin.client is None  # Not initialized until startup

    async def test_plugin_startup_registers_provider(self, provider: FlagsProvider) -> None:
        """Test that startup registers the provider and creates the client."""
        plugin = OpenFeaturePlugin(OpenFeatureConfig(provider=provider))
        app = Litestar(route_handlers=[], plugins=[plugin])

        async with app.lifespan():
            assert isinstance(plugin.client, OpenFeatureClient)
            assert app.state["openfeature_client"] is plugin.client
            assert provider.state is ProviderState.READY

    async def test_plugin_shutdown_cleans_up(self, provider: FlagsProvider) -> None:
        """Test that shutdown releases the client and shuts the provider down."""
        plugin = OpenFeaturePlugin(OpenFeatureConfig(provider=provider))
        app = Litestar(route_handlers=[], plugins=[plugin])

        async with app.lifespan():
            assert plugin.client is not None

        assert plugin.client is None
        assert "openfeature_client" not in app.state
        assert provider.state is ProviderState.UNREGISTERED

    async def test_evaluation_context_bound_on_startup(self, flags_client: InMemoryFlagsClient) -> None:
        """Test the configured context reaches the provider's initialize."""
        config = OpenFeatureConfig(
            provider=FlagsProvider(client=flags_client),
            evaluation_context=EvaluationContext(targeting_key="service-a", attributes={"region": "eu"}),
        )
        app = Litestar(route_handlers=[], plugins=[OpenFeaturePlugin(config)])

        async with app.lifespan():
            assert flags_client.evaluation_context is not None
            assert flags_client.evaluation_context.targeting_key == "service-a"
            assert api.get_evaluation_context().targeting_key == "service-a"


class TestDependencyInjection:
    """Tests for OpenFeature client dependency injection."""

    def test_client_injection_into_route_handler(self, provider: FlagsProvider) -> None:
        """Test that the OpenFeature client is injected into route handlers."""

        @get("/check")
        async def check_flag(openfeature_client: OpenFeatureClient) -> dict:
            return {"enabled": openfeature_client.get_boolean_value("enabled-feature", False)}

        app = Litestar(route_handlers=[check_flag], plugins=[OpenFeaturePlugin(OpenFeatureConfig(provider=provider))])

        with TestClient(app) as client:
            response = client.get("/check")
            assert response.status_code == 200
            assert response.json() == {"enabled": True}

    def test_client_injection_with_custom_dependency_key(self, provider: FlagsProvider) -> None:
        """Test client injection with a custom dependency key."""
        config = OpenFeatureConfig(provider=provider, client_dependency_key="flags")

        @get("/check")
        async def check_flag(flags: OpenFeatureClient) -> dict:
            return {"color": flags.get_string_value("string-flag", "red")}

        app = Litestar(route_handlers=[check_flag], plugins=[OpenFeaturePlugin(config)])

        with TestClient(app) as client:
            response = client.get("/check")
            assert response.status_code == 200
            assert response.json() == {"color": "blue"}

    def test_missing_flag_returns_default(self, provider: FlagsProvider) -> None:
        """Test graceful degradation for missing flags."""

        @get("/check")
        async def check_flag(openfeature_client: OpenFeatureClient) -> dict:
            return {"limit": openfeature_client.get_integer_value("missing", 10)}

        app = Litestar(route_handlers=[check_flag], plugins=[OpenFeaturePlugin(OpenFeatureConfig(provider=provider))])

        with TestClient(app) as client:
            assert client.get("/check").json() == {"limit": 10}

    def test_object_flag(self, provider: FlagsProvider) -> None:
        """Test structured flags serialize in responses."""

        @get("/settings")
        async def settings(openfeature_client: OpenFeatureClient) -> dict:
            return openfeature_client.get_object_value("object-flag", {})

        app = Litestar(route_handlers=[settings], plugins=[OpenFeaturePlugin(OpenFeatureConfig(provider=provider))])

        with TestClient(app) as client:
            assert client.get("/settings").json()["settings"] == {"enabled": True, "count": 5}


class TestDomain:
    """Tests for domain-scoped providers."""

    def test_domain_bound_client(self, provider: FlagsProvider) -> None:
        """Test the injected client evaluates against the domain's provider."""
        config = OpenFeatureConfig(provider=provider, domain="checkout")

        @get("/check")
        async def check_flag(openfeature_client: OpenFeatureClient) -> dict:
            return {
                "enabled": openfeature_client.get_boolean_value("enabled-feature", False),
                "provider": openfeature_client.provider.get_metadata().name,
            }

        app = Litestar(route_handlers=[check_flag], plugins=[OpenFeaturePlugin(config)])

        with TestClient(app) as client:
            assert client.get("/check").json() == {"enabled": True, "provider": "flags-openfeature"}
