"""Litestar integration.

:class:`OpenFeaturePlugin` registers an OpenFeature provider with the global
OpenFeature API when the application starts, injects an OpenFeature client
into route handlers and shuts the API down with the application.

Example::

    from litestar import Litestar, get
    from openfeature.client import OpenFeatureClient

    from flags_openfeature import FlagsProvider, InMemoryFlagsClient
    from flags_openfeature.contrib.litestar import OpenFeatureConfig, OpenFeaturePlugin

    @get("/")
    async def index(openfeature_client: OpenFeatureClient) -> dict[str, bool]:
        return {"beta": openfeature_client.get_boolean_value("beta", False)}

    provider = FlagsProvider(client=InMemoryFlagsClient())
    app = Litestar(
        route_handlers=[index],
        plugins=[OpenFeaturePlugin(OpenFeatureConfig(provider=provider))],
    )
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import anyio.to_thread
from litestar import Litestar
from litestar.config.app import AppConfig
from litestar.di import Provide
from litestar.plugins import InitPluginProtocol
from openfeature import api
from openfeature.client import OpenFeatureClient
from openfeature.evaluation_context import EvaluationContext
from openfeature.provider import FeatureProvider

__all__ = (
    "OpenFeatureConfig",
    "OpenFeaturePlugin",
)

logger = logging.getLogger(__name__)


@dataclass
class OpenFeatureConfig:
    """Configuration for :class:`OpenFeaturePlugin`.

    Attributes:
        provider: Provider registered on startup.
        evaluation_context: Global evaluation context set before the provider
            is registered, so it reaches the provider's ``initialize``.
        domain: OpenFeature domain to bind the provider and the injected
            client to. ``None`` uses the default provider.
        client_dependency_key: Dependency name of the injected client. The
            client is stored in ``app.state`` under the same key.
    """

    provider: FeatureProvider
    evaluation_context: EvaluationContext | None = None
    domain: str | None = None
    client_dependency_key: str = "openfeature_client"


class OpenFeaturePlugin(InitPluginProtocol):
    """Litestar plugin managing an OpenFeature provider."""

    __slots__ = ("_client", "_config")

    def __init__(self, config: OpenFeatureConfig) -> None:
        self._config = config
        self._client: OpenFeatureClient | None = None

    @property
    def config(self) -> OpenFeatureConfig:
        return self._config

    @property
    def client(self) -> OpenFeatureClient | None:
        """The OpenFeature client, available between startup and shutdown."""
        return self._client

    def on_app_init(self, app_config: AppConfig) -> AppConfig:
        app_config.on_startup.append(self._on_startup)
        app_config.on_shutdown.append(self._on_shutdown)
        app_config.dependencies[self._config.client_dependency_key] = Provide(
            self._provide_client,
            sync_to_thread=False,
        )
        return app_config

    async def _on_startup(self, app: Litestar) -> None:
        if self._config.evaluation_context is not None:
            api.set_evaluation_context(self._config.evaluation_context)

        # set_provider runs the provider's blocking initialize
        await anyio.to_thread.run_sync(api.set_provider, self._config.provider, self._config.domain)

        self._client = api.get_client(domain=self._config.domain)
        app.state[self._config.client_dependency_key] = self._client
        logger.info(
            "Registered OpenFeature provider %s (domain=%s)",
            self._config.provider.get_metadata().name,
            self._config.domain,
        )

    async def _on_shutdown(self, app: Litestar) -> None:
        api.shutdown()
        self._client = None
        app.state.pop(self._config.client_dependency_key, None)
        logger.info("OpenFeature API shut down")

    def _provide_client(self) -> OpenFeatureClient:
        if self._client is None:
            raise RuntimeError("OpenFeature client is not available outside the application lifespan")
        return self._client
