"""Dependency Injection Container.

This module provides a centralized DI container using dependency-injector.
Lifecycles:
- Singleton: One instance for the entire application (HTTP pool, clients)
- Factory: New instance every time (request-level services)

Usage:
    # In FastAPI
    from ytlookup.core.container import get_resolver

    @router.post("/channel")
    async def lookup(resolver: ChannelResolver = Depends(get_resolver)):
        ...

    # In tests
    with container.services.channel_resolver.override(mock_resolver):
        ...
"""

from dependency_injector import containers, providers

from ytlookup.core.config import Config, get_config


class InfrastructureContainer(containers.DeclarativeContainer):
    """Infrastructure layer dependencies (HTTP pool, upstream clients)."""

    global_config = providers.Dependency(instance_of=Config)

    youtube_api_config = providers.Singleton(
        "ytlookup.config.youtube.YouTubeAPIConfig",
    )

    # ============================================
    # HTTP Client
    # ============================================

    http_client = providers.Singleton(
        "ytlookup.infrastructure.http_client.HTTPClient",
        timeout=global_config.provided.http_timeout,
        max_connections=global_config.provided.http_max_connections,
        max_keepalive_connections=global_config.provided.http_max_keepalive_connections,
    )

    # ============================================
    # YouTube Clients
    # ============================================

    data_api_client = providers.Singleton(
        "ytlookup.infrastructure.youtube_data_api.YouTubeDataAPIClient",
        api_key=global_config.provided.youtube_api_key,
        http_client=http_client,
        config=youtube_api_config,
    )

    innertube_client = providers.Singleton(
        "ytlookup.infrastructure.innertube.InnertubeClient",
        http_client=http_client,
        config=youtube_api_config,
    )


class ServiceContainer(containers.DeclarativeContainer):
    """Service layer dependencies.

    Services are stateless and built per request.
    """

    infrastructure = providers.DependenciesContainer()

    channel_enricher = providers.Factory(
        "ytlookup.services.enrichment.ChannelEnricher",
        innertube=infrastructure.innertube_client,
    )

    channel_resolver = providers.Factory(
        "ytlookup.services.resolver.ChannelResolver",
        data_api=infrastructure.data_api_client,
        innertube=infrastructure.innertube_client,
        enricher=channel_enricher,
    )

    list_service = providers.Factory(
        "ytlookup.services.lists.ListService",
        data_api=infrastructure.data_api_client,
        config=infrastructure.youtube_api_config,
    )


class ApplicationContainer(containers.DeclarativeContainer):
    """Root application container.

    Composes all sub-containers and provides the main entry point.
    """

    # Uses get_config() to ensure same instance across the app
    config = providers.Singleton(get_config)

    infrastructure = providers.Container(
        InfrastructureContainer,
        global_config=config,
    )

    services = providers.Container(
        ServiceContainer,
        infrastructure=infrastructure,
    )


def create_container() -> ApplicationContainer:
    """Create and configure the application container.

    Returns:
        Configured ApplicationContainer instance
    """
    return ApplicationContainer()


# Global container instance
container = create_container()


# ============================================
# FastAPI Integration
# ============================================


def get_resolver():
    """FastAPI dependency for the channel resolver."""
    return container.services.channel_resolver()


def get_list_service():
    """FastAPI dependency for the list service."""
    return container.services.list_service()


async def close_http_client() -> None:
    """Close the shared HTTP client and drop the singleton.

    The next request after a close gets a fresh connection pool.
    """
    provider = container.infrastructure.http_client
    await provider().close()
    container.reset_singletons()


__all__ = [
    "ApplicationContainer",
    "InfrastructureContainer",
    "ServiceContainer",
    "close_http_client",
    "container",
    "create_container",
    "get_list_service",
    "get_resolver",
]
