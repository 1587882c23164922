"""
Dependency Injection Module
===========================

Provides the dependency registry used to wire application services.

Usage:
    from ioc_core.di import Container, Namespace, get_container

    LOGGER: Namespace[Logger] = Namespace("Service/Logger", Logger)

    # Get global container
    container = get_container()

    # Register services
    container.register(LOGGER, lambda c: Logger())
    container.register_singleton("Service/Database", create_db)

    # Resolve services
    logger = container.use(LOGGER)

    # Swap in test doubles
    container.mock(LOGGER, lambda c, original: FakeLogger()).enable_mocks()
"""

from .container import (
    Container,
    ContainerError,
    ServiceNotFoundError,
    CircularDependencyError,
    ServiceTypeError,
    Factory,
    MockFactory,
    MockSnapshot,
    get_container,
    reset_container,
)
from .keys import (
    LookupKind,
    LookupNode,
    Namespace,
    NamespaceKey,
    namespace_name,
)

__all__ = [
    "Container",
    "ContainerError",
    "ServiceNotFoundError",
    "CircularDependencyError",
    "ServiceTypeError",
    "Factory",
    "MockFactory",
    "MockSnapshot",
    "get_container",
    "reset_container",
    "LookupKind",
    "LookupNode",
    "Namespace",
    "NamespaceKey",
    "namespace_name",
]
