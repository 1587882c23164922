"""
IoC Core
========

Dependency registration and resolution for Python applications.

This package provides:
- A container with transient factories, singletons and mock overrides
- Typed namespace keys
- Environment-driven settings and structured logging setup
- Test helpers for temporary mock overrides
"""

__version__ = "1.0.0"

from ioc_core.di import (
    Container,
    ContainerError,
    ServiceNotFoundError,
    CircularDependencyError,
    ServiceTypeError,
    LookupNode,
    Namespace,
    get_container,
    reset_container,
)

__all__ = [
    "__version__",
    "Container",
    "ContainerError",
    "ServiceNotFoundError",
    "CircularDependencyError",
    "ServiceTypeError",
    "LookupNode",
    "Namespace",
    "get_container",
    "reset_container",
]
