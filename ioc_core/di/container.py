"""
Dependency Injection Container
==============================

A lightweight registry mapping namespaces to lazily or eagerly constructed
values, with a mock layer that can be switched on for tests.

Features:
    - Transient factories, re-invoked on every resolution
    - Eagerly built singletons, memoized for the container's lifetime
    - Mock overrides that receive the value they replace
    - Typed namespace keys for static checking
    - Thread-safe registration and resolution

Usage:
    container = Container()

    container.register("Core/Config", lambda c: Config.from_env())
    container.register_singleton(
        "Service/Database",
        lambda c: Database(c.use("Core/Config").database_url),
    )

    db = container.use("Service/Database")

    # In tests
    container.mock("Service/Database", lambda c, original: FakeDatabase())
    container.enable_mocks()
"""

from __future__ import annotations

import threading
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    List,
    Optional,
    Tuple,
    TypeVar,
    Union,
    overload,
)

import structlog

from .keys import LookupNode, Namespace, NamespaceKey, namespace_name

if TYPE_CHECKING:
    from ioc_core.core.config import Settings

logger = structlog.get_logger(__name__)

T = TypeVar("T")

Factory = Callable[["Container"], T]
MockFactory = Callable[["Container", T], T]
MockSnapshot = Tuple[Dict[str, MockFactory[Any]], bool]


class ContainerError(Exception):
    """Base exception for container errors."""
    pass


class ServiceNotFoundError(ContainerError, LookupError):
    """Namespace has neither a cached instance nor a factory."""

    def __init__(self, namespace: str, available: Optional[List[str]] = None):
        self.namespace = namespace
        self.available = list(available or [])
        message = f"Service '{namespace}' is not registered"
        if self.available:
            message += f". Available services: {self.available}"
        super().__init__(message)


class CircularDependencyError(ContainerError):
    """Circular dependency detected during resolution."""

    def __init__(self, chain: List[str]):
        self.chain = list(chain)
        super().__init__(
            f"Circular dependency detected: {' -> '.join(self.chain)}"
        )


class ServiceTypeError(ContainerError, TypeError):
    """Resolved value does not match the namespace's type tag."""

    def __init__(self, namespace: str, expected: type, actual: Any):
        self.namespace = namespace
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Service '{namespace}' expected {expected.__name__}, "
            f"got {type(actual).__name__}"
        )


class Container:
    """Dependency injection container.

    Holds three independent mappings (factories, singleton instances and
    mocks) plus the mock mode flag. All of them are guarded by one
    re-entrant lock, so factories may resolve other namespaces from inside a
    resolution.

    Example:
        container = Container()

        container.register("Service/Logger", lambda c: Logger())
        container.register_singleton(
            "Service/Database",
            lambda c: Database(logger=c.use("Service/Logger")),
        )

        container.use("Service/Database")
    """

    def __init__(
        self,
        use_mocks: bool = False,
        detect_cycles: bool = False,
        strict_types: bool = False,
    ):
        """Initialize empty container.

        Args:
            use_mocks: Initial state of the mock mode flag
            detect_cycles: Raise CircularDependencyError on re-entrant lookups
            strict_types: Check resolved values against namespace type tags
        """
        self._factories: Dict[str, Factory[Any]] = {}
        self._instances: Dict[str, Any] = {}
        self._mocks: Dict[str, MockFactory[Any]] = {}
        self._use_mocks = use_mocks
        self._detect_cycles = detect_cycles
        self._strict_types = strict_types
        self._lock = threading.RLock()
        self._local = threading.local()

    @classmethod
    def from_settings(cls, settings: "Settings") -> "Container":
        """Build a container configured from settings."""
        return cls(
            use_mocks=settings.use_mocks,
            detect_cycles=settings.detect_cycles,
            strict_types=settings.strict_types,
        )

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    @overload
    def register(self, namespace: Namespace[T], factory: Factory[T]) -> "Container": ...

    @overload
    def register(
        self, namespace: Union[str, LookupNode], factory: Factory[Any]
    ) -> "Container": ...

    def register(self, namespace: NamespaceKey, factory: Factory[Any]) -> "Container":
        """Register a transient factory, replacing any previous one.

        The factory is invoked with the container on every ``use`` call.

        Returns:
            Self for method chaining
        """
        name = namespace_name(namespace)
        with self._lock:
            replaced = name in self._factories
            self._factories[name] = factory
        logger.debug("service_registered", namespace=name, replaced=replaced)
        return self

    @overload
    def register_singleton(
        self, namespace: Namespace[T], factory: Factory[T]
    ) -> "Container": ...

    @overload
    def register_singleton(
        self, namespace: Union[str, LookupNode], factory: Factory[Any]
    ) -> "Container": ...

    def register_singleton(
        self, namespace: NamespaceKey, factory: Factory[Any]
    ) -> "Container":
        """Build and cache a singleton instance now.

        If an instance is already cached for the namespace the call does
        nothing: the factory is neither stored nor invoked.

        Returns:
            Self for method chaining
        """
        name = namespace_name(namespace)
        with self._lock:
            if name in self._instances:
                logger.debug("singleton_registration_skipped", namespace=name)
                return self

            instance = self._invoke(name, "singleton", factory, self)
            self._check_type(namespace, instance)
            self._instances[name] = instance

        logger.debug("singleton_created", namespace=name)
        return self

    @overload
    def mock(
        self, namespace: Namespace[T], mock_factory: MockFactory[T]
    ) -> "Container": ...

    @overload
    def mock(
        self, namespace: Union[str, LookupNode], mock_factory: MockFactory[Any]
    ) -> "Container": ...

    def mock(self, namespace: NamespaceKey, mock_factory: MockFactory[Any]) -> "Container":
        """Register a mock factory, replacing any previous mock.

        The mock is only consulted while mock mode is enabled. It receives
        the container and the original value of the namespace.

        Returns:
            Self for method chaining
        """
        name = namespace_name(namespace)
        with self._lock:
            self._mocks[name] = mock_factory
        logger.debug("mock_registered", namespace=name)
        return self

    # -------------------------------------------------------------------------
    # Mock mode
    # -------------------------------------------------------------------------

    @property
    def mocks_enabled(self) -> bool:
        return self._use_mocks

    @property
    def detect_cycles(self) -> bool:
        return self._detect_cycles

    @property
    def strict_types(self) -> bool:
        return self._strict_types

    def use_mock(self, enable: bool = True) -> "Container":
        """Set the mock mode flag."""
        with self._lock:
            self._use_mocks = enable
        logger.debug("mocks_enabled" if enable else "mocks_disabled")
        return self

    def enable_mocks(self) -> "Container":
        return self.use_mock(True)

    def disable_mocks(self) -> "Container":
        return self.use_mock(False)

    def clear_mocks(self) -> "Container":
        """Remove every registered mock. The mode flag is left unchanged."""
        with self._lock:
            count = len(self._mocks)
            self._mocks.clear()
        logger.debug("mocks_cleared", count=count)
        return self

    def snapshot_mocks(self) -> MockSnapshot:
        """Copy the registered mocks and the mode flag."""
        with self._lock:
            return dict(self._mocks), self._use_mocks

    def restore_mocks(self, snapshot: MockSnapshot) -> "Container":
        """Replace mocks and the mode flag with a previous snapshot."""
        mocks, enabled = snapshot
        with self._lock:
            self._mocks.clear()
            self._mocks.update(mocks)
            self.use_mock(enabled)
        logger.debug("mocks_restored", count=len(mocks))
        return self

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    @overload
    def use(self, namespace: Namespace[T]) -> T: ...

    @overload
    def use(self, namespace: Union[str, LookupNode]) -> Any: ...

    def use(self, namespace: NamespaceKey) -> Any:
        """Resolve a namespace to a value.

        Resolution order:
            1. Mock factory, when mock mode is on and a mock is registered.
               It is called with the original value and never cached.
            2. Cached singleton instance.
            3. Registered factory, invoked with the container.

        Raises:
            ServiceNotFoundError: If neither an instance nor a factory exists
            CircularDependencyError: If cycle detection is on and the
                namespace is already being resolved
        """
        name = namespace_name(namespace)
        with self._lock:
            if self._use_mocks:
                mock_factory = self._mocks.get(name)
                if mock_factory is not None:
                    original = self._resolve_original(name)
                    logger.debug("mock_resolved", namespace=name)
                    # test doubles are not type checked
                    return self._invoke(name, "mock", mock_factory, self, original)

            value = self._resolve_original(name)
        self._check_type(namespace, value)
        return value

    def _resolve_original(self, name: str) -> Any:
        """Resolve through instances and factories, ignoring mocks."""
        if name in self._instances:
            return self._instances[name]

        factory = self._factories.get(name)
        if factory is None:
            logger.warning("service_not_found", namespace=name)
            raise ServiceNotFoundError(name, self.namespaces())

        return self._invoke(name, "factory", factory, self)

    def _invoke(
        self, name: str, kind: str, producer: Callable[..., Any], *args: Any
    ) -> Any:
        """Call a producer, tracking the resolution chain when enabled.

        Stack entries are ``(namespace, kind)`` pairs, so a singleton factory
        may wrap the plain binding of its own namespace.
        """
        if not self._detect_cycles:
            return producer(*args)

        stack = self._resolution_stack()
        entry = (name, kind)
        if entry in stack:
            chain = [n for n, _ in stack[stack.index(entry):]] + [name]
            raise CircularDependencyError(chain)

        stack.append(entry)
        try:
            return producer(*args)
        finally:
            stack.pop()

    def _resolution_stack(self) -> List[Tuple[str, str]]:
        stack = getattr(self._local, "stack", None)
        if stack is None:
            stack = self._local.stack = []
        return stack

    def _check_type(self, namespace: NamespaceKey, value: Any) -> None:
        if not self._strict_types or not isinstance(namespace, Namespace):
            return
        if not namespace.accepts(value):
            raise ServiceTypeError(namespace.name, namespace.type_, value)

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def has(self, namespace: NamespaceKey) -> bool:
        """Check whether a namespace resolves without mocks."""
        name = namespace_name(namespace)
        with self._lock:
            return name in self._instances or name in self._factories

    def has_mock(self, namespace: NamespaceKey) -> bool:
        name = namespace_name(namespace)
        with self._lock:
            return name in self._mocks

    def namespaces(self) -> List[str]:
        """Names resolvable through factories or singleton instances."""
        with self._lock:
            return sorted(set(self._factories) | set(self._instances))

    def __contains__(self, namespace: object) -> bool:
        if not isinstance(namespace, (str, Namespace, LookupNode)):
            return False
        return self.has(namespace)

    def __repr__(self) -> str:
        return (
            f"<Container factories={len(self._factories)} "
            f"singletons={len(self._instances)} mocks={len(self._mocks)} "
            f"mocks_enabled={self._use_mocks}>"
        )


# Global container instance
_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the global container instance.

    Created on first use from the environment settings.

    Returns:
        The global Container instance
    """
    global _container
    if _container is None:
        with _container_lock:
            if _container is None:
                from ioc_core.core.config import get_settings

                _container = Container.from_settings(get_settings())
    return _container


def reset_container() -> None:
    """Discard the global container (mainly for tests)."""
    global _container
    with _container_lock:
        _container = None


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
]
