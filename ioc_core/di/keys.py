"""
Namespace Keys
==============

Typed keys used to address dependency slots in a container.

A slot is always identified by its string name. ``Namespace`` attaches a
value type to that name so static checkers can verify that registrations and
lookups agree, and optionally carries a runtime type tag for containers
running with strict typing.

Usage:
    LOGGER: Namespace[Logger] = Namespace("Service/Logger", Logger)

    container.register(LOGGER, lambda c: Logger())
    logger = container.use(LOGGER)  # typed as Logger
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, Type, TypeVar, Union

T = TypeVar("T")


class LookupKind(str, Enum):
    """How a lookup node refers to its namespace."""

    BINDING = "binding"
    ALIAS = "alias"


@dataclass(frozen=True)
class Namespace(Generic[T]):
    """A named dependency slot producing values of type ``T``."""

    name: str
    type_: Optional[Type[T]] = None

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Namespace name must be a non-empty string")

    def __str__(self) -> str:
        return self.name

    def accepts(self, value: Any) -> bool:
        """Check a value against the runtime type tag, if any."""
        if self.type_ is None:
            return True
        return isinstance(value, self.type_)


@dataclass(frozen=True)
class LookupNode:
    """Indirect reference to a namespace, as produced by generated lookups."""

    namespace: str
    kind: LookupKind = LookupKind.BINDING

    def __post_init__(self):
        # accept plain strings for kind
        object.__setattr__(self, "kind", LookupKind(self.kind))


NamespaceKey = Union[str, Namespace[Any], LookupNode]


def namespace_name(key: NamespaceKey) -> str:
    """Normalize any accepted key form to its string name."""
    if isinstance(key, str):
        return key
    if isinstance(key, Namespace):
        return key.name
    if isinstance(key, LookupNode):
        return key.namespace
    raise TypeError(f"Unsupported namespace key: {key!r}")


__all__ = [
    "LookupKind",
    "LookupNode",
    "Namespace",
    "NamespaceKey",
    "namespace_name",
]
