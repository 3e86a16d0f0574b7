from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ditest.container import ContainerBuilder


@runtime_checkable
class ExtensionProtocol(Protocol):
    """A unit that turns user configuration into parameters and definitions"""

    @property
    def alias(self) -> str:
        """The configuration key this extension answers to"""
        ...

    def load(self, config: Mapping[str, Any], container: ContainerBuilder) -> None:
        ...
