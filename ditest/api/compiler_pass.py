from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ditest.container import ContainerBuilder


@runtime_checkable
class CompilerPassProtocol(Protocol):
    def process(self, container: ContainerBuilder) -> None:
        """Transform the container builder in place before it is frozen"""
        ...
