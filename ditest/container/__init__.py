from ditest.container._alias import Alias
from ditest.container._builder import ContainerBuilder
from ditest.container._definition import Definition, MethodCall
from ditest.container._reference import InvalidBehavior, Reference

__all__ = (
    "Alias",
    "ContainerBuilder",
    "Definition",
    "InvalidBehavior",
    "MethodCall",
    "Reference",
)
