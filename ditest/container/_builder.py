from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ditest.api.compiler_pass import CompilerPassProtocol
from ditest.api.extension import ExtensionProtocol
from ditest.container._alias import Alias
from ditest.container._definition import Definition
from ditest.exceptions import (
    FrozenContainerError,
    InvalidArgumentError,
    LogicError,
    ParameterNotFoundError,
    ServiceNotFoundError,
)

logger = logging.getLogger(__name__)


class ContainerBuilder:
    """In-memory state of a container under construction.

    Holds parameters, service definitions and aliases. Extensions and
    compiler passes mutate it, tests read it back.
    An id is either a definition or an alias, never both.
    """

    __slots__ = (
        "_parameters",
        "_definitions",
        "_aliases",
        "_extensions",
        "_passes",
        "_frozen",
    )

    _parameters: Dict[str, Any]
    _definitions: Dict[str, Definition]
    _aliases: Dict[str, Alias]
    _extensions: Dict[str, ExtensionProtocol]
    _passes: List[Tuple[int, CompilerPassProtocol]]
    _frozen: bool

    def __init__(self, parameters: Optional[Mapping[str, Any]] = None) -> None:
        self._parameters = dict(parameters or {})
        self._definitions = {}
        self._aliases = {}
        self._extensions = {}
        self._passes = []
        self._frozen = False

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def _check_not_frozen(self, action: str) -> None:
        if self._frozen:
            raise FrozenContainerError(f"Impossible to {action} on a compiled container.")

    # parameters

    @property
    def parameters(self) -> Mapping[str, Any]:
        return MappingProxyType(self._parameters)

    def set_parameter(self, name: str, value: Any) -> None:
        self._check_not_frozen(f'set parameter "{name}"')
        self._parameters[name] = value

    def has_parameter(self, name: str) -> bool:
        return name in self._parameters

    def get_parameter(self, name: str) -> Any:
        try:
            return self._parameters[name]
        except KeyError:
            raise ParameterNotFoundError(
                f'You have requested a non-existent parameter "{name}".', name
            ) from None

    # definitions

    @property
    def definitions(self) -> Mapping[str, Definition]:
        return MappingProxyType(self._definitions)

    def register(self, service_id: str, class_name: Any = None) -> Definition:
        """Create, store and return a new definition.

        `class_name` defaults to the service id, following the convention
        of naming services after their class.
        """
        return self.set_definition(
            service_id, Definition(service_id if class_name is None else class_name)
        )

    def set_definition(self, service_id: str, definition: Definition) -> Definition:
        self._check_not_frozen(f'set definition "{service_id}"')
        self._aliases.pop(service_id, None)
        self._definitions[service_id] = definition
        return definition

    def add_definitions(self, definitions: Mapping[str, Definition]) -> None:
        for service_id, definition in definitions.items():
            self.set_definition(service_id, definition)

    def has_definition(self, service_id: str) -> bool:
        return service_id in self._definitions

    def get_definition(self, service_id: str) -> Definition:
        try:
            return self._definitions[service_id]
        except KeyError:
            raise ServiceNotFoundError(
                f'You have requested a non-existent service "{service_id}".',
                service_id,
            ) from None

    def find_definition(self, service_id: str) -> Definition:
        """Get a definition, following aliases until one is found"""
        seen = [service_id]
        while service_id in self._aliases:
            service_id = self._aliases[service_id].id
            if service_id in seen:
                seen.append(service_id)
                raise InvalidArgumentError(
                    f'Circular alias detected: {" -> ".join(seen)}'
                )
            seen.append(service_id)
        return self.get_definition(service_id)

    def remove_definition(self, service_id: str) -> None:
        self._check_not_frozen(f'remove definition "{service_id}"')
        self._definitions.pop(service_id, None)

    # aliases

    @property
    def aliases(self) -> Mapping[str, Alias]:
        return MappingProxyType(self._aliases)

    def set_alias(self, alias_id: str, target: Union[str, Alias]) -> Alias:
        self._check_not_frozen(f'set alias "{alias_id}"')
        alias = Alias(target) if isinstance(target, str) else target
        if alias.id == alias_id:
            raise InvalidArgumentError(
                f'An alias can not reference itself, got a circular reference on "{alias_id}".'
            )
        self._definitions.pop(alias_id, None)
        self._aliases[alias_id] = alias
        return alias

    def has_alias(self, alias_id: str) -> bool:
        return alias_id in self._aliases

    def get_alias(self, alias_id: str) -> Alias:
        try:
            return self._aliases[alias_id]
        except KeyError:
            raise ServiceNotFoundError(
                f'The service alias "{alias_id}" does not exist.', alias_id
            ) from None

    def remove_alias(self, alias_id: str) -> None:
        self._check_not_frozen(f'remove alias "{alias_id}"')
        self._aliases.pop(alias_id, None)

    def has(self, service_id: str) -> bool:
        return service_id in self._definitions or service_id in self._aliases

    def find_tagged_service_ids(self, tag: str) -> Dict[str, List[Dict[str, Any]]]:
        return {
            service_id: [dict(attributes) for attributes in definition.get_tag(tag)]
            for service_id, definition in self._definitions.items()
            if definition.has_tag(tag)
        }

    # extensions

    def register_extension(self, extension: ExtensionProtocol) -> None:
        if extension.alias in self._extensions:
            raise LogicError(
                f'An extension with alias "{extension.alias}" is already registered.'
            )
        self._extensions[extension.alias] = extension

    def has_extension(self, alias: str) -> bool:
        return alias in self._extensions

    def get_extension(self, alias: str) -> ExtensionProtocol:
        try:
            return self._extensions[alias]
        except KeyError:
            raise LogicError(
                f'Container extension "{alias}" is not registered.'
            ) from None

    def get_extensions(self) -> Mapping[str, ExtensionProtocol]:
        return MappingProxyType(self._extensions)

    # compilation

    def add_compiler_pass(
        self, compiler_pass: CompilerPassProtocol, priority: int = 0
    ) -> None:
        self._check_not_frozen("add a compiler pass")
        self._passes.append((priority, compiler_pass))

    def get_compiler_passes(self) -> List[CompilerPassProtocol]:
        """Registered passes in the order `compile()` runs them"""
        # sorted() is stable, so equal priorities keep registration order
        return [p for _, p in sorted(self._passes, key=lambda item: -item[0])]

    def compile(self) -> None:
        self._check_not_frozen("compile")
        for compiler_pass in self.get_compiler_passes():
            logger.debug("Processing compiler pass %r", compiler_pass)
            compiler_pass.process(self)
        self._frozen = True
        logger.debug(
            "Compiled container builder with %d definition(s) and %d alias(es)",
            len(self._definitions),
            len(self._aliases),
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(parameters={len(self._parameters)},"
            f" definitions={len(self._definitions)}, aliases={len(self._aliases)})"
        )
