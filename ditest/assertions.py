"""Semantic assertions over a `ContainerBuilder`.

Every function raises `AssertionError` with a message naming the key that
was missing or mismatched, so a failing test says *what* is wrong with the
container instead of surfacing a `KeyError` from deep inside it.
Aliases are followed wherever a service id is expected.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ditest._utils.equality import values_equal
from ditest.api.values import Value
from ditest.container import ContainerBuilder, Definition
from ditest.exceptions import InvalidArgumentError, ServiceNotFoundError

__all__ = (
    "MISSING",
    "assert_container_builder_has_alias",
    "assert_container_builder_has_parameter",
    "assert_container_builder_has_service",
    "assert_container_builder_has_service_definition_with_argument",
    "assert_container_builder_has_service_definition_with_method_call",
    "assert_container_builder_has_service_definition_with_tag",
    "assert_container_builder_has_synthetic_service",
    "assert_container_builder_not_has_service",
)


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


# Marks an expected value the caller did not give, since None is a valid value
MISSING: Any = _Missing()


def _describe_class(class_name: Any) -> str:
    if isinstance(class_name, type):
        return f"{class_name.__module__}.{class_name.__qualname__}"
    return str(class_name)


def _find_definition(container: ContainerBuilder, service_id: str) -> Definition:
    if not container.has(service_id):
        raise AssertionError(
            f'The container builder has no service "{service_id}"'
            " (neither a definition nor an alias with this id exists)."
        )
    try:
        return container.find_definition(service_id)
    except ServiceNotFoundError as e:
        raise AssertionError(
            f'The alias "{service_id}" points to a service that does not exist: {e}'
        ) from e
    except InvalidArgumentError as e:
        raise AssertionError(
            f'The service "{service_id}" could not be resolved: {e}'
        ) from e


def assert_container_builder_has_service(
    container: ContainerBuilder, service_id: str, expected_class: Any = None
) -> None:
    """The service exists and, when `expected_class` is given, has exactly that class"""
    definition = _find_definition(container, service_id)
    if expected_class is None:
        return
    if not values_equal(definition.class_name, expected_class):
        raise AssertionError(
            f'The service "{service_id}" has class "{_describe_class(definition.class_name)}",'
            f' expected "{_describe_class(expected_class)}".'
        )


def assert_container_builder_not_has_service(
    container: ContainerBuilder, service_id: str
) -> None:
    if container.has_definition(service_id):
        raise AssertionError(
            f'The container builder has a definition for "{service_id}", expected none.'
        )
    if container.has_alias(service_id):
        raise AssertionError(
            f'The container builder has an alias "{service_id}"'
            f' (to "{container.get_alias(service_id).id}"), expected none.'
        )


def assert_container_builder_has_synthetic_service(
    container: ContainerBuilder, service_id: str
) -> None:
    definition = _find_definition(container, service_id)
    if not definition.synthetic:
        raise AssertionError(f'The service "{service_id}" is not synthetic.')


def assert_container_builder_has_alias(
    container: ContainerBuilder,
    alias_id: str,
    expected_service_id: Optional[str] = None,
) -> None:
    if not container.has_alias(alias_id):
        raise AssertionError(f'The container builder has no alias "{alias_id}".')
    if expected_service_id is None:
        return
    target = container.get_alias(alias_id).id
    if target != expected_service_id:
        raise AssertionError(
            f'The alias "{alias_id}" points to service "{target}",'
            f' expected "{expected_service_id}".'
        )


def assert_container_builder_has_parameter(
    container: ContainerBuilder, name: str, expected_value: Value = MISSING
) -> None:
    if not container.has_parameter(name):
        raise AssertionError(f'The container builder has no parameter "{name}".')
    if expected_value is MISSING:
        return
    actual = container.get_parameter(name)
    if not values_equal(actual, expected_value):
        raise AssertionError(
            f'The parameter "{name}" has value {actual!r}, expected {expected_value!r}.'
        )


def assert_container_builder_has_service_definition_with_argument(
    container: ContainerBuilder,
    service_id: str,
    index: int,
    expected_value: Value = MISSING,
) -> None:
    definition = _find_definition(container, service_id)
    if not definition.has_argument(index):
        raise AssertionError(
            f'The service "{service_id}" has no argument at index {index}'
            f" (it has {len(definition.arguments)} argument(s))."
        )
    if expected_value is MISSING:
        return
    actual = definition.get_argument(index)
    if not values_equal(actual, expected_value):
        raise AssertionError(
            f'The argument at index {index} of service "{service_id}" is {actual!r},'
            f" expected {expected_value!r}."
        )


def assert_container_builder_has_service_definition_with_method_call(
    container: ContainerBuilder,
    service_id: str,
    method: str,
    arguments: Sequence[Value] = (),
) -> None:
    """Some recorded call has this method name and exactly these arguments, in order"""
    if isinstance(arguments, str):
        raise InvalidArgumentError(
            f'Expected a sequence of arguments for method "{method}",'
            f" got the string {arguments!r}."
            " Wrap a single argument in a list."
        )
    definition = _find_definition(container, service_id)
    for call in definition.method_calls:
        if call.method == method and values_equal(list(call.arguments), list(arguments)):
            return
    recorded = [
        f"{call.method}({', '.join(repr(a) for a in call.arguments)})"
        for call in definition.method_calls
    ]
    raise AssertionError(
        f'The service "{service_id}" has no call to method "{method}"'
        f" with arguments {list(arguments)!r}."
        f" Recorded calls: {', '.join(recorded) if recorded else 'none'}."
    )


def assert_container_builder_has_service_definition_with_tag(
    container: ContainerBuilder,
    service_id: str,
    tag: str,
    attributes: Optional[Mapping[str, Any]] = None,
) -> None:
    definition = _find_definition(container, service_id)
    if not definition.has_tag(tag):
        raise AssertionError(f'The service "{service_id}" has no tag "{tag}".')
    if attributes is None:
        return
    if not any(values_equal(dict(attributes), found) for found in definition.get_tag(tag)):
        raise AssertionError(
            f'The service "{service_id}" has tag "{tag}" but not with attributes'
            f" {dict(attributes)!r} (found {definition.get_tag(tag)!r})."
        )
