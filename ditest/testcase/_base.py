from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ditest import assertions
from ditest.container import ContainerBuilder


class ContainerBuilderTestCase:
    """Base for pytest test classes that inspect a `ContainerBuilder`.

    A fresh builder is created before every test method and exposed as
    `self.container`. The assertion helpers from `ditest.assertions` are
    available as methods bound to that builder.
    """

    container: ContainerBuilder

    def setup_method(self, method: Any = None) -> None:
        self.container = self.create_container_builder()

    def create_container_builder(self) -> ContainerBuilder:
        """Hook to customize the builder, e.g. to preset parameters"""
        return ContainerBuilder()

    def assert_container_builder_has_service(
        self, service_id: str, expected_class: Any = None
    ) -> None:
        assertions.assert_container_builder_has_service(
            self.container, service_id, expected_class
        )

    def assert_container_builder_not_has_service(self, service_id: str) -> None:
        assertions.assert_container_builder_not_has_service(self.container, service_id)

    def assert_container_builder_has_synthetic_service(self, service_id: str) -> None:
        assertions.assert_container_builder_has_synthetic_service(
            self.container, service_id
        )

    def assert_container_builder_has_alias(
        self, alias_id: str, expected_service_id: Optional[str] = None
    ) -> None:
        assertions.assert_container_builder_has_alias(
            self.container, alias_id, expected_service_id
        )

    def assert_container_builder_has_parameter(
        self, name: str, expected_value: Any = assertions.MISSING
    ) -> None:
        assertions.assert_container_builder_has_parameter(
            self.container, name, expected_value
        )

    def assert_container_builder_has_service_definition_with_argument(
        self, service_id: str, index: int, expected_value: Any = assertions.MISSING
    ) -> None:
        assertions.assert_container_builder_has_service_definition_with_argument(
            self.container, service_id, index, expected_value
        )

    def assert_container_builder_has_service_definition_with_method_call(
        self, service_id: str, method: str, arguments: Sequence[Any] = ()
    ) -> None:
        assertions.assert_container_builder_has_service_definition_with_method_call(
            self.container, service_id, method, arguments
        )

    def assert_container_builder_has_service_definition_with_tag(
        self,
        service_id: str,
        tag: str,
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> None:
        assertions.assert_container_builder_has_service_definition_with_tag(
            self.container, service_id, tag, attributes
        )
