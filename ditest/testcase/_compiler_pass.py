from __future__ import annotations

from typing import Any

from ditest.container import ContainerBuilder, Definition
from ditest.testcase._base import ContainerBuilderTestCase


class CompilerPassTestCase(ContainerBuilderTestCase):
    """Drive a compiler pass against a container builder the test arranges.

    Subclasses add the pass under test in `register_compiler_pass()`,
    populate `self.container` and then call `compile()` once.

    Every subclass also inherits a test checking that the pass leaves an
    empty container alone, since a pass must not assume the services it
    works on are registered.
    """

    def setup_method(self, method: Any = None) -> None:
        super().setup_method(method)
        self.register_compiler_pass(self.container)

    def register_compiler_pass(self, container: ContainerBuilder) -> None:
        raise NotImplementedError

    def compile(self) -> None:
        self.container.compile()

    def register_service(self, service_id: str, class_name: Any = None) -> Definition:
        return self.container.register(service_id, class_name)

    def set_definition(self, service_id: str, definition: Definition) -> Definition:
        return self.container.set_definition(service_id, definition)

    def set_parameter(self, name: str, value: Any) -> None:
        self.container.set_parameter(name, value)

    def test_compilation_without_services_does_not_raise(self) -> None:
        try:
            self.compile()
        except Exception as e:
            raise AssertionError(
                "The compiler pass should not fail when the services it works on"
                f" are not registered, but compiling an empty container raised {e!r}"
            ) from e
