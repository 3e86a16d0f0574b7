from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ditest")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"


import ditest.api as api  # noqa: E402
from ditest.assertions import (  # noqa: E402
    assert_container_builder_has_alias,
    assert_container_builder_has_parameter,
    assert_container_builder_has_service,
    assert_container_builder_has_service_definition_with_argument,
    assert_container_builder_has_service_definition_with_method_call,
    assert_container_builder_has_service_definition_with_tag,
    assert_container_builder_has_synthetic_service,
    assert_container_builder_not_has_service,
)
from ditest.container import (  # noqa: E402
    Alias,
    ContainerBuilder,
    Definition,
    InvalidBehavior,
    MethodCall,
    Reference,
)
from ditest.testcase import (  # noqa: E402
    CompilerPassTestCase,
    ContainerBuilderTestCase,
    ExtensionTestCase,
)

__all__ = (
    "api",
    "Alias",
    "CompilerPassTestCase",
    "ContainerBuilder",
    "ContainerBuilderTestCase",
    "Definition",
    "ExtensionTestCase",
    "InvalidBehavior",
    "MethodCall",
    "Reference",
    "assert_container_builder_has_alias",
    "assert_container_builder_has_parameter",
    "assert_container_builder_has_service",
    "assert_container_builder_has_service_definition_with_argument",
    "assert_container_builder_has_service_definition_with_method_call",
    "assert_container_builder_has_service_definition_with_tag",
    "assert_container_builder_has_synthetic_service",
    "assert_container_builder_not_has_service",
)
