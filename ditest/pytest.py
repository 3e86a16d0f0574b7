"""Fixtures for writing function style tests against a `ContainerBuilder`.

Enable with `pytest_plugins = ["ditest.pytest"]` in a conftest.py.
"""
from typing import Any, Callable, Mapping, Optional

try:
    import pytest
except ImportError:  # pragma: no cover
    raise ImportError(
        'The "pytest" extra is required to use ditest.pytest.'
        "\nYou can install it with `pip install ditest[pytest]`"
    )

from ditest._utils.config import merge_configuration
from ditest.api.extension import ExtensionProtocol
from ditest.container import ContainerBuilder


@pytest.fixture
def container_builder() -> ContainerBuilder:
    return ContainerBuilder()


@pytest.fixture
def load_extension(
    container_builder: ContainerBuilder,
) -> Callable[..., ContainerBuilder]:
    """Register an extension on the test's builder and load it in one call"""

    def load(
        extension: ExtensionProtocol,
        configuration_values: Optional[Mapping[str, Any]] = None,
        *,
        minimal_configuration: Optional[Mapping[str, Any]] = None,
    ) -> ContainerBuilder:
        container_builder.register_extension(extension)
        extension.load(
            merge_configuration(minimal_configuration or {}, configuration_values),
            container_builder,
        )
        return container_builder

    return load
