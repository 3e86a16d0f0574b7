from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

from ditest._utils.config import merge_configuration
from ditest.api.extension import ExtensionProtocol
from ditest.testcase._base import ContainerBuilderTestCase

logger = logging.getLogger(__name__)


class ExtensionTestCase(ContainerBuilderTestCase):
    """Drive one or more extensions against a fresh container builder.

    Subclasses return the extensions under test from
    `get_container_extensions()`, then call `load()` with the configuration
    for the scenario and assert on `self.container`:

    ```py
    class TestMyExtension(ExtensionTestCase):
        def get_container_extensions(self):
            return [MyExtension()]

        def test_sets_parameter(self):
            self.load({"enabled": True})
            self.assert_container_builder_has_parameter("my.enabled", True)
    ```
    """

    _loaded: bool

    def setup_method(self, method: Any = None) -> None:
        super().setup_method(method)
        self._register_extensions()
        self._loaded = False

    def get_container_extensions(self) -> Sequence[ExtensionProtocol]:
        raise NotImplementedError

    def get_minimal_configuration(self) -> Mapping[str, Any]:
        """Configuration every `load()` starts from, before overrides are applied"""
        return {}

    def _register_extensions(self) -> None:
        for extension in self.get_container_extensions():
            self.container.register_extension(extension)

    def load(self, configuration_values: Optional[Mapping[str, Any]] = None) -> None:
        if self._loaded:
            # start over so nothing from the previous load leaks into this one
            self.container = self.create_container_builder()
            self._register_extensions()
        config: Dict[str, Any] = merge_configuration(
            self.get_minimal_configuration(), configuration_values
        )
        for extension in self.container.get_extensions().values():
            logger.debug("Loading extension %r with %r", extension.alias, config)
            extension.load(config, self.container)
        self._loaded = True
