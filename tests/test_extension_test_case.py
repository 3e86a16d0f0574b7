from typing import Any, Mapping, Sequence

import pytest

from ditest import ExtensionTestCase
from ditest.api import ExtensionProtocol
from ditest.container import ContainerBuilder, Reference
from ditest.exceptions import LogicError, ServiceNotFoundError
from tests.extensions import FailingExtension, MyExtension, OtherExtension


class TestMyExtension(ExtensionTestCase):
    def get_container_extensions(self) -> Sequence[ExtensionProtocol]:
        return [MyExtension()]

    def test_parameter_is_set_regardless_of_configuration(self) -> None:
        self.load({"my": {"enabled": False}})
        self.assert_container_builder_has_parameter("parameter_name", "some value")
        self.assert_container_builder_not_has_service("my_service")

    def test_services_are_registered_when_enabled(self) -> None:
        self.load({"my": {"level": "debug"}})

        self.assert_container_builder_has_service("my_service", "app.MyService")
        self.assert_container_builder_has_alias("my_alias", "my_service")
        self.assert_container_builder_has_parameter("my.level", "debug")
        self.assert_container_builder_has_service_definition_with_argument(
            "my_service", 0, Reference("logger")
        )
        self.assert_container_builder_has_service_definition_with_argument(
            "my_alias", 1, {"level": "debug"}
        )
        self.assert_container_builder_has_service_definition_with_method_call(
            "my_service",
            "set_handlers",
            [[Reference("stream_handler"), Reference("file_handler")]],
        )
        self.assert_container_builder_has_service_definition_with_tag(
            "my_service", "kernel.event_listener", {"event": "request", "priority": 10}
        )

    def test_extension_is_registered(self) -> None:
        assert self.container.has_extension("my")

    def test_second_load_starts_from_a_fresh_container(self) -> None:
        self.load({"my": {"level": "debug"}})
        first = self.container
        self.load({"my": {"enabled": False}})

        assert self.container is not first
        assert self.container.has_extension("my")
        self.assert_container_builder_not_has_service("my_service")
        self.assert_container_builder_not_has_service("my_alias")
        with pytest.raises(AssertionError, match='no parameter "my.level"'):
            self.assert_container_builder_has_parameter("my.level")


class TestMinimalConfiguration(ExtensionTestCase):
    def get_container_extensions(self) -> Sequence[ExtensionProtocol]:
        return [MyExtension(), OtherExtension()]

    def get_minimal_configuration(self) -> Mapping[str, Any]:
        return {"my": {"enabled": False}, "framework": {"secret": "s3cr3t"}}

    def test_minimal_configuration_is_used(self) -> None:
        self.load()
        self.assert_container_builder_not_has_service("my_service")
        self.assert_container_builder_has_parameter(
            "other.seen_keys", ["framework", "my"]
        )

    def test_overrides_replace_top_level_keys(self) -> None:
        # "enabled" is not carried over from the minimal configuration
        self.load({"my": {"level": "warning"}, "extra": True})
        self.assert_container_builder_has_parameter("my.level", "warning")
        self.assert_container_builder_has_parameter(
            "other.seen_keys", ["extra", "framework", "my"]
        )


class TestPresetParameters(ExtensionTestCase):
    def get_container_extensions(self) -> Sequence[ExtensionProtocol]:
        return [OtherExtension()]

    def create_container_builder(self) -> ContainerBuilder:
        return ContainerBuilder({"kernel.debug": True})

    def test_preset_parameters_survive_load(self) -> None:
        self.load()
        self.assert_container_builder_has_parameter("kernel.debug", True)
        self.assert_container_builder_has_parameter("other.seen_keys", [])


class FailingExtensionCase(ExtensionTestCase):
    def get_container_extensions(self) -> Sequence[ExtensionProtocol]:
        return [FailingExtension()]


def test_extension_errors_propagate() -> None:
    case = FailingExtensionCase()
    case.setup_method()
    with pytest.raises(ServiceNotFoundError, match='"does_not_exist"'):
        case.load()


def test_extensions_must_be_provided() -> None:
    case = ExtensionTestCase()
    with pytest.raises(NotImplementedError):
        case.setup_method()


def test_extension_fixtures_satisfy_protocol() -> None:
    assert isinstance(MyExtension(), ExtensionProtocol)
    assert isinstance(FailingExtension(), ExtensionProtocol)


class DuplicateAliasCase(ExtensionTestCase):
    def get_container_extensions(self) -> Sequence[ExtensionProtocol]:
        return [MyExtension(), MyExtension()]


def test_duplicate_extension_aliases_are_rejected() -> None:
    case = DuplicateAliasCase()
    with pytest.raises(LogicError, match='alias "my" is already registered'):
        case.setup_method()
