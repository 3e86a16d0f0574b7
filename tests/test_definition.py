import pytest

from ditest.container import Definition, MethodCall, Reference
from ditest.exceptions import InvalidArgumentError, OutOfBoundsError


def test_arguments() -> None:
    definition = Definition("app.Mailer", ["smtp"])
    definition.add_argument(Reference("logger")).replace_argument(0, "sendmail")

    assert definition.arguments == ["sendmail", Reference("logger")]
    assert definition.get_argument(1) == Reference("logger")
    assert definition.has_argument(1)
    assert not definition.has_argument(2)


@pytest.mark.parametrize("index", [2, -1])
def test_argument_out_of_bounds(index: int) -> None:
    definition = Definition("app.Mailer", ["smtp", "localhost"])
    with pytest.raises(OutOfBoundsError, match=r"\[0, 1\]"):
        definition.get_argument(index)
    with pytest.raises(OutOfBoundsError):
        definition.replace_argument(index, "x")


def test_method_calls() -> None:
    definition = Definition("app.Mailer")
    definition.add_method_call("set_logger", [Reference("logger")])
    definition.add_method_call("enable")

    assert definition.method_calls == [
        MethodCall("set_logger", (Reference("logger"),)),
        MethodCall("enable", ()),
    ]
    assert definition.has_method_call("enable")

    definition.remove_method_call("enable")
    assert not definition.has_method_call("enable")

    definition.set_method_calls([("a", [1]), ("b", ())])
    assert [call.method for call in definition.method_calls] == ["a", "b"]


def test_method_call_without_name() -> None:
    with pytest.raises(InvalidArgumentError):
        Definition().add_method_call("")


def test_tags() -> None:
    definition = Definition().add_tag("listener", event="request")
    assert definition.has_tag("listener")
    assert definition.get_tag("listener") == [{"event": "request"}]
    assert definition.get_tag("other") == []

    definition.clear_tag("listener")
    assert not definition.has_tag("listener")


def test_reference_str() -> None:
    assert str(Reference("logger")) == "logger"
    assert Reference("logger") == Reference("logger")
    assert hash(Reference("logger")) == hash(Reference("logger"))


def test_set_arguments_replaces_all() -> None:
    definition = Definition("app.Mailer", ["smtp", "localhost"])
    assert definition.set_arguments((Reference("transport"),)) is definition
    assert definition.arguments == [Reference("transport")]
    with pytest.raises(OutOfBoundsError):
        definition.get_argument(1)


def test_set_class() -> None:
    definition = Definition("app.Mailer")
    assert definition.set_class("app.SmtpMailer") is definition
    assert definition.class_name == "app.SmtpMailer"
