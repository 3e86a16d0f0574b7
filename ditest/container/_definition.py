from __future__ import annotations

from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from ditest.exceptions import InvalidArgumentError, OutOfBoundsError


class MethodCall(NamedTuple):
    method: str
    arguments: Tuple[Any, ...]


class Definition:
    """Describes how a service would be built.

    Holds the class, the ordered constructor arguments and the ordered
    method calls to make after construction. Arguments may be literal
    values, `Reference`s to other services, nested sequences and mappings
    or inline `Definition`s.

    Definitions are only ever inspected, never instantiated.
    """

    __slots__ = (
        "class_name",
        "arguments",
        "method_calls",
        "tags",
        "public",
        "synthetic",
    )

    class_name: Any
    arguments: List[Any]
    method_calls: List[MethodCall]
    tags: Dict[str, List[Dict[str, Any]]]
    public: bool
    synthetic: bool

    def __init__(
        self,
        class_name: Any = None,
        arguments: Optional[Iterable[Any]] = None,
        *,
        public: bool = True,
        synthetic: bool = False,
    ) -> None:
        self.class_name = class_name
        self.arguments = list(arguments or ())
        self.method_calls = []
        self.tags = {}
        self.public = public
        self.synthetic = synthetic

    def set_class(self, class_name: Any) -> "Definition":
        self.class_name = class_name
        return self

    def set_arguments(self, arguments: Iterable[Any]) -> "Definition":
        self.arguments = list(arguments)
        return self

    def add_argument(self, argument: Any) -> "Definition":
        self.arguments.append(argument)
        return self

    def get_argument(self, index: int) -> Any:
        self._check_index(index)
        return self.arguments[index]

    def replace_argument(self, index: int, argument: Any) -> "Definition":
        self._check_index(index)
        self.arguments[index] = argument
        return self

    def has_argument(self, index: int) -> bool:
        return 0 <= index < len(self.arguments)

    def _check_index(self, index: int) -> None:
        # negative indexes would silently count from the end
        if not self.has_argument(index):
            raise OutOfBoundsError(
                f"The index {index} is not in the range [0, {len(self.arguments) - 1}]"
                f" ({len(self.arguments)} argument(s))"
            )

    def add_method_call(
        self, method: str, arguments: Sequence[Any] = ()
    ) -> "Definition":
        if not method:
            raise InvalidArgumentError("Method name cannot be empty.")
        self.method_calls.append(MethodCall(method, tuple(arguments)))
        return self

    def set_method_calls(
        self, calls: Iterable[Tuple[str, Sequence[Any]]]
    ) -> "Definition":
        self.method_calls = []
        for method, arguments in calls:
            self.add_method_call(method, arguments)
        return self

    def has_method_call(self, method: str) -> bool:
        return any(call.method == method for call in self.method_calls)

    def remove_method_call(self, method: str) -> "Definition":
        self.method_calls = [call for call in self.method_calls if call.method != method]
        return self

    def add_tag(self, name: str, **attributes: Any) -> "Definition":
        self.tags.setdefault(name, []).append(attributes)
        return self

    def has_tag(self, name: str) -> bool:
        return name in self.tags

    def get_tag(self, name: str) -> List[Dict[str, Any]]:
        return self.tags.get(name, [])

    def clear_tag(self, name: str) -> "Definition":
        self.tags.pop(name, None)
        return self

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(class_name={self.class_name!r},"
            f" arguments={self.arguments!r})"
        )
