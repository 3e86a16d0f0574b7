from typing import Any, Mapping

from ditest.container._definition import Definition
from ditest.container._reference import Reference


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def values_equal(left: Any, right: Any) -> bool:
    """Structural equality over argument and parameter values.

    References match on id and invalid behavior, sequences element by
    element, mappings key by key and inline definitions on class,
    arguments and method calls. `True` never equals `1`.
    """
    if isinstance(left, Reference) or isinstance(right, Reference):
        return (
            isinstance(left, Reference)
            and isinstance(right, Reference)
            and left.id == right.id
            and left.invalid_behavior == right.invalid_behavior
        )
    if isinstance(left, Definition) or isinstance(right, Definition):
        return (
            isinstance(left, Definition)
            and isinstance(right, Definition)
            and values_equal(left.class_name, right.class_name)
            and values_equal(left.arguments, right.arguments)
            and len(left.method_calls) == len(right.method_calls)
            and all(
                lc.method == rc.method and values_equal(lc.arguments, rc.arguments)
                for lc, rc in zip(left.method_calls, right.method_calls)
            )
        )
    if _is_sequence(left) or _is_sequence(right):
        return (
            _is_sequence(left)
            and _is_sequence(right)
            and len(left) == len(right)
            and all(values_equal(lv, rv) for lv, rv in zip(left, right))
        )
    if isinstance(left, Mapping) or isinstance(right, Mapping):
        return (
            isinstance(left, Mapping)
            and isinstance(right, Mapping)
            and left.keys() == right.keys()
            and all(values_equal(left[k], right[k]) for k in left)
        )
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return bool(left == right)
