from typing import Any, Mapping, Sequence, Union

from ditest.container._definition import Definition
from ditest.container._reference import Reference

# What can appear as an argument, a method call argument or a parameter.
# Sequence and Mapping members may nest any of these again.
Value = Union[
    None,
    bool,
    int,
    float,
    str,
    Reference,
    Definition,
    Sequence[Any],
    Mapping[Any, Any],
]
