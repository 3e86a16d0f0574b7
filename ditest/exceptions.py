class ContainerError(Exception):
    """Base exception for this library"""

    pass


class ServiceNotFoundError(ContainerError):
    """Raised when a service id is neither a definition nor an alias"""

    def __init__(self, msg: str, service_id: str) -> None:
        super().__init__(msg)
        self.service_id = service_id


class ParameterNotFoundError(ContainerError):
    """Raised when a parameter was never set on the container builder"""

    def __init__(self, msg: str, name: str) -> None:
        super().__init__(msg)
        self.name = name


class FrozenContainerError(ContainerError):
    """Raised when a compiled container builder is modified or compiled again"""


class OutOfBoundsError(ContainerError):
    """Raised when a definition argument index does not exist"""


class InvalidArgumentError(ContainerError):
    """Raised when a definition, alias or method call is given an unusable value.
    For example, aliasing an id to itself or adding a method call with no name.
    """


class LogicError(ContainerError):
    """Raised when the container builder is used out of order,
    for example asking for an extension that was never registered.
    """
