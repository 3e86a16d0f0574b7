from ditest.api.compiler_pass import CompilerPassProtocol
from ditest.api.extension import ExtensionProtocol
from ditest.api.values import Value

__all__ = ("CompilerPassProtocol", "ExtensionProtocol", "Value")
