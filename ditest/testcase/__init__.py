from ditest.testcase._base import ContainerBuilderTestCase
from ditest.testcase._compiler_pass import CompilerPassTestCase
from ditest.testcase._extension import ExtensionTestCase

__all__ = ("CompilerPassTestCase", "ContainerBuilderTestCase", "ExtensionTestCase")
