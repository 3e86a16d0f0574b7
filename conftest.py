pytest_plugins = ("ditest.pytest",)
